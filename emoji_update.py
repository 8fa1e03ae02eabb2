import io
import json
import sys
from json import JSONDecodeError
from pathlib import Path
from typing import Any, cast
from urllib.error import URLError
from urllib.request import Request, urlopen

from PyEmoji.loader import EmojiLoadError, load_emojis


GEMOJI_URL = "https://raw.githubusercontent.com/github/gemoji/master/db/emoji.json"

# fields of a gemoji record that are kept in the bundled database
KEEP_FIELDS = ("emoji", "description", "aliases")


def get(url: str) -> str:
    return cast(bytes, urlopen(Request(url, data=None, headers={"User-Agent": ""})).read()).decode("utf8")  # noqa: S310


def strip_records(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        {k: record[k] for k in KEEP_FIELDS if k in record} if isinstance(record, dict) else record for record in records
    ]


def dump_records(records: list[dict[str, Any]]) -> str:
    lines = ",\n".join(f"  {json.dumps(record, ensure_ascii=False)}" for record in records)
    return f"[\n{lines}\n]\n"


if __name__ == "__main__":
    try:
        emoji_json: Any = json.loads(get(GEMOJI_URL))
    except (URLError, JSONDecodeError) as e:
        print(f"Error while downloading emoji database from {GEMOJI_URL}: {e}")
        sys.exit(1)

    if not isinstance(emoji_json, list):
        print("Emoji database is not a list")
        sys.exit(1)

    content = dump_records(strip_records(emoji_json))

    try:
        emojis = load_emojis(io.BytesIO(content.encode("utf-8")))
    except EmojiLoadError as e:
        print(f"Emoji database is invalid: {e}")
        sys.exit(1)

    print(f"Found {len(emojis)} emojis")

    with Path(__file__).parent.joinpath("PyEmoji/emoji.json").open("w", encoding="utf-8") as file:
        file.write(content)
