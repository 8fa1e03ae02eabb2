"""Parse an emoji database in the gemoji ``db/emoji.json`` format."""

import json
from typing import Any, BinaryIO

from PyEmoji.emoji import Emoji
from PyEmoji.logger import get_logger


logger = get_logger(__name__)


class EmojiLoadError(Exception):
    """The emoji database could not be loaded."""

    pass


class EmojiIOError(EmojiLoadError):
    """The emoji database could not be read."""

    pass


class EmojiParseError(EmojiLoadError):
    """The emoji database is not valid JSON or contains a malformed record."""

    pass


def _parse_aliases(index: int, value: Any) -> list[str]:
    if not isinstance(value, list):
        raise EmojiParseError(f"record {index}: aliases must be an array, got {type(value).__name__}")
    if not value:
        raise EmojiParseError(f"record {index}: aliases must not be empty")

    aliases: list[str] = []
    for alias in value:
        if not isinstance(alias, str) or not alias:
            raise EmojiParseError(f"record {index}: invalid alias {alias!r}")
        aliases.append(alias)

    return aliases


def _parse_emoji(index: int, record: Any) -> Emoji | None:
    """
    Build an emoji from a single record of the database.

    :param index: the position of the record, used in error messages
    :param record: the decoded json object
    :return: the emoji or None, if the record has no emoji field
    """

    if not isinstance(record, dict):
        raise EmojiParseError(f"record {index}: expected an object, got {type(record).__name__}")

    # records without an emoji (e.g. custom images) are skipped
    if "emoji" not in record:
        return None

    unicode = record["emoji"]
    if not isinstance(unicode, str) or not unicode:
        raise EmojiParseError(f"record {index}: emoji must be a non-empty string")
    try:
        unicode.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EmojiParseError(f"record {index}: emoji is not valid unicode") from e

    if "aliases" not in record:
        raise EmojiParseError(f"record {index}: missing aliases for {unicode!r}")

    return Emoji(_parse_aliases(index, record["aliases"]), unicode)


def load_emojis(stream: BinaryIO) -> list[Emoji]:
    """
    Load all emojis from a byte stream containing a json array of emoji records.

    The stream is read completely and closed, even if loading fails.
    No partial results are returned: any malformed record fails the whole load.

    :param stream: the utf-8 encoded json document
    :return: the emojis in the order of the source array
    :raises EmojiIOError: if the stream could not be read
    :raises EmojiParseError: if the document or one of its records is malformed
    """

    # closed streams raise ValueError
    try:
        with stream:
            data: bytes = stream.read()
    except (OSError, ValueError) as e:
        raise EmojiIOError(f"could not read emoji database: {e}") from e

    try:
        records = json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise EmojiParseError(f"emoji database is not valid utf-8: {e}") from e
    except (json.JSONDecodeError, RecursionError) as e:
        raise EmojiParseError(f"emoji database is not valid json: {e}") from e

    if not isinstance(records, list):
        raise EmojiParseError(f"emoji database must be an array, got {type(records).__name__}")

    emojis: list[Emoji] = []
    for i, record in enumerate(records):
        if (emoji := _parse_emoji(i, record)) is not None:
            emojis.append(emoji)

    logger.debug("read %d emoji records: %d kept, %d skipped", len(records), len(emojis), len(records) - len(emojis))
    return emojis
