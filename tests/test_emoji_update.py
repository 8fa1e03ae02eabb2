import io

from emoji_update import dump_records, strip_records
from PyEmoji.loader import load_emojis


def test_strip_records_keeps_known_fields():
    records = [
        {"emoji": "😀", "description": "grinning face", "category": "Smileys & Emotion", "aliases": ["grinning"]},
        {"aliases": ["octocat"], "tags": []},
    ]

    assert strip_records(records) == [
        {"emoji": "😀", "description": "grinning face", "aliases": ["grinning"]},
        {"aliases": ["octocat"]},
    ]


def test_dumped_records_can_be_loaded():
    content = dump_records([{"emoji": "😀", "aliases": ["grinning"]}, {"emoji": "🎉", "aliases": ["tada"]}])

    assert content.splitlines()[1] == '  {"emoji": "😀", "aliases": ["grinning"]},'
    assert [e.unicode for e in load_emojis(io.BytesIO(content.encode("utf-8")))] == ["😀", "🎉"]
