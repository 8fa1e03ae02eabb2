from .aliases import normalize_alias
from .emoji import Emoji
from .loader import EmojiIOError, EmojiLoadError, EmojiParseError, load_emojis
from .logger import setup_sentry
from .registry import EmojiRegistry, get_for_alias, get_registry


__all__ = [
    "Emoji",
    "EmojiIOError",
    "EmojiLoadError",
    "EmojiParseError",
    "EmojiRegistry",
    "get_for_alias",
    "get_registry",
    "load_emojis",
    "normalize_alias",
    "setup_sentry",
]
