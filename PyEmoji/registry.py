from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from types import MappingProxyType
from typing import BinaryIO, Iterable, Mapping

from PyEmoji.aliases import normalize_alias
from PyEmoji.emoji import Emoji
from PyEmoji.environment import EMOJI_DATA_PATH, LOG_ALIAS_OVERWRITES
from PyEmoji.loader import EmojiIOError, EmojiLoadError, load_emojis
from PyEmoji.logger import get_logger


logger = get_logger(__name__)

# https://github.com/github/gemoji/blob/master/db/emoji.json
BUNDLED_DATA_PATH = Path(__file__).parent.joinpath("emoji.json")
DATA_PATH = Path(EMOJI_DATA_PATH) if EMOJI_DATA_PATH else BUNDLED_DATA_PATH


class EmojiRegistry:
    """Read-only index which maps normalized aliases to their emojis."""

    def __init__(self, emojis: Iterable[Emoji]):
        index: dict[str, Emoji] = {}
        distinct: dict[Emoji, None] = {}
        overwrite_level = logging.WARNING if LOG_ALIAS_OVERWRITES else logging.DEBUG

        for emoji in emojis:
            distinct.setdefault(emoji, None)
            for alias in emoji.aliases:
                if not (key := normalize_alias(alias)):
                    continue

                # later records take precedence
                if (previous := index.get(key)) is not None and previous is not emoji:
                    logger.log(overwrite_level, "alias '%s' of %s overwritten by %s", key, previous, emoji)
                index[key] = emoji

        self._index: Mapping[str, Emoji] = MappingProxyType(index)
        self._emojis: tuple[Emoji, ...] = tuple(distinct)

        logger.info("emoji registry built: %d emojis, %d aliases", len(self._emojis), len(self._index))

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> EmojiRegistry:
        """Load the emojis from a byte stream and build a registry from them."""

        return cls(load_emojis(stream))

    @classmethod
    def from_path(cls, path: Path) -> EmojiRegistry:
        """Load the emojis from a json file and build a registry from them."""

        try:
            stream = path.open("rb")
        except OSError as e:
            raise EmojiIOError(f"could not open emoji database {path}: {e}") from e

        return cls.from_stream(stream)

    @property
    def emojis(self) -> tuple[Emoji, ...]:
        """All distinct emojis in load order."""

        return self._emojis

    def get_for_alias(self, alias: str | None) -> Emoji | None:
        """
        Return the emoji for a given alias.

        :param alias: the alias with or without colons, e.g. "smile" or ":smile:"
        :return: the emoji or None, if the alias is unknown
        """

        if not alias:
            return None

        if not (key := normalize_alias(alias)):
            return None

        return self._index.get(key)

    def __contains__(self, alias: object) -> bool:
        return isinstance(alias, str) and self.get_for_alias(alias) is not None

    def __len__(self) -> int:
        return len(self._index)


_registry: EmojiRegistry | None = None
_registry_lock = Lock()


def get_registry() -> EmojiRegistry:
    """
    Return the process-wide emoji registry, building it on first use.

    The registry is built exactly once, even if multiple threads request it at the same time.
    If building fails, the error is propagated and the next call tries again.
    """

    global _registry

    if (registry := _registry) is not None:
        return registry

    with _registry_lock:
        if _registry is None:
            logger.debug("loading emoji database from %s", DATA_PATH)
            try:
                _registry = EmojiRegistry.from_path(DATA_PATH)
            except EmojiLoadError:
                logger.exception("could not build emoji registry from %s", DATA_PATH)
                raise

        return _registry


def get_for_alias(alias: str | None) -> Emoji | None:
    """Return the emoji for a given alias from the process-wide registry or None, if the alias is unknown."""

    return get_registry().get_for_alias(alias)
