from __future__ import annotations

from typing import Any, Iterable


class Emoji:
    """
    An emoji and the aliases that refer to it.

    Emojis are immutable and compare equal if and only if their unicode text is equal,
    no matter which aliases they carry.
    """

    __slots__ = ("_aliases", "_unicode")

    def __init__(self, aliases: Iterable[str], unicode: str):
        aliases = tuple(aliases)
        if not unicode:
            raise ValueError("emoji unicode text must not be empty")
        if not aliases:
            raise ValueError(f"emoji {unicode!r} has no aliases")

        object.__setattr__(self, "_aliases", aliases)
        object.__setattr__(self, "_unicode", unicode)

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def unicode(self) -> str:
        return self._unicode

    def __setattr__(self, key: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Emoji):
            return NotImplemented
        return self._unicode == other._unicode

    def __hash__(self) -> int:
        return hash(self._unicode)

    def __str__(self) -> str:
        return self._unicode

    def __repr__(self) -> str:
        return f"Emoji(aliases={list(self._aliases)!r}, unicode={self._unicode!r})"
