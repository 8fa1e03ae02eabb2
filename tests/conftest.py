import io
import json
from typing import Any, Callable

import pytest

from PyEmoji import registry as registry_module
from PyEmoji.registry import EmojiRegistry


EXAMPLE_RECORDS = [
    {"emoji": "😀", "aliases": ["grinning"]},
    {"emoji": "😄", "aliases": ["smile", ":grin:"]},
]


def encode(data: Any) -> bytes:
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


class TrackingStream(io.BytesIO):
    """BytesIO which remembers whether it has been closed."""

    def __init__(self, data: bytes):
        super().__init__(data)
        self.was_closed = False

    def close(self):
        self.was_closed = True
        super().close()


@pytest.fixture
def make_stream() -> Callable[[Any], TrackingStream]:
    def inner(data: Any) -> TrackingStream:
        return TrackingStream(data if isinstance(data, bytes) else encode(data))

    return inner


@pytest.fixture
def example_registry(make_stream) -> EmojiRegistry:
    return EmojiRegistry.from_stream(make_stream(EXAMPLE_RECORDS))


@pytest.fixture
def fresh_registry(monkeypatch):
    """Reset the process-wide registry so that the next access builds it again."""

    monkeypatch.setattr(registry_module, "_registry", None)
    yield
    registry_module._registry = None
