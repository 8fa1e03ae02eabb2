import logging

from PyEmoji import logger as logger_module
from PyEmoji.logger import get_logger, logging_handler, setup_sentry


def test_get_logger_adds_handler_once():
    logger = get_logger("PyEmoji.tests.example")
    get_logger("PyEmoji.tests.example")

    assert logger.handlers.count(logging_handler) == 1
    assert logger.level == logging.getLevelName(logger_module.LOG_LEVEL.upper())


def test_setup_sentry(monkeypatch):
    calls = []
    monkeypatch.setattr(logger_module.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))

    setup_sentry("https://key@sentry.example.com/1", "PyEmoji", "1.0.0")

    [kwargs] = calls
    assert kwargs["dsn"] == "https://key@sentry.example.com/1"
    assert kwargs["release"] == "PyEmoji@1.0.0"
    assert len(kwargs["integrations"]) == 1


def test_setup_sentry_is_exported():
    import PyEmoji

    assert PyEmoji.setup_sentry is setup_sentry
    assert "setup_sentry" in PyEmoji.__all__
