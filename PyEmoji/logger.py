import logging
import sys

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration
from uvicorn.logging import DefaultFormatter

from PyEmoji.environment import LOG_LEVEL


def setup_sentry(dsn: str, name: str, version: str):
    """Initialize sentry connection."""

    sentry_sdk.init(
        dsn=dsn,
        attach_stacktrace=True,
        shutdown_timeout=5,
        integrations=[
            LoggingIntegration(
                level=logging.DEBUG,
                event_level=logging.WARNING,
            ),
        ],
        release=f"{name}@{version}",
    )


logging_formatter = DefaultFormatter("[%(asctime)s] %(levelprefix)s %(message)s")

logging_handler = logging.StreamHandler(sys.stdout)
logging_handler.setFormatter(logging_formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a given name."""

    logger: logging.Logger = logging.getLogger(name)
    if logging_handler not in logger.handlers:
        logger.addHandler(logging_handler)
    logger.setLevel(LOG_LEVEL.upper())

    return logger
