from os import getenv


def get_bool(key: str, default: bool) -> bool:
    """Get a boolean from an environment variable."""

    return getenv(key, str(default)).lower() in ("true", "t", "yes", "y", "1")


LOG_LEVEL: str = getenv("LOG_LEVEL", "INFO")

# alternate emoji data file, the bundled emoji.json is used if not set
EMOJI_DATA_PATH: str | None = getenv("EMOJI_DATA_PATH")

# log aliases overwritten by a later record as warnings instead of debug messages
LOG_ALIAS_OVERWRITES: bool = get_bool("LOG_ALIAS_OVERWRITES", False)
