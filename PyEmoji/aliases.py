def normalize_alias(alias: str) -> str:
    """
    Strip the optional colon decoration from an alias.

    At most one leading and at most one trailing colon are removed, independently of each other.
    The leading colon is stripped first, so ":" and "::" both normalize to an empty string.

    :param alias: the alias, e.g. ":smile:" or "smile"
    :return: the normalized alias, e.g. "smile"
    """

    if alias.startswith(":"):
        alias = alias[1:]
    if alias.endswith(":"):
        alias = alias[:-1]

    return alias
