from PyEmoji.registry import EmojiRegistry, get_registry


def split_tags(tags: str | None) -> list[str]:
    """Split a comma separated list of tags."""

    if not tags:
        return []

    return tags.split(",")


def to_emoji(tag: str, registry: EmojiRegistry | None = None) -> str | None:
    """Return the unicode text of the emoji a tag refers to or None, if the tag is no emoji alias."""

    emoji = (registry if registry is not None else get_registry()).get_for_alias(tag)
    return emoji.unicode if emoji else None


def to_emojis(tags: list[str], registry: EmojiRegistry | None = None) -> list[str]:
    """Convert all tags which are emoji aliases to emojis and drop the others."""

    if registry is None:
        registry = get_registry()

    return [emoji for tag in tags if (emoji := to_emoji(tag, registry)) is not None]


def unmatched_tags(tags: list[str], registry: EmojiRegistry | None = None) -> list[str]:
    """Return all tags which are not emoji aliases."""

    if registry is None:
        registry = get_registry()

    return [tag for tag in tags if to_emoji(tag, registry) is None]
