"""Slash handling for tag bases and archive URLs."""

DEFAULT_TAG_BASE = "tag"


def trailingslashit(value: str) -> str:
    """Ensure exactly one trailing slash."""
    return untrailingslashit(value) + "/"


def untrailingslashit(value: str) -> str:
    """Remove all trailing slashes (and backslashes)."""
    return value.rstrip("/\\")


def user_trailingslashit(value: str, *, trailing_slash: bool) -> str:
    """Apply the site's trailing-slash convention to a path segment.

    The convention comes from the permalink structure: a structure ending in
    ``/`` gets trailing slashes on archive links, anything else gets none.
    """
    if trailing_slash:
        return trailingslashit(value)
    return untrailingslashit(value)


def normalize_tag_base(tag_base: str | None) -> str:
    """Turn a configured tag base into the ``"<base>/"`` token to strip.

    Missing, empty or bare-slash values fall back to ``"tag"``. One leading
    slash is dropped, since the trailing one is part of the token.

    Example:
        normalize_tag_base("/topics")  # "topics/"
        normalize_tag_base("")         # "tag/"
    """
    base = tag_base or ""
    if base.startswith("/"):
        base = base[1:]
    return (base or DEFAULT_TAG_BASE) + "/"
