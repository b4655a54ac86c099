"""Tag permalink rewriting."""

from tagbase.urls import normalize_tag_base


def remove_tag_base(permalink: str, tag_base: str | None) -> str:
    """Strip the first occurrence of ``<tag_base>/`` from a permalink.

    The base is matched literally, leftmost first, and only once:

        remove_tag_base("http://example.com/tag/news/", "tag")
        # "http://example.com/news/"

    Permalinks without the base are returned unchanged.
    """
    token = normalize_tag_base(tag_base)
    head, found, tail = permalink.partition(token)
    if not found:
        return permalink
    return head + tail
