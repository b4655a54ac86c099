"""Core types for tagbase."""

from dataclasses import dataclass
from enum import Enum

REDIRECT_STATUS = 301


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag as enumerated from the host taxonomy."""

    slug: str
    name: str = ""
    count: int = 0  # Posts using the tag; empty tags are still enumerated


@dataclass(frozen=True, slots=True)
class Redirect:
    """A permanent redirect to a tag archive without the base."""

    location: str
    status: int = REDIRECT_STATUS


class HookEvent(Enum):
    """Host lifecycle events the rewriter responds to."""

    INIT = "init"
    TAG_CREATED = "created_post_tag"
    TAG_EDITED = "edited_post_tag"
    TAG_DELETED = "delete_post_tag"
    PERMALINK_GENERATED = "tag_link"
    REQUEST_RESOLVED = "request"
    REWRITE_RULES_REQUESTED = "tag_rewrite_rules"
    QUERY_VARS_REQUESTED = "query_vars"
    ACTIVATED = "activate"
    DEACTIVATED = "deactivate"


class FlushState(Enum):
    """Whether the host's rewrite rules need to be rebuilt."""

    CLEAN = "clean"
    DIRTY = "dirty"


# Ordered pattern -> query target mapping
RewriteRules = dict[str, str]
