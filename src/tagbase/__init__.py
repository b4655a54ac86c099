"""tagbase - Remove the tag base from tag archive URLs."""

from contextlib import suppress

# Adapters
from tagbase.adapters import (
    Host,
    MemoryOptionStore,
    OptionStore,
    StaticTagSource,
    TagSource,
)

# Configuration
from tagbase.config import Settings, get_settings

# Hooks
from tagbase.hooks import HookTable
from tagbase.invalidation import FLUSH_OPTION, FlushScheduler

# Pure logic
from tagbase.permalink import remove_tag_base
from tagbase.redirect import RequestTerminated, decide_redirect
from tagbase.rewriter import TagBaseRewriter
from tagbase.rules import (
    REDIRECT_QUERY_VAR,
    add_redirect_query_var,
    blog_prefix,
    default_tag_permastruct,
    generate_rewrite_rules,
)

# Core types
from tagbase.types import (
    FlushState,
    HookEvent,
    Redirect,
    RewriteRules,
    Tag,
)
from tagbase.urls import normalize_tag_base

# Optional adapter imports - only available when dependencies are installed
with suppress(ImportError):
    from tagbase.adapters import RedisOptionStore

with suppress(ImportError):
    from tagbase.adapters import RestTagSource

__version__ = "0.1.0"

__all__ = [
    "FLUSH_OPTION",
    "REDIRECT_QUERY_VAR",
    "FlushScheduler",
    "FlushState",
    "Host",
    "HookEvent",
    "HookTable",
    "MemoryOptionStore",
    "OptionStore",
    "Redirect",
    "RedisOptionStore",
    "RequestTerminated",
    "RestTagSource",
    "RewriteRules",
    "Settings",
    "StaticTagSource",
    "Tag",
    "TagBaseRewriter",
    "TagSource",
    "add_redirect_query_var",
    "blog_prefix",
    "decide_redirect",
    "default_tag_permastruct",
    "generate_rewrite_rules",
    "get_settings",
    "normalize_tag_base",
    "remove_tag_base",
]
