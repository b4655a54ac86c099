"""Host collaborator adapters for tagbase."""

from contextlib import suppress

from tagbase.adapters.base import Host, OptionStore, TagSource
from tagbase.adapters.memory import MemoryOptionStore, StaticTagSource

# Optional adapters - only available when dependencies are installed
with suppress(ImportError):
    from tagbase.adapters.redis import RedisOptionStore

with suppress(ImportError):
    from tagbase.adapters.rest import RestTagSource

__all__ = [
    "Host",
    "MemoryOptionStore",
    "OptionStore",
    "RedisOptionStore",
    "RestTagSource",
    "StaticTagSource",
    "TagSource",
]
