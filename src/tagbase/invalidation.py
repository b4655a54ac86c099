"""Deferred rewrite-rule flushing after tag changes."""

import logging

from tagbase.adapters.base import Host, OptionStore
from tagbase.types import FlushState

logger = logging.getLogger(__name__)

FLUSH_OPTION = "rtb_flush_rewrite_rules"


class FlushScheduler:
    """Two-state machine backed by a single persisted option.

    Tag changes mark the rules dirty. The next request init schedules one
    flush for the end of that request and clears the flag right away, so
    later requests don't flush again. Two requests racing on a dirty flag
    can both schedule a flush; flushing is idempotent.
    """

    def __init__(
        self,
        options: OptionStore,
        host: Host,
        *,
        option_name: str = FLUSH_OPTION,
    ) -> None:
        self._options = options
        self._host = host
        self._option_name = option_name

    @property
    def state(self) -> FlushState:
        """Current state as seen in the option store."""
        if self._options.get(self._option_name):
            return FlushState.DIRTY
        return FlushState.CLEAN

    def mark_dirty(self) -> None:
        """Flag the rewrite rules as stale."""
        self._options.set(self._option_name, 1)
        logger.debug("Rewrite rules marked stale (%s)", self._option_name)

    def flush_if_dirty(self) -> bool:
        """Schedule an end-of-request flush if stale. Returns True if scheduled."""
        if not self._options.get(self._option_name):
            return False
        self._host.defer(self._host.flush_rewrite_rules)
        self._options.delete(self._option_name)
        logger.info("Scheduled rewrite rule flush at end of request")
        return True
