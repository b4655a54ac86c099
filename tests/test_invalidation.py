"""Tests for deferred rewrite rule flushing."""

from tagbase import FLUSH_OPTION, FlushScheduler, FlushState, MemoryOptionStore

from conftest import RecordingHost


class TestFlushScheduler:
    """Tests for FlushScheduler state machine."""

    def test_starts_clean(self, options: MemoryOptionStore, host: RecordingHost) -> None:
        """Test that an absent flag means clean."""
        scheduler = FlushScheduler(options, host)
        assert scheduler.state is FlushState.CLEAN

    def test_mark_dirty_sets_flag(
        self, options: MemoryOptionStore, host: RecordingHost
    ) -> None:
        """Test that a tag change sets the persisted flag."""
        scheduler = FlushScheduler(options, host)
        scheduler.mark_dirty()
        assert scheduler.state is FlushState.DIRTY
        assert options.get(FLUSH_OPTION) == 1

    def test_mark_dirty_is_idempotent(
        self, options: MemoryOptionStore, host: RecordingHost
    ) -> None:
        """Test that repeated changes leave the same flag value."""
        scheduler = FlushScheduler(options, host)
        scheduler.mark_dirty()
        scheduler.mark_dirty()
        assert options.get(FLUSH_OPTION) == 1
        assert scheduler.flush_if_dirty() is True
        assert len(host.deferred) == 1

    def test_flush_if_dirty_schedules_once(
        self, options: MemoryOptionStore, host: RecordingHost
    ) -> None:
        """Test that one flush is deferred and the flag is cleared."""
        scheduler = FlushScheduler(options, host)
        scheduler.mark_dirty()

        assert scheduler.flush_if_dirty() is True
        assert scheduler.state is FlushState.CLEAN
        assert FLUSH_OPTION not in options
        assert host.flushes == 0  # Deferred, not immediate

        host.shutdown()
        assert host.flushes == 1

        assert scheduler.flush_if_dirty() is False
        host.shutdown()
        assert host.flushes == 1

    def test_flag_cleared_before_flush_runs(
        self, options: MemoryOptionStore, host: RecordingHost
    ) -> None:
        """Test that the flag is already clear when the deferred flush runs."""
        scheduler = FlushScheduler(options, host)
        scheduler.mark_dirty()
        scheduler.flush_if_dirty()
        assert host.deferred
        assert options.get(FLUSH_OPTION) is None

    def test_clean_does_nothing(
        self, options: MemoryOptionStore, host: RecordingHost
    ) -> None:
        """Test that a clean state schedules nothing."""
        scheduler = FlushScheduler(options, host)
        assert scheduler.flush_if_dirty() is False
        assert host.deferred == []

    def test_custom_option_name(
        self, options: MemoryOptionStore, host: RecordingHost
    ) -> None:
        """Test using a different option name."""
        scheduler = FlushScheduler(options, host, option_name="my_flush")
        scheduler.mark_dirty()
        assert options.get("my_flush") == 1
        assert options.get(FLUSH_OPTION) is None

    def test_shared_store_seen_by_other_scheduler(
        self, options: MemoryOptionStore, host: RecordingHost
    ) -> None:
        """Test that the flag persists across scheduler instances."""
        FlushScheduler(options, host).mark_dirty()
        other_host = RecordingHost()
        assert FlushScheduler(options, other_host).flush_if_dirty() is True
        assert len(other_host.deferred) == 1
