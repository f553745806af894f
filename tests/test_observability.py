"""Tests for mew.observability — resolution event stream."""

import threading

import pytest

from mew.observability import (
    EventLog,
    FilterRejected,
    HookApplied,
    ResolveCollector,
    TemplatesResolved,
    now_ns,
)


def _resolved(tag: str = "book", ts: int | None = None) -> TemplatesResolved:
    return TemplatesResolved(
        tag=tag, candidates=4, result=4, duration_ms=0.1,
        timestamp_ns=now_ns() if ts is None else ts,
    )


def _applied(hook: str, ts: int | None = None) -> HookApplied:
    return HookApplied(
        hook=hook, callbacks=1, changed=False,
        timestamp_ns=now_ns() if ts is None else ts,
    )


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class TestEvents:
    """Events are frozen value objects."""

    def test_frozen(self) -> None:
        event = _resolved()
        with pytest.raises(AttributeError):
            event.tag = "page"  # type: ignore[misc]

    def test_now_ns_monotonic(self) -> None:
        a = now_ns()
        b = now_ns()
        assert b >= a


# ---------------------------------------------------------------------------
# EventLog
# ---------------------------------------------------------------------------


class TestEventLog:
    """Tests for the event log store."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_resolved())
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        for i in range(10):
            log.append(_resolved(tag=str(i)))
        assert len(log) == 5
        assert log.query(limit=1)[0].tag == "9"

    def test_query_by_type(self) -> None:
        log = EventLog()
        log.append(_resolved())
        log.append(_applied("content_template_array"))
        log.append(_resolved())

        results = log.query(event_type=TemplatesResolved)
        assert len(results) == 2
        assert all(isinstance(r, TemplatesResolved) for r in results)

    def test_query_by_hook_is_exact(self) -> None:
        log = EventLog()
        log.append(_applied("content_template_array"))
        log.append(_applied("content_template_array_book"))
        log.append(_resolved())

        results = log.query(hook="content_template_array")
        assert len(results) == 1
        assert results[0].hook == "content_template_array"

    def test_query_newest_first_and_limit(self) -> None:
        log = EventLog()
        for i in range(5):
            log.append(_resolved(tag=str(i)))
        results = log.query(limit=2)
        assert [e.tag for e in results] == ["4", "3"]

    def test_last_resolution_empty(self) -> None:
        log = EventLog()
        log.append(_applied("h"))
        assert log.last_resolution() is None

    def test_last_resolution(self) -> None:
        log = EventLog()
        log.append(_resolved(tag="book"))
        log.append(_applied("h"))
        log.append(_resolved(tag="404"))
        assert log.last_resolution().tag == "404"

    def test_hook_trail_covers_last_resolution_only(self) -> None:
        log = EventLog()
        log.append(_applied("content_template_array"))
        log.append(_applied("content_template_array_book"))
        log.append(_resolved(tag="book"))
        log.append(_applied("content_template_array"))
        log.append(_applied("content_template_array_404"))
        log.append(_resolved(tag="404"))
        # In progress, not yet resolved
        log.append(_applied("content_template_array"))

        assert log.hook_trail() == [
            "content_template_array",
            "content_template_array_404",
        ]

    def test_hook_trail_empty(self) -> None:
        assert EventLog().hook_trail() == []

    def test_thread_safety(self) -> None:
        """Concurrent appends should not lose events."""
        log = EventLog(max_events=50_000)

        def worker() -> None:
            for _ in range(1000):
                log.append(_resolved())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(log) == 8000


# ---------------------------------------------------------------------------
# ResolveCollector
# ---------------------------------------------------------------------------


class TestResolveCollector:
    """ResolveCollector records typed events."""

    def test_default_log_created(self) -> None:
        assert isinstance(ResolveCollector().log, EventLog)

    def test_record_resolved(self) -> None:
        collector = ResolveCollector()
        collector.record_resolved("404", candidates=2, result=3, duration_ms=0.5)
        (event,) = collector.log.query()
        assert isinstance(event, TemplatesResolved)
        assert (event.tag, event.candidates, event.result) == ("404", 2, 3)

    def test_record_hook(self) -> None:
        collector = ResolveCollector()
        collector.record_hook("h", callbacks=2, changed=True)
        (event,) = collector.log.query()
        assert isinstance(event, HookApplied)
        assert event.changed is True

    def test_record_rejected(self) -> None:
        collector = ResolveCollector()
        collector.record_rejected("h", "mod.cb", "str")
        (event,) = collector.log.query()
        assert isinstance(event, FilterRejected)
        assert event.returned_type == "str"
