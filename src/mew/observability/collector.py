"""Resolve collector — records resolver and hook activity into an event log.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.
    Safe for concurrent use from multiple threads.

"""

from __future__ import annotations

from mew.observability.events import (
    FilterRejected,
    HookApplied,
    TemplatesResolved,
    now_ns,
)
from mew.observability.log import EventLog


class ResolveCollector:
    """Event collector for template resolution.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_resolved(
        self,
        tag: str,
        *,
        candidates: int = 0,
        result: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a completed resolution."""
        self._log.append(
            TemplatesResolved(
                tag=tag,
                candidates=candidates,
                result=result,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_hook(self, hook: str, *, callbacks: int = 0, changed: bool = False) -> None:
        """Record a hook application."""
        self._log.append(
            HookApplied(
                hook=hook,
                callbacks=callbacks,
                changed=changed,
                timestamp_ns=now_ns(),
            )
        )

    def record_rejected(self, hook: str, callback: str, returned_type: str) -> None:
        """Record a discarded callback return value."""
        self._log.append(
            FilterRejected(
                hook=hook,
                callback=callback,
                returned_type=returned_type,
                timestamp_ns=now_ns(),
            )
        )
