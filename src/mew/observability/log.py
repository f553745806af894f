"""Event log — bounded, thread-safe store of resolution events.

Keeps the most recent events in a ring buffer so a caller (the CLI, a
debug toolbar) can ask what the last resolution did: which tag it derived,
which hooks ran, which callbacks were rejected.

Thread Safety:
    All methods are protected by a ``threading.Lock``.

"""

import threading
from collections import deque

from mew.observability.events import HookApplied, ResolveEvent, TemplatesResolved


class EventLog:
    """Ring buffer of resolution events, oldest dropped first.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[ResolveEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: ResolveEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        hook: str | None = None,
        limit: int = 100,
    ) -> list[ResolveEvent]:
        """Return matching events, most recent first.

        ``hook`` matches the hook name exactly; ``TemplatesResolved`` events
        carry no hook and never match it.

        """
        with self._lock:
            results: list[ResolveEvent] = []
            for event in reversed(self._events):
                if len(results) >= limit:
                    break
                if event_type is not None and not isinstance(event, event_type):
                    continue
                if hook is not None and getattr(event, "hook", None) != hook:
                    continue
                results.append(event)
            return results

    def last_resolution(self) -> TemplatesResolved | None:
        """The most recent ``TemplatesResolved`` event, if any."""
        found = self.query(event_type=TemplatesResolved, limit=1)
        return found[0] if found else None  # type: ignore[return-value]

    def hook_trail(self) -> list[str]:
        """Hook names applied by the most recent completed resolution, in order."""
        with self._lock:
            events = list(self._events)

        trail: list[str] = []
        in_resolution = False
        for event in reversed(events):
            if isinstance(event, TemplatesResolved):
                if in_resolution:
                    break
                in_resolution = True
            elif in_resolution and isinstance(event, HookApplied):
                trail.append(event.hook)
        trail.reverse()
        return trail

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
