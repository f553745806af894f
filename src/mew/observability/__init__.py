"""Resolution observability — a structured event stream.

Records what the resolver and hook registry did:
- **TemplatesResolved**: one per ``resolve()`` call
- **HookApplied**: one per hook consulted
- **FilterRejected**: a callback's return value was discarded

All events are frozen dataclasses with nanosecond timestamps.

Quick Start:
    >>> from mew.observability import ResolveCollector, EventLog
    >>> log = EventLog()
    >>> collector = ResolveCollector(log)
    >>> # Pass collector to TemplateResolver(collector=...)

"""

from mew.observability.collector import ResolveCollector
from mew.observability.events import (
    FilterRejected,
    HookApplied,
    ResolveEvent,
    TemplatesResolved,
    now_ns,
)
from mew.observability.log import EventLog

__all__ = [
    "EventLog",
    "FilterRejected",
    "HookApplied",
    "ResolveCollector",
    "ResolveEvent",
    "TemplatesResolved",
    "now_ns",
]
