"""Event model for template resolution observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TemplatesResolved:
    """A candidate chain was resolved for a request.

    Attributes:
        tag: Derived post-type tag (empty when no scoped hook ran).
        candidates: Number of paths before hooks ran.
        result: Number of paths returned after hooks.
        duration_ms: Time spent resolving in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    tag: str
    candidates: int
    result: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class HookApplied:
    """A named hook was applied to a template list.

    Attributes:
        hook: Hook name.
        callbacks: Number of registered callbacks that ran.
        changed: True if the list differs from the one passed in.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    hook: str
    callbacks: int
    changed: bool
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class FilterRejected:
    """A callback returned something other than a list of strings.

    The list from before the callback was kept.

    Attributes:
        hook: Hook name.
        callback: Qualified name of the offending callback.
        returned_type: Type name of the rejected return value.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    hook: str
    callback: str
    returned_type: str
    timestamp_ns: int


type ResolveEvent = TemplatesResolved | HookApplied | FilterRejected


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
