"""Hook registry — named filters that may rewrite a template chain.

Extension code registers callbacks against a hook name; the resolver
applies every callback registered under an exact name, in order::

    hooks = HookRegistry()

    @hooks.filter("content_template_array_book")
    def prefer_legacy(templates, context):
        return ["legacy/book.php", *templates]

Callbacks run in ascending ``priority`` (default 10), then registration
order.  Each receives a copy of the current list and the ``PageContext``
and must return a list of strings.  Anything else is discarded and the
list from before that callback is kept.  Exceptions raised by a callback
propagate to the caller.

Thread Safety:
    Registration and application are protected by a ``threading.Lock``;
    callbacks run outside the lock against a snapshot of the registrations.

"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from mew._types import FilterFunc, HookName, TemplateList
    from mew.context import PageContext
    from mew.observability.collector import ResolveCollector

DEFAULT_PRIORITY = 10


@dataclass(frozen=True, slots=True)
class _Registration:
    priority: int
    sequence: int
    callback: FilterFunc


class HookRegistry:
    """Ordered filter callbacks keyed by hook name."""

    __slots__ = ("_filters", "_lock", "_sequence")

    def __init__(self) -> None:
        self._filters: dict[str, list[_Registration]] = {}
        self._lock = threading.Lock()
        self._sequence = 0

    def add_filter(
        self,
        name: HookName,
        callback: FilterFunc,
        *,
        priority: int = DEFAULT_PRIORITY,
    ) -> FilterFunc:
        """Register *callback* under *name* and return it unchanged."""
        with self._lock:
            self._sequence += 1
            entries = self._filters.setdefault(name, [])
            entries.append(_Registration(priority, self._sequence, callback))
            entries.sort(key=lambda r: (r.priority, r.sequence))
        return callback

    def filter(
        self,
        name: HookName,
        *,
        priority: int = DEFAULT_PRIORITY,
    ) -> Callable[[FilterFunc], FilterFunc]:
        """Decorator form of :meth:`add_filter`."""

        def decorator(callback: FilterFunc) -> FilterFunc:
            return self.add_filter(name, callback, priority=priority)

        return decorator

    def remove_filter(self, name: HookName, callback: FilterFunc) -> bool:
        """Unregister the first registration of *callback* under *name*.

        Returns:
            True if a registration was removed.

        """
        with self._lock:
            entries = self._filters.get(name)
            if not entries:
                return False
            for i, reg in enumerate(entries):
                if reg.callback is callback:
                    del entries[i]
                    if not entries:
                        del self._filters[name]
                    return True
            return False

    def has_filters(self, name: HookName) -> bool:
        """True if at least one callback is registered under *name*."""
        with self._lock:
            return bool(self._filters.get(name))

    def names(self) -> list[HookName]:
        """Hook names with at least one callback, sorted."""
        with self._lock:
            return sorted(self._filters)

    def clear(self) -> None:
        """Drop every registration."""
        with self._lock:
            self._filters.clear()

    def apply(
        self,
        name: HookName,
        templates: TemplateList,
        context: PageContext,
        *,
        collector: ResolveCollector | None = None,
    ) -> TemplateList:
        """Run every callback registered under *name* over *templates*.

        Returns a new list; *templates* itself is never mutated.  With no
        registrations this returns a copy of the input.

        """
        with self._lock:
            snapshot = tuple(self._filters.get(name, ()))

        current = list(templates)
        for reg in snapshot:
            returned = reg.callback(list(current), context)
            if _is_template_list(returned):
                current = returned  # type: ignore[assignment]
            elif collector is not None:
                collector.record_rejected(
                    name,
                    _callback_name(reg.callback),
                    type(returned).__name__,
                )

        if collector is not None:
            collector.record_hook(
                name,
                callbacks=len(snapshot),
                changed=current != list(templates),
            )
        return current


def _is_template_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _callback_name(callback: object) -> str:
    module = getattr(callback, "__module__", None) or ""
    qualname = getattr(callback, "__qualname__", None) or type(callback).__name__
    return f"{module}.{qualname}" if module else qualname
