"""Shared test fixtures for mew."""

from __future__ import annotations

from pathlib import Path

import pytest

from mew.context import CurrentPost, PageContext
from mew.hooks import HookRegistry
from mew.observability import EventLog, ResolveCollector


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def collector() -> ResolveCollector:
    return ResolveCollector(EventLog())


@pytest.fixture
def book_singular() -> PageContext:
    return PageContext(is_singular=True, post=CurrentPost("book"))


@pytest.fixture
def tmp_site(tmp_path: Path) -> Path:
    """Create a site root with a mew.yaml using the ``ui`` convention."""
    (tmp_path / "mew.yaml").write_text(
        "mew:\n  content_dir: ui\n  hook_prefix: cnp_get\n  hook_suffix: _template_array\n",
        encoding="utf-8",
    )
    return tmp_path


class CallRecorder:
    """Filter callback that records each invocation and returns its input."""

    def __init__(self, result: object = None) -> None:
        self.calls: list[list[str]] = []
        self._result = result

    def __call__(self, templates: list[str], context: PageContext) -> object:
        self.calls.append(list(templates))
        if self._result is None:
            return templates
        return self._result


@pytest.fixture
def make_recorder() -> type[CallRecorder]:
    return CallRecorder
