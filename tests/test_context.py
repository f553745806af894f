"""Tests for mew.context — PageContext and CurrentPost."""

from __future__ import annotations

import pytest

from mew._errors import ContextError
from mew.context import CurrentPost, PageContext


class TestPageContext:
    """PageContext — frozen request classification."""

    def test_defaults_all_false(self) -> None:
        ctx = PageContext()
        assert not any((
            ctx.is_archive, ctx.is_home, ctx.is_search,
            ctx.is_singular, ctx.is_not_found, ctx.is_front_page,
        ))
        assert ctx.post is None

    def test_frozen(self) -> None:
        ctx = PageContext()
        with pytest.raises(AttributeError):
            ctx.is_archive = True  # type: ignore[misc]

    @pytest.mark.parametrize("flag", ["is_archive", "is_home", "is_search"])
    def test_is_listing(self, flag: str) -> None:
        assert PageContext(**{flag: True}).is_listing

    def test_singular_is_not_listing(self) -> None:
        assert not PageContext(is_singular=True).is_listing

    def test_equal_contexts_compare_equal(self) -> None:
        a = PageContext(is_singular=True, post=CurrentPost("book"))
        b = PageContext(is_singular=True, post=CurrentPost("book"))
        assert a == b


class TestFromMapping:
    """PageContext.from_mapping — building contexts from plain data."""

    def test_flags_and_post_type(self) -> None:
        ctx = PageContext.from_mapping({"is_archive": True, "post_type": "book"})
        assert ctx == PageContext(is_archive=True, post=CurrentPost("book"))

    def test_nested_post(self) -> None:
        ctx = PageContext.from_mapping({"is_singular": True, "post": {"post_type": "page"}})
        assert ctx.post == CurrentPost("page")

    def test_null_post(self) -> None:
        assert PageContext.from_mapping({"post": None}).post is None

    def test_empty(self) -> None:
        assert PageContext.from_mapping({}) == PageContext()

    def test_unknown_key(self) -> None:
        with pytest.raises(ContextError, match="is_category"):
            PageContext.from_mapping({"is_category": True})

    def test_non_bool_flag(self) -> None:
        with pytest.raises(ContextError, match="must be a bool"):
            PageContext.from_mapping({"is_search": "yes"})

    def test_non_string_post_type(self) -> None:
        with pytest.raises(ContextError, match="post_type"):
            PageContext.from_mapping({"post_type": 3})

    def test_empty_post_type(self) -> None:
        with pytest.raises(ContextError, match="post_type"):
            PageContext.from_mapping({"post_type": ""})

    def test_non_mapping_post(self) -> None:
        with pytest.raises(ContextError, match="'post' must be a mapping"):
            PageContext.from_mapping({"post": "book"})

    @pytest.mark.parametrize(
        ("data", "match"),
        [
            ({"is_singular": True, "post": {"typo": "book"}}, "Unknown post keys: typo"),
            ({"post": {"post_type": "book", "extra": 1}}, "Unknown post keys: extra"),
            ({"post": {}}, "requires a post_type"),
            ({"post": {"post_type": None}}, "requires a post_type"),
        ],
    )
    def test_invalid_nested_post(self, data: dict[str, object], match: str) -> None:
        with pytest.raises(ContextError, match=match):
            PageContext.from_mapping(data)
