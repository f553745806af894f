"""Shared type definitions for mew."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mew.context import PageContext

# Relative template path (e.g., "book/book-content-singular.php")
type TemplatePath = str

# Ordered candidate list, most specific first
type TemplateList = list[TemplatePath]

# Derived hook tag: "", "404", "search", a post type, or "front-page"
type PostTypeTag = str

# Registered hook name (e.g., "content_template_array_book")
type HookName = str

# Filter callback: receives a copy of the list and the request context
type FilterFunc = Callable[[TemplateList, PageContext], object]
