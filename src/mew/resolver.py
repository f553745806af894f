"""Template chain resolver — ordered content-template candidates for a request.

Builds the list of template paths a loader should try, most specific first.
For a post type called ``book`` the chain looks like:

    Archive view::

        book/book-content-archive.php
        book/book.php
        default/default-content-archive.php
        default/default-content.php

    Singular view::

        book/book-content-singular.php
        book/book.php
        default/default-content-singular.php
        default/default-content.php

If a post type renders the same content in both views, ship only
``{type}/{type}.php``.  When they differ, add the ``-content-archive`` and
``-content-singular`` variants.

Each rule prepends, so a rule evaluated later outranks everything before it.
Front-page detection runs last and therefore wins even when a post is
present.  After the chain is built, the global hook and then the tag-scoped
hook may rewrite it.

Thread Safety:
    ``build_candidates`` is pure.  ``TemplateResolver`` holds no per-call
    state; the registry and collector it uses are internally locked.

"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mew.config import MewConfig
from mew.hooks import HookRegistry

if TYPE_CHECKING:
    from mew._types import HookName, PostTypeTag, TemplateList
    from mew.context import PageContext
    from mew.observability.collector import ResolveCollector

NOT_FOUND_TAG = "404"
SEARCH_TAG = "search"
FRONT_PAGE_TAG = "front-page"

# Tags derived from the view rather than from a post type
VIEW_TAGS: tuple[str, ...] = (NOT_FOUND_TAG, SEARCH_TAG, FRONT_PAGE_TAG)


@dataclass(frozen=True, slots=True)
class CandidateChain:
    """Template candidates before any hook has run.

    Attributes:
        templates: Paths, most specific first.  The last entry is always the
            universal fallback.
        tag: Post-type tag selecting the scoped hook, or ``""`` for none.

    """

    templates: tuple[str, ...]
    tag: PostTypeTag


def build_candidates(context: PageContext, config: MewConfig | None = None) -> CandidateChain:
    """Build the pre-hook candidate chain for *context*."""
    config = config if config is not None else MewConfig()
    path = config.template_path
    default = config.default_dir

    # Collected least specific first; reversed on return.
    chain: list[str] = [config.fallback_template]
    tag = ""

    if context.is_listing:
        chain.append(path(default, f"{default}-content-archive.php"))
    if context.is_singular:
        chain.append(path(default, f"{default}-content-singular.php"))
    if context.is_not_found:
        tag = NOT_FOUND_TAG
        chain.append(path("404", "404.php"))
    if context.is_search:
        tag = SEARCH_TAG
        chain.append(path("search", "search-content.php"))

    if context.post is not None:
        post_type = context.post.post_type
        tag = post_type
        chain.append(path(post_type, f"{post_type}.php"))
        # Taxonomy archives count too: the post content renders in both.
        if context.is_archive or context.is_home:
            chain.append(path(post_type, f"{post_type}-content-archive.php"))
        if context.is_singular:
            chain.append(path(post_type, f"{post_type}-content-singular.php"))

    if context.is_front_page:
        tag = FRONT_PAGE_TAG
        chain.append(path("front-page", "front-page-content.php"))

    chain.reverse()
    return CandidateChain(templates=tuple(chain), tag=tag)


class TemplateResolver:
    """Resolves template chains and runs them through the hook registry.

    Args:
        config: Directory convention and hook names.
        hooks: Registry consulted on every call.  A private, empty registry
            is created when omitted.
        collector: Optional event collector.

    """

    __slots__ = ("_collector", "_config", "_hooks")

    def __init__(
        self,
        config: MewConfig | None = None,
        hooks: HookRegistry | None = None,
        *,
        collector: ResolveCollector | None = None,
    ) -> None:
        self._config = config if config is not None else MewConfig()
        self._hooks = hooks if hooks is not None else HookRegistry()
        self._collector = collector

    @property
    def config(self) -> MewConfig:
        return self._config

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    def hook_names(self, tag: PostTypeTag) -> list[HookName]:
        """Hook names consulted for *tag*, in application order."""
        names = [self._config.global_hook]
        if tag:
            names.append(self._config.tag_hook(tag))
        return names

    def resolve(self, context: PageContext) -> TemplateList:
        """Return the final template chain for *context*."""
        start = time.perf_counter()
        chain = build_candidates(context, self._config)

        templates = list(chain.templates)
        for name in self.hook_names(chain.tag):
            templates = self._hooks.apply(
                name, templates, context, collector=self._collector,
            )

        if self._collector is not None:
            self._collector.record_resolved(
                chain.tag,
                candidates=len(chain.templates),
                result=len(templates),
                duration_ms=(time.perf_counter() - start) * 1000,
            )
        return templates


def resolve(
    context: PageContext,
    *,
    config: MewConfig | None = None,
    hooks: HookRegistry | None = None,
) -> TemplateList:
    """One-shot resolution.  See :class:`TemplateResolver`."""
    return TemplateResolver(config, hooks).resolve(context)
