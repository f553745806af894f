"""Page context — the request classification a template chain is built from.

The classifier that decides whether a request is an archive, a search, the
front page and so on lives outside mew.  Its answers are captured once per
request in an immutable ``PageContext`` and passed explicitly to the
resolver.

Thread Safety:
    Both types are frozen.  Safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from mew._errors import ContextError


@dataclass(frozen=True, slots=True)
class CurrentPost:
    """The content item being rendered.

    Attributes:
        post_type: Content category name (e.g. ``book``, ``page``).

    """

    post_type: str


@dataclass(frozen=True, slots=True)
class PageContext:
    """Classification of the current request.

    Any combination of flags may be true at once (a search results page is
    usually also an archive).  ``post`` is *None* when no single content
    item is in play.

    """

    is_archive: bool = False
    is_home: bool = False
    is_search: bool = False
    is_singular: bool = False
    is_not_found: bool = False
    is_front_page: bool = False
    post: CurrentPost | None = None

    @property
    def is_listing(self) -> bool:
        """True for any view that renders a list of items."""
        return self.is_archive or self.is_home or self.is_search

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> PageContext:
        """Build a context from plain data (YAML, JSON, CLI input).

        Accepts the flag names as keys plus either ``post_type`` (a string)
        or ``post`` (a mapping with ``post_type``).

        Raises:
            ContextError: On unknown keys (including inside ``post``),
                non-boolean flags, a ``post`` without ``post_type``, or a
                non-string post type.

        """
        flag_names = {f.name for f in fields(cls)} - {"post"}
        kwargs: dict[str, object] = {}
        post_type: object = None

        for key, value in data.items():
            if key in flag_names:
                if not isinstance(value, bool):
                    msg = f"Context flag {key!r} must be a bool, got {type(value).__name__}"
                    raise ContextError(msg)
                kwargs[key] = value
            elif key == "post_type":
                post_type = value
            elif key == "post":
                if value is None:
                    continue
                if not isinstance(value, Mapping):
                    msg = f"Context 'post' must be a mapping, got {type(value).__name__}"
                    raise ContextError(msg)
                extra = sorted(str(k) for k in value if k != "post_type")
                if extra:
                    msg = f"Unknown post keys: {', '.join(extra)}"
                    raise ContextError(msg)
                post_type = value.get("post_type")
                if post_type is None:
                    msg = "Context 'post' requires a post_type"
                    raise ContextError(msg)
            else:
                msg = f"Unknown context key {key!r}"
                raise ContextError(msg)

        if post_type is not None:
            if not isinstance(post_type, str) or not post_type:
                msg = f"post_type must be a non-empty str, got {post_type!r}"
                raise ContextError(msg)
            kwargs["post"] = CurrentPost(post_type=post_type)

        return cls(**kwargs)  # type: ignore[arg-type]
