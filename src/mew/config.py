"""Mew configuration.

MewConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass

from mew._errors import ConfigError


@dataclass(frozen=True, slots=True)
class MewConfig:
    """Configuration for template chain resolution.

    Attributes:
        content_dir: Directory every candidate path is placed under, relative
            to the theme root (e.g. ``ui`` or ``content``).  Empty means the
            bare layout.  Surrounding slashes are stripped on construction.
        default_dir: Directory holding the generic fallback templates.
        global_hook: Hook applied to every resolved list.
        hook_prefix: Prefix of the tag-scoped hook, joined to the tag with
            ``_`` (``content_template_array_book``).
        hook_suffix: Appended after the tag, verbatim.  ``_template_array``
            with prefix ``cnp_get`` gives ``cnp_get_book_template_array``.
        max_events: Capacity of the event log used by the CLI.

    """

    content_dir: str = ""
    default_dir: str = "default"
    global_hook: str = "content_template_array"
    hook_prefix: str = "content_template_array"
    hook_suffix: str = ""
    max_events: int = 10_000

    def __post_init__(self) -> None:
        object.__setattr__(self, "content_dir", self.content_dir.strip("/"))

        if not self.default_dir or "/" in self.default_dir:
            msg = f"default_dir must be a single directory name, got {self.default_dir!r}"
            raise ConfigError(msg)
        if not self.global_hook:
            msg = "global_hook must not be empty"
            raise ConfigError(msg)
        if not self.hook_prefix:
            msg = "hook_prefix must not be empty"
            raise ConfigError(msg)
        if self.max_events < 1:
            msg = f"max_events must be positive, got {self.max_events}"
            raise ConfigError(msg)

    def template_path(self, directory: str, filename: str) -> str:
        """Join *directory*/*filename* onto the content directory.

        ``MewConfig(content_dir="ui").template_path("book", "book.php")``
        returns ``ui/book/book.php``.

        """
        relative = f"{directory}/{filename}"
        if not self.content_dir:
            return relative
        return f"{self.content_dir}/{relative}"

    def tag_hook(self, tag: str) -> str:
        """Name of the hook scoped to *tag*."""
        return f"{self.hook_prefix}_{tag}{self.hook_suffix}"

    @property
    def fallback_template(self) -> str:
        """The universal fallback, always last before hooks run."""
        return self.template_path(self.default_dir, f"{self.default_dir}-content.php")
