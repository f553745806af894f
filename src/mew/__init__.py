"""Mew — content template chain resolution.

Given the classification of a page request, mew builds the ordered list of
content templates a theme should try, most specific first, and lets
extension code rewrite that list through named hooks.

Quick start::

    from mew import PageContext, CurrentPost, resolve

    ctx = PageContext(is_singular=True, post=CurrentPost("book"))
    resolve(ctx)
    # ['book/book-content-singular.php', 'book/book.php',
    #  'default/default-content-singular.php', 'default/default-content.php']

Hooks::

    from mew import HookRegistry, TemplateResolver

    hooks = HookRegistry()
    hooks.add_filter("content_template_array_book", lambda t, ctx: ["x.php", *t])
    TemplateResolver(hooks=hooks).resolve(ctx)

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "CurrentPost",
    "HookRegistry",
    "MewConfig",
    "PageContext",
    "TemplateResolver",
    "__version__",
    "build_candidates",
    "load_config",
    "resolve",
]

_LAZY: dict[str, str] = {
    "CurrentPost": "mew.context",
    "PageContext": "mew.context",
    "HookRegistry": "mew.hooks",
    "MewConfig": "mew.config",
    "load_config": "mew.config_loader",
    "TemplateResolver": "mew.resolver",
    "build_candidates": "mew.resolver",
    "resolve": "mew.resolver",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import mew`` fast while providing a clean top-level API.
    """
    module_name = _LAZY.get(name)
    if module_name is not None:
        import importlib

        return getattr(importlib.import_module(module_name), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
