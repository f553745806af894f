"""Mew CLI — mew resolve / mew hooks.

Entry point for the ``mew`` command-line interface.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml

from mew._errors import ContextError, MewError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the mew CLI."""
    parser = argparse.ArgumentParser(
        prog="mew",
        description="Resolve content template chains for page requests.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # mew resolve
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Print the template chain for a page context",
    )
    resolve_parser.add_argument("--root", default=".", help="Directory containing mew.yaml")
    resolve_parser.add_argument("--content-dir", default=None, help="Template directory prefix")
    resolve_parser.add_argument("--archive", action="store_true", help="Archive view")
    resolve_parser.add_argument("--home", action="store_true", help="Blog home view")
    resolve_parser.add_argument("--search", action="store_true", help="Search results view")
    resolve_parser.add_argument("--singular", action="store_true", help="Single item view")
    resolve_parser.add_argument("--not-found", action="store_true", help="404 view")
    resolve_parser.add_argument("--front-page", action="store_true", help="Site front page")
    resolve_parser.add_argument("--post-type", default=None, help="Type of the current post")
    resolve_parser.add_argument(
        "--context-file", default=None,
        help="YAML/JSON file with context flags (CLI flags are OR-ed in)",
    )
    resolve_parser.add_argument("--json", action="store_true", help="Emit JSON")

    # mew hooks
    hooks_parser = subparsers.add_parser(
        "hooks",
        help="List hook names consulted for the configured convention",
    )
    hooks_parser.add_argument("--root", default=".", help="Directory containing mew.yaml")
    hooks_parser.add_argument(
        "--post-type", action="append", default=[], dest="post_types",
        help="Post type to list a scoped hook for (repeatable)",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from mew import __version__

    return __version__


_FLAG_ARGS: tuple[tuple[str, str], ...] = (
    ("archive", "is_archive"),
    ("home", "is_home"),
    ("search", "is_search"),
    ("singular", "is_singular"),
    ("not_found", "is_not_found"),
    ("front_page", "is_front_page"),
)


def _context_data(args: argparse.Namespace) -> dict[str, object]:
    """Merge --context-file contents with CLI flags into context data."""
    data: dict[str, object] = {}
    if args.context_file is not None:
        path = Path(args.context_file)
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            msg = f"Cannot read context file {path}: {exc}"
            raise ContextError(msg) from exc
        if not isinstance(loaded, dict):
            msg = f"Context file {path} must contain a mapping"
            raise ContextError(msg)
        data.update(loaded)

    for arg_name, flag in _FLAG_ARGS:
        if getattr(args, arg_name):
            data[flag] = True
    if args.post_type is not None:
        data.pop("post", None)
        data["post_type"] = args.post_type
    return data


def _run_resolve(args: argparse.Namespace) -> None:
    from mew.config_loader import load_config
    from mew.context import PageContext
    from mew.observability import EventLog, ResolveCollector
    from mew.resolver import TemplateResolver

    config = load_config(Path(args.root), content_dir=args.content_dir)
    context = PageContext.from_mapping(_context_data(args))

    collector = ResolveCollector(EventLog(max_events=config.max_events))
    resolver = TemplateResolver(config, collector=collector)
    templates = resolver.resolve(context)

    if args.json:
        resolved = collector.log.last_resolution()
        payload = {
            "tag": resolved.tag if resolved is not None else "",
            "templates": templates,
            "hooks": collector.log.hook_trail(),
        }
        print(json.dumps(payload, indent=2))
    else:
        print("\n".join(templates))


def _run_hooks(args: argparse.Namespace) -> None:
    from mew.config_loader import load_config
    from mew.resolver import VIEW_TAGS

    config = load_config(Path(args.root))
    print(config.global_hook)
    for tag in VIEW_TAGS:
        print(config.tag_hook(tag))
    for post_type in args.post_types:
        print(config.tag_hook(post_type))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "resolve":
            _run_resolve(args)
        elif args.command == "hooks":
            _run_hooks(args)
    except MewError as exc:
        print(f"mew: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
