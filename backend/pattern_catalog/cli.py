"""Command line front end for browsing the pattern catalog.

Examples:
    pattern-catalog list --category structural
    pattern-catalog show Command --format mermaid
    pattern-catalog demo Strategy
"""

import argparse
import sys
from typing import Optional, Sequence

from pattern_catalog import config
from pattern_catalog.demo import run
from pattern_catalog.errors import NoDemoAvailableError, NotFoundError
from pattern_catalog.models import PatternEntry
from pattern_catalog.registry import get_catalog
from pattern_catalog.renderer import RENDERERS, render_entry


def _print_listing(category: Optional[str]) -> None:
    for entry in get_catalog().list(category):
        marker = "*" if entry.has_demo else " "
        print(f"{entry.number:>2}. {marker} {entry.name:<24} {entry.category.value}")


def _print_demo(entry: PatternEntry) -> None:
    try:
        result = run(entry)
    except NoDemoAvailableError as e:
        print(f"({e})")
        return
    for line in result.output_lines:
        print(f"  {line}")


def _print_entry(entry: PatternEntry, fmt: str, with_demo: bool) -> None:
    title = f"#{entry.number} {entry.name} ({entry.category.value})"
    print(title)
    print("=" * len(title))
    print(entry.summary)
    print()
    print(entry.explanation)
    print()
    print(render_entry(entry, fmt))
    if with_demo:
        print()
        print("Demo:")
        _print_demo(entry)


def _serve(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("pattern_catalog.main:app", host=host, port=port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Browse the classic design patterns: diagrams, explanations and demos.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List patterns in canonical order (* = has a demo)")
    list_cmd.add_argument("-c", "--category", help="creational, structural or behavioral")

    show_cmd = sub.add_parser("show", help="Show one pattern")
    show_cmd.add_argument("name", help="Canonical pattern name, e.g. 'Factory Method'")
    show_cmd.add_argument(
        "-f",
        "--format",
        choices=sorted(RENDERERS),
        default=None,
        help="Diagram dialect (default: PATTERN_CATALOG_FORMAT or ascii)",
    )
    show_cmd.add_argument("--no-demo", action="store_true", help="Do not run the demo")

    demo_cmd = sub.add_parser("demo", help="Run a pattern's demo only")
    demo_cmd.add_argument("name", help="Canonical pattern name")

    serve_cmd = sub.add_parser("serve", help="Serve the catalog over HTTP")
    serve_cmd.add_argument("--host", default=config.HOST)
    serve_cmd.add_argument("--port", type=int, default=config.PORT)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        config.set_verbose(True)

    try:
        if args.command == "list":
            _print_listing(args.category)
        elif args.command == "show":
            _print_entry(get_catalog().lookup(args.name), args.format or config.DEFAULT_FORMAT, not args.no_demo)
        elif args.command == "demo":
            _print_demo(get_catalog().lookup(args.name))
        elif args.command == "serve":
            _serve(args.host, args.port)
    except NotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
