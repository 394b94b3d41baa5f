"""Command-line front door for json-view.

Parses CLI options, loads the input documents and either prints, validates
or browses them interactively.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import __version__
from .config import ViewerConfig, resolve_config
from .document.loader import LoadResult, load_documents
from .document.serialize import colorize_json, format_json
from .logging_setup import configure as configure_logging
from .ui_theme import available_scheme_names, resolve_scheme

NO_DOCUMENTS_MESSAGE = "No valid JSON documents provided."

_EPILOG = """\
navigation:
  Up/Down, k/j      move selection        PgUp/PgDn  move one page
  Home/End          first or last item    Left/h     collapse or go to parent
  Right/l           expand                Enter      toggle
  + / -             expand or collapse all
  0-9               expand to nesting level (0=collapse all)
  s or /, S         search keys, search values
  n/N, c            next/previous match, clear search
  t                 cycle color scheme    y          copy selected JSON
  ?                 help                  q          quit
  mouse             click to select, click left of label or double-click to
                    expand/collapse, click footer hints

environment:
  JSON_VIEW_ASCII, JSON_VIEW_NO_MOUSE, JSON_VIEW_COLOR_SCHEME

examples:
  json-view config.json data.json
  json-view --parse-only config.json
  curl -s https://api.example.com/data | json-view
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-view",
        description="Interactive JSON viewer with tree navigation.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", help="JSON files to open. Reads standard input when omitted.")
    parser.add_argument("-V", "--version", action="version", version=f"json-view {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-p",
        "--parse-only",
        action="store_true",
        help="Parse input and pretty-print JSON, then exit.",
    )
    mode.add_argument("--validate", action="store_true", help="Validate JSON input and exit with status.")
    parser.add_argument("--no-mouse", action="store_true", help="Disable mouse support.")
    parser.add_argument("--ascii", action="store_true", help="Use ASCII tree and indicator characters.")
    parser.add_argument(
        "--color-scheme",
        metavar="NAME",
        default=None,
        help=f"Color scheme ({', '.join(available_scheme_names())}).",
    )
    return parser


def _report_errors(result: LoadResult) -> None:
    for error in result.errors:
        print(error.message, file=sys.stderr)


def print_documents(result: LoadResult, config: ViewerConfig) -> None:
    """Pretty-print every parsed document, highlighted on a colour terminal."""
    colored = sys.stdout.isatty() and resolve_scheme(config.color_scheme).colors
    for document in result.documents:
        text = format_json(document.value, indent=2)
        if colored:
            sys.stdout.write(colorize_json(text))
        else:
            sys.stdout.write(text + "\n")
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, load documents and dispatch; returns the exit status."""
    configure_logging()
    args = build_parser().parse_args(argv)
    config = resolve_config(
        args.files,
        parse_only=args.parse_only,
        validate=args.validate,
        no_mouse=args.no_mouse,
        ascii_glyphs=args.ascii,
        color_scheme=args.color_scheme,
    )

    stdin = None if config.paths else sys.stdin.buffer
    result = load_documents(config.paths, stdin)
    _report_errors(result)

    if config.validate:
        return 0 if result.any_parsed and result.all_parsed else 1

    if not result.any_parsed:
        print(NO_DOCUMENTS_MESSAGE, file=sys.stderr)
        return 1

    if config.parse_only:
        print_documents(result, config)
        return 0

    from .runtime.app import run_viewer

    run_viewer(result.documents, config)
    return 0
