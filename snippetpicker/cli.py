"""Command-line front door for snippetpicker.

Parses CLI options, loads the snippet collection, and drives a picker
session. Resolved payloads are written to stdout so an external injection
tool can consume them; nothing here types or copies text itself.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import shutil
import sys
from pathlib import Path

from .config import load_config, load_picker_limits, load_snippets_path, load_style_name
from .errors import CollectionLoadError
from .input import handle_picker_key
from .loader import load_snippet_collection
from .render import render_picker_lines, render_preview
from .search import find_snippet_by_title
from .session import PickerSession

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
CANCELLED_EXIT_CODE = 1


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default picker width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def configure_logging(debug: bool) -> None:
    """Send package diagnostics to stderr when ``debug`` is enabled."""
    if not debug:
        return
    package_logger = logging.getLogger("snippetpicker")
    package_logger.setLevel(logging.DEBUG)
    if any(type(handler) is logging.StreamHandler for handler in package_logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    package_logger.addHandler(handler)


def split_key_tokens(raw: str) -> list[str]:
    """Split a comma-separated ``--keys`` value into key tokens."""
    return [token for token in (part.strip() for part in raw.split(",")) if token]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search, navigate and combine text snippets; print the chosen text."
    )
    parser.add_argument("--file", default=None, help="Snippets JSON file. Defaults to the configured data file.")
    parser.add_argument("--query", default="", help="Initial search term.")
    parser.add_argument(
        "--keys",
        default=None,
        help="Comma-separated key tokens to replay (e.g. DOWN,TAB,DOWN,TAB,ENTER).",
    )
    parser.add_argument("--show", metavar="TITLE", default=None, help="Preview the snippet with this exact title and exit.")
    parser.add_argument("--max-window", type=_positive_int, default=None, help="Number of visible rows.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Render width (default: terminal width).")
    parser.add_argument("--style", default=None, help="Pygments style name for previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--debug", action="store_true", help="Log diagnostics to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one picker session.

    With ``--keys`` the tokens are replayed through the picker key handler; a
    commit prints its text and a cancel exits with status 1. Without keys the
    picker is rendered once.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    config = load_config()
    limits = load_picker_limits(config)
    if args.max_window is not None:
        limits = dataclasses.replace(limits, max_window_size=args.max_window)
    style = args.style or load_style_name(config)
    no_color = args.no_color or not sys.stdout.isatty()

    path = Path(args.file).expanduser() if args.file else load_snippets_path(config)
    try:
        collection = load_snippet_collection(path, limits)
    except CollectionLoadError as exc:
        raise SystemExit(str(exc)) from exc

    if args.show is not None:
        snippet = find_snippet_by_title(collection, args.show)
        if snippet is None:
            raise SystemExit(f"Snippet not found: {args.show}")
        sys.stdout.write(render_preview(snippet.content, style, no_color))
        return

    session = PickerSession(collection, limits)
    session.set_query(args.query)

    if args.keys is not None:
        committed = []
        for key in split_key_tokens(args.keys):
            _handled, should_quit = handle_picker_key(key, session, committed)
            if should_quit:
                break
        if committed:
            sys.stdout.write(committed[-1].text)
            return
        if session.cancelled:
            raise SystemExit(CANCELLED_EXIT_CODE)

    width = args.width if args.width is not None else _default_render_width()
    for line in render_picker_lines(session, width, no_color):
        sys.stdout.write(line + "\n")
