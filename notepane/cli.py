"""Command-line front door for notepane.

Parses CLI options, merges them with the persisted config, sets up file
logging, and dispatches into the interactive session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .notes import NoteStoreError
from .runtime import run_app
from .runtime.config import DEFAULT_LOG_PATH, load_notes_path, load_theme_name, load_tick_ms, save_theme_name
from .ui_theme import available_theme_names, normalize_theme_name

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Attach a file handler, or a null handler when logging is off.

    The terminal belongs to the TUI, so records never go to stderr.
    """
    root = logging.getLogger("notepane")
    if log_file is None and not verbose:
        root.addHandler(logging.NullHandler())
        return
    target = log_file if log_file is not None else DEFAULT_LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write and browse notes in the terminal.")
    parser.add_argument("--notes-file", type=Path, default=None, help="Path to the saved-notes file.")
    parser.add_argument(
        "--tick-ms",
        type=_positive_int,
        default=None,
        help="Redraw tick in milliseconds (default: 250).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="Print saved notes and exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    parser.add_argument("--verbose", action="store_true", help="Log debug records (default file unless --log-file).")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch a notepane session.

    A failure to save notes at quit exits with status 1 and a message on
    stderr; all other errors propagate.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    notes_path = args.notes_file.expanduser() if args.notes_file is not None else load_notes_path()
    tick_ms = args.tick_ms if args.tick_ms is not None else load_tick_ms()
    if args.theme is not None:
        theme_name = normalize_theme_name(args.theme)
        save_theme_name(theme_name)
    else:
        theme_name = load_theme_name()

    try:
        run_app(notes_path, theme_name, args.no_color, tick_ms, list_only=args.list)
    except NoteStoreError as exc:
        logging.getLogger(__name__).error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
