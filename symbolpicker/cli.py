"""Command-line front door for symbolpicker.

Resolves the resource directory, loads the symbol catalog, and prints either
the prioritized default view or the ranked matches for a query.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from . import config
from .catalog import CatalogLoader
from .picker import SymbolPicker
from .ranking import rank_with_scores
from .render import DEFAULT_CELL_WIDTH, render_grid
from .resources import PlistResourceProvider, default_resource_dir
from .top_symbols import DEFAULT_TOP_SYMBOLS


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
    """Resolve default grid width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symbolpicker",
        description="Browse and search the SF Symbols catalog by name and alias.",
    )
    parser.add_argument("query", nargs="?", default="", help="Search text. Omit to list the default view.")
    parser.add_argument(
        "--resources",
        metavar="DIR",
        default=None,
        help="Directory holding name_availability/symbol_order/symbol_search plists.",
    )
    parser.add_argument("--limit", type=_positive_int, default=None, help="Show at most N symbols.")
    parser.add_argument(
        "--top",
        metavar="NAME",
        nargs="+",
        default=None,
        help="Priority symbols shown first when no query is given.",
    )
    parser.add_argument("--no-top", action="store_true", help="Keep catalog order in the default view.")
    parser.add_argument("--scores", action="store_true", help="Print the match score next to each name.")
    parser.add_argument("--grid", action="store_true", help="Lay results out in a grid.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Grid width in columns (default: terminal width).",
    )
    parser.add_argument("--select", metavar="NAME", default=None, help="Select NAME and remember it.")
    parser.add_argument("--check", action="store_true", help="Exit 0 when the symbol tables are available.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log catalog loading to stderr.")
    return parser


def _resolve_resource_dir(explicit: str | None) -> Path:
    if explicit is not None:
        path = Path(explicit).expanduser()
        if not path.is_dir():
            raise SystemExit(f"Resource directory not found: {path}")
        return path
    return default_resource_dir(config.load_resource_dir())


def _resolve_top_symbols(args: argparse.Namespace) -> tuple[str, ...]:
    if args.no_top:
        return ()
    if args.top is not None:
        return tuple(args.top)
    configured = config.load_top_symbols()
    if configured is not None:
        return tuple(configured)
    return DEFAULT_TOP_SYMBOLS


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and print symbols for the requested view.

    Returns the process exit status; ``--check`` reports ``1`` when the tables
    are missing.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    loader = CatalogLoader(PlistResourceProvider(_resolve_resource_dir(args.resources)))
    if args.check:
        available = loader.is_available()
        sys.stdout.write("available\n" if available else "unavailable\n")
        return 0 if available else 1

    picker = SymbolPicker(
        loader,
        top_symbols=_resolve_top_symbols(args),
        selection=config.load_last_selection() or "",
        on_select=config.save_last_selection,
    )
    picker.load()

    if args.select is not None:
        if not picker.select(args.select):
            raise SystemExit(f"Unknown symbol: {args.select}")
        sys.stdout.write(f"{args.select}\n")
        return 0

    picker.set_query(args.query)
    if not picker.visible_symbols:
        sys.stderr.write(picker.message.strip() + "\n")
        return 0

    names = picker.visible_names()
    if args.limit is not None:
        names = names[: args.limit]

    if args.scores:
        scores = {entry.name: score for entry, score in rank_with_scores(args.query, picker.all_symbols)}
        lines = [f"{scores.get(name, 0):>5}  {name}" for name in names]
    elif args.grid:
        width = args.width if args.width is not None else _default_render_width()
        color = not args.no_color and sys.stdout.isatty()
        lines = render_grid(names, picker.selection, width, DEFAULT_CELL_WIDTH, color)
    else:
        lines = names

    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
