"""CLI subcommand registration for the count command."""

from __future__ import annotations

import argparse
from typing import Any

from ductwork.formats import FORMATS


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def _non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not number >= 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {value}")
    return number


def add_search_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by every command that runs a search."""
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Input format (detected from the file suffix if omitted)",
    )
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Disable the dead-end pruning check (much slower)",
    )
    parser.add_argument(
        "--reachability",
        action="store_true",
        help="Also prune branches that cut off unvisited rooms",
    )
    parser.add_argument(
        "--max-nodes",
        type=_non_negative_int,
        default=None,
        help="Abort after expanding this many search nodes",
    )
    parser.add_argument(
        "--time-limit",
        type=_non_negative_float,
        default=None,
        help="Abort after this many seconds",
    )


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``count`` subcommand and its sub-actions."""
    cnt = subparsers.add_parser("count", help="Duct path counting")
    cnt_sub = cnt.add_subparsers(dest="action")

    # --- count paths ---
    pth = cnt_sub.add_parser("paths", help="Count duct paths with search statistics")
    pth.add_argument("grid_file", help="Path to the grid file ('-' for stdin)")
    add_search_arguments(pth)
    pth.add_argument(
        "--by-first-move",
        action="store_true",
        help="Split the count by the first step out of the intake",
    )

    # --- count crosscheck ---
    chk = cnt_sub.add_parser(
        "crosscheck", help="Compare pruned and unpruned counts"
    )
    chk.add_argument("grid_file", help="Path to the grid file ('-' for stdin)")
    chk.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Input format (detected from the file suffix if omitted)",
    )
    chk.add_argument(
        "--max-nodes",
        type=_non_negative_int,
        default=None,
        help="Abort each search after this many nodes",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate count action."""
    from ductwork.commands.count import paths, crosscheck

    if args.action == "paths":
        return paths(
            args.grid_file,
            fmt=args.format,
            prune=not args.no_prune,
            reachability=args.reachability,
            max_nodes=args.max_nodes,
            time_limit=args.time_limit,
            by_first_move=args.by_first_move,
        )

    if args.action == "crosscheck":
        return crosscheck(
            args.grid_file,
            fmt=args.format,
            max_nodes=args.max_nodes,
        )

    return {"error": f"Unknown count action: {args.action}"}
