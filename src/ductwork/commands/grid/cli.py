"""CLI subcommand registration for the grid command."""

from __future__ import annotations

import argparse
from typing import Any

from ductwork.formats import FORMATS


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``grid`` subcommand and its sub-actions."""
    grd = subparsers.add_parser("grid", help="Datacenter grid operations")
    grd_sub = grd.add_subparsers(dest="action")

    # --- grid show ---
    shw = grd_sub.add_parser("show", help="Describe a grid")
    shw.add_argument("grid_file", help="Path to the grid file ('-' for stdin)")
    shw.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Input format (detected from the file suffix if omitted)",
    )

    # --- grid render ---
    rnd = grd_sub.add_parser("render", help="Syntax-highlight a grid")
    rnd.add_argument("grid_file", help="Path to the grid file ('-' for stdin)")
    rnd.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Input format (detected from the file suffix if omitted)",
    )
    rnd.add_argument(
        "--style",
        default="monokai",
        help="Pygments style name (default: monokai)",
    )
    rnd.add_argument(
        "--output",
        choices=["html", "terminal"],
        default="html",
        help="Highlighted output kind (default: html)",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate grid action."""
    from ductwork.commands.grid import show, render

    if args.action == "show":
        return show(args.grid_file, fmt=args.format)

    if args.action == "render":
        return render(
            args.grid_file,
            fmt=args.format,
            style=args.style,
            output=args.output,
        )

    return {"error": f"Unknown grid action: {args.action}"}
