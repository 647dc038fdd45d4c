"""CLI entry point for ductwork commands."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ductwork.errors import ConfigurationError, SearchAbortedError

EXIT_CONFIG_ERROR = 2
EXIT_ABORTED = 3


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ductwork",
        description="Count cooling-duct routes through a datacenter grid",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search progress to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # --- Register command groups ---
    from ductwork.commands.grid.cli import register as register_grid
    from ductwork.commands.count.cli import (
        register as register_count,
        add_search_arguments,
    )

    register_grid(sub)
    register_count(sub)

    # --- Plain solve: print the count and nothing else ---
    solve = sub.add_parser(
        "solve",
        help="Read a grid and print the number of duct paths",
    )
    solve.add_argument(
        "grid_file",
        nargs="?",
        default="-",
        help="Path to the grid file (default: stdin)",
    )
    add_search_arguments(solve)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return _dispatch(parser, args)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except SearchAbortedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ABORTED


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.command == "solve":
        from ductwork.commands.count.pathfinder import count_paths
        from ductwork.commands.grid import load

        grid = load(args.grid_file, fmt=args.format)
        total = count_paths(
            grid,
            prune=not args.no_prune,
            reachability=args.reachability,
            max_nodes=args.max_nodes,
            time_limit=args.time_limit,
        )
        print(total)
        return 0

    # Command groups with two-level dispatch
    group_dispatch = {
        "grid": "ductwork.commands.grid.cli",
        "count": "ductwork.commands.count.cli",
    }

    if args.command in group_dispatch:
        # Check if action was provided
        if not getattr(args, "action", None):
            # Re-parse to show group-specific help
            parser.parse_args([args.command, "--help"])
            return 1

        import importlib
        cli_mod = importlib.import_module(group_dispatch[args.command])
        result = cli_mod.run(args)
        json.dump(result, sys.stdout, indent=2)
        print()
        if result.get("status") == "aborted":
            return EXIT_ABORTED
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
