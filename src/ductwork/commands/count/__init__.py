"""Count command – count duct routes through a datacenter.

Public API
----------
- paths(grid_file, *, fmt=None, prune=True, reachability=False,
        max_nodes=None, time_limit=None, by_first_move=False) -> dict
- crosscheck(grid_file, *, fmt=None, max_nodes=None) -> dict
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from ductwork.errors import SearchAbortedError
from ductwork.commands.grid import load
from ductwork.commands.count.pathfinder import (
    Pathfinder,
    SearchOptions,
    SearchStats,
    count_paths,
    has_dead_end,
    has_unreachable_room,
)


def paths(
    grid_file: str,
    *,
    fmt: str | None = None,
    prune: bool = True,
    reachability: bool = False,
    max_nodes: int | None = None,
    time_limit: float | None = None,
    by_first_move: bool = False,
) -> dict[str, Any]:
    """Count Hamiltonian ducts from intake to air conditioner.

    Returns dict with keys: path_count, status, stats, and breakdown when
    by_first_move is set.  An aborted search reports status "aborted" and
    the partial count found before the budget ran out.
    """
    grid = load(grid_file, fmt=fmt)
    options = SearchOptions(
        prune=prune,
        reachability=reachability,
        max_nodes=max_nodes,
        time_limit=time_limit,
    )
    finder = Pathfinder(grid, options)

    result: dict[str, Any] = {"free_rooms": grid.free_count}
    try:
        if by_first_move:
            breakdown = finder.count_by_first_move()
            result["breakdown"] = breakdown
            result["path_count"] = sum(breakdown.values())
        else:
            result["path_count"] = finder.count()
        result["status"] = "complete"
    except SearchAbortedError as exc:
        result["path_count"] = exc.partial_count
        result["status"] = "aborted"
        result["reason"] = exc.reason

    result["stats"] = asdict(finder.stats)
    return result


def crosscheck(
    grid_file: str,
    *,
    fmt: str | None = None,
    max_nodes: int | None = None,
) -> dict[str, Any]:
    """Count with every pruning combination and compare.

    The heuristics only cut branches that cannot complete, so all counts
    must agree.  Returns dict with keys: counts, nodes, consistent, status.
    When a variant runs out of budget the remaining variants are skipped,
    status is "aborted" and consistent is None.
    """
    grid = load(grid_file, fmt=fmt)
    variants = {
        "unpruned": SearchOptions(prune=False, max_nodes=max_nodes),
        "degree": SearchOptions(prune=True, max_nodes=max_nodes),
        "degree+reachability": SearchOptions(
            prune=True, reachability=True, max_nodes=max_nodes
        ),
    }
    counts: dict[str, int] = {}
    nodes: dict[str, int] = {}
    for name, options in variants.items():
        finder = Pathfinder(grid, options)
        try:
            counts[name] = finder.count()
        except SearchAbortedError as exc:
            nodes[name] = exc.nodes
            return {
                "counts": counts,
                "nodes": nodes,
                "consistent": None,
                "status": "aborted",
                "reason": exc.reason,
                "aborted_variant": name,
            }
        nodes[name] = finder.stats.nodes

    return {
        "counts": counts,
        "nodes": nodes,
        "consistent": len(set(counts.values())) == 1,
        "status": "complete",
    }


__all__ = [
    "Pathfinder",
    "SearchOptions",
    "SearchStats",
    "count_paths",
    "crosscheck",
    "has_dead_end",
    "has_unreachable_room",
    "paths",
]
