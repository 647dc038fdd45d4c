"""Depth-first counting of Hamiltonian duct paths.

The search walks from the intake, marking rooms as it enters them and
unmarking them on the way back, and counts every walk that reaches the air
conditioner having covered all free rooms.  Before expanding a room it
checks whether the partial path has already stranded a room (see
``has_dead_end``); that check is what keeps the search tractable.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass

from ductwork.errors import SearchAbortedError
from ductwork.commands.grid.model import BLOCKED, Grid

logger = logging.getLogger(__name__)

# How many nodes to expand between wall-clock checks.
_CLOCK_INTERVAL = 1024


@dataclass
class SearchOptions:
    """Knobs for a single search."""

    prune: bool = True
    reachability: bool = False
    max_nodes: int | None = None
    time_limit: float | None = None


@dataclass
class SearchStats:
    """Counters collected while searching."""

    nodes: int = 0
    pruned: int = 0
    paths: int = 0


def has_dead_end(grid: Grid, visited: bytearray, crt: int) -> bool:
    """True if some unvisited room can no longer be passed through.

    A room in the middle of the duct needs one way in and one way out, so
    every unvisited room other than the air conditioner needs at least two
    neighbours that are either unvisited or the current frontier ``crt``.
    """
    end = grid.end
    for i in range(grid.size):
        if visited[i] or i == end:
            continue
        degree = 0
        for j in grid.neighbors(i):
            if not visited[j] or j == crt:
                degree += 1
                if degree >= 2:
                    break
        if degree < 2:
            return True
    return False


def has_unreachable_room(grid: Grid, visited: bytearray, crt: int) -> bool:
    """True if a flood fill from ``crt`` misses some unvisited room."""
    remaining = visited.count(0)
    if remaining == 0:
        return False

    seen = {crt}
    queue: deque[int] = deque([crt])
    reached = 0
    while queue:
        cell = queue.popleft()
        for j in grid.neighbors(cell):
            if visited[j] or j in seen:
                continue
            seen.add(j)
            reached += 1
            queue.append(j)
    return reached < remaining


class Pathfinder:
    """Counts Hamiltonian paths from a grid's intake to its air conditioner.

    Every call to :meth:`count` builds its own visited set, so one
    Pathfinder can be run repeatedly and always gives the same answer.
    """

    def __init__(self, grid: Grid, options: SearchOptions | None = None) -> None:
        self.grid = grid
        self.options = options or SearchOptions()
        self.stats = SearchStats()
        self._deadline: float | None = None

    def count(self) -> int:
        """Total number of complete ducts."""
        self._reset()
        visited = self._initial_visited()
        visited[self.grid.start] = 1
        found = self._search(self.grid.start, visited, 1)
        logger.debug(
            "Search finished: %d paths, %d nodes, %d pruned",
            found, self.stats.nodes, self.stats.pruned,
        )
        return found

    def count_by_first_move(self) -> dict[str, int]:
        """Path counts split by the direction of the first step out of the intake.

        Each branch runs on its own copy of the visited set.
        """
        self._reset()
        grid = self.grid
        base = self._initial_visited()
        base[grid.start] = 1

        breakdown: dict[str, int] = {}
        for direction, j in grid.moves(grid.start):
            if base[j]:
                continue
            visited = bytearray(base)
            visited[j] = 1
            breakdown[direction] = self._search(j, visited, 2)
        logger.debug("First-move breakdown: %s", breakdown)
        return breakdown

    def _reset(self) -> None:
        self.stats = SearchStats()
        limit = self.options.time_limit
        self._deadline = time.monotonic() + limit if limit is not None else None

    def _initial_visited(self) -> bytearray:
        return bytearray(1 if v == BLOCKED else 0 for v in self.grid.cells)

    def _search(self, root: int, visited: bytearray, length: int) -> int:
        """Iterative DFS from ``root``, which must already be marked visited.

        Each stack frame holds a room and an iterator over the children still
        to try.  A room is marked when pushed and unmarked when popped.
        """
        found_before = self.stats.paths
        stack = [(root, iter(self._enter(root, visited, length)))]
        while stack:
            cell, children = stack[-1]
            nxt = next(children, None)
            if nxt is None:
                stack.pop()
                if stack:
                    visited[cell] = 0
                continue
            visited[nxt] = 1
            # len(stack) + length is the new path length once nxt is pushed
            stack.append((nxt, iter(self._enter(nxt, visited, length + len(stack)))))
        return self.stats.paths - found_before

    def _enter(self, crt: int, visited: bytearray, length: int) -> tuple[int, ...]:
        """Account for arriving at ``crt``; return the rooms to try next."""
        grid = self.grid
        opts = self.options
        stats = self.stats
        stats.nodes += 1
        self._check_budget()

        if crt == grid.end:
            if length == grid.free_count:
                stats.paths += 1
            return ()

        if opts.prune and has_dead_end(grid, visited, crt):
            stats.pruned += 1
            return ()
        if opts.reachability and has_unreachable_room(grid, visited, crt):
            stats.pruned += 1
            return ()

        return tuple(j for j in grid.neighbors(crt) if not visited[j])

    def _check_budget(self) -> None:
        stats = self.stats
        max_nodes = self.options.max_nodes
        if max_nodes is not None and stats.nodes > max_nodes:
            self._abort("node limit")
        if self._deadline is not None and stats.nodes % _CLOCK_INTERVAL == 0:
            if time.monotonic() > self._deadline:
                self._abort("time limit")

    def _abort(self, reason: str) -> None:
        logger.warning(
            "Search aborted (%s) after %d nodes", reason, self.stats.nodes
        )
        raise SearchAbortedError(
            reason, partial_count=self.stats.paths, nodes=self.stats.nodes
        )


def count_paths(grid: Grid, **kwargs) -> int:
    """Convenience wrapper: count ducts with the given SearchOptions fields."""
    return Pathfinder(grid, SearchOptions(**kwargs)).count()
