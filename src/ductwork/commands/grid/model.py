"""Datacenter grid value and its adjacency relation.

The grid is stored flat, row-major: room ``(row, col)`` lives at index
``row * width + col``.  Neighbours are derived from the index and the
dimensions and always come back in the order Up, Right, Down, Left.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from ductwork.errors import ConfigurationError

OWNED = 0
BLOCKED = 1
START = 2
END = 3

ROOM_VALUES = (OWNED, BLOCKED, START, END)

DIRECTIONS = ("up", "right", "down", "left")


@dataclass(frozen=True)
class Grid:
    """An immutable datacenter layout."""

    width: int
    height: int
    cells: tuple[int, ...]
    start: int
    end: int
    free_count: int

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def blocked_count(self) -> int:
        return self.size - self.free_count

    def step(self, i: int, direction: str) -> int | None:
        """Index of the room one step from ``i``, or None if off the grid."""
        if direction == "up":
            j = i - self.width
            return j if j >= 0 else None
        if direction == "right":
            return i + 1 if (i + 1) % self.width != 0 else None
        if direction == "down":
            j = i + self.width
            return j if j < self.size else None
        if direction == "left":
            return i - 1 if i % self.width != 0 else None
        raise ValueError(f"Unknown direction: {direction}")

    @cached_property
    def _moves(self) -> tuple[tuple[tuple[str, int], ...], ...]:
        table = []
        for i in range(self.size):
            row = []
            for direction in DIRECTIONS:
                j = self.step(i, direction)
                if j is not None:
                    row.append((direction, j))
            table.append(tuple(row))
        return tuple(table)

    @cached_property
    def _neighbors(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(j for _, j in moves) for moves in self._moves)

    def moves(self, i: int) -> tuple[tuple[str, int], ...]:
        """(direction, index) pairs for every in-bounds neighbour of ``i``."""
        return self._moves[i]

    def neighbors(self, i: int) -> tuple[int, ...]:
        """In-bounds neighbours of ``i`` in Up, Right, Down, Left order."""
        return self._neighbors[i]

    def coords(self, i: int) -> tuple[int, int]:
        return divmod(i, self.width)

    def index(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({row}, {col}) is outside a {self.width}x{self.height} grid")
        return row * self.width + col

    def rows(self) -> list[list[int]]:
        w = self.width
        return [list(self.cells[r * w:(r + 1) * w]) for r in range(self.height)]

    def to_text(self) -> str:
        """Serialise in the plain text input format (width first)."""
        lines = [f"{self.width} {self.height}"]
        lines.extend(" ".join(str(v) for v in row) for row in self.rows())
        return "\n".join(lines) + "\n"


def build_grid(width: int, height: int, cells: list[int] | tuple[int, ...]) -> Grid:
    """Validate raw dimensions and room values and build a Grid.

    Raises ConfigurationError on any malformed input.
    """
    if width <= 0 or height <= 0:
        raise ConfigurationError(
            f"Grid dimensions must be positive, got {width}x{height}"
        )
    if len(cells) != width * height:
        raise ConfigurationError(
            f"Expected {width * height} rooms for a {width}x{height} grid, "
            f"got {len(cells)}"
        )

    starts: list[int] = []
    ends: list[int] = []
    free = 0
    for i, value in enumerate(cells):
        if type(value) is not int or value not in ROOM_VALUES:
            raise ConfigurationError(
                f"Invalid room value {value!r} at index {i} (expected 0, 1, 2 or 3)"
            )
        if value == START:
            starts.append(i)
        elif value == END:
            ends.append(i)
        if value != BLOCKED:
            free += 1

    if len(starts) != 1:
        raise ConfigurationError(
            f"Grid must contain exactly one intake (2), found {len(starts)}"
        )
    if len(ends) != 1:
        raise ConfigurationError(
            f"Grid must contain exactly one air conditioner (3), found {len(ends)}"
        )

    return Grid(
        width=width,
        height=height,
        cells=tuple(cells),
        start=starts[0],
        end=ends[0],
        free_count=free,
    )
