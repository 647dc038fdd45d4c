"""Grid command – load, inspect, and render datacenter layouts.

Public API
----------
- load(path, *, fmt=None) -> Grid
- show(path, *, fmt=None) -> dict
- render(path, *, fmt=None, style="monokai", output="html") -> dict
"""

from __future__ import annotations

from typing import Any

from ductwork.formats import detect_format, read_source
from ductwork.commands.grid.model import Grid
from ductwork.commands.grid.reader import parse
from ductwork.commands.grid.renderer import render_grid


def load(path: str, *, fmt: str | None = None) -> Grid:
    """Read and validate a grid from a file (or stdin for '-')."""
    if fmt is None:
        fmt = detect_format(path)
    return parse(read_source(path), fmt)


def show(path: str, *, fmt: str | None = None) -> dict[str, Any]:
    """Describe a grid.

    Returns dict with keys: width, height, start, end, free_rooms,
    blocked_rooms, rows.
    """
    grid = load(path, fmt=fmt)
    return {
        "width": grid.width,
        "height": grid.height,
        "start": list(grid.coords(grid.start)),
        "end": list(grid.coords(grid.end)),
        "free_rooms": grid.free_count,
        "blocked_rooms": grid.blocked_count,
        "rows": grid.rows(),
    }


def render(
    path: str,
    *,
    fmt: str | None = None,
    style: str = "monokai",
    output: str = "html",
) -> dict[str, Any]:
    """Syntax-highlight a grid.

    Returns dict with keys: source, highlighted, output, style.
    """
    grid = load(path, fmt=fmt)
    return render_grid(grid, style=style, output=output)
