"""Parse datacenter descriptions into Grid values.

Two serialisations are understood:

- text: ``width height`` followed by ``width * height`` room values, all
  whitespace-separated, row-major.
- json: ``{"width": W, "height": H, "cells": [...]}`` or
  ``{"rows": [[...], ...]}``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ductwork.errors import ConfigurationError
from ductwork.commands.grid.model import Grid, build_grid

logger = logging.getLogger(__name__)


def parse_text(text: str) -> Grid:
    """Parse the whitespace-separated text format."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ConfigurationError("Missing grid dimensions (expected 'width height')")

    values: list[int] = []
    for pos, tok in enumerate(tokens):
        try:
            values.append(int(tok))
        except ValueError:
            raise ConfigurationError(
                f"Token {pos + 1} is not an integer: {tok!r}"
            ) from None

    width, height = values[0], values[1]
    grid = build_grid(width, height, values[2:])
    logger.debug("Parsed %dx%d grid with %d free rooms", width, height, grid.free_count)
    return grid


def parse_json(text: str) -> Grid:
    """Parse the JSON format."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON grid: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError("JSON grid must be an object")

    if "rows" in data:
        grid = _from_rows(data["rows"])
    else:
        grid = _from_flat(data)
    logger.debug(
        "Parsed %dx%d JSON grid with %d free rooms",
        grid.width, grid.height, grid.free_count,
    )
    return grid


def parse(text: str, fmt: str = "text") -> Grid:
    if fmt == "json":
        return parse_json(text)
    if fmt == "text":
        return parse_text(text)
    raise ConfigurationError(f"Unknown grid format: {fmt}")


def _from_rows(rows: Any) -> Grid:
    if not isinstance(rows, list) or not rows:
        raise ConfigurationError("'rows' must be a non-empty list of lists")
    if not all(isinstance(r, list) for r in rows):
        raise ConfigurationError("'rows' must be a non-empty list of lists")
    width = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ConfigurationError(
                f"Row {r} has {len(row)} rooms, expected {width}"
            )
    cells = [v for row in rows for v in row]
    return build_grid(width, len(rows), cells)


def _from_flat(data: dict[str, Any]) -> Grid:
    missing = [k for k in ("width", "height", "cells") if k not in data]
    if missing:
        raise ConfigurationError(f"JSON grid is missing keys: {', '.join(missing)}")
    width, height, cells = data["width"], data["height"], data["cells"]
    if type(width) is not int or type(height) is not int:
        raise ConfigurationError("'width' and 'height' must be integers")
    if not isinstance(cells, list):
        raise ConfigurationError("'cells' must be a list")
    return build_grid(width, height, cells)
