"""Input format detection and source reading shared across commands."""

from __future__ import annotations

import sys
from pathlib import Path

from ductwork.errors import ConfigurationError


EXT_MAP = {
    ".json": "json",
    ".txt": "text",
    ".dc": "text",
}

FORMATS = ("text", "json")


def detect_format(path: str) -> str:
    """Guess the input format from the file suffix."""
    if path == "-":
        return "text"
    return EXT_MAP.get(Path(path).suffix.lower(), "text")


def read_source(path: str) -> str:
    """Read a grid description from a file, or from stdin when path is '-'."""
    if path != "-" and not Path(path).is_file():
        raise ConfigurationError(f"Grid file not found: {path}")
    try:
        if path == "-":
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read grid {path}: {exc}") from exc
