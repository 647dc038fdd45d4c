"""Pygments-based rendering of datacenter grids."""

from __future__ import annotations

from typing import Any

from pygments import highlight as _pygments_highlight
from pygments.formatters import HtmlFormatter, TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound
from pygments.token import Comment, Error, Keyword, Name, Number, Text, Whitespace

from ductwork.errors import ConfigurationError
from ductwork.commands.grid.model import Grid


class DatacenterLexer(RegexLexer):
    """Lexer for the plain text grid format.

    The leading ``width height`` pair is lexed as numbers; after it every
    room value gets its own token type so intake, air conditioner and
    unowned rooms stand out.
    """

    name = "Datacenter"
    aliases = ["datacenter"]
    filenames = ["*.dc"]

    tokens = {
        "root": [
            (r"\s+", Whitespace),
            (r"(\d+)(\s+)(\d+)", bygroups(Number.Integer, Whitespace, Number.Integer), "rooms"),
            (r"\S+", Error),
        ],
        "rooms": [
            (r"\s+", Whitespace),
            (r"2(?!\d)", Keyword),
            (r"3(?!\d)", Name.Exception),
            (r"1(?!\d)", Comment),
            (r"0(?!\d)", Text),
            (r"\S+", Error),
        ],
    }


FORMATTERS = {
    "html": lambda style: HtmlFormatter(style=style, nowrap=True),
    "terminal": lambda style: TerminalFormatter(),
}


def render_grid(grid: Grid, *, style: str = "monokai", output: str = "html") -> dict[str, Any]:
    """Highlight the canonical text form of a grid.

    Returns dict with keys: source, highlighted, output, style.
    """
    try:
        get_style_by_name(style)
    except ClassNotFound:
        raise ConfigurationError(f"Unknown Pygments style: {style}") from None

    source = grid.to_text()
    return {
        "source": source,
        "highlighted": _highlight_source(source, style, output),
        "output": output,
        "style": style,
    }


def _highlight_source(source: str, style: str, output: str) -> str:
    """Apply Pygments highlighting; unknown outputs return the source unchanged."""
    make_formatter = FORMATTERS.get(output)
    if make_formatter is None:
        return source
    return _pygments_highlight(source, DatacenterLexer(), make_formatter(style))
