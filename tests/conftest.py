"""Shared test fixtures for ductwork tests."""

import json

import pytest

from ductwork.commands.grid.reader import parse_text
from grids import DOC_EXAMPLE


@pytest.fixture
def write_grid(tmp_path):
    """Factory that writes grid text (or a JSON-able object) to a file."""

    def _write(content, name="grid.txt"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return str(path)

    return _write


@pytest.fixture
def doc_grid():
    return parse_text(DOC_EXAMPLE)
