"""Tests for the count command public API (count/__init__.py).

The API functions load a grid file and run real searches; only the
budget-exhaustion path is forced with a patch.
"""

from unittest.mock import patch

import pytest

from ductwork.errors import ConfigurationError, SearchAbortedError
from ductwork.commands.count import crosscheck, paths
from grids import CROSSCHECK_GRIDS, DOC_EXAMPLE, KNOWN_COUNTS


class TestPaths:
    def test_doc_example(self, write_grid):
        result = paths(write_grid(DOC_EXAMPLE))
        assert result["path_count"] == 2
        assert result["status"] == "complete"
        assert result["free_rooms"] == 11
        assert set(result["stats"]) == {"nodes", "pruned", "paths"}
        assert result["stats"]["paths"] == 2
        assert "breakdown" not in result

    def test_unpruned(self, write_grid):
        result = paths(write_grid(DOC_EXAMPLE), prune=False)
        assert result["path_count"] == 2
        assert result["stats"]["pruned"] == 0

    def test_no_path_is_a_normal_result(self, write_grid):
        result = paths(write_grid(KNOWN_COUNTS["two_row_stub"][0]))
        assert result["path_count"] == 0
        assert result["status"] == "complete"

    def test_by_first_move(self, write_grid):
        result = paths(
            write_grid(KNOWN_COUNTS["three_by_three_corners"][0]),
            by_first_move=True,
        )
        assert result["breakdown"] == {"right": 1, "down": 1}
        assert result["path_count"] == 2

    def test_json_grid(self, write_grid):
        path = write_grid({"rows": [[2, 0, 0], [0, 0, 0], [0, 0, 3]]}, name="g.json")
        assert paths(path)["path_count"] == 2

    def test_aborted_search(self, write_grid):
        result = paths(write_grid(DOC_EXAMPLE), max_nodes=1)
        assert result["status"] == "aborted"
        assert result["reason"] == "node limit"
        assert result["path_count"] == 0
        assert result["stats"]["nodes"] == 2

    def test_aborted_keeps_partial_count(self, write_grid):
        err = SearchAbortedError("time limit", partial_count=5, nodes=99)
        with patch(
            "ductwork.commands.count.Pathfinder.count", side_effect=err
        ):
            result = paths(write_grid(DOC_EXAMPLE))
        assert result["status"] == "aborted"
        assert result["path_count"] == 5
        assert result["reason"] == "time limit"

    def test_invalid_grid_raises_before_search(self, write_grid):
        with patch("ductwork.commands.count.Pathfinder") as mock_finder:
            with pytest.raises(ConfigurationError):
                paths(write_grid("2 1\n2 2\n"))
        mock_finder.assert_not_called()


class TestCrosscheck:
    def test_doc_example(self, write_grid):
        result = crosscheck(write_grid(DOC_EXAMPLE))
        assert result["consistent"] is True
        assert result["counts"] == {
            "unpruned": 2,
            "degree": 2,
            "degree+reachability": 2,
        }
        assert result["nodes"]["degree"] < result["nodes"]["unpruned"]

    @pytest.mark.parametrize("name", sorted(CROSSCHECK_GRIDS))
    def test_consistent(self, write_grid, name):
        assert crosscheck(write_grid(CROSSCHECK_GRIDS[name]))["consistent"] is True

    def test_complete_status(self, write_grid):
        assert crosscheck(write_grid(DOC_EXAMPLE))["status"] == "complete"

    def test_budget_reports_aborted(self, write_grid):
        result = crosscheck(write_grid(DOC_EXAMPLE), max_nodes=1)
        assert result["status"] == "aborted"
        assert result["reason"] == "node limit"
        assert result["aborted_variant"] == "unpruned"
        assert result["consistent"] is None
        assert result["counts"] == {}
        assert result["nodes"] == {"unpruned": 2}
