"""Shared exception classes for ductwork commands."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when a datacenter grid is malformed.

    Covers bad dimensions, a wrong number of cells, unknown room values and
    a missing or duplicated intake / air conditioner.
    """


class SearchAbortedError(Exception):
    """Raised when a search exceeds its node or time budget."""

    def __init__(self, reason: str, *, partial_count: int, nodes: int) -> None:
        super().__init__(
            f"Search aborted ({reason}) after {nodes} nodes; "
            f"{partial_count} paths found so far"
        )
        self.reason = reason
        self.partial_count = partial_count
        self.nodes = nodes
