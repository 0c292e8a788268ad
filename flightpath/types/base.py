"""Base aliases and enums shared by the model and the search engine."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable

#: Identifier of a node (airport code, opaque key, ...).
NodeID = Hashable

#: Identifier of an edge (flight/lane id).
EdgeID = Hashable

#: Edge weight and accumulated path distance. Non-negative integers only.
Weight = int


class TieBreak(IntEnum):
    """Secondary ordering among unsettled nodes that share the minimum distance.

    Path costs do not depend on this choice. It only decides which predecessor
    wins among equal-cost alternatives, making results reproducible.
    """

    #: Lowest node identifier first (compared as strings).
    NODE_ID = 1
    #: Earliest node in the graph's node order first.
    GRAPH_ORDER = 2

    @classmethod
    def from_string(cls, value: str) -> "TieBreak":
        """Parse a string into a TieBreak enum value.

        Args:
            value: Case-insensitive member name (e.g., "node_id", "GRAPH_ORDER").

        Returns:
            The corresponding TieBreak member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid tie_break '{value}'. Valid values are: {valid}"
            ) from None
