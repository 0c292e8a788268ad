"""Lightweight representation of a single reconstructed route.

The ``Path`` dataclass stores the node sequence from source to target, the
edges traversed between consecutive nodes and the total cost. Helpers expose
endpoints, ordering by cost and a plain-dict form for JSON output.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Iterator, Tuple

from flightpath.model.graph import Edge, Node
from flightpath.types.base import NodeID, Weight


@dataclass(frozen=True)
class Path:
    """Represents one route from a source node to a target node.

    Attributes:
        nodes: Nodes in travel order, source first.
        edges: Edges between consecutive nodes; ``len(edges) == len(nodes) - 1``.
        cost: Sum of the edge weights.
    """

    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]
    cost: Weight

    def __post_init__(self) -> None:
        if not self.nodes:
            raise ValueError("Path must contain at least one node.")
        if len(self.edges) != len(self.nodes) - 1:
            raise ValueError(
                f"Path with {len(self.nodes)} nodes needs {len(self.nodes) - 1} "
                f"edges, got {len(self.edges)}."
            )

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def src_node(self) -> Node:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> Node:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @cached_property
    def node_ids(self) -> Tuple[NodeID, ...]:
        """Return node identifiers in travel order."""
        return tuple(node.id for node in self.nodes)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation of the path."""
        return {
            "source": self.src_node.id,
            "target": self.dst_node.id,
            "cost": self.cost,
            "nodes": [{"id": n.id, "name": n.name} for n in self.nodes],
            "edges": [
                {
                    "id": e.id,
                    "source": e.source.id,
                    "target": e.destination.id,
                    "weight": e.weight,
                }
                for e in self.edges
            ],
        }
