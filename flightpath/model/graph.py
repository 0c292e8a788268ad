"""Route graph model: Node, Edge and the immutable Graph aggregate.

Nodes are locations (airports) identified by ``id``; ``name`` is display-only
and does not take part in equality or hashing. Edges are directed, weighted
connections (flights) between two nodes. A ``Graph`` is built once from ordered
node and edge sequences and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from flightpath.types.base import EdgeID, NodeID, Weight


@dataclass(frozen=True)
class Node:
    """Represents a location in the route graph.

    Attributes:
        id: Unique identifier. Equality and hashing use this field only.
        name: Display name. Defaults to ``str(id)`` when omitted.
    """

    id: NodeID
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", str(self.id))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Edge:
    """Represents one directed, weighted connection between two nodes.

    Attributes:
        id: Edge identifier (e.g. a flight or lane id).
        source: Origin node.
        destination: Target node.
        weight: Non-negative integer cost (duration, distance, fare, ...).
    """

    id: EdgeID
    source: Node
    destination: Node
    weight: Weight

    def __str__(self) -> str:
        return f"{self.source} {self.destination}"


@dataclass(frozen=True)
class Graph:
    """Immutable collection of nodes and directed edges.

    Construction validates the input unless ``validate=False`` is passed:

      - Every edge endpoint must be one of the graph's nodes.
      - Edge weights must be non-negative integers.
      - Node ids and edge ids must be unique.

    With ``validate=False`` these become caller preconditions and are not
    checked.

    Multiple edges between the same ordered node pair are permitted; only the
    first one in edge order is reported by :meth:`outgoing` and
    :meth:`first_edge`.

    Attributes:
        nodes: Nodes in construction order.
        edges: Edges in construction order.
    """

    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]
    validate: InitVar[bool] = True
    _by_id: Dict[NodeID, Node] = field(init=False, repr=False, compare=False)
    _adj: Dict[NodeID, Dict[NodeID, Edge]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self, validate: bool) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

        by_id: Dict[NodeID, Node] = {}
        for node in self.nodes:
            if validate and node.id in by_id:
                raise ValueError(f"Node '{node.id}' already exists in this graph.")
            by_id.setdefault(node.id, node)

        adj: Dict[NodeID, Dict[NodeID, Edge]] = {}
        seen_edges: set = set()
        for edge in self.edges:
            if validate:
                self._check_edge(edge, by_id, seen_edges)
            # Keep the first edge per ordered pair
            adj.setdefault(edge.source.id, {}).setdefault(edge.destination.id, edge)

        object.__setattr__(self, "_by_id", by_id)
        object.__setattr__(self, "_adj", adj)

    @staticmethod
    def _check_edge(edge: Edge, by_id: Dict[NodeID, Node], seen: set) -> None:
        if edge.id in seen:
            raise ValueError(f"Edge with id '{edge.id}' already exists.")
        seen.add(edge.id)
        if edge.source.id not in by_id:
            raise ValueError(
                f"Dangling edge reference: edge '{edge.id}' source "
                f"'{edge.source.id}' is not in the graph."
            )
        if edge.destination.id not in by_id:
            raise ValueError(
                f"Dangling edge reference: edge '{edge.id}' destination "
                f"'{edge.destination.id}' is not in the graph."
            )
        if isinstance(edge.weight, bool) or not isinstance(edge.weight, int):
            raise ValueError(
                f"Edge '{edge.id}' weight must be an integer, got {edge.weight!r}."
            )
        if edge.weight < 0:
            raise ValueError(
                f"Edge '{edge.id}' has negative weight {edge.weight}; "
                "negative weights are not supported."
            )

    @classmethod
    def from_lists(
        cls,
        nodes: Iterable[Node],
        edges: Iterable[Edge],
        validate: bool = True,
    ) -> Graph:
        """Build a graph from arbitrary iterables of nodes and edges."""
        return cls(tuple(nodes), tuple(edges), validate)

    def __contains__(self, node: object) -> bool:
        if isinstance(node, Node):
            return node.id in self._by_id
        try:
            return node in self._by_id
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def get_node(self, node_id: NodeID) -> Node:
        """Return the node with the given id.

        Raises:
            KeyError: If no such node exists.
        """
        try:
            return self._by_id[node_id]
        except KeyError:
            raise KeyError(f"Node '{node_id}' is not in the graph.") from None

    def first_edge(self, source: Node, destination: Node) -> Optional[Edge]:
        """Return the first edge from ``source`` to ``destination``, if any."""
        return self._adj.get(source.id, {}).get(destination.id)

    def outgoing(self, node: Node) -> Mapping[Node, Edge]:
        """Outgoing neighbors of ``node`` mapped to the first edge reaching each.

        Returns a fresh dict ordered by the first appearance of each
        destination in the edge list.
        """
        return {
            edge.destination: edge for edge in self._adj.get(node.id, {}).values()
        }
