"""Shortest-path-first (SPF) search over a route graph.

Implements a label-setting (Dijkstra) search from a single source with
non-negative integer weights, and reconstruction of the route to any reached
node by walking predecessor links.

Notes:
    Neighbors come from an adjacency index keyed by node id. For each ordered
    node pair only the first edge in graph edge order is considered, even when
    parallel edges with lower weights exist.

    The minimum unsettled node is taken from a binary heap keyed by
    ``(distance, tie_key)``. ``tie_key`` comes from ``SearchConfig.tie_break``
    and makes the predecessor chosen among equal-cost alternatives
    reproducible. A node's distance is only replaced by a strictly smaller one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count
from typing import Any, Callable, Dict, List, Optional, Set, Tuple, Union

from flightpath.config import SEARCH_CONFIG, SearchConfig
from flightpath.logging import get_logger
from flightpath.model.graph import Edge, Graph, Node
from flightpath.model.path import Path
from flightpath.types.base import NodeID, TieBreak, Weight

logger = get_logger(__name__)

NodeRef = Union[Node, NodeID]


@dataclass
class SearchSession:
    """Search state produced by one ``execute()`` call.

    Attributes:
        source: Node the search started from.
        settled: Nodes whose shortest distance is final.
        unsettled: Nodes with a tentative distance pending evaluation.
        distance: Best known distance from ``source``; absent means unreached.
        predecessor: Node each node was reached from on its best path. The
            source has no entry.
        settle_order: Settled nodes in the order they were finalized.
    """

    source: Node
    settled: Set[Node] = field(default_factory=set)
    unsettled: Set[Node] = field(default_factory=set)
    distance: Dict[Node, Weight] = field(default_factory=dict)
    predecessor: Dict[Node, Node] = field(default_factory=dict)
    settle_order: List[Node] = field(default_factory=list)


class ShortestPathSearch:
    """Single-source shortest paths with route reconstruction.

    The engine keeps its own copies of the graph's node and edge lists. Each
    ``execute()`` replaces the previous session, so results from an earlier
    source are no longer visible. Instances are not safe for concurrent use;
    run concurrent searches on separate instances built from the same graph.

    Example:
        >>> search = ShortestPathSearch(graph)
        >>> search.execute(graph.get_node("JFK"))
        >>> search.get_path(graph.get_node("LAX"))
    """

    def __init__(self, graph: Graph, config: Optional[SearchConfig] = None) -> None:
        self._nodes: List[Node] = list(graph.nodes)
        self._edges: List[Edge] = list(graph.edges)
        self._config = config or SEARCH_CONFIG

        self._node_index: Dict[NodeID, Node] = {}
        self._order: Dict[NodeID, int] = {}
        for idx, node in enumerate(self._nodes):
            self._node_index.setdefault(node.id, node)
            self._order.setdefault(node.id, idx)

        # Copy of the graph's first-edge-per-pair adjacency, keyed by node id
        self._adj: Dict[NodeID, Dict[NodeID, Edge]] = {}
        for edge in self._edges:
            if edge.source.id not in self._adj:
                self._adj[edge.source.id] = {
                    dst.id: first for dst, first in graph.outgoing(edge.source).items()
                }

        self._tie_key = self._make_tie_key(self._config.tie_break)
        self._session: Optional[SearchSession] = None

    def _make_tie_key(self, tie_break: TieBreak) -> Callable[[Node], Any]:
        if tie_break == TieBreak.GRAPH_ORDER:
            unknown = len(self._nodes)
            return lambda node: self._order.get(node.id, unknown)
        return lambda node: str(node.id)

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def session(self) -> SearchSession:
        """Return the current search session.

        Raises:
            RuntimeError: If ``execute()`` has not been called yet.
        """
        if self._session is None:
            raise RuntimeError("Search not yet run: call execute() first.")
        return self._session

    @property
    def source(self) -> Node:
        """Return the source node of the current session."""
        return self.session.source

    def _resolve(self, node: NodeRef) -> Optional[Node]:
        node_id = node.id if isinstance(node, Node) else node
        return self._node_index.get(node_id)

    def _as_node(self, node: NodeRef) -> Node:
        # Edge endpoints outside the node list still count when validation is off
        if isinstance(node, Node):
            return self._node_index.get(node.id, node)
        return self._node_index.get(node, Node(node))

    def execute(self, source: NodeRef) -> None:
        """Run the search from ``source``, replacing any previous results.

        Args:
            source: Source node, or its id.

        Raises:
            KeyError: If the source is not a node of the graph.
        """
        src = self._resolve(source)
        if src is None:
            source_id = source.id if isinstance(source, Node) else source
            raise KeyError(f"Unknown source node '{source_id}'.")

        logger.debug(
            "SPF from %s over %d nodes, %d edges",
            src.id,
            len(self._nodes),
            len(self._edges),
        )

        session = SearchSession(source=src)
        session.distance[src] = 0
        session.unsettled.add(src)

        tie = count()
        min_pq: List[Tuple[Weight, Any, int, Node]] = [
            (0, self._tie_key(src), next(tie), src)
        ]

        while min_pq:
            current, _, _, node = heappop(min_pq)
            if node in session.settled or current != session.distance[node]:
                continue

            session.unsettled.discard(node)
            session.settled.add(node)
            session.settle_order.append(node)

            for neighbor_id, edge in self._adj.get(node.id, {}).items():
                neighbor = self._node_index.get(neighbor_id, edge.destination)
                if neighbor in session.settled:
                    continue
                candidate = current + self.edge_weight(node, neighbor)
                best = session.distance.get(neighbor)
                if best is None or candidate < best:
                    session.distance[neighbor] = candidate
                    session.predecessor[neighbor] = node
                    session.unsettled.add(neighbor)
                    heappush(
                        min_pq,
                        (candidate, self._tie_key(neighbor), next(tie), neighbor),
                    )

        self._session = session
        logger.debug(
            "SPF from %s settled %d of %d nodes",
            src.id,
            len(session.settled),
            len(self._nodes),
        )

    def edge_weight(self, node: Node, target: Node) -> Weight:
        """Return the weight of the first edge from ``node`` to ``target``.

        Raises:
            RuntimeError: If no such edge exists. The search only asks for
                pairs it enumerated from the adjacency index, so this signals
                a logic error.
        """
        edge = self._adj.get(node.id, {}).get(target.id)
        if edge is None:
            raise RuntimeError(
                f"No edge between settled adjacency pair '{node.id}' -> '{target.id}'."
            )
        return edge.weight

    def distance(self, target: NodeRef) -> Optional[Weight]:
        """Return the shortest distance to ``target``, or None if unreached."""
        session = self.session
        return session.distance.get(self._as_node(target))

    def reachable(self) -> List[Node]:
        """Return every node reached from the source, in settlement order."""
        return list(self.session.settle_order)

    def get_path(self, target: NodeRef) -> Optional[List[Node]]:
        """Return the nodes from the source to ``target`` inclusive.

        Returns None when ``target`` was never reached. The source itself has
        no predecessor and also yields None, unless
        ``SearchConfig.source_path_single_node`` is set, in which case it
        yields ``[source]``.

        Raises:
            RuntimeError: If ``execute()`` has not been called yet.
        """
        session = self.session
        step = self._as_node(target)
        if step not in session.predecessor:
            if step == session.source and self._config.source_path_single_node:
                return [session.source]
            return None

        path = [step]
        while step in session.predecessor:
            step = session.predecessor[step]
            path.append(step)
        path.reverse()
        return path

    def get_route(self, target: NodeRef) -> Optional[Path]:
        """Return the route to ``target`` with traversed edges and total cost.

        Follows the same reachability rules as :meth:`get_path`.
        """
        nodes = self.get_path(target)
        if nodes is None:
            return None
        edges = tuple(
            self._adj[u.id][v.id] for u, v in zip(nodes, nodes[1:])
        )
        cost = sum(edge.weight for edge in edges)
        return Path(nodes=tuple(nodes), edges=edges, cost=cost)


def shortest_path(
    graph: Graph,
    source: NodeRef,
    target: NodeRef,
    config: Optional[SearchConfig] = None,
) -> Optional[Path]:
    """Convenience wrapper: run one search and return the route to ``target``."""
    search = ShortestPathSearch(graph, config)
    search.execute(source)
    return search.get_route(target)
