"""NetworkX graph conversion utilities.

Converts between the route ``Graph`` and ``networkx.DiGraph`` so callers can
use NetworkX tooling (drawing, reference algorithms) on the same data.

Example:
    >>> import networkx as nx
    >>> from flightpath.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("JFK", "LAX", weight=330)
    >>> graph = from_networkx(G)
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import List

import networkx as nx

from flightpath.model.graph import Edge, Graph, Node


def to_networkx(graph: Graph, weight: str = "weight") -> nx.DiGraph:
    """Convert a route graph to a ``networkx.DiGraph``.

    Only the first edge of each ordered node pair is kept, matching the edge
    the search engine uses. Node ``name`` and edge ``id`` are stored as
    attributes.

    Args:
        graph: Route graph to convert.
        weight: Attribute name for edge weights.

    Returns:
        A new DiGraph keyed by node id.
    """
    G = nx.DiGraph()
    for node in graph.nodes:
        G.add_node(node.id, name=node.name)
    for edge in graph.edges:
        if G.has_edge(edge.source.id, edge.destination.id):
            continue
        G.add_edge(
            edge.source.id, edge.destination.id, id=edge.id, **{weight: edge.weight}
        )
    return G


def from_networkx(G: nx.DiGraph, weight: str = "weight") -> Graph:
    """Build a route graph from a directed NetworkX graph.

    Node attribute ``name`` and edge attribute ``id`` are used when present.
    Edges without an ``id`` are named ``"<source>|<target>"``.

    Raises:
        TypeError: If ``G`` is not directed.
        ValueError: If an edge lacks the weight attribute, or the resulting
            graph fails validation.
    """
    if not G.is_directed():
        raise TypeError("from_networkx expects a directed graph.")

    nodes = {n: Node(n, str(attrs.get("name") or "")) for n, attrs in G.nodes(data=True)}
    edges: List[Edge] = []
    for u, v, attrs in G.edges(data=True):
        if weight not in attrs:
            raise ValueError(f"Edge {u!r}->{v!r} has no '{weight}' attribute.")
        edges.append(Edge(attrs.get("id", f"{u}|{v}"), nodes[u], nodes[v], attrs[weight]))
    return Graph(tuple(nodes.values()), tuple(edges))
