"""flightpath: shortest flight routes over a weighted directed graph.

Primary API:
    Node, Edge, Graph - immutable route graph model
    ShortestPathSearch - single-source search with route reconstruction
    Path - a reconstructed route with its edges and cost
    load_routes_yaml() / load_routes_file() - build a graph from YAML

Example:
    from flightpath import Edge, Graph, Node, ShortestPathSearch

    jfk, ord_, lax = Node("JFK"), Node("ORD"), Node("LAX")
    graph = Graph(
        (jfk, ord_, lax),
        (Edge("F1", jfk, ord_, 150), Edge("F2", ord_, lax, 240)),
    )

    search = ShortestPathSearch(graph)
    search.execute(jfk)
    search.get_path(lax)  # [JFK, ORD, LAX]
"""

from __future__ import annotations

from flightpath import cli, logging
from flightpath._version import __version__
from flightpath.algorithms.spf import SearchSession, ShortestPathSearch, shortest_path
from flightpath.config import SEARCH_CONFIG, SearchConfig
from flightpath.dsl.loader import RouteDocument, load_routes_file, load_routes_yaml
from flightpath.lib.nx import from_networkx, to_networkx
from flightpath.model.graph import Edge, Graph, Node
from flightpath.model.path import Path
from flightpath.types.base import TieBreak

__all__ = [
    # Version
    "__version__",
    # Model
    "Node",
    "Edge",
    "Graph",
    "Path",
    # Search
    "ShortestPathSearch",
    "SearchSession",
    "shortest_path",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    "TieBreak",
    # Input
    "RouteDocument",
    "load_routes_yaml",
    "load_routes_file",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
