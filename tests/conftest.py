"""Shared route-graph fixtures.

Graph sketches use ``id(weight)`` on arrows; all edges are directed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from flightpath.model.graph import Edge, Graph, Node

# Reference flight network: (edge id, source index, destination index, weight)
FLIGHT_LANES: List[Tuple[str, int, int, int]] = [
    ("Edge_0", 0, 1, 85),
    ("Edge_1", 0, 2, 217),
    ("Edge_2", 0, 4, 173),
    ("Edge_3", 2, 6, 186),
    ("Edge_4", 2, 7, 103),
    ("Edge_5", 3, 7, 183),
    ("Edge_6", 5, 8, 250),
    ("Edge_7", 8, 9, 84),
    ("Edge_8", 7, 9, 167),
    ("Edge_9", 4, 9, 502),
    ("Edge_10", 9, 10, 40),
    ("Edge_11", 1, 10, 600),
]


@pytest.fixture
def flight_nodes() -> List[Node]:
    return [Node(f"Node_{i}", f"Node_{i}") for i in range(11)]


@pytest.fixture
def flight_graph(flight_nodes: List[Node]) -> Graph:
    # Node_0 reaches 1, 2, 4, 6, 7, 9, 10; Node_3, Node_5 and Node_8 are
    # unreachable from it.
    edges = [
        Edge(edge_id, flight_nodes[src], flight_nodes[dst], weight)
        for edge_id, src, dst, weight in FLIGHT_LANES
    ]
    return Graph(tuple(flight_nodes), tuple(edges))


@pytest.fixture
def diamond() -> Dict[str, Node]:
    return {name: Node(name) for name in "ABCD"}


@pytest.fixture
def diamond_graph(diamond: Dict[str, Node]) -> Graph:
    #        [1]      [1]
    #   ┌───────►B───────┐
    #   │                ▼
    #   A                D
    #   │                ▲
    #   └───────►C───────┘
    #        [1]      [1]
    a, b, c, d = (diamond[k] for k in "ABCD")
    return Graph(
        (a, c, b, d),
        (
            Edge("AB", a, b, 1),
            Edge("AC", a, c, 1),
            Edge("BD", b, d, 1),
            Edge("CD", c, d, 1),
        ),
    )


@pytest.fixture
def routes_yaml() -> str:
    return """
nodes:
  - {id: JFK, name: New York JFK}
  - {id: ORD, name: Chicago O'Hare}
  - {id: LAX, name: Los Angeles}
  - {id: SEA, name: Seattle}
edges:
  - {id: F1, source: JFK, target: ORD, weight: 150}
  - {id: F2, source: ORD, target: LAX, weight: 240}
  - {id: F3, source: JFK, target: LAX, weight: 420}
  - {id: F4, source: SEA, target: LAX, weight: 160}
"""


@pytest.fixture
def routes_file(tmp_path: Path, routes_yaml: str) -> Path:
    path = tmp_path / "routes.yaml"
    path.write_text(routes_yaml, encoding="utf-8")
    return path
