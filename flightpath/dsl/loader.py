"""YAML loader for route graphs.

Parses a YAML document describing airports and flights into a validated
``Graph`` plus the ``SearchConfig`` to run it with. Accepted shape::

    nodes:
      - id: JFK
        name: New York JFK
      - LAX                 # bare id; name defaults to the id
    edges:
      - id: F100            # optional; defaults to "Edge_<index>"
        source: JFK
        target: LAX
        weight: 330
    search:                 # optional
      tie_break: node_id
      source_path_single_node: false
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path as FilePath
from typing import Any, Dict, List, Union

import yaml

from flightpath.config import SearchConfig
from flightpath.logging import get_logger
from flightpath.model.graph import Edge, Graph, Node

logger = get_logger(__name__)

_TOP_LEVEL_KEYS = {"nodes", "edges", "search"}
_NODE_KEYS = {"id", "name"}
_EDGE_KEYS = {"id", "source", "target", "weight"}


@dataclass(frozen=True)
class RouteDocument:
    """Parsed route document.

    Attributes:
        graph: Validated route graph.
        search: Search options from the ``search`` section (defaults if absent).
    """

    graph: Graph
    search: SearchConfig = field(default_factory=SearchConfig)


def _key(value: Any) -> str:
    # YAML 1.1 turns ids like "123" into int; ids are strings here.
    return str(value)


def _parse_nodes(raw: Any) -> List[Node]:
    if not isinstance(raw, list):
        raise ValueError("'nodes' must be a list")
    nodes: List[Node] = []
    for entry in raw:
        if isinstance(entry, dict):
            extra = set(entry) - _NODE_KEYS
            if extra:
                raise ValueError(
                    f"Unrecognized key(s) in node definition: {', '.join(sorted(map(str, extra)))}"
                )
            if "id" not in entry:
                raise ValueError("Each node definition must include 'id'")
            nodes.append(Node(_key(entry["id"]), str(entry.get("name") or "")))
        elif isinstance(entry, (str, int)) and not isinstance(entry, bool):
            nodes.append(Node(_key(entry)))
        else:
            raise ValueError(f"Invalid node definition: {entry!r}")
    return nodes


def _parse_edges(raw: Any, nodes: List[Node]) -> List[Edge]:
    if not isinstance(raw, list):
        raise ValueError("'edges' must be a list")
    by_id: Dict[str, Node] = {node.id: node for node in nodes}
    edges: List[Edge] = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ValueError(
                "Each edge definition must be a mapping with 'source', 'target' and 'weight'"
            )
        extra = set(entry) - _EDGE_KEYS
        if extra:
            raise ValueError(
                f"Unrecognized key(s) in edge definition: {', '.join(sorted(map(str, extra)))}"
            )
        missing = [k for k in ("source", "target", "weight") if k not in entry]
        if missing:
            raise ValueError(
                f"Edge definition #{idx} is missing {', '.join(repr(k) for k in missing)}"
            )
        src_id, dst_id = _key(entry["source"]), _key(entry["target"])
        # Unknown endpoints become placeholder nodes so Graph reports the dangling reference
        source = by_id.get(src_id, Node(src_id))
        destination = by_id.get(dst_id, Node(dst_id))
        edge_id = _key(entry["id"]) if "id" in entry else f"Edge_{idx}"
        edges.append(Edge(edge_id, source, destination, entry["weight"]))
    return edges


def load_routes_yaml(yaml_str: str) -> RouteDocument:
    """Load and validate a route document from a YAML string.

    Raises:
        ValueError: If the document shape is invalid or the graph fails
            validation (dangling edge, negative weight, duplicate ids).
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data) - _TOP_LEVEL_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s): {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(_TOP_LEVEL_KEYS)}"
        )

    nodes = _parse_nodes(data.get("nodes") or [])
    edges = _parse_edges(data.get("edges") or [], nodes)
    graph = Graph(tuple(nodes), tuple(edges))

    search_section = data.get("search") or {}
    if not isinstance(search_section, dict):
        raise ValueError("'search' must be a mapping")
    search = SearchConfig.from_dict(search_section)

    logger.info("Loaded route graph: %d nodes, %d edges", len(nodes), len(edges))
    return RouteDocument(graph=graph, search=search)


def load_routes_file(path: Union[str, FilePath]) -> RouteDocument:
    """Load a route document from a YAML file on disk."""
    file_path = FilePath(path)
    logger.debug("Reading route document %s", file_path)
    return load_routes_yaml(file_path.read_text(encoding="utf-8"))
