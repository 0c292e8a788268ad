"""Route graph model and path primitives."""

from flightpath.model.graph import Edge, Graph, Node
from flightpath.model.path import Path

__all__ = ["Edge", "Graph", "Node", "Path"]
