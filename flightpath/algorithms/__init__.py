"""Shortest-path search algorithms."""

from flightpath.algorithms.spf import SearchSession, ShortestPathSearch, shortest_path

__all__ = ["SearchSession", "ShortestPathSearch", "shortest_path"]
