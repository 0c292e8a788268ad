"""Shared type aliases and enums."""

from flightpath.types.base import EdgeID, NodeID, TieBreak, Weight

__all__ = ["EdgeID", "NodeID", "TieBreak", "Weight"]
