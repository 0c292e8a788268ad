"""Integrations with third-party graph libraries."""

from flightpath.lib.nx import from_networkx, to_networkx

__all__ = ["from_networkx", "to_networkx"]
