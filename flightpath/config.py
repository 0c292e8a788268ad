"""Configuration classes for flightpath components."""

from dataclasses import dataclass

from flightpath.types.base import TieBreak


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for the shortest-path search engine."""

    # Ordering among unsettled nodes with equal tentative distance
    tie_break: TieBreak = TieBreak.NODE_ID

    # When True, asking for the path to the search source returns [source].
    # The default reports "no path" because the source has no predecessor.
    source_path_single_node: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "SearchConfig":
        """Build a config from a plain mapping (e.g. a YAML ``search`` section)."""
        allowed = {"tie_break", "source_path_single_node"}
        extra = set(data) - allowed
        if extra:
            raise ValueError(
                f"Unrecognized search option(s): {', '.join(sorted(extra))}. "
                f"Allowed keys are {sorted(allowed)}"
            )
        tie_break = data.get("tie_break", cls.tie_break)
        if isinstance(tie_break, str):
            tie_break = TieBreak.from_string(tie_break)
        return cls(
            tie_break=TieBreak(tie_break),
            source_path_single_node=bool(data.get("source_path_single_node", False)),
        )


# Global default configuration instance
SEARCH_CONFIG = SearchConfig()
