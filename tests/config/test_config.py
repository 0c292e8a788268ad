"""Tests for `flightpath.config` and the TieBreak enum."""

import pytest

from flightpath.config import SEARCH_CONFIG, SearchConfig
from flightpath.types.base import TieBreak


def test_default_config() -> None:
    assert SEARCH_CONFIG.tie_break == TieBreak.NODE_ID
    assert SEARCH_CONFIG.source_path_single_node is False
    assert SearchConfig() == SEARCH_CONFIG


def test_from_dict_parses_strings() -> None:
    cfg = SearchConfig.from_dict(
        {"tie_break": "graph_order", "source_path_single_node": True}
    )
    assert cfg.tie_break == TieBreak.GRAPH_ORDER
    assert cfg.source_path_single_node is True


def test_from_dict_accepts_enum_values_and_defaults() -> None:
    assert SearchConfig.from_dict({"tie_break": 2}).tie_break == TieBreak.GRAPH_ORDER
    assert SearchConfig.from_dict({}) == SearchConfig()


def test_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unrecognized search option"):
        SearchConfig.from_dict({"heap": "fibonacci"})


def test_tie_break_from_string() -> None:
    assert TieBreak.from_string("Node_Id") is TieBreak.NODE_ID
    with pytest.raises(ValueError, match="Invalid tie_break 'random'"):
        TieBreak.from_string("random")


def test_config_is_frozen() -> None:
    with pytest.raises(AttributeError):
        SEARCH_CONFIG.tie_break = TieBreak.GRAPH_ORDER  # type: ignore[misc]
