"""Tests covering the LexoRank facade."""
import sys
from functools import cmp_to_key
from pathlib import Path as _TestPath

import pytest

ROOT = _TestPath(__file__).resolve().parents[1]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from lexorank import LexoRank, LexoRankKind, Ordering, UnsupportedStrategyError
from lexorank.constants import STRATEGY_ENV_VAR
from lexorank.strategies import FigmaRankingStrategy


@pytest.fixture
def lexrank(monkeypatch):
    monkeypatch.delenv(STRATEGY_ENV_VAR, raising=False)
    return LexoRank(LexoRankKind.FIGMA)


def test_default_kind_is_figma(monkeypatch):
    monkeypatch.delenv(STRATEGY_ENV_VAR, raising=False)
    rank = LexoRank()

    assert rank.kind is LexoRankKind.FIGMA
    assert isinstance(rank.strategy, FigmaRankingStrategy)


def test_kind_from_environment(monkeypatch):
    monkeypatch.setenv(STRATEGY_ENV_VAR, "figma")

    assert LexoRank().kind is LexoRankKind.FIGMA


def test_kind_from_string(lexrank):
    assert LexoRank("figma").kind is LexoRankKind.FIGMA


def test_unknown_kind_raises():
    with pytest.raises(UnsupportedStrategyError):
        LexoRank("atlassian")


def test_repr_names_kind(lexrank):
    assert repr(lexrank) == "LexoRank(kind=FIGMA)"


def test_compare_positions(lexrank):
    assert lexrank.compare_positions("AA", "AB") == Ordering.LESS
    assert lexrank.compare_positions("AA", "AA") == Ordering.EQUAL
    assert lexrank.compare_positions("AA", "A0") == Ordering.GREATER


def test_is_valid_position(lexrank):
    assert lexrank.is_valid_position("AA") is True
    assert lexrank.is_valid_position("!") is True
    assert lexrank.is_valid_position("~") is True
    # Character outside ASCII 32-126
    assert lexrank.is_valid_position("¡") is False


def test_position_before(lexrank):
    assert lexrank.position_before("C") == "B"
    assert lexrank.position_before("AA") == "A@"
    assert lexrank.position_before("!") == " ~"


def test_position_after(lexrank):
    assert lexrank.position_after("C") == "D"
    assert lexrank.position_after("AA") == "AB"
    assert lexrank.position_after("~") == "~!"


def test_position_between(lexrank):
    assert lexrank.position_between("A", "C") == "B"
    assert lexrank.position_between("AA", "AB") == "AAO"


def test_compare_sorts_with_cmp_to_key(lexrank):
    positions = ["AB", "A", "~", "!", "AA", "A0", " ~"]

    assert sorted(positions, key=cmp_to_key(lexrank.compare_positions)) == sorted(positions)


def test_reorder_list_by_moving_items(lexrank):
    # Build a list by appending, then move the last item to the front
    items = {"a": "O"}
    items["b"] = lexrank.position_after(items["a"])
    items["c"] = lexrank.position_after(items["b"])
    items["c"] = lexrank.position_before(items["a"])
    items["d"] = lexrank.position_between(items["a"], items["b"])

    ordered = [name for name, _ in sorted(items.items(), key=lambda kv: kv[1])]

    assert ordered == ["c", "a", "d", "b"]
