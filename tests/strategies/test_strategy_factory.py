"""Tests covering strategy selection by kind."""
import sys
from pathlib import Path as _TestPath

import pytest

ROOT = _TestPath(__file__).resolve().parents[2]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from lexorank.models import LexoRankKind
from lexorank.strategies import strategy_factory
from lexorank.strategies.figma_strategy import FigmaRankingStrategy
from lexorank.strategies.strategy_factory import (
    StrategyFactory,
    UnsupportedStrategyError,
    get_strategy_factory,
)


@pytest.mark.parametrize("kind", [LexoRankKind.FIGMA, "figma", "FIGMA", " Figma "])
def test_get_strategy_resolves_kind(kind):
    strategy = StrategyFactory().get_strategy(kind)

    assert isinstance(strategy, FigmaRankingStrategy)
    assert strategy.kind is LexoRankKind.FIGMA


def test_get_strategy_reuses_instance():
    factory = StrategyFactory()

    assert factory.get_strategy("figma") is factory.get_strategy(LexoRankKind.FIGMA)


@pytest.mark.parametrize("kind", ["atlassian", "", 42, None])
def test_get_strategy_rejects_unknown_kind(kind):
    with pytest.raises(UnsupportedStrategyError):
        StrategyFactory().get_strategy(kind)


def test_unsupported_strategy_error_is_value_error():
    with pytest.raises(ValueError):
        StrategyFactory().get_strategy("atlassian")


def test_unregistered_kind_raises(monkeypatch):
    monkeypatch.delitem(strategy_factory.STRATEGY_CLASSES, LexoRankKind.FIGMA)

    with pytest.raises(UnsupportedStrategyError, match="No ranking strategy registered"):
        StrategyFactory().get_strategy(LexoRankKind.FIGMA)


def test_every_kind_has_a_strategy():
    factory = StrategyFactory()

    assert set(factory.get_supported_kinds()) == set(LexoRankKind)
    for kind in LexoRankKind:
        assert factory.get_strategy(kind).kind is kind


def test_default_factory_is_shared():
    assert get_strategy_factory() is get_strategy_factory()
