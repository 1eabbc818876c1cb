"""
LexoRank facade.

Holds one ranking strategy chosen at construction time and forwards the
five position operations to it unchanged.
"""

import logging
from typing import Optional, Union

from .config import get_default_kind
from .models import LexoRankKind, Ordering
from .strategies import RankingStrategy, get_strategy_factory

logger = logging.getLogger(__name__)


class LexoRank:
    """
    Generate and compare list positions with a selectable strategy.

    Example:
        rank = LexoRank()
        first = rank.position_after("O")
        middle = rank.position_between("O", first)
    """

    def __init__(self, kind: Optional[Union[LexoRankKind, str]] = None):
        if kind is None:
            kind = get_default_kind()
        self._strategy: RankingStrategy = get_strategy_factory().get_strategy(kind)
        logger.debug(f"LexoRank using {self._strategy!r}")

    @property
    def kind(self) -> LexoRankKind:
        return self._strategy.kind

    @property
    def strategy(self) -> RankingStrategy:
        return self._strategy

    def compare_positions(self, first_pos: str, second_pos: str) -> Ordering:
        return self._strategy.compare_positions(first_pos, second_pos)

    def is_valid_position(self, pos: str) -> bool:
        return self._strategy.is_valid_position(pos)

    def position_before(self, pos: str) -> str:
        return self._strategy.position_before(pos)

    def position_after(self, pos: str) -> str:
        return self._strategy.position_after(pos)

    def position_between(self, first_pos: str, second_pos: str) -> str:
        return self._strategy.position_between(first_pos, second_pos)

    def __repr__(self) -> str:
        return f"LexoRank(kind={self.kind.name})"
