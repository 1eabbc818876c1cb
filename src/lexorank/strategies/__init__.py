"""
Ranking strategies for generating and comparing positions.
"""

from .base_strategy import RankingStrategy
from .figma_strategy import FigmaRankingStrategy
from .strategy_factory import (
    StrategyFactory,
    UnsupportedStrategyError,
    get_strategy_factory,
)

__all__ = [
    'RankingStrategy',
    'FigmaRankingStrategy',
    'StrategyFactory',
    'UnsupportedStrategyError',
    'get_strategy_factory',
]
