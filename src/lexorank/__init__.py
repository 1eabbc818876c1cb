"""
lexorank - short, densely ordered string keys for list ordering.

Positions are strings over the printable ASCII alphabet that sort by plain
string comparison. New positions can always be generated before, after or
between existing ones without renumbering.
"""

from .constants import MAX_CHAR_CODE, MIN_CHAR_CODE
from .lexorank import LexoRank
from .models import LexoRankKind, Ordering
from .strategies import (
    FigmaRankingStrategy,
    RankingStrategy,
    StrategyFactory,
    UnsupportedStrategyError,
)
from .utils import ValidationHelper

__version__ = "0.1.0"

__all__ = [
    "LexoRank",
    "LexoRankKind",
    "Ordering",
    "RankingStrategy",
    "FigmaRankingStrategy",
    "StrategyFactory",
    "UnsupportedStrategyError",
    "ValidationHelper",
    "MIN_CHAR_CODE",
    "MAX_CHAR_CODE",
]
