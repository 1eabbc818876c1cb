"""
Strategy factory for creating ranking strategies by kind.
"""

import logging
import threading
from typing import Dict, List, Type, Union

from ..models import LexoRankKind
from .base_strategy import RankingStrategy
from .figma_strategy import FigmaRankingStrategy

logger = logging.getLogger(__name__)


class UnsupportedStrategyError(ValueError):
    """Raised when no ranking strategy is registered for a kind."""


# Registered implementations, one per kind
STRATEGY_CLASSES: Dict[LexoRankKind, Type[RankingStrategy]] = {
    LexoRankKind.FIGMA: FigmaRankingStrategy,
}


class StrategyFactory:
    """Factory for creating ranking strategies."""

    def __init__(self):
        # Strategies are stateless, so one shared instance per kind is enough
        self._strategies: Dict[LexoRankKind, RankingStrategy] = {}
        self._lock = threading.RLock()

    def get_strategy(self, kind: Union[LexoRankKind, str]) -> RankingStrategy:
        """
        Get the strategy implementing a kind.

        Args:
            kind: A LexoRankKind member or its string value (e.g. 'figma')

        Returns:
            Ranking strategy instance

        Raises:
            UnsupportedStrategyError: If the kind is unknown or unregistered
        """
        resolved = self._resolve_kind(kind)

        with self._lock:
            strategy = self._strategies.get(resolved)
            if strategy is None:
                strategy_class = STRATEGY_CLASSES.get(resolved)
                if strategy_class is None:
                    raise UnsupportedStrategyError(
                        f"No ranking strategy registered for {resolved.value!r}"
                    )
                strategy = strategy_class()
                self._strategies[resolved] = strategy
                logger.debug(f"Created {strategy_class.__name__} for kind {resolved.value}")
            return strategy

    def get_supported_kinds(self) -> List[LexoRankKind]:
        """Get all kinds that have a registered strategy."""
        return list(STRATEGY_CLASSES.keys())

    @staticmethod
    def _resolve_kind(kind: Union[LexoRankKind, str]) -> LexoRankKind:
        if isinstance(kind, LexoRankKind):
            return kind
        if isinstance(kind, str):
            try:
                return LexoRankKind.from_value(kind)
            except ValueError as e:
                raise UnsupportedStrategyError(str(e)) from e
        raise UnsupportedStrategyError(f"Invalid ranking strategy kind: {kind!r}")


_default_factory = StrategyFactory()


def get_strategy_factory() -> StrategyFactory:
    """Return the process-wide strategy factory."""
    return _default_factory
