"""
Abstract base class for position ranking strategies.
"""

from abc import ABC, abstractmethod

from ..models import LexoRankKind, Ordering


class RankingStrategy(ABC):
    """Abstract base class for position ranking strategies."""

    @property
    @abstractmethod
    def kind(self) -> LexoRankKind:
        """The strategy kind this implementation handles."""
        pass

    @abstractmethod
    def compare_positions(self, first_pos: str, second_pos: str) -> Ordering:
        """Compare two positions without validating them."""
        pass

    @abstractmethod
    def is_valid_position(self, pos: str) -> bool:
        """Return True if pos is a well-formed position."""
        pass

    @abstractmethod
    def position_before(self, pos: str) -> str:
        """
        Generate a position ordered strictly before pos.

        Args:
            pos: A valid position (not checked)

        Returns:
            New position string
        """
        pass

    @abstractmethod
    def position_after(self, pos: str) -> str:
        """
        Generate a position ordered strictly after pos.

        Args:
            pos: A valid position (not checked)

        Returns:
            New position string
        """
        pass

    @abstractmethod
    def position_between(self, first_pos: str, second_pos: str) -> str:
        """
        Generate a position strictly between two positions.

        Args:
            first_pos: Lower bound, a valid position (not checked)
            second_pos: Upper bound, a valid position ordered after first_pos

        Returns:
            New position string
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
