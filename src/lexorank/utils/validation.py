"""
Explicit validation for positions.

The ranking strategies never validate their inputs. Callers that accept
positions from outside (user input, stored rows) validate here first, once
per value or once per batch, and only then hand the values to a generator.
Whether a position is valid, and how two positions order, is always decided
by the strategy; this module only turns a rejection into a readable message.
"""

from typing import Iterable, Optional, Union

from ..config import get_default_kind
from ..constants import MAX_CHAR_CODE, MIN_CHAR_CODE
from ..lexorank import LexoRank
from ..models import Ordering
from ..strategies import RankingStrategy, get_strategy_factory


class ValidationHelper:
    """
    Helper class containing position validation logic.

    Every method returns an error message if validation fails and None if
    the input is valid.

    Args:
        ranker: Anything exposing is_valid_position and compare_positions,
            i.e. a RankingStrategy or a LexoRank. Defaults to the strategy
            of the configured default kind.
    """

    def __init__(self, ranker: Optional[Union[RankingStrategy, LexoRank]] = None):
        if ranker is None:
            ranker = get_strategy_factory().get_strategy(get_default_kind())
        self._ranker = ranker

    def validate_position(self, pos: str) -> Optional[str]:
        """
        Validate a single position.

        Args:
            pos: Candidate position string

        Returns:
            Error message if validation fails, None if valid
        """
        if not isinstance(pos, str):
            return f"Position must be a string, got {type(pos).__name__}"

        if self._ranker.is_valid_position(pos):
            return None

        return self._describe_invalid(pos)

    def validate_positions(self, positions: Iterable[str]) -> Optional[str]:
        """
        Validate a batch of positions in one pass.

        Args:
            positions: Candidate position strings

        Returns:
            First error message, prefixed with the offending index, or None
        """
        for index, pos in enumerate(positions):
            error = self.validate_position(pos)
            if error:
                return f"Position {index}: {error}"
        return None

    def validate_ordered_pair(self, first_pos: str, second_pos: str) -> Optional[str]:
        """
        Validate the bounds for a between operation.

        Args:
            first_pos: Lower bound
            second_pos: Upper bound

        Returns:
            Error message if either bound is invalid or they are not
            strictly ordered, None if valid
        """
        for label, pos in (("Lower bound", first_pos), ("Upper bound", second_pos)):
            error = self.validate_position(pos)
            if error:
                return f"{label}: {error}"

        if self._ranker.compare_positions(first_pos, second_pos) != Ordering.LESS:
            return f"Lower bound {first_pos!r} must sort before upper bound {second_pos!r}"

        return None

    @staticmethod
    def _describe_invalid(pos: str) -> str:
        """Pick a message for a position the strategy rejected."""
        if not pos:
            return "Position cannot be empty"

        for index, char in enumerate(pos):
            code = ord(char)
            if code < MIN_CHAR_CODE or code > MAX_CHAR_CODE:
                return (f"Invalid character {char!r} (code {code}) at index {index}; "
                        f"allowed range is {MIN_CHAR_CODE}-{MAX_CHAR_CODE}")

        if ord(pos[-1]) == MIN_CHAR_CODE:
            return "Position cannot end with a space"

        return f"Position {pos!r} is not valid"
