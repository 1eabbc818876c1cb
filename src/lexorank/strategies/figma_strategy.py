"""
Figma-style fractional ranking over the printable ASCII alphabet.

Positions are plain strings whose characters lie in the code point range
[MIN_CHAR_CODE, MAX_CHAR_CODE]. They sort by Python's native string
ordering, so a generated position can be stored and compared as-is.
None of the generators validate their input; callers are expected to run
is_valid_position once (for example per batch) before generating.
"""

from ..constants import MAX_CHAR_CODE, MIN_CHAR_CODE
from ..models import LexoRankKind, Ordering
from .base_strategy import RankingStrategy


class FigmaRankingStrategy(RankingStrategy):
    """
    Ranking strategy that keeps positions as short as possible.

    Generated positions only grow in length when the characters that would
    otherwise be adjusted are already at the edge of the alphabet.
    """

    START_CHAR_CODE = MIN_CHAR_CODE
    END_CHAR_CODE = MAX_CHAR_CODE

    @property
    def kind(self) -> LexoRankKind:
        return LexoRankKind.FIGMA

    @staticmethod
    def _avg(lower: int, upper: int) -> int:
        return (lower + upper) // 2

    def compare_positions(self, first_pos: str, second_pos: str) -> Ordering:
        if first_pos < second_pos:
            return Ordering.LESS
        if first_pos > second_pos:
            return Ordering.GREATER
        return Ordering.EQUAL

    def is_valid_position(self, pos: str) -> bool:
        # A trailing start char sorts like the same string without it
        if not pos or ord(pos[-1]) == self.START_CHAR_CODE:
            return False

        for char in pos:
            code = ord(char)
            if code < self.START_CHAR_CODE or code > self.END_CHAR_CODE:
                return False
        return True

    def position_before(self, pos: str) -> str:
        for i in range(len(pos) - 1, -1, -1):
            code = ord(pos[i])
            if code > self.START_CHAR_CODE + 1:
                return pos[:i] + chr(code - 1)

        # Tail is already minimal: step down one char and open a full range below
        return pos[:-1] + chr(self.START_CHAR_CODE) + chr(self.END_CHAR_CODE)

    def position_after(self, pos: str) -> str:
        for i in range(len(pos) - 1, -1, -1):
            code = ord(pos[i])
            if code < self.END_CHAR_CODE:
                return pos[:i] + chr(code + 1)

        return pos + chr(self.START_CHAR_CODE + 1)

    def position_between(self, first_pos: str, second_pos: str) -> str:
        chars = []
        open_ended = False
        first_len = len(first_pos)
        second_len = len(second_pos)

        for i in range(max(first_len, second_len)):
            lower = ord(first_pos[i]) if i < first_len else self.START_CHAR_CODE
            if i < second_len and not open_ended:
                upper = ord(second_pos[i])
            else:
                upper = self.END_CHAR_CODE

            if lower == upper:
                chars.append(chr(lower))
            elif upper - lower > 1:
                chars.append(chr(self._avg(lower, upper)))
                return "".join(chars)
            else:
                # No room left against second_pos at this depth
                chars.append(chr(lower))
                open_ended = True

        if open_ended:
            chars.append(chr(self._avg(self.START_CHAR_CODE, self.END_CHAR_CODE)))
        return "".join(chars)
