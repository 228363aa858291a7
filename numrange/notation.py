from enum import Enum

from numrange.util import CLOSED_LEFT, CLOSED_RIGHT, OPEN_LEFT, OPEN_RIGHT


class Notation(Enum):
    """Which sides of an interval are open.

    The value of each member is its bracket pair, so ``Notation("[)")``
    looks a member up from parsed symbols. Any other pair raises ``ValueError``.
    """

    OPEN = "()"
    CLOSED = "[]"
    LEFT_OPEN = "(]"
    RIGHT_OPEN = "[)"

    @classmethod
    def from_sides(cls, left_open: bool, right_open: bool) -> "Notation":
        opening = OPEN_LEFT if left_open else CLOSED_LEFT
        closing = OPEN_RIGHT if right_open else CLOSED_RIGHT
        return cls(opening + closing)

    def is_left_open(self) -> bool:
        return self in (Notation.OPEN, Notation.LEFT_OPEN)

    def is_right_open(self) -> bool:
        return self in (Notation.OPEN, Notation.RIGHT_OPEN)

    def opening_symbol(self) -> str:
        return OPEN_LEFT if self.is_left_open() else CLOSED_LEFT

    def closing_symbol(self) -> str:
        return OPEN_RIGHT if self.is_right_open() else CLOSED_RIGHT
