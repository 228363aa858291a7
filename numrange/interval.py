import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Rational, Real
from typing import Any, Self, TypeAlias, override

from numrange.errors import InvalidEndpoints
from numrange.notation import Notation
from numrange.parser import parse
from numrange.util import SEPARATOR, UNBOUNDED_LEFT, UNBOUNDED_RIGHT

Endpoint: TypeAlias = Decimal | int
Scalar: TypeAlias = int | float | Decimal | Fraction


def _render(endpoint: Endpoint) -> str:
    # Fixed-point so small fractions never come out as "1E-8"
    if isinstance(endpoint, Decimal):
        return format(endpoint, "f")
    return str(endpoint)


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (Real, Decimal))


def _check_scalar(value: Any) -> None:
    """Reject values an interval cannot be compared against."""
    if not _is_scalar(value):
        raise TypeError(
            f"Intervals compare against numbers only.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if isinstance(value, Decimal):
        nan = value.is_nan()
    elif isinstance(value, Rational):
        nan = False
    else:
        nan = math.isnan(value)
    if nan:
        raise ValueError(f"Cannot compare an interval against {value!r}")


def _check_endpoint(value: Any, side: str) -> None:
    """Reject endpoints that are not exact, finite numbers."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise TypeError(
            f"Interval {side} endpoint must be a Decimal or int.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if isinstance(value, Decimal) and not value.is_finite():
        raise InvalidEndpoints(
            f"Interval {side} endpoint must be finite. Got {value}",
            left=value if side == "left" else None,
            right=value if side == "right" else None,
        )


@dataclass(frozen=True)
class Interval:
    """A range between two exact endpoints, each side open or closed.

    Endpoints parsed from text are ``Decimal`` values. An unbounded side holds
    the sentinel from :mod:`numrange.util` rather than an infinity.
    """

    left: Endpoint
    right: Endpoint
    notation: Notation = Notation.CLOSED

    def __post_init__(self) -> None:
        _check_endpoint(self.left, "left")
        _check_endpoint(self.right, "right")
        if self.left > self.right:
            raise InvalidEndpoints.out_of_order(self.left, self.right)

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Build an interval from notation such as ``[1,5)`` or ``(,3]``.

        Raises:
            InvalidIntervalSyntax: If ``text`` is not interval notation
            InvalidEndpoints: If a closed side has no endpoint, or left > right
        """
        left, right, notation = parse(text)
        return cls(left, right, notation)

    @property
    def is_left_unbounded(self) -> bool:
        return self.left == UNBOUNDED_LEFT

    @property
    def is_right_unbounded(self) -> bool:
        return self.right == UNBOUNDED_RIGHT

    def is_less_than(self, value: Scalar) -> bool:
        """True if every point of the interval lies below ``value``.

        An open right endpoint is excluded, so it may equal ``value``.
        """
        _check_scalar(value)
        if self.notation.is_right_open():
            return self.right <= value
        return self.right < value

    def is_less_than_or_equal_to(self, value: Scalar) -> bool:
        """True if no point of the interval lies above ``value``.

        Openness does not matter: the supremum is ``right`` either way.
        """
        _check_scalar(value)
        return self.right <= value

    def is_greater_than(self, value: Scalar) -> bool:
        """True if every point of the interval lies above ``value``.

        An open left endpoint is excluded, so it may equal ``value``.
        """
        _check_scalar(value)
        if self.notation.is_left_open():
            return self.left >= value
        return self.left > value

    def is_greater_than_or_equal_to(self, value: Scalar) -> bool:
        _check_scalar(value)
        return self.left >= value

    # Comparison operators against scalars. Reflected forms like
    # `3 > interval` land on __lt__ and keep the same meaning.

    def __lt__(self, other: Any) -> bool:
        if not _is_scalar(other):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other: Any) -> bool:
        if not _is_scalar(other):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: Any) -> bool:
        if not _is_scalar(other):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: Any) -> bool:
        if not _is_scalar(other):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    @override
    def __str__(self) -> str:
        return (
            f"{self.notation.opening_symbol()}"
            f"{_render(self.left)}{SEPARATOR}{_render(self.right)}"
            f"{self.notation.closing_symbol()}"
        )
