"""Exceptions raised while building intervals."""

from decimal import Decimal


class IntervalError(ValueError):
    """Base class for malformed interval input."""


class InvalidIntervalSyntax(IntervalError):
    """The text does not match interval notation at all."""

    def __init__(self, text: str):
        self.text: str = text
        super().__init__(f"Invalid interval: {text}")


class InvalidEndpoints(IntervalError):
    """The endpoints are out of order, or a closed side has no endpoint."""

    def __init__(
        self,
        message: str,
        left: Decimal | int | None = None,
        right: Decimal | int | None = None,
    ):
        self.left: Decimal | int | None = left
        self.right: Decimal | int | None = right
        super().__init__(message)

    @classmethod
    def out_of_order(
        cls, left: Decimal | int, right: Decimal | int
    ) -> "InvalidEndpoints":
        return cls(
            f"Left must be less than or equal to right. Got {left} and {right}",
            left=left,
            right=right,
        )
