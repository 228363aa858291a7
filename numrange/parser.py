"""Parser for interval notation.

Accepted inputs look like ``[1,5)``, ``(-2.5, 3]``, ``(,0]`` or ``(,)``:

- an opening bracket, ``(`` or ``[``
- an optional left endpoint (``-``? digits, optionally ``.`` digits)
- a comma, optionally followed by whitespace
- an optional right endpoint
- a closing bracket, ``)`` or ``]``

The whole string has to match; nothing may precede or follow it.

A missing endpoint means "unbounded" and is only allowed on an open side.
It is replaced by the matching sentinel from :mod:`numrange.util`.
"""

import re
from decimal import Decimal

from loguru import logger

from numrange.errors import InvalidEndpoints, InvalidIntervalSyntax
from numrange.notation import Notation
from numrange.util import CLOSED_LEFT, CLOSED_RIGHT, UNBOUNDED_LEFT, UNBOUNDED_RIGHT

_NUMERAL = r"-?[0-9]+(?:\.[0-9]+)?"

INTERVAL_PATTERN = re.compile(
    rf"(?P<opening>[\[(])"
    rf"(?P<left>{_NUMERAL})?"
    r",\s*"
    rf"(?P<right>{_NUMERAL})?"
    rf"(?P<closing>[\])])"
)


def parse(text: str) -> tuple[Decimal, Decimal, Notation]:
    """Split interval notation into ``(left, right, notation)``.

    Endpoint order is not checked here; constructing the ``Interval`` does that.

    Raises:
        TypeError: If ``text`` is not a string
        InvalidIntervalSyntax: If ``text`` is not interval notation
        InvalidEndpoints: If an endpoint is missing on a closed side
    """
    if not isinstance(text, str):
        raise TypeError(
            f"Interval notation must be a string.\n"
            f"Got {type(text).__name__!r}: {text!r}"
        )

    match = INTERVAL_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected interval notation {!r}", text)
        raise InvalidIntervalSyntax(text)

    opening = match.group("opening")
    closing = match.group("closing")
    left_text = match.group("left")
    right_text = match.group("right")

    # A group that did not take part in the match is None; "0" is a real endpoint
    if left_text is None:
        if opening == CLOSED_LEFT:
            raise InvalidEndpoints(
                "Left endpoint must be defined when left side is closed."
            )
        left = Decimal(UNBOUNDED_LEFT)
    else:
        left = Decimal(left_text)

    if right_text is None:
        if closing == CLOSED_RIGHT:
            raise InvalidEndpoints(
                "Right endpoint must be defined when right side is closed."
            )
        right = Decimal(UNBOUNDED_RIGHT)
    else:
        right = Decimal(right_text)

    notation = Notation(opening + closing)
    logger.debug("Parsed {!r} as {} {} {}", text, notation.name, left, right)
    return left, right, notation
