"""Utility constants for numrange.

Unbounded endpoints are stored as the extremes of a signed 64-bit integer.
An endpoint that really equals one of these values cannot be told apart from
an unbounded one.
"""

# Stand-ins for negative and positive infinity
UNBOUNDED_LEFT = -(2**63)
UNBOUNDED_RIGHT = 2**63 - 1

# Bracket symbols
OPEN_LEFT = "("
CLOSED_LEFT = "["
OPEN_RIGHT = ")"
CLOSED_RIGHT = "]"

# Endpoint separator emitted by str(); the parser also accepts ", "
SEPARATOR = ","
