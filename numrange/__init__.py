from loguru import logger

from .errors import IntervalError, InvalidEndpoints, InvalidIntervalSyntax
from .interval import Interval
from .notation import Notation
from .parser import parse
from .util import UNBOUNDED_LEFT, UNBOUNDED_RIGHT

# Library code stays quiet until the application opts in with
# logger.enable("numrange")
logger.disable(__name__)

__all__ = [
    "Interval",
    "Notation",
    "parse",
    "IntervalError",
    "InvalidEndpoints",
    "InvalidIntervalSyntax",
    "UNBOUNDED_LEFT",
    "UNBOUNDED_RIGHT",
]
