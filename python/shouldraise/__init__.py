"""shouldraise - declarative "this block should raise" test cases for pytest."""

from shouldraise.capture import CaptureContext, capture, exception_message
from shouldraise.context import Context
from shouldraise.criteria import MatchCriteria
from shouldraise.macros import should_raise

__version__ = "0.1.0"

__all__ = [
    "CaptureContext",
    "Context",
    "MatchCriteria",
    "__version__",
    "capture",
    "exception_message",
    "should_raise",
]
