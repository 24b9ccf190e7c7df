"""Validated matching criteria for ``should_raise``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

KNOWN_OPTIONS = ("message", "instance_of", "kind_of")


def _check_exception_type(value: Any) -> type[BaseException]:
    if not isinstance(value, type) or not issubclass(value, BaseException):
        raise TypeError(f"{value!r} is not a valid exception type")
    return value


@dataclass(frozen=True)
class MatchCriteria:
    """What a raised exception has to look like.

    ``expected_type`` is ``None`` when any exception will do. ``exact_match``
    selects between an exact class check and a subclass check.
    """

    expected_type: type[BaseException] | None = None
    exact_match: bool = False
    message: str | re.Pattern[str] | None = None

    @classmethod
    def from_arguments(cls, args: tuple[Any, ...], options: dict[str, Any]) -> MatchCriteria:
        """Build criteria from the positional types and keyword options of a call.

        Raises:
            TypeError: On unknown options, extra positional types or
                non-exception types.
            ValueError: If ``message`` is not a valid regular expression.
        """
        unknown = sorted(key for key in options if key not in KNOWN_OPTIONS)
        if unknown:
            raise TypeError(
                f"Unknown parameter(s): {unknown!r}. Only message, instance_of and kind_of are supported."
            )
        if len(args) > 1:
            raise TypeError(f"Expected at most one exception type, got {len(args)}")

        message = options.get("message")
        if isinstance(message, str):
            try:
                re.compile(message)
            except re.error as e:
                raise ValueError(f"Invalid regex pattern provided to 'message': {e}") from e
        elif message is not None and not isinstance(message, re.Pattern):
            raise TypeError(f"message must be a string or compiled pattern, not {type(message).__name__}")

        if args:
            return cls(_check_exception_type(args[0]), True, message)
        if options.get("instance_of") is not None:
            return cls(_check_exception_type(options["instance_of"]), True, message)
        if options.get("kind_of") is not None:
            return cls(_check_exception_type(options["kind_of"]), False, message)
        return cls(None, False, message)

    @property
    def describe_type(self) -> str:
        if self.expected_type is None:
            return "an exception"
        return self.expected_type.__name__
