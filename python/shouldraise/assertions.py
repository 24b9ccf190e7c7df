"""Assertions used by generated test cases."""

from __future__ import annotations

import re
from typing import Any


def _type_name(value: Any) -> str:
    return type(value).__name__


def assert_true(condition: Any, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def assert_instance_of(expected_type: type, value: Any) -> None:
    """Assert that ``value``'s class is exactly ``expected_type``."""
    if type(value) is not expected_type:
        raise AssertionError(
            f"Expected {value!r} to be an instance of {expected_type.__name__}, not {_type_name(value)}"
        )


def assert_kind_of(expected_type: type, value: Any) -> None:
    """Assert that ``value`` is an instance of ``expected_type`` or one of its subclasses."""
    if not isinstance(value, expected_type):
        raise AssertionError(
            f"Expected {value!r} to be a kind of {expected_type.__name__}, not {_type_name(value)}"
        )


def assert_match(pattern: str | re.Pattern[str], string: str) -> None:
    """Assert that ``pattern`` is found anywhere in ``string`` (``re.search`` semantics)."""
    if not re.search(pattern, string):
        raise AssertionError(f"Regex pattern did not match.\n Regex: {pattern!r}\n Input: {string!r}")
