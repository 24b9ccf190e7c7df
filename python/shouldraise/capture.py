"""Capture whatever exception a block of code raises."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Any


class CaptureContext:
    """Context manager that swallows any exception raised in its body and keeps it.

    Usage::

        with CaptureContext() as ctx:
            int("not a number")
        assert isinstance(ctx.value, ValueError)
    """

    def __init__(self) -> None:
        self.value: BaseException | None = None

    def __enter__(self) -> CaptureContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> bool:
        if exc_type is None:
            return False

        self.value = exc_val
        return True


def exception_message(exc: BaseException) -> str:
    """The message an exception was raised with.

    A single string argument is returned as is, so ``KeyError("missing")``
    gives ``missing`` rather than its quoted ``str()``.
    """
    if len(exc.args) == 1 and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc)


def capture(block: Callable[[], Any]) -> BaseException | None:
    """Run ``block`` once and return the exception it raised.

    Args:
        block: A zero-argument callable.

    Returns:
        The raised exception, or ``None`` if the block returned normally.
    """
    if not callable(block):
        raise TypeError(f"{block!r} is not callable")

    with CaptureContext() as ctx:
        block()
    return ctx.value
