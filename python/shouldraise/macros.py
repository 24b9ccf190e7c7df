"""``should_raise``: declare that a block raises, get the test cases for free."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from shouldraise.assertions import assert_instance_of, assert_kind_of, assert_match, assert_true
from shouldraise.capture import capture, exception_message
from shouldraise.criteria import MatchCriteria

if TYPE_CHECKING:
    from shouldraise.context import Context

logger = logging.getLogger(__name__)

Block = Callable[[], Any]


def describe_block(block: Block) -> str:
    return getattr(block, "__name__", None) or type(block).__name__


def should_raise(context: Context, *args: Any, **options: Any) -> Any:
    """Make sure a block raises an exception.

    Registers the generated test cases in ``context``. Options are validated
    immediately, so a typo fails while the test module is imported rather
    than when the generated tests run.

    Args:
        context: The grouping the test cases are registered in.
        *args: An optional exception type (shorthand for ``instance_of``)
            and an optional zero-argument block.
        **options: ``instance_of`` (exact type), ``kind_of`` (type or
            subclass) and ``message`` (regex searched in the exception message;
            a single string argument is used as is, so a ``KeyError`` key is
            matched without quotes).

    Returns:
        The block. Without a block, a decorator registering the decorated
        function as the block.

    Examples::

        should_raise(ctx, block)
        should_raise(ctx, OSError, block)
        should_raise(ctx, block, instance_of=OSError)
        should_raise(ctx, block, kind_of=OSError)
        should_raise(ctx, block, message="No such file")
        should_raise(ctx, block, message=re.compile(r"such \\w+"))
        should_raise(ctx, OSError, block, message="file")

        @should_raise(ctx, kind_of=LookupError, message="missing")
        def lookup_missing_key():
            {}["missing"]
    """
    types: list[Any] = []
    block: Block | None = None
    for arg in args:
        if isinstance(arg, type) or not callable(arg):
            types.append(arg)
        elif block is None:
            block = arg
        else:
            raise TypeError("should_raise takes a single block")

    criteria = MatchCriteria.from_arguments(tuple(types), options)

    if block is None:

        def decorator(fn: Block) -> Block:
            _register(context, criteria, fn)
            return fn

        return decorator

    _register(context, criteria, block)
    return block


def _register(context: Context, criteria: MatchCriteria, block: Block) -> None:
    block_id = context.next_block_id()
    grouping = context.group(f"block #{block_id} {describe_block(block)}")
    logger.debug("should_raise %s in %r (block #%d)", criteria, context, block_id)

    no_raise_message = f"The block was expected to raise {criteria.describe_type}, but didn't"
    expected_type = criteria.expected_type
    if expected_type is not None:

        @grouping.should(f"raise an exception of type {expected_type.__name__}")
        def _check_type(case: Any) -> None:
            case.raised_exception = capture(block)
            assert_true(case.raised_exception is not None, no_raise_message)
            if criteria.exact_match:
                assert_instance_of(expected_type, case.raised_exception)
            else:
                assert_kind_of(expected_type, case.raised_exception)

    else:

        @grouping.should("raise an exception")
        def _check_raised(case: Any) -> None:
            assert_true(capture(block) is not None, no_raise_message)

    message = criteria.message
    if message is not None:
        raising = context.group(f"block #{block_id} raising an exception")

        @raising.setup
        def _capture(case: Any) -> None:
            case.raised_exception = capture(block)

        @raising.should(f"contain a message that matches {message!r}")
        def _check_message(case: Any) -> None:
            assert_true(
                case.raised_exception is not None,
                f"The block was expected to raise an exception with a message matching {message!r}, but didn't",
            )
            assert_match(message, exception_message(case.raised_exception))
