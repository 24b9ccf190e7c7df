"""Named groupings of test cases that compile down to pytest test classes.

A :class:`Context` is a tree of groupings. Each grouping holds named test
cases and setup hooks. :meth:`Context.build` turns the tree into nested
``Test*`` classes that pytest collects the usual way: one class per grouping,
one ``test_*`` method per test case and a ``setup_method`` running the setup
hooks of the grouping and all of its parents.

Usage::

    parsing = Context("parsing")

    @parsing.should("accept digits")
    def _(case):
        assert int("42") == 42

    parsing.should_raise(ValueError, lambda: int("x"), message="invalid literal")
"""

from __future__ import annotations

import itertools
import logging
import re
import sys
from collections.abc import Callable
from typing import Any

from shouldraise.macros import should_raise

logger = logging.getLogger(__name__)

SetupHook = Callable[[Any], None]
CaseBody = Callable[[Any], None]


def _words(name: str) -> list[str]:
    return [w for w in re.split(r"\W+", name) if w]


def class_identifier(name: str) -> str:
    """``"block #1 parse"`` -> ``"TestBlock1Parse"``."""
    return "Test" + "".join(w[0].upper() + w[1:] for w in _words(name))


def method_identifier(name: str) -> str:
    """``"raise an exception"`` -> ``"test_raise_an_exception"``."""
    return "_".join(["test", *_words(name)])


class Context:
    """A named grouping of test cases, setup hooks and child groupings."""

    def __init__(self, name: str, parent: Context | None = None, module: str | None = None) -> None:
        self.name = name
        self.parent = parent
        # root contexts are collected only in the module that defines them
        if module is None:
            module = parent.module if parent is not None else sys._getframe(1).f_globals.get("__name__")
        self.module = module
        self.children: dict[str, Context] = {}
        self.tests: dict[str, CaseBody] = {}
        self.setups: list[SetupHook] = []
        self._block_ids = itertools.count(1)

    def __repr__(self) -> str:
        return f"<Context {self.full_name!r}>"

    @property
    def full_name(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.full_name} {self.name}"

    def group(self, name: str) -> Context:
        """Open the child grouping called ``name``, creating it on first use."""
        child = self.children.get(name)
        if child is not None:
            return child

        identifier = class_identifier(name)
        for other in self.children.values():
            if class_identifier(other.name) == identifier:
                raise ValueError(f"Grouping {name!r} clashes with {other.name!r} in {self.full_name!r}")

        child = self.children[name] = Context(name, parent=self)
        return child

    def should(self, name: str) -> Callable[[CaseBody], CaseBody]:
        """Register the decorated function as the test case ``name``.

        The function receives the test instance, which carries whatever the
        setup hooks stored on it.
        """

        def decorator(body: CaseBody) -> CaseBody:
            identifier = method_identifier(name)
            if any(method_identifier(existing) == identifier for existing in self.tests):
                raise ValueError(f"Test case {name!r} is already defined in {self.full_name!r}")
            self.tests[name] = body
            logger.debug("Registered %r should %s", self.full_name, name)
            return body

        return decorator

    def setup(self, hook: SetupHook) -> SetupHook:
        """Register ``hook`` to run before every test case of this grouping."""
        self.setups.append(hook)
        return hook

    def next_block_id(self) -> int:
        return next(self._block_ids)

    def should_raise(self, *args: Any, **options: Any) -> Any:
        """Shortcut for :func:`shouldraise.macros.should_raise` on this context."""
        return should_raise(self, *args, **options)

    def setup_chain(self) -> list[SetupHook]:
        chain = self.parent.setup_chain() if self.parent is not None else []
        return chain + self.setups

    def build(self) -> type:
        """Compile this grouping and its children into a pytest test class."""
        hooks = self.setup_chain()

        def setup_method(case: Any, method: Any = None) -> None:
            for hook in hooks:
                hook(case)

        namespace: dict[str, Any] = {"__doc__": self.full_name, "setup_method": setup_method}
        for name, body in self.tests.items():
            namespace[method_identifier(name)] = _make_test(name, body)
        for child in self.children.values():
            namespace[class_identifier(child.name)] = child.build()

        cls = type(class_identifier(self.name), (), namespace)
        logger.debug("Built %s with %d test(s)", cls.__name__, len(self.tests))
        return cls


def _make_test(name: str, body: CaseBody) -> Callable[[Any], None]:
    def test(case: Any) -> None:
        body(case)

    test.__name__ = test.__qualname__ = method_identifier(name)
    test.__doc__ = f"should {name}"
    return test
