"""Contexts shared between fixture modules; collected only where they are defined."""

from shouldraise import Context

shared = Context("shared")
shared.should_raise(lambda: int("x"), ValueError)
