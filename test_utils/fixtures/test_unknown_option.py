"""A module whose should_raise() call has a typo in its options."""

from shouldraise import Context, should_raise

typo = Context("typo")
should_raise(typo, lambda: int("x"), instance_off=ValueError)
