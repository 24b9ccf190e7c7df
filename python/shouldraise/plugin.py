"""pytest plugin: collect module-level :class:`~shouldraise.context.Context` objects.

Only root contexts defined in the module being collected become test classes.
Nested groupings are collected through their root, and contexts imported from
elsewhere are collected in the module that defines them.

Loaded through the ``pytest11`` entry point. Disable with ``-p no:shouldraise``.
"""

from __future__ import annotations

from typing import Any

import pytest

from shouldraise.context import Context


def pytest_pycollect_makeitem(collector: pytest.Collector, name: str, obj: Any) -> pytest.Class | None:
    if not isinstance(obj, Context) or not isinstance(collector, pytest.Module):
        return None
    if obj.parent is not None or obj.module != collector.obj.__name__:
        return None

    built = obj.build()
    item = pytest.Class.from_parent(collector, name=name, obj=built)
    # from_parent ignores obj on some pytest releases
    item.obj = built
    return item
