"""Test utilities for code that reads and writes cookies.

Provides jar assertions, a fragment inspector, and fakes::

    from crumb.testing import FrozenClock, StaticJar, assert_has_cookie
"""

from crumb.testing.assertions import (
    assert_has_cookie,
    assert_no_cookie,
    fragment_attributes,
)
from crumb.testing.fakes import FrozenClock, StaticJar

__all__ = [
    "FrozenClock",
    "StaticJar",
    "assert_has_cookie",
    "assert_no_cookie",
    "fragment_attributes",
]
