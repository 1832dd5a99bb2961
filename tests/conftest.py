"""Shared fixtures: a controllable clock, a memory jar, and a codec over it."""

import pytest

from crumb.codec import CookieCodec
from crumb.jar import MemoryJar
from crumb.testing import FrozenClock


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def jar(clock: FrozenClock) -> MemoryJar:
    return MemoryJar(clock=clock)


@pytest.fixture
def codec(jar: MemoryJar) -> CookieCodec:
    return CookieCodec(jar)
