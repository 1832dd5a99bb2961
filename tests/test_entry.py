"""Tests for crumb.entry — CookieEntry normalization."""

import math

import pytest

from crumb.dates import AtEpochMillis, Never, Verbatim
from crumb.entry import CookieEntry


class TestCookieEntry:
    def test_defaults(self) -> None:
        entry = CookieEntry("a")
        assert entry.value == ""
        assert entry.max_age is None
        assert entry.expires is None
        assert entry.path is None
        assert entry.domain is None
        assert entry.secure is None

    def test_expires_coerced(self) -> None:
        assert CookieEntry("a", expires=0).expires == AtEpochMillis(0)
        assert CookieEntry("a", expires=math.inf).expires == Never()
        assert CookieEntry("a", expires="x").expires == Verbatim("x")

    def test_bad_expires_rejected(self) -> None:
        with pytest.raises(TypeError):
            CookieEntry("a", expires=object())  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        entry = CookieEntry("a")
        with pytest.raises(AttributeError):
            entry.value = "b"  # type: ignore[misc]

    @pytest.mark.parametrize("value", [1, True, None, b"x"])
    def test_non_string_value_rejected(self, value: object) -> None:
        with pytest.raises(TypeError, match="must be a str"):
            CookieEntry("a", value)  # type: ignore[arg-type]
