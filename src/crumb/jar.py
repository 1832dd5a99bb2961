"""Host jars — the string-valued cookie store the codec reads and writes.

A jar is anything with ``get_jar()`` and ``set_jar(fragment)``. No base
class required; the codec checks the shape, not the lineage.

``MemoryJar`` behaves the way a browser's ``document.cookie`` does:
reading returns every live ``name=value`` pair, assigning a fragment
upserts (or expires) exactly the one cookie it names.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from email.utils import parsedate_to_datetime
from typing import Protocol

logger = logging.getLogger("crumb.jar")


class Jar(Protocol):
    """Protocol for a host cookie jar.

    Accepts any object with the two accessors::

        class WindowJar:
            def get_jar(self) -> str:
                return window.document.cookie

            def set_jar(self, fragment: str) -> None:
                window.document.cookie = fragment
    """

    def get_jar(self) -> str: ...

    def set_jar(self, fragment: str) -> None: ...


@dataclass(slots=True)
class _StoredCookie:
    value: str
    expires_at: float | None = None


class MemoryJar:
    """An in-memory jar with set-or-update semantics per cookie.

    Cookies are keyed by ``(name, domain, path)``. A fragment whose
    ``max-age`` is zero or negative, or whose ``expires`` lies in the
    past, removes the cookie. ``max-age`` wins over ``expires``.
    """

    __slots__ = ("_clock", "_cookies")

    def __init__(self, initial: str = "", *, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._cookies: dict[tuple[str, str, str], _StoredCookie] = {}
        for segment in initial.split(";"):
            name, sep, value = segment.strip().partition("=")
            if sep and name.strip():
                self._cookies[(name.strip(), "", "")] = _StoredCookie(value.strip())

    def get_jar(self) -> str:
        self._evict_expired()
        return "; ".join(f"{name}={stored.value}" for (name, _, _), stored in self._cookies.items())

    def set_jar(self, fragment: str) -> None:
        first, *attributes = fragment.split(";")
        name, sep, value = first.strip().partition("=")
        name = name.strip()
        if not sep or not name:
            logger.debug("ignored fragment without a cookie pair: %r", fragment)
            return

        attrs: dict[str, str] = {}
        for attribute in attributes:
            attr_name, _, attr_value = attribute.strip().partition("=")
            attrs[attr_name.strip().lower()] = attr_value.strip()

        key = (name, attrs.get("domain", ""), attrs.get("path", ""))
        expires_at = self._expiry(attrs)
        if expires_at is not None and expires_at <= self._clock():
            if self._cookies.pop(key, None) is not None:
                logger.debug("cookie removed: %s (domain=%r, path=%r)", *key)
            return
        self._cookies[key] = _StoredCookie(value.strip(), expires_at)

    def clear(self) -> None:
        """Remove every cookie."""
        self._cookies.clear()

    def __len__(self) -> int:
        self._evict_expired()
        return len(self._cookies)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_jar()!r})"

    def _expiry(self, attrs: dict[str, str]) -> float | None:
        if "max-age" in attrs:
            try:
                return self._clock() + int(attrs["max-age"])
            except ValueError:
                logger.debug("ignored malformed max-age: %r", attrs["max-age"])
        if attrs.get("expires"):
            try:
                return parsedate_to_datetime(attrs["expires"]).timestamp()
            except (TypeError, ValueError):
                logger.debug("ignored malformed expires: %r", attrs["expires"])
        return None

    def _evict_expired(self) -> None:
        now = self._clock()
        expired = [
            key
            for key, stored in self._cookies.items()
            if stored.expires_at is not None and stored.expires_at <= now
        ]
        for key in expired:
            logger.debug("cookie expired: %s (domain=%r, path=%r)", *key)
            del self._cookies[key]


class HeaderJar(MemoryJar):
    """A server-side jar: seeded from a ``Cookie`` request header.

    Every committed fragment is also kept in ``set_cookie_headers`` so a
    handler can attach them to its response as ``Set-Cookie`` values::

        jar = HeaderJar(request.headers.get("cookie", ""))
        CookieCodec(jar).write("theme", "dark", path="/")
        for value in jar.set_cookie_headers:
            response = response.with_header("Set-Cookie", value)
    """

    __slots__ = ("set_cookie_headers",)

    def __init__(self, cookie_header: str = "", *, clock: Callable[[], float] = time.time) -> None:
        super().__init__(cookie_header, clock=clock)
        self.set_cookie_headers: list[str] = []

    def set_jar(self, fragment: str) -> None:
        self.set_cookie_headers.append(fragment)
        super().set_jar(fragment)
