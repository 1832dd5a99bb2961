"""The cookie codec — structured access to a jar string.

Maps the single ``key=value; key=value`` string a host exposes onto
read / write / delete / has / keys operations. The codec holds no
state of its own: every read goes to the live jar, every write is one
assignment the host interprets as an upsert of a single cookie.
"""

import logging
import re

from crumb.config import CodecConfig
from crumb.dates import BEGINNING_OF_TIME, Never, Verbatim, render_expires
from crumb.encoding import (
    compile_entry,
    decode_component,
    encode_component,
    is_reserved,
    sanitize_key,
)
from crumb.entry import CookieEntry
from crumb.errors import EnvironmentUnavailable, InvalidAttribute, InvalidKey
from crumb.jar import Jar

logger = logging.getLogger("crumb.codec")


def _read_pattern(key: str) -> re.Pattern[str]:
    # First branch captures the value after the key; the catch-all
    # branch matches a jar without the key and captures nothing.
    return re.compile(rf"(?:(?:^|.*;)\s*{sanitize_key(key)}\s*=\s*([^;]*).*$)|^.*$")


def _has_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"(?:^|;\s*){sanitize_key(key)}\s*=")


_UNSAFE_ATTRIBUTE_RE = re.compile(r"[;\r\n]")


def _checked(name: str, value: str | None) -> str | None:
    if value is not None and _UNSAFE_ATTRIBUTE_RE.search(value):
        raise InvalidAttribute(name, value)
    return value


class CookieCodec:
    """Read, write, delete, and enumerate cookies in a host jar.

    Usage::

        codec = CookieCodec(MemoryJar())
        codec.write("theme", "dark", path="/")
        codec.read("theme")   # "dark"
        codec.keys()          # ["theme"]
        codec.delete("theme", path="/")
    """

    __slots__ = ("_config", "_jar")

    def __init__(self, jar: Jar | None, config: CodecConfig | None = None) -> None:
        self._jar = jar
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        return self._config

    def _host(self) -> Jar:
        if self._jar is None:
            raise EnvironmentUnavailable
        return self._jar

    # -- Reading --

    def read(self, key: str) -> str | None:
        """Return the decoded value for *key*, or ``None``.

        A missing key and a key with an empty value both yield ``None``;
        use ``has()`` when the difference matters.
        """
        if not key:
            return None
        jar = self._host().get_jar()
        match = _read_pattern(key).match(jar)
        raw = match.group(1) if match else None
        return decode_component(raw or "") or None

    def has(self, key: str) -> bool:
        """Return True if *key* is present in the jar (even with an empty value)."""
        if not key:
            return False
        jar = self._host().get_jar()
        return _has_pattern(key).search(jar) is not None

    def keys(self) -> list[str]:
        """Return every cookie name in the jar, decoded, first-seen order.

        Recomputed from the live jar on every call.
        """
        jar = self._host().get_jar()
        seen: dict[str, None] = {}
        for segment in jar.split(";"):
            name, sep, _ = segment.strip().partition("=")
            if not sep:
                continue
            name = decode_component(name.strip())
            if name:
                seen.setdefault(name, None)
        return list(seen)

    # -- Writing --

    def write(self, entry: CookieEntry | str, value: str = "", **attrs: object) -> str:
        """Commit one cookie to the jar and return the committed fragment.

        Accepts a ready ``CookieEntry`` or the key, value, and keyword
        attributes to build one::

            codec.write("sid", "abc", max_age=3600, secure=True)

        Raises ``InvalidKey`` for an empty or reserved key.
        """
        if isinstance(entry, CookieEntry):
            if value != "" or attrs:
                msg = "write() takes either a CookieEntry or a key with value and attributes, not both"
                raise TypeError(msg)
        else:
            entry = CookieEntry(entry, value, **attrs)  # type: ignore[arg-type]
        fragment = self.compile(entry)
        self._host().set_jar(fragment)
        logger.debug("cookie committed: %s", fragment)
        return fragment

    def compile(self, entry: CookieEntry) -> str:
        """Build the wire fragment for *entry* without committing it."""
        key = entry.key
        if not key or not isinstance(key, str) or is_reserved(key):
            raise InvalidKey(key)

        cfg = self._config
        expires = entry.expires
        if expires is None and entry.max_age is None and cfg.persistent_by_default:
            expires = Never()

        expires_text: str | None = None
        if expires is not None and (entry.max_age is None or isinstance(expires, Verbatim)):
            expires_text = render_expires(expires)

        max_age = None if entry.max_age is None else str(entry.max_age)
        secure = cfg.default_secure if entry.secure is None else entry.secure
        domain = entry.domain if entry.domain is not None else cfg.default_domain
        path = entry.path if entry.path is not None else cfg.default_path

        attributes: list[tuple[str, str | bool | None]] = [
            (encode_component(key), encode_component(entry.value)),
            ("expires", _checked("expires", expires_text)),
            ("max-age", max_age),
            ("domain", _checked("domain", domain)),
            ("path", _checked("path", path)),
            ("secure", bool(secure)),
        ]
        parts = (compile_entry(name, attr) for name, attr in attributes)
        return "; ".join(part for part in parts if part)

    def delete(self, key: str, *, path: str | None = None, domain: str | None = None) -> str:
        """Expire *key* in the jar and return the committed fragment.

        Pass the same *path* and *domain* the cookie was written with;
        the host keys cookies by scope, so a mismatched scope leaves the
        original in place.
        """
        entry = CookieEntry(key, "", expires=Verbatim(BEGINNING_OF_TIME), path=path, domain=domain)
        fragment = self.compile(entry)
        self._host().set_jar(fragment)
        logger.debug("cookie deleted: %s", fragment)
        return fragment

    def __repr__(self) -> str:
        return f"CookieCodec(jar={self._jar!r}, config={self._config!r})"
