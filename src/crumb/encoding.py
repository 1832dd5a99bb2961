"""Percent-encoding, key sanitizing, and attribute compilation.

The primitives every codec operation shares. All functions here are
pure: no jar access, no logging.
"""

import re
from urllib.parse import quote, unquote

# Attribute names a cookie key must never collide with (case-insensitive)
RESERVED_ATTRIBUTES: frozenset[str] = frozenset(
    {"expires", "max-age", "path", "domain", "secure"}
)

_RESERVED_RE = re.compile(r"expires|max-age|path|domain|secure", re.IGNORECASE)

# Characters component-encoding leaves alone but a pattern would interpret
_PATTERN_META_RE = re.compile(r"[-.+*()]")

# Component-encoding keeps these besides letters, digits and "_.-~"
_COMPONENT_SAFE = "!*'()"


def encode_component(text: str) -> str:
    """Percent-encode *text* as a URI component (UTF-8)."""
    return quote(text, safe=_COMPONENT_SAFE)


def decode_component(text: str) -> str:
    """Percent-decode *text*. Malformed escapes are kept verbatim."""
    return unquote(text)


def is_reserved(key: str) -> bool:
    """Return True if *key* names a cookie attribute (any case)."""
    return _RESERVED_RE.fullmatch(key) is not None


def sanitize_key(key: str) -> str:
    """Encode *key* so it can be interpolated literally into a pattern.

    The key is percent-encoded first, which removes every pattern
    metacharacter except ``- . + * ( )``; those are backslash-escaped.

    >>> sanitize_key("a.b c")
    'a\\\\.b%20c'
    """
    return _PATTERN_META_RE.sub(r"\\\g<0>", encode_component(key))


def compile_entry(name: str, value: str | bool | None) -> str:
    """Serialize one attribute into its wire fragment.

    ``None`` and ``False`` omit the attribute (empty string), ``True``
    yields the bare flag, anything else becomes ``name=value``.  The
    value is not encoded here; callers pass it pre-encoded.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return name
    return f"{name}={value}"
