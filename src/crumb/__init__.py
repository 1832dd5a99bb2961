"""Crumb — structured access to a semicolon-delimited cookie jar string.

Reads, writes, deletes, and enumerates cookies in the single
``key=value; key=value`` string a host exposes, with percent-encoding
and attribute serialization handled for you.

Basic usage::

    from crumb import CookieCodec, MemoryJar

    codec = CookieCodec(MemoryJar())
    codec.write("theme", "dark", path="/", max_age=3600)
    codec.read("theme")  # "dark"

Context-bound usage::

    from crumb import use_jar, write_cookie, read_cookie

    with use_jar(jar):
        write_cookie("lang", "en")
        read_cookie("lang")
"""

__version__ = "0.1.0"
__all__ = [
    "AtDate",
    "AtEpochMillis",
    "CodecConfig",
    "CookieCodec",
    "CookieEntry",
    "CrumbError",
    "EnvironmentUnavailable",
    "HeaderJar",
    "InvalidAttribute",
    "InvalidKey",
    "Jar",
    "MemoryJar",
    "Never",
    "Verbatim",
    "cookie",
    "delete_cookie",
    "has_cookie",
    "list_keys",
    "read_cookie",
    "use_jar",
    "write_cookie",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "AtDate": "crumb.dates",
    "AtEpochMillis": "crumb.dates",
    "Never": "crumb.dates",
    "Verbatim": "crumb.dates",
    "CodecConfig": "crumb.config",
    "CookieCodec": "crumb.codec",
    "CookieEntry": "crumb.entry",
    "CrumbError": "crumb.errors",
    "EnvironmentUnavailable": "crumb.errors",
    "InvalidAttribute": "crumb.errors",
    "InvalidKey": "crumb.errors",
    "HeaderJar": "crumb.jar",
    "Jar": "crumb.jar",
    "MemoryJar": "crumb.jar",
    "cookie": "crumb.context",
    "delete_cookie": "crumb.context",
    "has_cookie": "crumb.context",
    "list_keys": "crumb.context",
    "read_cookie": "crumb.context",
    "use_jar": "crumb.context",
    "write_cookie": "crumb.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
