"""Context-bound cookie functions via ContextVar.

Provides:
- ``jar_var``: The host jar for the current task/thread.
- ``read_cookie`` / ``write_cookie`` / ``delete_cookie`` / ``has_cookie`` /
  ``list_keys``: the codec operations against that jar.
- ``cookie``: the same operations as a read-only namespace.

Nothing is bound by default. Calling any operation outside a
``use_jar()`` block raises ``EnvironmentUnavailable``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from crumb.codec import CookieCodec
from crumb.config import CodecConfig
from crumb.entry import CookieEntry
from crumb.errors import EnvironmentUnavailable
from crumb.jar import Jar

# -- Jar context --

jar_var: ContextVar[Jar] = ContextVar("crumb_jar")
"""The current host jar. Set by ``use_jar()``."""

_config_var: ContextVar[CodecConfig | None] = ContextVar("crumb_config", default=None)


@contextmanager
def use_jar(jar: Jar, config: CodecConfig | None = None) -> Iterator[Jar]:
    """Bind *jar* (and optionally *config*) for the duration of the block.

    Usage::

        with use_jar(HeaderJar(request.headers.get("cookie", ""))) as jar:
            write_cookie("theme", "dark", path="/")
    """
    jar_token = jar_var.set(jar)
    config_token = _config_var.set(config)
    try:
        yield jar
    finally:
        _config_var.reset(config_token)
        jar_var.reset(jar_token)


def get_codec() -> CookieCodec:
    """Return a codec over the bound jar.

    Raises ``EnvironmentUnavailable`` if called outside ``use_jar()``.
    """
    try:
        jar = jar_var.get()
    except LookupError:
        raise EnvironmentUnavailable("No cookie jar bound to the current context") from None
    return CookieCodec(jar, _config_var.get())


# -- Public operations --


def read_cookie(key: str) -> str | None:
    return get_codec().read(key)


def write_cookie(entry: CookieEntry | str, value: str = "", **attrs: object) -> str:
    return get_codec().write(entry, value, **attrs)


def delete_cookie(key: str, *, path: str | None = None, domain: str | None = None) -> str:
    return get_codec().delete(key, path=path, domain=domain)


def has_cookie(key: str) -> bool:
    return get_codec().has(key)


def list_keys() -> list[str]:
    return get_codec().keys()


class _CookieNamespace:
    """Read-only namespace over the context-bound operations.

    Usage::

        from crumb.context import cookie

        cookie.write("lang", "en")
        cookie.read("lang")
    """

    __slots__ = ()

    read = staticmethod(read_cookie)
    write = staticmethod(write_cookie)
    delete = staticmethod(delete_cookie)
    has = staticmethod(has_cookie)
    keys = staticmethod(list_keys)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "'cookie' is read-only"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return "<cookie read|write|delete|has|keys>"


cookie = _CookieNamespace()
"""The context-bound operations as one namespace."""
