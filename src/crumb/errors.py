"""Crumb exception hierarchy.

Shared by the codec, the hosts, and the CLI so every module raises and
catches the same types.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class InvalidKey(CrumbError, ValueError):  # noqa: N818
    """Raised when a cookie key is empty or names a reserved attribute.

    Signals a programming error in the caller, so it always propagates.
    """

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Key was not provided or is invalid: {key!r}")


class EnvironmentUnavailable(CrumbError, RuntimeError):  # noqa: N818
    """Raised when an operation runs without a host jar to read or write."""

    def __init__(self, detail: str = "No cookie jar is available") -> None:
        super().__init__(detail)


class InvalidAttribute(CrumbError, ValueError):  # noqa: N818
    """Raised when an attribute value would break the fragment (``;`` or a newline)."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name} attribute: {value!r}")
