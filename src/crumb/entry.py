"""The structured view of one cookie write."""

from dataclasses import dataclass

from crumb.dates import Expires, coerce_expires


@dataclass(frozen=True, slots=True)
class CookieEntry:
    """One cookie's value plus its write-time attributes.

    ``expires`` accepts an ``Expires`` variant or any value
    ``coerce_expires`` understands; it is normalized on creation.
    ``max_age``, when set, takes precedence over ``expires``. ``value``
    must be a ``str``; nothing else is serialized implicitly.
    """

    key: str
    value: str = ""
    max_age: int | None = None
    expires: Expires | None = None
    path: str | None = None
    domain: str | None = None
    secure: bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = f"Cookie value must be a str, got {type(self.value).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "expires", coerce_expires(self.expires))
