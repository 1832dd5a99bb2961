"""Expiration values and HTTP-date rendering.

``expires`` is a tagged variant rather than "whatever the caller passed"::

    Never()                    # far-future cookie
    AtEpochMillis(0)           # Unix epoch milliseconds
    AtDate(datetime(...))      # calendar value
    Verbatim("Wed, ...")       # pre-formatted, passed through untouched

``coerce_expires`` maps plain Python values onto these.
"""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from email.utils import format_datetime

from crumb.errors import InvalidAttribute

BEGINNING_OF_TIME = "Thu, 01 Jan 1970 00:00:00 GMT"
END_OF_TIME = "Fri, 31 Dec 9999 23:59:59 GMT"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class Never:
    """The cookie never expires (rendered as ``END_OF_TIME``)."""


@dataclass(frozen=True, slots=True)
class AtEpochMillis:
    """Expire at a point given in milliseconds since the Unix epoch."""

    millis: float


@dataclass(frozen=True, slots=True)
class AtDate:
    """Expire at a calendar date or date-time."""

    when: date


@dataclass(frozen=True, slots=True)
class Verbatim:
    """A pre-formatted ``expires`` value, written as given."""

    text: str


Expires = Never | AtEpochMillis | AtDate | Verbatim


def http_date(when: datetime) -> str:
    """Format *when* as an RFC 1123 date in GMT.

    Naive datetimes are taken to be UTC.
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    return format_datetime(when.astimezone(UTC), usegmt=True)


def coerce_expires(value: object) -> Expires | None:
    """Map a plain Python value onto an ``Expires`` variant.

    ``math.inf`` means never; other numbers are epoch milliseconds;
    ``date``/``datetime`` are calendar values; strings pass through.
    """
    match value:
        case None:
            return None
        case Never() | AtEpochMillis() | AtDate() | Verbatim():
            return value
        case bool():
            msg = f"expires cannot be a bool: {value!r}"
            raise TypeError(msg)
        case int() | float() if value == math.inf:
            return Never()
        case int() | float():
            return AtEpochMillis(value)
        case date():
            return AtDate(value)
        case str():
            return Verbatim(value)
    msg = f"Unsupported expires value: {value!r}"
    raise TypeError(msg)


def render_expires(expires: Expires) -> str:
    """Render an ``Expires`` variant as the ``expires`` attribute value."""
    match expires:
        case Never():
            return END_OF_TIME
        case AtEpochMillis(millis=millis):
            # NaN, infinities and instants outside years 1..9999 have no HTTP-date
            try:
                when = _EPOCH + timedelta(milliseconds=millis)
            except (OverflowError, ValueError) as exc:
                raise InvalidAttribute("expires", str(millis)) from exc
            return http_date(when)
        case AtDate(when=datetime() as when):
            return http_date(when)
        case AtDate(when=when):
            return http_date(datetime(when.year, when.month, when.day, tzinfo=UTC))
        case Verbatim(text=text):
            return text
    msg = f"Unsupported expires variant: {expires!r}"
    raise TypeError(msg)
