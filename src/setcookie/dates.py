"""HTTP date handling for the ``Expires`` attribute.

Parsing is lenient in what it accepts (RFC 7231 IMF-fixdate, the obsolete
RFC 850 and asctime forms, ISO 8601); formatting always produces the
IMF-fixdate form, e.g. ``Wed, 21 Oct 2015 07:28:00 GMT``.
"""

from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime

# RFC 6265 floor; two-digit years would not survive a format/parse round trip
MIN_YEAR = 1601


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _checked(value: datetime) -> datetime:
    try:
        value = _as_utc(value)
    except OverflowError as exc:
        msg = "date out of range"
        raise ValueError(msg) from exc
    if value.year < MIN_YEAR:
        msg = f"year {value.year} is before {MIN_YEAR}"
        raise ValueError(msg)
    return value


def parse_http_date(text: str) -> datetime:
    """Parse an ``Expires`` value into an aware UTC datetime.

    Raises ``ValueError`` when *text* is not a recognizable date, falls
    outside the datetime range once converted to UTC, or predates 1601.
    """
    text = text.strip()
    if not text:
        msg = "empty date"
        raise ValueError(msg)
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            msg = f"unrecognized date: {text!r}"
            raise ValueError(msg) from None
    return _checked(parsed)


def format_http_date(value: datetime) -> str:
    """Render *value* as an RFC 7231 IMF-fixdate in GMT."""
    return format_datetime(_as_utc(value), usegmt=True)
