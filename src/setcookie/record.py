"""The SetCookie record — parse, validate, and serialize one header value.

String input is parsed and every recognized attribute is validated.
Mapping input is trusted: only ``key`` and ``value`` are checked, every
other field is copied through as given.

Usage::

    from setcookie import parse_one

    cookie = parse_one("sid=abc; Path=/; HttpOnly")
    cookie.path            # "/"
    str(cookie)            # "sid=abc; Path=/; HttpOnly"
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

from setcookie.attributes import ATTRIBUTES, BY_NAME
from setcookie.config import DEFAULT_OPTIONS, CodecOptions
from setcookie.errors import InvalidInputType, InvalidKey, InvalidPair, InvalidValue

logger = logging.getLogger("setcookie.parser")

type CookieInput = str | Mapping[str, Any] | SetCookie

# Wire-style spellings accepted in mapping input
_ALIASES: dict[str, str] = {
    "maxAge": "max_age",
    "httpOnly": "http_only",
    "sameSite": "same_site",
}

_FIELDS: frozenset[str] = frozenset(attr.field for attr in ATTRIBUTES)


@dataclass(slots=True)
class SetCookie:
    """A single ``Set-Cookie`` directive.

    ``None`` means an attribute is unset. The ``secure`` and ``http_only``
    flags are presence-based: any non-None value, ``False`` included, is
    serialized as present.
    """

    key: str
    value: str
    expires: datetime | None = None
    max_age: int | None = None
    domain: str | None = None
    path: str | None = None
    secure: bool | None = None
    http_only: bool | None = None
    same_site: str | None = None
    options: CodecOptions = field(default=DEFAULT_OPTIONS, repr=False, compare=False)

    @classmethod
    def parse(cls, source: CookieInput, options: CodecOptions | None = None) -> "SetCookie":
        """Build a record from a header string or a mapping."""
        return parse_one(source, options)

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        encode = self.options.encode
        parts = [f"{encode(self.key)}={encode(self.value)}"]
        for attr in ATTRIBUTES:
            value = getattr(self, attr.field)
            if value is not None:
                parts.append(attr.to_segment(value))
        return "; ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Return the set fields, keyed by field name, in field order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "options" and getattr(self, f.name) is not None
        }

    def __str__(self) -> str:
        return self.to_header_value()


# ---------------------------------------------------------------------------
# String form
# ---------------------------------------------------------------------------


def _split_segment(segment: str) -> tuple[str, str | None]:
    """Split ``name=value`` on the first ``=``; value is None without one."""
    name, sep, value = segment.strip().partition("=")
    return name, (value if sep else None)


def _from_string(header: str, options: CodecOptions) -> SetCookie:
    first, *rest = header.split(";")
    name, raw_value = _split_segment(first)
    if not name or not raw_value:
        raise InvalidPair
    try:
        key = options.decode(name)
        value = options.decode(raw_value)
    except ValueError as exc:
        raise InvalidPair from exc
    if not key or not value:
        raise InvalidPair

    data: dict[str, Any] = {}
    for segment in rest:
        attr_name, raw = _split_segment(segment)
        attr_name = attr_name.strip()
        if not attr_name:
            continue
        attr = BY_NAME.get(attr_name.lower())
        if attr is None:
            logger.debug("Ignoring unknown Set-Cookie attribute %r", attr_name)
            continue
        try:
            parsed = attr.parse(raw if raw is None else raw.strip())
        except ValueError as exc:
            raise attr.error from exc
        if attr.field in data:
            logger.debug("Repeated Set-Cookie attribute %s, last value wins", attr.name)
        data[attr.field] = parsed

    return SetCookie(key=key, value=value, options=options, **data)


# ---------------------------------------------------------------------------
# Mapping form
# ---------------------------------------------------------------------------


def _from_mapping(source: Mapping[str, Any], options: CodecOptions) -> SetCookie:
    key = source.get("key")
    if not key or not isinstance(key, str):
        raise InvalidKey
    value = source.get("value")
    if not value or not isinstance(value, str):
        raise InvalidValue

    data: dict[str, Any] = {}
    for name, item in source.items():
        name = _ALIASES.get(name, name)
        if name in _FIELDS:
            data[name] = item
    return SetCookie(key=key, value=value, options=options, **data)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def parse_one(source: CookieInput, options: CodecOptions | None = None) -> SetCookie:
    """Build one record from a header string, a mapping, or another record.

    Raises a ``SetCookieError`` subclass when the input is unusable.
    """
    if isinstance(source, SetCookie):
        return _from_mapping(source.to_dict(), source.options if options is None else options)
    if options is None:
        options = DEFAULT_OPTIONS
    if isinstance(source, str):
        return _from_string(source, options)
    if isinstance(source, Mapping):
        return _from_mapping(source, options)
    raise InvalidInputType


def parse_many(sources: Iterable[CookieInput], options: CodecOptions | None = None) -> list[SetCookie]:
    """Build one record per input, all with the same *options*."""
    if isinstance(sources, (str, bytes, Mapping, SetCookie)) or not isinstance(sources, Iterable):
        raise InvalidInputType
    return [parse_one(source, options) for source in sources]


def set_cookie(
    source: CookieInput | list[CookieInput] | tuple[CookieInput, ...],
    options: CodecOptions | None = None,
) -> SetCookie | list[SetCookie]:
    """Convenience wrapper: a list for list/tuple input, one record otherwise."""
    if isinstance(source, (list, tuple)):
        return parse_many(source, options)
    return parse_one(source, options)
