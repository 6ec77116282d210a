"""Set-Cookie attribute table.

One ``Attribute`` per recognized directive, in serialization order. Each
entry knows its wire name, the record field it fills, how to validate a
raw segment value, and which error to raise when validation fails.

Value parsers follow one protocol::

    def parse(raw: str | None) -> object:
        '''Return the field value, or raise ValueError.'''

``raw`` is ``None`` when the segment had no ``=`` at all.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from setcookie.dates import format_http_date, parse_http_date
from setcookie.errors import (
    InvalidAttribute,
    InvalidDomain,
    InvalidExpires,
    InvalidHttpOnly,
    InvalidMaxAge,
    InvalidPath,
    InvalidSameSite,
    InvalidSecure,
)

type ValueParser = Callable[[str | None], object]

# Leading decimal integer, trailing garbage tolerated ("100abc" -> 100)
_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


# ---------------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------------


def _date(raw: str | None) -> object:
    if raw is None:
        msg = "missing date"
        raise ValueError(msg)
    return parse_http_date(raw)


def _integer(raw: str | None) -> object:
    match = _INT_RE.match(raw or "")
    if match is None:
        msg = f"not an integer: {raw!r}"
        raise ValueError(msg)
    return int(match.group(1))


def _text(raw: str | None) -> object:
    if not raw:
        msg = "empty value"
        raise ValueError(msg)
    return raw


def _flag(raw: str | None) -> object:
    # "Secure=" is tolerated; "Secure=yes" is not.
    if raw:
        msg = f"flag takes no value: {raw!r}"
        raise ValueError(msg)
    return True


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Attribute:
    """A recognized Set-Cookie directive."""

    name: str
    field: str
    parse: ValueParser
    error: type[InvalidAttribute]
    render: Callable[[Any], str] = str
    flag: bool = False

    def to_segment(self, value: object) -> str:
        """Render *value* as this attribute's header segment."""
        if self.flag:
            return self.name
        return f"{self.name}={self.render(value)}"


ATTRIBUTES: tuple[Attribute, ...] = (
    Attribute("Expires", "expires", _date, InvalidExpires, render=format_http_date),
    Attribute("Max-Age", "max_age", _integer, InvalidMaxAge),
    Attribute("Domain", "domain", _text, InvalidDomain),
    Attribute("Path", "path", _text, InvalidPath),
    Attribute("Secure", "secure", _flag, InvalidSecure, flag=True),
    Attribute("HttpOnly", "http_only", _flag, InvalidHttpOnly, flag=True),
    Attribute("SameSite", "same_site", _text, InvalidSameSite),
)

# Lowercased wire name -> attribute, for case-insensitive lookup
BY_NAME: dict[str, Attribute] = {attr.name.lower(): attr for attr in ATTRIBUTES}
