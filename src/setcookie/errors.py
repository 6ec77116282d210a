"""setcookie exception hierarchy.

Every error carries a fixed, literal message so callers can match on it.
Errors that describe a bad attribute also expose the attribute's wire name.
"""


class SetCookieError(Exception):
    """Base for all setcookie errors."""

    message: str = "Invalid Set-Cookie input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidInputType(SetCookieError, TypeError):  # noqa: N818
    """Input is neither a string, a mapping, nor a sequence of those."""

    message = "Invalid input type"


class InvalidPair(SetCookieError, ValueError):  # noqa: N818
    """The leading ``key=value`` segment is missing, malformed, or empty."""

    message = "Invalid key-value pair"


class InvalidKey(SetCookieError, ValueError):  # noqa: N818
    """Mapping input has no usable ``key``."""

    message = "Invalid key"


class InvalidValue(SetCookieError, ValueError):  # noqa: N818
    """Mapping input has no usable ``value``."""

    message = "Invalid value"


class InvalidAttribute(SetCookieError, ValueError):  # noqa: N818
    """An attribute segment failed validation while parsing a header string."""

    attribute: str = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or f"Invalid {self.attribute} field")


class InvalidExpires(InvalidAttribute):
    attribute = "Expires"


class InvalidMaxAge(InvalidAttribute):
    attribute = "Max-Age"


class InvalidDomain(InvalidAttribute):
    attribute = "Domain"


class InvalidPath(InvalidAttribute):
    attribute = "Path"


class InvalidSecure(InvalidAttribute):
    attribute = "Secure"


class InvalidHttpOnly(InvalidAttribute):
    attribute = "HttpOnly"


class InvalidSameSite(InvalidAttribute):
    attribute = "SameSite"
