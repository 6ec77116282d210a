"""setcookie — parse and serialize HTTP ``Set-Cookie`` header values.

Basic usage::

    from setcookie import parse_one, parse_many

    cookie = parse_one("foo=bar; Max-Age=100; Secure")
    cookie.max_age         # 100
    str(cookie)            # "foo=bar; Max-Age=100; Secure"

    cookies = parse_many(["foo=bar", "baz=buz"])

Custom key/value codecs::

    from setcookie import CodecOptions

    raw = CodecOptions(decode=str, encode=str)
    parse_one("a%20b=c", raw).key   # "a%20b"
"""

__version__ = "0.1.0"
__all__ = [
    "CodecOptions",
    "InvalidAttribute",
    "InvalidDomain",
    "InvalidExpires",
    "InvalidHttpOnly",
    "InvalidInputType",
    "InvalidKey",
    "InvalidMaxAge",
    "InvalidPair",
    "InvalidPath",
    "InvalidSameSite",
    "InvalidSecure",
    "InvalidValue",
    "SetCookie",
    "SetCookieError",
    "format_http_date",
    "parse_http_date",
    "parse_many",
    "parse_one",
    "set_cookie",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CodecOptions": "setcookie.config",
    "SetCookie": "setcookie.record",
    "parse_one": "setcookie.record",
    "parse_many": "setcookie.record",
    "set_cookie": "setcookie.record",
    "format_http_date": "setcookie.dates",
    "parse_http_date": "setcookie.dates",
    "SetCookieError": "setcookie.errors",
    "InvalidInputType": "setcookie.errors",
    "InvalidPair": "setcookie.errors",
    "InvalidKey": "setcookie.errors",
    "InvalidValue": "setcookie.errors",
    "InvalidAttribute": "setcookie.errors",
    "InvalidExpires": "setcookie.errors",
    "InvalidMaxAge": "setcookie.errors",
    "InvalidDomain": "setcookie.errors",
    "InvalidPath": "setcookie.errors",
    "InvalidSecure": "setcookie.errors",
    "InvalidHttpOnly": "setcookie.errors",
    "InvalidSameSite": "setcookie.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import setcookie`` cheap while providing a flat top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
