"""Codec configuration.

CodecOptions is a frozen dataclass holding the decode/encode pair a record is
built with, immutable after creation.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from functools import partial
from urllib.parse import quote, unquote

type Codec = Callable[[str], str]

# Same unreserved set as JavaScript's encodeURIComponent
_COMPONENT_SAFE = "!~*'()"


@dataclass(frozen=True, slots=True)
class CodecOptions:
    """Key/value transforms applied while parsing and serializing.

    ``decode`` runs on the key and value of a parsed header string.
    ``encode`` runs on the key and value when the record is serialized.
    Override what you need::

        options = CodecOptions(encode=str, decode=str)
    """

    decode: Codec = field(default=partial(unquote, errors="strict"))
    encode: Codec = field(default=partial(quote, safe=_COMPONENT_SAFE))

    def replace(self, **changes: Codec) -> "CodecOptions":
        """Return a copy with the given codecs swapped in."""
        return replace(self, **changes)


DEFAULT_OPTIONS = CodecOptions()
