r"""Python codec for the legacy Georgian single-byte codepage.

Registers a charmap codec so that the legacy encoding can be used wherever
Python accepts an encoding name:

    >>> "ქართული".encode("georgian_ascii")
    b'\xd8\xc0\xd2\xc8\xd6\xcb\xc9'

Bytes outside 0xC0..0xE5 decode as Latin-1. The tables are derived from the
same arithmetic as legacy.py, so both paths always agree.
"""

from __future__ import annotations

import codecs
from functools import lru_cache
import logging

from .const import (
    CODEC_ALIASES,
    CODEC_NAME,
    LEGACY_FIRST,
    LEGACY_LAST,
    NUMERO_SIGN,
    NUMERO_SIGN_REPLACEMENT,
)
from .legacy import legacy_byte_to_codepoint

_LOGGER = logging.getLogger(__name__)


### Codec APIs


class Codec(codecs.Codec):
    def encode(self, input: str, errors: str = "strict") -> tuple[bytes, int]:
        return codecs.charmap_encode(input, errors, encoding_map)

    def decode(self, input: bytes, errors: str = "strict") -> tuple[str, int]:
        return codecs.charmap_decode(input, errors, decoding_map)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input: str, final: bool = False) -> bytes:
        return codecs.charmap_encode(input, self.errors, encoding_map)[0]


class IncrementalDecoder(codecs.IncrementalDecoder):
    def decode(self, input: bytes, final: bool = False) -> str:
        return codecs.charmap_decode(input, self.errors, decoding_map)[0]


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    pass


def getregentry() -> codecs.CodecInfo:
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


### Decoding Map

decoding_map = codecs.make_identity_dict(range(256))
decoding_map.update(
    {byte: legacy_byte_to_codepoint(byte) for byte in range(LEGACY_FIRST, LEGACY_LAST + 1)}
)

### Encoding Map

encoding_map = codecs.make_encoding_map(decoding_map)
# One-way: "#" still decodes to "#"
encoding_map[NUMERO_SIGN] = NUMERO_SIGN_REPLACEMENT


### Registry

_CODEC_NAMES = frozenset(
    name.replace("-", "_") for name in (CODEC_NAME, *CODEC_ALIASES)
)


def _search(name: str) -> codecs.CodecInfo | None:
    normalized = name.lower().replace("-", "_").replace(" ", "_")
    if normalized not in _CODEC_NAMES:
        return None
    _LOGGER.debug("Resolved codec '%s'", name)
    return getregentry()


@lru_cache(maxsize=1)
def register_codec() -> None:
    """Register the legacy codepage with the codecs registry.

    Safe to call repeatedly; the search function is added only once.
    """
    codecs.register(_search)
    _LOGGER.debug("Registered codec '%s' with aliases %s", CODEC_NAME, CODEC_ALIASES)
