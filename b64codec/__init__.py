"""b64codec: a Base64 binary-to-text codec.

This package implements the Base64 encoding of RFC 4648 with the standard and
URL-safe alphabets, and RFC 2045 style line-wrapped output.

Main Components:
    - encode / decode: Base64 transform and its inverse
    - encode_pem / encode_mime: 64 and 76 column wrapped encodings
    - Base64Codec: codec bound to a CodecConfig
    - Alphabets: STANDARD and URL_SAFE symbol sets

Example:
    >>> from b64codec import decode, encode
    >>> encode(b"Man")
    'TWFu'
    >>> decode("TWFu")
    b'Man'
"""

from b64codec.alphabet import STANDARD, URL_SAFE, Alphabet
from b64codec.codec import (
    MIME_CODEC,
    PEM_CODEC,
    STANDARD_CODEC,
    URL_SAFE_CODEC,
    Base64Codec,
    CodecConfig,
    decode,
    encode,
    encode_mime,
    encode_pem,
)
from b64codec.exceptions import Base64Error, InvalidInputError
from b64codec.wrapping import MIME_LINE_LENGTH, PEM_LINE_LENGTH, insert_linebreaks

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "encode_pem",
    "encode_mime",
    "decode",
    "Base64Codec",
    "CodecConfig",
    "STANDARD_CODEC",
    "URL_SAFE_CODEC",
    "PEM_CODEC",
    "MIME_CODEC",
    # Alphabets
    "Alphabet",
    "STANDARD",
    "URL_SAFE",
    # Wrapping
    "insert_linebreaks",
    "PEM_LINE_LENGTH",
    "MIME_LINE_LENGTH",
    # Exceptions
    "Base64Error",
    "InvalidInputError",
]
