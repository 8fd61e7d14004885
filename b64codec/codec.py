"""Base64 encoder and decoder.

This module implements the Base64 transform of RFC 4648 over the standard and
URL-safe alphabets, plus the PEM (64 column) and MIME (76 column) line-wrapped
encodings. The URL-safe variant pads with '.' instead of '='; the decoder
accepts both padding characters and both alphabets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from b64codec import alphabet, wrapping
from b64codec.exceptions import InvalidInputError
from b64codec.interfaces import ICodec

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def encode(data: BytesLike, url_safe: bool = False) -> str:
    """Encode bytes as a Base64 string.

    Every 3 input bytes become 4 output characters, taken from the input
    bit-stream six bits at a time, most significant bit first. A final group
    of 1 or 2 bytes is completed with 2 or 1 padding characters, so the
    output length is always ceil(len(data) / 3) * 4.

    Args:
        data: The bytes to encode.
        url_safe: Use the URL-safe alphabet ('-_' and '.' padding) instead of
            the standard one ('+/' and '=' padding).

    Returns:
        The encoded string.

    Raises:
        TypeError: If data is not a bytes-like object.
    """
    raw = bytes(memoryview(data))
    chosen = alphabet.select(url_safe)
    symbols = chosen.symbols
    pad = chosen.padding

    out = []
    full = len(raw) - len(raw) % 3
    for pos in range(0, full, 3):
        group = (raw[pos] << 16) | (raw[pos + 1] << 8) | raw[pos + 2]
        out.append(
            symbols[group >> 18]
            + symbols[(group >> 12) & 0x3F]
            + symbols[(group >> 6) & 0x3F]
            + symbols[group & 0x3F]
        )

    remainder = len(raw) - full
    if remainder == 1:
        group = raw[full] << 16
        out.append(symbols[group >> 18] + symbols[(group >> 12) & 0x3F] + pad * 2)
    elif remainder == 2:
        group = (raw[full] << 16) | (raw[full + 1] << 8)
        out.append(
            symbols[group >> 18]
            + symbols[(group >> 12) & 0x3F]
            + symbols[(group >> 6) & 0x3F]
            + pad
        )

    return "".join(out)


def encode_pem(data: BytesLike) -> str:
    """Encode bytes with the standard alphabet, wrapped at 64 columns."""
    return wrapping.insert_linebreaks(encode(data), wrapping.PEM_LINE_LENGTH)


def encode_mime(data: BytesLike) -> str:
    """Encode bytes with the standard alphabet, wrapped at 76 columns."""
    return wrapping.insert_linebreaks(encode(data), wrapping.MIME_LINE_LENGTH)


def decode(encoded: Union[str, BytesLike], strip_linebreaks: bool = False) -> bytes:
    """Decode a Base64 string back to bytes.

    Input is consumed in chunks of 4 characters. Every chunk yields its first
    byte; the second and third bytes are produced only while the 3rd and 4th
    characters are present and are not padding. Unpadded final chunks are
    accepted, but a final chunk must hold at least 2 characters.

    Args:
        encoded: The text to decode. ASCII bytes are accepted as well.
        strip_linebreaks: Remove every newline before decoding, as needed for
            PEM or MIME wrapped input.

    Returns:
        The decoded bytes.

    Raises:
        InvalidInputError: If the input holds a character outside both
            alphabets, non-ASCII bytes, or a dangling final character.
    """
    if isinstance(encoded, (bytes, bytearray, memoryview)):
        try:
            encoded = bytes(encoded).decode("ascii")
        except UnicodeDecodeError as e:
            logger.debug("rejected non-ASCII base64 input at offset %d", e.start)
            raise InvalidInputError("Input is not valid base64-encoded data.") from e

    if strip_linebreaks:
        encoded = wrapping.strip_linebreaks(encoded)

    length = len(encoded)
    out = bytearray()

    for pos in range(0, length, 4):
        if pos + 1 >= length:
            logger.debug("rejected base64 input with a dangling character at offset %d", pos)
            raise InvalidInputError(
                f"Input is not valid base64-encoded data: truncated group at offset {pos}."
            )

        first = _value_of(encoded, pos)
        second = _value_of(encoded, pos + 1)
        out.append((first << 2) | (second >> 4))

        if pos + 2 < length and encoded[pos + 2] not in alphabet.PADDING_CHARS:
            third = _value_of(encoded, pos + 2)
            out.append(((second & 0x0F) << 4) | (third >> 2))

            if pos + 3 < length and encoded[pos + 3] not in alphabet.PADDING_CHARS:
                out.append(((third & 0x03) << 6) | _value_of(encoded, pos + 3))

    return bytes(out)


def _value_of(encoded: str, pos: int) -> int:
    ch = encoded[pos]
    code = ord(ch)
    value = alphabet.DECODE_TABLE[code] if code < alphabet.MAX_ENCODE_CHAR else alphabet.INVALID
    if value == alphabet.INVALID:
        logger.debug("rejected base64 input: %r at offset %d", ch, pos)
        raise InvalidInputError(
            f"Input is not valid base64-encoded data: unexpected {ch!r} at offset {pos}."
        )
    return value


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for a Base64Codec.

    Attributes:
        url_safe: Encode with the URL-safe alphabet.
        line_length: Wrap encoded output at this many columns. None disables
            wrapping.
    """

    url_safe: bool = False
    line_length: Optional[int] = None

    def __post_init__(self) -> None:
        if self.line_length is not None and self.line_length <= 0:
            raise ValueError(f"line_length must be positive, got {self.line_length}")


class Base64Codec(ICodec):
    """Base64 codec bound to one configuration.

    Wrapped codecs strip line breaks when decoding, so anything a codec
    encodes it can decode again.
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        """Initialize the codec.

        Args:
            config: Alphabet and wrapping settings. Defaults to the standard
                alphabet without wrapping.
        """
        self.config = config or CodecConfig()

    def encode(self, data: bytes) -> str:
        """Encode bytes according to this codec's configuration.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded, optionally wrapped, string.
        """
        text = encode(data, url_safe=self.config.url_safe)
        if self.config.line_length is None:
            return text
        return wrapping.insert_linebreaks(text, self.config.line_length)

    def decode(self, encoded: str) -> bytes:
        """Decode a string produced by this or any compatible codec.

        Args:
            encoded: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: If the text is not valid base64.
        """
        return decode(encoded, strip_linebreaks=self.config.line_length is not None)

    def __repr__(self) -> str:
        return f"Base64Codec({self.config!r})"


STANDARD_CODEC = Base64Codec(CodecConfig())
URL_SAFE_CODEC = Base64Codec(CodecConfig(url_safe=True))
PEM_CODEC = Base64Codec(CodecConfig(line_length=wrapping.PEM_LINE_LENGTH))
MIME_CODEC = Base64Codec(CodecConfig(line_length=wrapping.MIME_LINE_LENGTH))
