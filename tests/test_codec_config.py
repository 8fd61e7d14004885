"""Tests for configured codec instances."""

from __future__ import annotations

import pytest

from b64codec import (
    MIME_CODEC,
    PEM_CODEC,
    STANDARD_CODEC,
    URL_SAFE_CODEC,
    Base64Codec,
    CodecConfig,
    InvalidInputError,
    encode,
    encode_mime,
    encode_pem,
)
from b64codec.interfaces import ICodec


def encode_with(codec: ICodec, data: bytes) -> str:
    """Encode through the protocol to check structural compatibility."""
    return codec.encode(data)


def test_default_config() -> None:
    """Test a codec without config uses the standard alphabet unwrapped."""
    codec = Base64Codec()

    assert codec.config == CodecConfig(url_safe=False, line_length=None)
    assert codec.encode(b"\xfb\xff") == "+/8="
    assert repr(codec) == "Base64Codec(CodecConfig(url_safe=False, line_length=None))"


def test_ready_made_codecs_match_functions() -> None:
    """Test the shared codec instances agree with the module functions."""
    data = bytes(range(200))

    assert STANDARD_CODEC.encode(data) == encode(data)
    assert URL_SAFE_CODEC.encode(data) == encode(data, url_safe=True)
    assert PEM_CODEC.encode(data) == encode_pem(data)
    assert MIME_CODEC.encode(data) == encode_mime(data)


@pytest.mark.parametrize("codec", [STANDARD_CODEC, URL_SAFE_CODEC, PEM_CODEC, MIME_CODEC])
def test_codecs_round_trip(codec: Base64Codec) -> None:
    """Test each codec decodes its own output."""
    data = bytes(range(256)) * 2

    assert codec.decode(encode_with(codec, data)) == data


def test_wrapped_url_safe_codec() -> None:
    """Test URL-safe output can be wrapped at a custom width."""
    codec = Base64Codec(CodecConfig(url_safe=True, line_length=8))
    encoded = codec.encode(b"\xfb\xff" * 12)

    assert all(len(line) <= 8 for line in encoded.split("\n"))
    assert encoded.count("\n") == 3
    assert "+" not in encoded and "/" not in encoded
    assert codec.decode(encoded) == b"\xfb\xff" * 12


def test_unwrapped_codec_rejects_line_breaks() -> None:
    """Test only wrapping codecs strip line breaks when decoding."""
    wrapped = encode_mime(bytes(100))

    with pytest.raises(InvalidInputError):
        STANDARD_CODEC.decode(wrapped)
    assert MIME_CODEC.decode(wrapped) == bytes(100)


@pytest.mark.parametrize("line_length", [0, -1])
def test_config_rejects_non_positive_line_length(line_length: int) -> None:
    """Test a wrapping width must be positive."""
    with pytest.raises(ValueError):
        CodecConfig(line_length=line_length)
