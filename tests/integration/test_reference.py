"""Interoperability tests against the standard library reference implementation."""

import random

import pytest

from b64codec import decode, encode, encode_mime, encode_pem
from examples.implementation.encoding import Base64

SEED = 4648


def random_payloads(count: int, max_length: int):
    """Yield seeded random payloads of varying length."""
    rng = random.Random(SEED)
    for _ in range(count):
        length = rng.randint(0, max_length)
        yield bytes(rng.getrandbits(8) for _ in range(length))


@pytest.mark.parametrize("url_safe", [False, True])
def test_encode_matches_reference(url_safe: bool) -> None:
    """Test encoding agrees with the standard library byte for byte."""
    for data in random_payloads(200, 300):
        assert encode(data, url_safe) == Base64.encode(data, url_safe=url_safe)


@pytest.mark.parametrize("url_safe", [False, True])
def test_reference_output_decodes(url_safe: bool) -> None:
    """Test the decoder accepts what the standard library produces."""
    for data in random_payloads(200, 300):
        assert decode(Base64.encode(data, url_safe=url_safe)) == data


def test_decode_matches_reference() -> None:
    """Test both decoders recover the same bytes from our output."""
    for data in random_payloads(200, 300):
        encoded = encode(data, url_safe=True)
        assert decode(encoded) == Base64.decode(encoded) == data


def test_wrapped_encodings_match_reference() -> None:
    """Test PEM and MIME wrapping agree with the reference line splitting."""
    for data in random_payloads(50, 1000):
        assert encode_pem(data) == Base64.encode_wrapped(data, 64)
        assert encode_mime(data) == Base64.encode_wrapped(data, 76)
        assert decode(encode_mime(data), strip_linebreaks=True) == data
