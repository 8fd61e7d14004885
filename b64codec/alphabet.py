"""Base64 alphabets and reverse lookup tables.

This module defines the standard (RFC 4648 section 4) and URL-safe
(section 5) alphabets, and the character-code indexed tables used to map
encoded characters back to their 6-bit values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Characters above 'z' never appear in either alphabet.
MAX_ENCODE_CHAR = ord("z") + 1
INVALID = 0xFF

_COMMON_SYMBOLS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
)


@dataclass(frozen=True)
class Alphabet:
    """An ordered set of 64 symbols plus a padding character.

    Attributes:
        name: Short name of the variant.
        symbols: The 64 symbols, indexed by 6-bit value.
        padding: The character appended to fill a final partial group.
    """

    name: str
    symbols: str
    padding: str

    def __post_init__(self) -> None:
        if len(self.symbols) != 64 or len(set(self.symbols)) != 64:
            raise ValueError(f"{self.name} alphabet must hold 64 distinct symbols")
        if len(self.padding) != 1 or self.padding in self.symbols:
            raise ValueError(f"{self.name} alphabet has an invalid padding character")
        if any(ord(ch) >= MAX_ENCODE_CHAR for ch in self.symbols):
            raise ValueError(f"{self.name} alphabet symbols must be below {MAX_ENCODE_CHAR}")

    def decode_table(self) -> Tuple[int, ...]:
        """Build the reverse lookup table for this alphabet.

        Returns:
            A tuple of MAX_ENCODE_CHAR entries holding either the 6-bit value
            of the character with that code or INVALID.
        """
        table = [INVALID] * MAX_ENCODE_CHAR
        for value, ch in enumerate(self.symbols):
            table[ord(ch)] = value
        return tuple(table)


STANDARD = Alphabet(name="standard", symbols=_COMMON_SYMBOLS + "+/", padding="=")
URL_SAFE = Alphabet(name="url-safe", symbols=_COMMON_SYMBOLS + "-_", padding=".")

PADDING_CHARS = frozenset(alphabet.padding for alphabet in (STANDARD, URL_SAFE))


def merge_decode_tables(*alphabets: Alphabet) -> Tuple[int, ...]:
    """Combine the reverse tables of several alphabets into one.

    Alphabets must agree on the value of every character they share.

    Args:
        *alphabets: The alphabets to combine.

    Returns:
        A reverse lookup table accepting the symbols of every alphabet.

    Raises:
        ValueError: If two alphabets map one character to different values.
    """
    merged = [INVALID] * MAX_ENCODE_CHAR
    for alphabet in alphabets:
        for code, value in enumerate(alphabet.decode_table()):
            if value == INVALID:
                continue
            if merged[code] not in (INVALID, value):
                raise ValueError(f"conflicting values for {chr(code)!r}")
            merged[code] = value
    return tuple(merged)


# Shared by every decode call: accepts '+/' and '-_' alike.
DECODE_TABLE = merge_decode_tables(STANDARD, URL_SAFE)


def select(url_safe: bool) -> Alphabet:
    """Return the URL-safe alphabet when requested, else the standard one."""
    return URL_SAFE if url_safe else STANDARD
