"""Codec interfaces for b64codec.

This module defines the protocol shared by binary-to-text codecs.
"""

from __future__ import annotations

from typing import Protocol


class ICodec(Protocol):
    """Interface for binary-to-text encoding and decoding operations."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, encoded: str) -> bytes:
        """Decode text back into bytes.

        Args:
            encoded: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: When the text is not valid encoded data.
        """
        ...
