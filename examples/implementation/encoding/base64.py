"""Base64 reference implementation.

This module wraps the standard library base64 module so the codec can be
checked against an independent implementation.
"""

import base64


class Base64:
    """Reference Base64 operations backed by the standard library.

    The standard library pads URL-safe output with '=', while b64codec pads
    it with '.'. This class applies the same substitution so outputs can be
    compared directly.
    """

    @staticmethod
    def encode(data: bytes, url_safe: bool = False) -> str:
        """Encode bytes to a base64 string.

        Args:
            data: The bytes to encode.
            url_safe: Use the RFC 4648 section 5 alphabet with '.' padding.

        Returns:
            A base64 encoded string.
        """
        if not url_safe:
            return base64.b64encode(data).decode("ascii")

        encoded = base64.urlsafe_b64encode(data).decode("ascii")
        return encoded.replace("=", ".")

    @staticmethod
    def encode_wrapped(data: bytes, width: int) -> str:
        """Encode bytes with the standard alphabet, breaking lines every `width` characters.

        Args:
            data: The bytes to encode.
            width: Characters per line.

        Returns:
            The wrapped base64 string without a trailing newline.
        """
        encoded = base64.b64encode(data).decode("ascii")
        lines = [encoded[pos : pos + width] for pos in range(0, len(encoded), width)]
        return "\n".join(lines)

    @staticmethod
    def decode(base64_str: str) -> bytes:
        """Decode a base64 string to bytes.

        Accepts both alphabets, either padding character, and missing padding.

        Args:
            base64_str: The base64 string to decode.

        Returns:
            The decoded bytes.
        """
        normalized = base64_str.replace(".", "=").replace("-", "+").replace("_", "/")
        normalized = normalized.rstrip("=")
        normalized += "=" * (-len(normalized) % 4)
        return base64.b64decode(normalized, validate=True)
