"""Exception classes for b64codec.

This module defines the error types raised by the codec.
"""


class Base64Error(Exception):
    """Base exception class for all b64codec errors."""

    pass


class InvalidInputError(Base64Error, ValueError):
    """Exception raised when input is not valid base64-encoded data."""

    pass
