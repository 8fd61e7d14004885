"""Encoding reference implementation package.

This package provides reference implementations used to cross-check the
b64codec encoder and decoder.
"""

from .base64 import Base64

__all__ = [
    "Base64",
]
