"""Error taxonomy for the AES-128 cipher.

Two classes of failure exist:

- ``AESError`` and subclasses: recoverable input errors reported to the
  caller (bad key length, malformed base64, non-text plaintext, ...).
- ``InvariantViolation``: a defect in a constant table or loop bound.
  It is intentionally not an ``AESError`` so that ``except AESError``
  handlers never mask it.
"""

from __future__ import annotations


class AESError(Exception):
    """Base class for recoverable cipher input errors."""


class InvalidKeyLengthError(AESError, ValueError):
    """Key is not exactly 16 bytes."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Key must be 16 bytes, got {length}")


class InvalidBlockLengthError(AESError, ValueError):
    """Single-block operation received something other than 16 bytes."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Block must be 16 bytes, got {length}")


class InvalidCiphertextLengthError(AESError, ValueError):
    """Ciphertext length is not a multiple of the block size."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Ciphertext length must be a multiple of 16 bytes, got {length}")


class InvalidTransportEncodingError(AESError):
    """Ciphertext text could not be decoded from base64."""


class InvalidTextEncodingError(AESError):
    """Recovered plaintext bytes are not valid text."""


class InvariantViolation(RuntimeError):
    """Internal consistency failure; never caused by external input."""
