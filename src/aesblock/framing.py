"""
Message framing: 0x80 marker padding and 16-byte block splitting.

Padding appends a single 0x80 marker and then zero bytes up to the next
multiple of 16; an already aligned message gains a whole extra block.
Depadding truncates at the FIRST 0x80 in the decrypted bytes, so a
plaintext that itself contains 0x80 comes back cut short at that byte.
That behavior is kept for compatibility with existing ciphertexts.
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidCiphertextLengthError
from .utils import BLOCK_SIZE

PAD_MARKER = 0x80


def pad(data: bytes) -> bytes:
    """Append the 0x80 marker and zero-fill to a multiple of 16 bytes."""
    padded = bytearray(data)
    padded.append(PAD_MARKER)
    padded.extend(bytes(-len(padded) % BLOCK_SIZE))
    return bytes(padded)


def depad(data: bytes) -> bytes:
    """Truncate at the first 0x80 marker; return data unchanged if absent."""
    pos = data.find(PAD_MARKER)
    if pos < 0:
        return bytes(data)
    return bytes(data[:pos])


def split_blocks(data: bytes) -> list[bytes]:
    """
    Split data into consecutive 16-byte blocks.

    Raises:
        InvalidCiphertextLengthError: If data is not block aligned
    """
    if len(data) % BLOCK_SIZE != 0:
        raise InvalidCiphertextLengthError(len(data))
    return [bytes(data[offset:offset + BLOCK_SIZE]) for offset in range(0, len(data), BLOCK_SIZE)]


def join_blocks(blocks: Iterable[bytes]) -> bytes:
    """Concatenate blocks in order."""
    return b"".join(blocks)
