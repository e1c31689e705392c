"""
AES-128 cipher instance.

AESCipher expands its key once at construction and then exposes:

- encrypt_block / decrypt_block: one raw 16-byte block, no framing
- encrypt_bytes / decrypt_bytes: 0x80-marker framing, independent per-block
  (ECB-style) transforms
- encrypt / decrypt: text in, base64 out and back

Identical plaintext blocks encrypt to identical ciphertext blocks. There is
no IV and no chaining.

Blocks are mapped over a thread pool. The transforms are pure Python and hold
the GIL, so the pool keeps ordering and interface but gives no CPU speedup on
CPython.
"""

from __future__ import annotations

import base64
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from .block import decrypt_state, encrypt_state
from .config import CipherConfig
from .errors import (
    InvalidBlockLengthError,
    InvalidTextEncodingError,
    InvalidTransportEncodingError,
)
from .framing import depad, join_blocks, pad, split_blocks
from .key_schedule import RoundKey, expand_key
from .trace import TraceRecorder
from .utils import BLOCK_SIZE, bytes_to_state, state_to_bytes

logger = logging.getLogger(__name__)


class AESCipher:
    """
    AES-128 cipher bound to a single key.

    The round-key schedule is immutable after construction, so one instance
    can be shared freely between threads.
    """

    def __init__(self, key: bytes, config: CipherConfig | None = None):
        """
        Args:
            key: 16-byte AES key
            config: Worker pool and text encoding settings

        Raises:
            InvalidKeyLengthError: If key is not 16 bytes
        """
        self.config = config or CipherConfig()
        self._round_keys = expand_key(key)
        logger.debug("Expanded key into %d round keys", len(self._round_keys))

    @property
    def round_keys(self) -> tuple[RoundKey, ...]:
        """The 11 round keys (read-only)."""
        return self._round_keys

    # ------------------------------------------------------------------
    # Single block
    # ------------------------------------------------------------------

    def encrypt_block(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """
        Encrypt exactly one 16-byte block.

        Raises:
            InvalidBlockLengthError: If block is not 16 bytes
        """
        if len(block) != BLOCK_SIZE:
            raise InvalidBlockLengthError(len(block))
        state = encrypt_state(bytes_to_state(block), self._round_keys, tracer)
        return state_to_bytes(state)

    def decrypt_block(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """
        Decrypt exactly one 16-byte block.

        Raises:
            InvalidBlockLengthError: If block is not 16 bytes
        """
        if len(block) != BLOCK_SIZE:
            raise InvalidBlockLengthError(len(block))
        state = decrypt_state(bytes_to_state(block), self._round_keys, tracer)
        return state_to_bytes(state)

    # ------------------------------------------------------------------
    # Byte messages
    # ------------------------------------------------------------------

    def encrypt_bytes(self, data: bytes) -> bytes:
        """Pad data and encrypt every block independently."""
        blocks = split_blocks(pad(data))
        return join_blocks(self._map_blocks(self.encrypt_block, blocks))

    def decrypt_bytes(self, data: bytes) -> bytes:
        """
        Decrypt every block independently and strip the padding.

        Raises:
            InvalidCiphertextLengthError: If data is not a multiple of 16 bytes
        """
        blocks = split_blocks(data)
        return depad(join_blocks(self._map_blocks(self.decrypt_block, blocks)))

    def _map_blocks(self, transform: Callable[[bytes], bytes], blocks: list[bytes]) -> list[bytes]:
        """Apply transform to every block, keeping results at their input index."""
        workers = min(self.config.workers, len(blocks))
        if workers <= 1 or len(blocks) < self.config.parallel_threshold:
            logger.debug("Transforming %d block(s) sequentially", len(blocks))
            return [transform(block) for block in blocks]

        logger.debug("Transforming %d blocks on %d workers", len(blocks), workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(transform, blocks))

    # ------------------------------------------------------------------
    # Text messages
    # ------------------------------------------------------------------

    def encrypt(self, text: str) -> str:
        """
        Encrypt text and return the ciphertext as base64.

        Raises:
            InvalidTextEncodingError: If text cannot be encoded (e.g. lone surrogates)
        """
        try:
            data = text.encode(self.config.text_encoding)
        except UnicodeEncodeError as e:
            raise InvalidTextEncodingError(f"Text encoding error: {e}") from e
        ciphertext = self.encrypt_bytes(data)
        return base64.b64encode(ciphertext).decode("ascii")

    def decrypt(self, token: str) -> str:
        """
        Decrypt base64 ciphertext back to text.

        Raises:
            InvalidTransportEncodingError: If token is not valid base64
            InvalidCiphertextLengthError: If the decoded length is not block aligned
            InvalidTextEncodingError: If the recovered bytes are not valid text
        """
        try:
            ciphertext = base64.b64decode(token, validate=True)
        except ValueError as e:
            raise InvalidTransportEncodingError(f"Base64 decoding error: {e}") from e

        # Reject non-zero trailing bits so each ciphertext has exactly one token
        if base64.b64encode(ciphertext).decode("ascii") != token:
            raise InvalidTransportEncodingError("Base64 decoding error: non-canonical encoding")

        plaintext = self.decrypt_bytes(ciphertext)

        try:
            return plaintext.decode(self.config.text_encoding)
        except UnicodeDecodeError as e:
            raise InvalidTextEncodingError(f"Text decoding error: {e}") from e
