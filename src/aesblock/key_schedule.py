"""
Rijndael key expansion for AES-128.

The 16-byte key expands into 44 four-byte words, grouped into 11 round
keys of four words each. Each round key is returned in state layout
(``round_key[row][col]``, word ``col`` in column ``col``) as nested tuples,
so the schedule cannot be mutated after construction.
"""

from __future__ import annotations

from .errors import InvalidKeyLengthError, InvariantViolation
from .tables import RCON, SBOX

NUM_ROUNDS = 10
NUM_ROUND_KEYS = NUM_ROUNDS + 1
KEY_SIZE = 16

RoundKey = tuple[tuple[int, ...], ...]


def round_constant(index: int) -> int:
    """Round constant for key-schedule step ``index`` (0-based)."""
    if not 0 <= index < len(RCON):
        raise InvariantViolation(f"Invalid round constant index: {index}")
    return RCON[index]


def rot_word(word: list[int]) -> list[int]:
    """Rotate a 4-byte word left by one byte."""
    return [word[1], word[2], word[3], word[0]]


def sub_word(word: list[int]) -> list[int]:
    """Apply the S-box to each byte of a word."""
    return [SBOX[b] for b in word]


def _words_to_round_key(words: list[list[int]]) -> RoundKey:
    return tuple(tuple(words[col][row] for col in range(4)) for row in range(4))


def expand_key(key: bytes) -> tuple[RoundKey, ...]:
    """
    Expand a 16-byte key into the 11 AES-128 round keys.

    Args:
        key: 16-byte AES key

    Returns:
        Tuple of 11 round keys, each a 4x4 byte matrix

    Raises:
        InvalidKeyLengthError: If key is not 16 bytes
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLengthError(len(key))

    # Words 0..3 are the key columns
    words = [list(key[i * 4:(i + 1) * 4]) for i in range(4)]

    for round_num in range(1, NUM_ROUND_KEYS):
        prev = words[(round_num - 1) * 4:round_num * 4]

        temp = sub_word(rot_word(prev[3]))
        temp[0] ^= round_constant(round_num - 1)
        first = [t ^ p for t, p in zip(temp, prev[0])]
        words.append(first)

        for col in range(1, 4):
            words.append([a ^ b for a, b in zip(words[-1], prev[col])])

    return tuple(
        _words_to_round_key(words[r * 4:(r + 1) * 4]) for r in range(NUM_ROUND_KEYS)
    )
