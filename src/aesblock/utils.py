"""
Byte/state conversions and hex formatting.

A State is a 4x4 byte matrix indexed ``state[row][col]``. Bytes map onto
it column by column:

  byte[0]  -> state[0][0]
  byte[1]  -> state[1][0]
  byte[2]  -> state[2][0]
  byte[3]  -> state[3][0]
  byte[4]  -> state[0][1]
  ...
  byte[15] -> state[3][3]

Round keys use the same layout, so column ``c`` of a round key is key
word ``c``.
"""

from .errors import InvalidBlockLengthError

State = list[list[int]]

BLOCK_SIZE = 16


def bytes_to_state(data: bytes) -> State:
    """
    Convert 16 bytes to a 4x4 state (column-major).

    Args:
        data: 16 bytes of input

    Returns:
        Fresh 4x4 list of integers (0-255)

    Raises:
        InvalidBlockLengthError: If data is not 16 bytes
    """
    if len(data) != BLOCK_SIZE:
        raise InvalidBlockLengthError(len(data))

    state = [[0 for _ in range(4)] for _ in range(4)]
    for col in range(4):
        for row in range(4):
            state[row][col] = data[col * 4 + row]
    return state


def state_to_bytes(state: State) -> bytes:
    """Convert a 4x4 state back to 16 bytes (column-major)."""
    return bytes(state[row][col] for col in range(4) for row in range(4))


def hex_to_bytes(hex_str: str) -> bytes:
    """Convert hex string to bytes."""
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to lowercase hex string."""
    return data.hex()


def state_to_hex(state: State) -> str:
    """
    Convert state to hex string (via bytes).
    """
    return bytes_to_hex(state_to_bytes(state))


def copy_state(state: State) -> State:
    """
    Deep copy a 4x4 state.
    """
    return [[state[row][col] for col in range(4)] for row in range(4)]
