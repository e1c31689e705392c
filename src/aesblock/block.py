"""
AES-128 block transform pipeline.

Forward schedule:
- Round 0: AddRoundKey
- Rounds 1-9: SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round 10: SubBytes, ShiftRows, AddRoundKey (no MixColumns)

The inverse schedule walks the round keys from 10 down to 0 applying the
inverse steps in reverse order. Every step returns a fresh state; the
input state and the round keys are never modified, so a single schedule can
drive any number of concurrent block transforms.
"""

from __future__ import annotations

from typing import Callable, Sequence

from .errors import InvariantViolation
from .gf import gmul
from .key_schedule import NUM_ROUND_KEYS, NUM_ROUNDS, RoundKey
from .tables import INV_MIX_MATRIX, INV_SBOX, MIX_MATRIX, SBOX
from .trace import TraceRecorder
from .utils import State, copy_state


# Step schedules: (round key index, operations)
ENCRYPT_SCHEDULE = (
    [(0, ["AddRoundKey"])]
    + [(r, ["SubBytes", "ShiftRows", "MixColumns", "AddRoundKey"]) for r in range(1, NUM_ROUNDS)]
    + [(NUM_ROUNDS, ["SubBytes", "ShiftRows", "AddRoundKey"])]  # Final round: no MixColumns
)

DECRYPT_SCHEDULE = (
    [(NUM_ROUNDS, ["AddRoundKey", "InvShiftRows", "InvSubBytes"])]
    + [
        (r, ["AddRoundKey", "InvMixColumns", "InvShiftRows", "InvSubBytes"])
        for r in range(NUM_ROUNDS - 1, 0, -1)
    ]
    + [(0, ["AddRoundKey"])]
)


def sub_bytes(state: State) -> State:
    """Substitute every byte through the S-box."""
    return [[SBOX[b] for b in row] for row in state]


def inv_sub_bytes(state: State) -> State:
    """Substitute every byte through the inverse S-box."""
    return [[INV_SBOX[b] for b in row] for row in state]


def shift_rows(state: State) -> State:
    """Rotate row i left by i positions."""
    return [[state[row][(col + row) % 4] for col in range(4)] for row in range(4)]


def inv_shift_rows(state: State) -> State:
    """Rotate row i right by i positions."""
    return [[state[row][(col - row) % 4] for col in range(4)] for row in range(4)]


def _mix(state: State, matrix: Sequence[Sequence[int]]) -> State:
    new_state = [[0 for _ in range(4)] for _ in range(4)]
    for col in range(4):
        for row in range(4):
            acc = 0
            for k in range(4):
                acc ^= gmul(matrix[row][k], state[k][col])
            new_state[row][col] = acc
    return new_state


def mix_columns(state: State) -> State:
    """Multiply each column by the MixColumns matrix over GF(2^8)."""
    return _mix(state, MIX_MATRIX)


def inv_mix_columns(state: State) -> State:
    """Multiply each column by the inverse MixColumns matrix over GF(2^8)."""
    return _mix(state, INV_MIX_MATRIX)


def add_round_key(state: State, round_key: RoundKey) -> State:
    """XOR the state with a round key."""
    return [[state[row][col] ^ round_key[row][col] for col in range(4)] for row in range(4)]


_STEPS: dict[str, Callable[[State], State]] = {
    "SubBytes": sub_bytes,
    "ShiftRows": shift_rows,
    "MixColumns": mix_columns,
    "InvSubBytes": inv_sub_bytes,
    "InvShiftRows": inv_shift_rows,
    "InvMixColumns": inv_mix_columns,
}


def _run_schedule(
    state: State,
    round_keys: Sequence[RoundKey],
    schedule: list[tuple[int, list[str]]],
    tracer: TraceRecorder | None,
) -> State:
    if len(round_keys) != NUM_ROUND_KEYS:
        raise InvariantViolation(f"Expected {NUM_ROUND_KEYS} round keys, got {len(round_keys)}")

    for round_num, operations in schedule:
        if not 0 <= round_num < NUM_ROUND_KEYS:
            raise InvariantViolation(f"Invalid round index: {round_num}")
        round_key = round_keys[round_num]

        for op in operations:
            if op == "AddRoundKey":
                state = add_round_key(state, round_key)
            else:
                step = _STEPS.get(op)
                if step is None:
                    raise InvariantViolation(f"Unknown operation: {op}")
                state = step(state)

            if tracer:
                if op == "AddRoundKey":
                    tracer.record(
                        round=round_num,
                        operation=op,
                        state=copy_state(state),
                        round_key=copy_state(round_key),
                    )
                else:
                    tracer.record(round=round_num, operation=op, state=copy_state(state))

    return state


def encrypt_state(
    state: State,
    round_keys: Sequence[RoundKey],
    tracer: TraceRecorder | None = None,
) -> State:
    """
    Run the forward AES-128 transform on one state.

    Args:
        state: 4x4 input state (not modified)
        round_keys: The 11 round keys from ``expand_key``
        tracer: Optional recorder receiving the state after every step

    Returns:
        New 4x4 ciphertext state
    """
    return _run_schedule(state, round_keys, ENCRYPT_SCHEDULE, tracer)


def decrypt_state(
    state: State,
    round_keys: Sequence[RoundKey],
    tracer: TraceRecorder | None = None,
) -> State:
    """
    Run the inverse AES-128 transform on one state.

    Args:
        state: 4x4 ciphertext state (not modified)
        round_keys: The 11 round keys from ``expand_key``
        tracer: Optional recorder receiving the state after every step

    Returns:
        New 4x4 plaintext state
    """
    return _run_schedule(state, round_keys, DECRYPT_SCHEDULE, tracer)
