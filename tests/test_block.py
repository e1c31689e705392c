"""Tests for the round-transform pipeline."""

import random

import pytest

from aesblock.block import (
    DECRYPT_SCHEDULE,
    ENCRYPT_SCHEDULE,
    add_round_key,
    decrypt_state,
    encrypt_state,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_rows,
    sub_bytes,
)
from aesblock.errors import InvariantViolation
from aesblock.key_schedule import expand_key
from aesblock.trace import TraceRecorder
from aesblock.utils import bytes_to_state, copy_state, state_to_bytes, state_to_hex


KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
PT = bytes.fromhex("00112233445566778899aabbccddeeff")
CT = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")


def random_state(rng: random.Random) -> list[list[int]]:
    return bytes_to_state(bytes(rng.randint(0, 255) for _ in range(16)))


class TestSteps:

    def test_shift_rows_layout(self):
        state = bytes_to_state(bytes(range(16)))
        result = state_to_bytes(shift_rows(state))
        assert result == bytes([0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12, 1, 6, 11])

    def test_shift_rows_keeps_row_zero(self):
        state = bytes_to_state(bytes(range(16)))
        assert shift_rows(state)[0] == state[0]

    def test_mix_columns_known_column(self):
        """Column db 13 53 45 mixes to 8e 4d a1 bc."""
        block = bytes.fromhex("db135345") * 4
        result = state_to_bytes(mix_columns(bytes_to_state(block)))
        assert result == bytes.fromhex("8e4da1bc") * 4

    def test_steps_do_not_mutate_input(self):
        state = bytes_to_state(PT)
        before = copy_state(state)
        rk = expand_key(KEY)[1]
        for step in (sub_bytes, shift_rows, mix_columns, inv_sub_bytes, inv_shift_rows, inv_mix_columns):
            step(state)
        add_round_key(state, rk)
        assert state == before

    @pytest.mark.parametrize("seed", range(5))
    def test_inverse_steps(self, seed):
        rng = random.Random(seed)
        state = random_state(rng)
        assert inv_sub_bytes(sub_bytes(state)) == state
        assert inv_shift_rows(shift_rows(state)) == state
        assert inv_mix_columns(mix_columns(state)) == state

    def test_add_round_key_is_involution(self):
        state = bytes_to_state(PT)
        rk = expand_key(KEY)[3]
        assert add_round_key(add_round_key(state, rk), rk) == state


class TestSchedules:

    def test_encrypt_schedule_shape(self):
        assert [r for r, _ in ENCRYPT_SCHEDULE] == list(range(11))
        assert "MixColumns" not in ENCRYPT_SCHEDULE[-1][1]
        assert ENCRYPT_SCHEDULE[0][1] == ["AddRoundKey"]

    def test_decrypt_schedule_shape(self):
        assert [r for r, _ in DECRYPT_SCHEDULE] == list(range(10, -1, -1))
        assert "InvMixColumns" not in DECRYPT_SCHEDULE[0][1]
        assert DECRYPT_SCHEDULE[-1][1] == ["AddRoundKey"]


class TestBlockTransform:

    def test_fips_197_c1_encrypt(self):
        result = encrypt_state(bytes_to_state(PT), expand_key(KEY))
        assert state_to_bytes(result) == CT

    def test_fips_197_c1_decrypt(self):
        result = decrypt_state(bytes_to_state(CT), expand_key(KEY))
        assert state_to_bytes(result) == PT

    @pytest.mark.parametrize("seed", range(10))
    def test_inverse_correctness(self, seed):
        rng = random.Random(seed)
        round_keys = expand_key(bytes(rng.randint(0, 255) for _ in range(16)))
        state = random_state(rng)
        assert decrypt_state(encrypt_state(state, round_keys), round_keys) == state

    def test_wrong_schedule_length_is_fatal(self):
        round_keys = expand_key(KEY)
        with pytest.raises(InvariantViolation):
            encrypt_state(bytes_to_state(PT), round_keys[:10])
        with pytest.raises(InvariantViolation):
            decrypt_state(bytes_to_state(PT), round_keys + round_keys[:1])


class TestTracedTransform:
    """Intermediate states from FIPS-197 Appendix C.1."""

    def test_round_one_states(self):
        tracer = TraceRecorder()
        encrypt_state(bytes_to_state(PT), expand_key(KEY), tracer)
        records = tracer.get_records()

        assert state_to_hex(records[0]["state"]) == "00102030405060708090a0b0c0d0e0f0"
        assert state_to_hex(records[1]["state"]) == "63cab7040953d051cd60e0e7ba70e18c"
        assert state_to_hex(records[2]["state"]) == "6353e08c0960e104cd70b751bacad0e7"
        assert state_to_hex(records[3]["state"]) == "5f72641557f5bc92f7be3b291db9f91a"

    def test_record_count(self):
        tracer = TraceRecorder()
        round_keys = expand_key(KEY)
        encrypt_state(bytes_to_state(PT), round_keys, tracer)
        assert len(tracer.get_records()) == 1 + 9 * 4 + 3

        tracer.clear()
        decrypt_state(bytes_to_state(CT), round_keys, tracer)
        records = tracer.get_records()
        assert len(records) == 3 + 9 * 4 + 1
        assert records[-1]["operation"] == "AddRoundKey"
        assert records[-1]["round"] == 0
        assert state_to_hex(records[-1]["state"]) == PT.hex()
