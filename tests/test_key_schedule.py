"""Tests for AES-128 key expansion."""

import pytest

from aesblock.errors import InvalidKeyLengthError, InvariantViolation
from aesblock.key_schedule import expand_key, rot_word, round_constant, sub_word
from aesblock.utils import state_to_hex


# FIPS-197 Appendix A.1 key
FIPS_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")


class TestExpandKey:

    def test_produces_eleven_round_keys(self):
        round_keys = expand_key(FIPS_KEY)
        assert len(round_keys) == 11
        for rk in round_keys:
            assert len(rk) == 4
            assert all(len(row) == 4 for row in rk)

    def test_round_key_zero_is_the_key(self):
        round_keys = expand_key(FIPS_KEY)
        assert state_to_hex(round_keys[0]) == FIPS_KEY.hex()

    def test_fips_197_appendix_a1_round_1(self):
        """w[4..7] = a0fafe17 88542cb1 23a33939 2a6c7605."""
        round_keys = expand_key(FIPS_KEY)
        assert state_to_hex(round_keys[1]) == "a0fafe1788542cb123a339392a6c7605"

    def test_fips_197_appendix_a1_round_10(self):
        """w[40..43] = d014f9a8 c9ee2589 e13f0cc8 b6630ca6."""
        round_keys = expand_key(FIPS_KEY)
        assert state_to_hex(round_keys[10]) == "d014f9a8c9ee2589e13f0cc8b6630ca6"

    def test_zero_key_round_1(self):
        round_keys = expand_key(bytes(16))
        assert state_to_hex(round_keys[1]) == "62636363" * 4

    def test_schedule_is_immutable(self):
        round_keys = expand_key(FIPS_KEY)
        with pytest.raises(TypeError):
            round_keys[0][0][0] = 0

    def test_deterministic(self):
        assert expand_key(FIPS_KEY) == expand_key(bytearray(FIPS_KEY))

    @pytest.mark.parametrize("length", [0, 15, 17, 24, 32])
    def test_invalid_key_length(self, length):
        with pytest.raises(InvalidKeyLengthError, match="Key must be 16 bytes"):
            expand_key(bytes(length))


class TestHelpers:

    def test_rot_word(self):
        assert rot_word([0x09, 0xcf, 0x4f, 0x3c]) == [0xcf, 0x4f, 0x3c, 0x09]

    def test_sub_word(self):
        """FIPS-197 Appendix A.1, i=4: SubWord(cf4f3c09) = 8a84eb01."""
        assert sub_word([0xcf, 0x4f, 0x3c, 0x09]) == [0x8a, 0x84, 0xeb, 0x01]

    def test_round_constant_range(self):
        assert round_constant(0) == 0x01
        assert round_constant(9) == 0x36
        with pytest.raises(InvariantViolation):
            round_constant(22)
        with pytest.raises(InvariantViolation):
            round_constant(-1)
