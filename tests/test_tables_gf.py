"""Tests for constant tables and GF(2^8) arithmetic."""

import pytest

from aesblock.errors import AESError, InvariantViolation
from aesblock.gf import gf_multiply, gmul, xtime
from aesblock.tables import GMUL_TABLES, INV_MIX_MATRIX, INV_SBOX, MIX_MATRIX, RCON, SBOX


class TestSubstitutionTables:
    """S-box and inverse S-box."""

    def test_sizes(self):
        assert len(SBOX) == 256
        assert len(INV_SBOX) == 256

    def test_sbox_is_permutation(self):
        assert sorted(SBOX) == list(range(256))

    def test_inverse_of_each_other(self):
        for b in range(256):
            assert INV_SBOX[SBOX[b]] == b
            assert SBOX[INV_SBOX[b]] == b

    def test_known_entries(self):
        """Spot-check values from FIPS-197 Figure 7 / Figure 14."""
        assert SBOX[0x00] == 0x63
        assert SBOX[0x53] == 0xed
        assert INV_SBOX[0x63] == 0x00


class TestGaloisTables:
    """Precomputed multiplication tables."""

    def test_multiplicand_set(self):
        assert set(GMUL_TABLES) == {2, 3, 9, 11, 13, 14}

    def test_matrices_only_use_supported_multiplicands(self):
        used = {v for row in MIX_MATRIX for v in row} | {v for row in INV_MIX_MATRIX for v in row}
        assert used <= set(GMUL_TABLES) | {1}

    @pytest.mark.parametrize("n", sorted(GMUL_TABLES))
    def test_table_matches_direct_multiplication(self, n):
        table = GMUL_TABLES[n]
        assert len(table) == 256
        for m in range(256):
            assert table[m] == gf_multiply(n, m), f"{n} * {m:#04x}"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            GMUL_TABLES[5] = bytes(256)


class TestRoundConstants:
    def test_length(self):
        assert len(RCON) == 22

    def test_successive_powers_of_x(self):
        assert RCON[0] == 0x01
        for i in range(len(RCON) - 1):
            assert RCON[i + 1] == xtime(RCON[i])


class TestGmul:
    """Table-driven multiplication."""

    def test_multiply_by_one_is_identity(self):
        for m in range(256):
            assert gmul(1, m) == m

    def test_known_products(self):
        assert gmul(2, 0x57) == 0xae
        assert gmul(3, 0x57) == 0xae ^ 0x57
        assert gmul(0x0e, 0x00) == 0x00

    def test_direct_multiplication_fips_example(self):
        """FIPS-197 section 4.2: {57} * {83} = {c1}, {57} * {13} = {fe}."""
        assert gf_multiply(0x57, 0x83) == 0xc1
        assert gf_multiply(0x57, 0x13) == 0xfe

    def test_xtime(self):
        assert xtime(0x57) == 0xae
        assert xtime(0xae) == 0x47
        assert xtime(0x80) == 0x1b

    @pytest.mark.parametrize("n", [0, 4, 5, 15, 255])
    def test_unsupported_multiplicand_is_fatal(self, n):
        with pytest.raises(InvariantViolation, match="Unsupported"):
            gmul(n, 0x10)

    @pytest.mark.parametrize("m", [-1, 256])
    def test_out_of_range_byte_is_fatal(self, m):
        with pytest.raises(InvariantViolation):
            gmul(2, m)

    def test_invariant_violation_is_not_a_user_error(self):
        assert not issubclass(InvariantViolation, AESError)
