"""Tests for 0x80 marker padding and block splitting."""

import pytest

from aesblock.errors import InvalidCiphertextLengthError
from aesblock.framing import PAD_MARKER, depad, join_blocks, pad, split_blocks


class TestPad:

    @pytest.mark.parametrize("length", [0, 1, 14, 15, 16, 17, 31, 32, 100])
    def test_aligned_to_block_size(self, length):
        padded = pad(b"a" * length)
        assert len(padded) % 16 == 0
        assert len(padded) > length
        assert padded[length] == PAD_MARKER
        assert padded[length + 1:] == bytes(len(padded) - length - 1)

    def test_empty_message_is_one_block(self):
        assert pad(b"") == b"\x80" + bytes(15)

    def test_fifteen_bytes_fill_exactly_one_block(self):
        assert pad(b"x" * 15) == b"x" * 15 + b"\x80"

    def test_aligned_message_gains_full_block(self):
        assert pad(b"y" * 16) == b"y" * 16 + b"\x80" + bytes(15)


class TestDepad:

    def test_strips_marker_and_zeros(self):
        assert depad(b"hello\x80" + bytes(10)) == b"hello"

    def test_no_marker_returns_input(self):
        data = b"no marker here"
        assert depad(data) == data

    def test_truncates_at_first_marker(self):
        """Known ambiguity: an embedded 0x80 cuts the message short."""
        assert depad(pad(b"abc\x80def")) == b"abc"

    def test_inverse_of_pad_without_marker(self):
        for length in range(40):
            data = bytes(i % 0x7f for i in range(length))
            assert depad(pad(data)) == data


class TestSplitJoin:

    def test_split(self):
        data = bytes(range(48))
        blocks = split_blocks(data)
        assert blocks == [bytes(range(0, 16)), bytes(range(16, 32)), bytes(range(32, 48))]

    def test_split_empty(self):
        assert split_blocks(b"") == []

    @pytest.mark.parametrize("length", [1, 15, 17, 33])
    def test_split_rejects_unaligned(self, length):
        with pytest.raises(InvalidCiphertextLengthError) as exc_info:
            split_blocks(bytes(length))
        assert exc_info.value.length == length

    def test_join_preserves_order(self):
        blocks = [b"a" * 16, b"b" * 16, b"c" * 16]
        assert join_blocks(blocks) == b"a" * 16 + b"b" * 16 + b"c" * 16
