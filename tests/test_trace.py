"""
Tests for the trace recorder.

Verifies that:
- Ciphertext is unchanged with tracing enabled
- Verbose output has one line per step
- JSON Lines output renders states as hex
"""

import contextlib
import io
import json

from aesblock.cipher import AESCipher
from aesblock.trace import TraceRecorder
from aesblock.utils import bytes_to_state


KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
PT = bytes.fromhex("00112233445566778899aabbccddeeff")
CT = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")


class TestTraceRecorder:

    def _run_verbose(self):
        tracer = TraceRecorder(verbose=True)
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            ct = AESCipher(KEY).encrypt_block(PT, tracer)
        return ct, tracer, buf.getvalue()

    def test_ciphertext_unchanged(self):
        ct, _, _ = self._run_verbose()
        assert ct == CT

    def test_one_line_per_step(self):
        _, tracer, output = self._run_verbose()
        lines = output.splitlines()
        assert len(lines) == len(tracer.get_records()) == 40
        assert lines[0].startswith("R 0  AddRoundKey")
        assert lines[-1].endswith(f"STATE:{CT.hex()}")

    def test_final_round_has_no_mix_columns(self):
        _, tracer, _ = self._run_verbose()
        final_ops = [r["operation"] for r in tracer.get_records() if r["round"] == 10]
        assert final_ops == ["SubBytes", "ShiftRows", "AddRoundKey"]

    def test_silent_when_not_verbose(self, capsys):
        tracer = TraceRecorder()
        AESCipher(KEY).encrypt_block(PT, tracer)
        assert capsys.readouterr().out == ""
        assert len(tracer.get_records()) == 40

    def test_jsonl_output(self):
        buf = io.StringIO()
        tracer = TraceRecorder(trace_file=buf)
        tracer.record(round=3, operation="ShiftRows", state=bytes_to_state(PT), note=b"\x01\x02")
        record = json.loads(buf.getvalue())
        assert record == {"round": 3, "operation": "ShiftRows", "state": PT.hex(), "note": "0102"}

    def test_clear(self):
        tracer = TraceRecorder()
        tracer.record(round=0, operation="AddRoundKey", state=bytes_to_state(PT))
        tracer.clear()
        assert tracer.get_records() == []
