"""
Trace recording for the AES block pipeline.

TraceRecorder collects one entry per pipeline step. When a trace file is
attached, every entry is also written as a JSON Lines record with states
rendered as 32-char hex (column-major). When verbose, a compact line per
step is printed to stdout.
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from .utils import state_to_hex

_STATE_FIELDS = ("state", "round_key")


class TraceRecorder:
    """
    Records and outputs traces of AES block transforms.
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry (round, operation, state, optional round_key)."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, record: dict[str, Any]) -> dict[str, Any]:
        out = {}
        for key, value in record.items():
            if key in _STATE_FIELDS:
                out[key] = state_to_hex(value)
            elif isinstance(value, bytes):
                out[key] = value.hex()
            else:
                out[key] = value
        return out

    def _print_verbose(self, record: dict[str, Any]) -> None:
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")

        if "state" in record:
            state_hex = state_to_hex(record["state"])
            print(f"R{round_num:>2}  {operation:14s} STATE:{state_hex}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()
