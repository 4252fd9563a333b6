"""
Trace recording and pretty printing for cipher runs.

Contains:
- TraceRecorder: JSON Lines trace + compact verbose stdout, one entry
  per round transformation
- print_header / print_result: shared formatting helpers for the CLI
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from .utils import state_to_hex


class TraceRecorder:
    """
    Records and outputs traces of block cipher execution.

    Supports:
    - JSON Lines file output  (when trace_file is set)
    - Compact verbose stdout  (when verbose is set)

    Records are always kept in memory and can be inspected with
    get_records().
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            # states are lists of byte values
            if obj and all(isinstance(v, int) for v in obj):
                return state_to_hex(obj)
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, bytes):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        """Compact verbose line."""
        direction = record.get("direction", "?")
        round_num = record.get("round")
        operation = record.get("operation", "unknown")
        round_str = "-" if round_num is None else str(round_num)

        if "state" in record:
            state_hex = state_to_hex(record["state"])
            print(f"{direction[:3].upper()} R{round_str:<2} {operation:16s} STATE:{state_hex}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, output_hex: str,
                 op_counts: dict[str, int] | None = None,
                 passed: bool | None = None) -> None:
    """Print final cipher result."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")

    if op_counts:
        for name, count in op_counts.items():
            print(f"{name}: {count}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
