"""
Trace recording and pretty printing for AES block operations.

Contains:
- TraceRecorder: JSON Lines trace + compact verbose stdout
- print_header / print_result: shared formatting helpers
"""

import json
from typing import Any, TextIO

import click

from .utils import State, format_state_words, state_to_hex


def _compute_delta(old_state: State | None, new_state: State, max_show: int = 8) -> str:
    """Compute byte-wise delta between two states."""
    if old_state is None:
        return "(initial)"

    changes: list[str] = []
    for col in range(4):
        for row in range(4):
            idx = col * 4 + row
            ov = old_state[row][col]
            nv = new_state[row][col]
            if ov != nv:
                changes.append(f"b[{idx:d}]={ov:02x}→{nv:02x}")

    if not changes:
        return "(no change)"
    if len(changes) <= max_show:
        return " ".join(changes)
    return " ".join(changes[:max_show]) + f" +{len(changes) - max_show} more"


class TraceRecorder:
    """
    Records the state after every round transformation.

    Supports:
    - JSON Lines file output  (when trace_file is set)
    - Compact verbose stdout  (when verbose is set)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None,
                 show_delta: bool = False):
        self.verbose = verbose
        self.trace_file = trace_file
        self.show_delta = show_delta
        self._records: list[dict[str, Any]] = []
        self._prev_state: State | None = None

    def record(self, **kwargs) -> None:
        """Record a trace entry (keys: round, operation, state, round_key...)."""
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
            if "state" in obj:
                obj = {**obj, "state": state_to_hex(obj["state"])}
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, bytearray)):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        """Compact verbose line: round, operation, state words."""
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")

        if "state" not in record:
            return

        state = record["state"]
        line = f"R{round_num:02d}  {operation:14s} STATE:{format_state_words(state)}"
        if self.show_delta:
            line += f"  Δ:{_compute_delta(self._prev_state, state)}"
        click.echo(line)
        self._prev_state = state

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()
        self._prev_state = None


def print_header(title: str) -> None:
    """Print a section header."""
    click.echo(f"\n{'#'*70}")
    click.echo(f"# {title}")
    click.echo(f"{'#'*70}")


def print_result(output_hex: str, label: str = "Ciphertext",
                 passed: bool | None = None) -> None:
    """Print the final block result, with reference verification if known."""
    click.echo(f"\n{'='*70}")
    click.echo("RESULT")
    click.echo(f"{'='*70}")
    click.echo(f"{label}: {output_hex}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        click.echo(f"Verification: {marker} {status}")
    click.echo(f"{'='*70}")
