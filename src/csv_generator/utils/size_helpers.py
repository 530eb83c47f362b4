"""Helpers for working with byte sizes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


BYTE = 1
KIB = 1024 * BYTE
MIB = 1024 * KIB
GIB = 1024 * MIB


@dataclass(frozen=True)
class SizeValue:
    """Represents a human-friendly size and provides conversion helpers."""

    amount: float
    unit: str

    def to_bytes(self) -> int:
        """Convert the human-friendly size into raw bytes (binary multiples)."""
        normalized = self.unit.lower()
        if normalized in {"b", "byte", "bytes"}:
            return int(self.amount)
        if normalized in {"kb", "kib"}:
            return int(self.amount * KIB)
        if normalized in {"mb", "mib"}:
            return int(self.amount * MIB)
        if normalized in {"gb", "gib"}:
            return int(self.amount * GIB)
        raise ValueError(f"Unsupported size unit: {self.unit}")

    def describe(self) -> str:
        """Render the size the way it was requested, e.g. ``10GB``."""
        amount = int(self.amount) if float(self.amount).is_integer() else self.amount
        return f"{amount}{self.unit}"


@dataclass(frozen=True)
class SizeConstraint:
    """Byte threshold a generated file must reach before generation stops."""

    target_bytes: int


class SizeTracker:
    """Tracks the on-disk size of a file to determine when the target has been met."""

    def __init__(self, constraint: SizeConstraint, destination: Path) -> None:
        self._constraint = constraint
        self._destination = destination
        self._bytes_observed = 0

    @property
    def target_bytes(self) -> int:
        """Return the exact byte threshold configured for the file."""
        return self._constraint.target_bytes

    def refresh(self) -> int:
        """Query the filesystem for the current size of the destination.

        Buffered output must be flushed first or the result lags behind
        what has been written.
        """
        self._bytes_observed = os.stat(self._destination).st_size
        return self._bytes_observed

    def should_continue(self) -> bool:
        """Return True while additional bytes are needed to reach the target."""
        return self._bytes_observed < self.target_bytes

    def percent_complete(self) -> float:
        """Return a user-friendly completion percentage for progress bars."""
        if self.target_bytes == 0:
            return 100.0
        return min(100.0, (self._bytes_observed / self.target_bytes) * 100)

    @property
    def observed_bytes(self) -> int:
        """Expose the size recorded by the last filesystem query."""
        return self._bytes_observed


def format_gib(byte_count: int) -> str:
    """Render a byte count in gibibytes with two decimals, e.g. ``1.50GB``."""
    return f"{byte_count / GIB:.2f}GB"
