"""Shared request/response models and protocols used across the app."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Protocol

from csv_generator.utils.names import NameTable
from csv_generator.utils.size_helpers import SizeConstraint

DEFAULT_BATCH_SIZE = 10_000
PROGRESS_INTERVAL = 100_000


class ProgressReporter(Protocol):  # pylint: disable=too-few-public-methods
    """Callable used to surface progress updates to the CLI or UI layer."""

    def __call__(self, message: str, percent_complete: float | None = None) -> None:
        ...


class FileGenerator(Protocol):  # pylint: disable=too-few-public-methods
    """Interface the CSV writer loop implements."""

    def generate(
        self, request: "CsvGenerationRequest", progress: ProgressReporter
    ) -> "CsvGenerationResult":
        """Generate the requested file."""
        raise NotImplementedError


CancelCallback = Callable[[], bool]


@dataclass(frozen=True)
class CsvGenerationRequest:  # pylint: disable=too-few-public-methods
    """Value object containing user-supplied generation parameters."""

    destination: Path
    size_constraint: SizeConstraint
    name_table: NameTable = NameTable()
    batch_size: int = DEFAULT_BATCH_SIZE
    progress_interval: int = PROGRESS_INTERVAL
    seed: int | str | None = None
    size_label: str | None = None
    cancel_requested: CancelCallback | None = None


@dataclass(frozen=True)
class CsvGenerationResult:
    """Outcome of a completed generation run."""

    destination: Path
    rows_written: int
    target_bytes: int
    final_size_bytes: int

    @property
    def overshoot_bytes(self) -> int:
        """Bytes written beyond the requested target."""
        return max(0, self.final_size_bytes - self.target_bytes)
