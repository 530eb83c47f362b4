"""Candidate name tables used to populate the ``name`` column."""

from __future__ import annotations

import csv
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

# Short English first names used when no name file is supplied.
DEFAULT_NAMES: tuple[str, ...] = (
    "Liam", "Noah", "Jack", "Levi", "Owen", "John", "Leo", "Luke", "Ezra", "Luca",
    "Alex", "Alan", "Ben", "Kyle", "Kurt", "Lou", "Matt", "Ryan", "Mia", "Elias",
    "Mila", "Nova", "Axel", "Leon", "Amara", "Finn", "Molly", "Brian", "Dante",
    "Rhys", "Thea", "Otis", "Rohan", "Anne", "Britt", "Brooks", "Cash", "Dane",
    "Eve", "Gem", "Huck", "Ivy", "Lael", "Mack", "Maeve", "Nell", "Onyx", "Pace",
    "Quinn", "Reed", "Scout", "Taft", "Ula", "Van", "Wade", "West",
)

TEXT_SUFFIXES = (".txt",)
CSV_SUFFIXES = (".csv",)
EXCEL_SUFFIXES = (".xlsx", ".xlsm")


@dataclass(frozen=True)
class NameTable:
    """Immutable, ordered sequence of candidate names."""

    names: tuple[str, ...] = DEFAULT_NAMES

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def choose(self, rng: random.Random) -> str:
        """Pick one name uniformly at random, or ``""`` when the table is empty."""
        if not self.names:
            return ""
        return rng.choice(self.names)

    @classmethod
    def from_iterable(cls, names: Iterable[str]) -> "NameTable":
        """Build a table from raw values, dropping blanks and surrounding whitespace."""
        cleaned = (str(name).strip() for name in names if name is not None)
        return cls(names=tuple(name for name in cleaned if name))


def load_name_table(path: Path | str) -> NameTable:
    """Load a name table from a text, CSV or Excel file.

    Text files hold one name per line. CSV and Excel files contribute their
    first column; a leading ``name`` header cell is skipped.
    """
    source = Path(path)
    suffix = source.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        with source.open("r", encoding="utf-8") as handle:
            return NameTable.from_iterable(handle.read().splitlines())
    if suffix in CSV_SUFFIXES:
        with source.open("r", encoding="utf-8", newline="") as handle:
            values = [row[0] for row in csv.reader(handle) if row]
        return NameTable.from_iterable(_skip_header(values))
    if suffix in EXCEL_SUFFIXES:
        return NameTable.from_iterable(_skip_header(_read_first_excel_column(source)))
    raise ValueError(f"Unsupported name file type: '{source.suffix or source.name}'")


def _read_first_excel_column(source: Path) -> list[str]:
    """Read the first column of the first worksheet using OpenPyXL read-only mode."""
    try:
        workbook = load_workbook(source, read_only=True, data_only=True)
    except (BadZipFile, KeyError, InvalidFileException) as exc:
        raise ValueError(f"Unreadable name file '{source}': {exc}") from exc
    try:
        sheet = workbook.worksheets[0]
        return [
            "" if row[0] is None else str(row[0])
            for row in sheet.iter_rows(max_col=1, values_only=True)
            if row
        ]
    finally:
        workbook.close()


def _skip_header(values: list[str]) -> list[str]:
    if values and values[0].strip().lower() == "name":
        return values[1:]
    return values
