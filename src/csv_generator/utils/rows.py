"""Reusable helpers for generating row content."""

from __future__ import annotations

import hashlib
import random
from typing import Iterator, Sequence

from csv_generator.utils.names import NameTable

HEADERS: tuple[str, ...] = ("id", "name", "age")
ID_SOURCE_BYTES = 32
MIN_AGE = 18
MAX_AGE = 60


class PersonRowGenerator:
    """Generates ``id,name,age`` rows from a shared random source.

    Rows are independent of each other. Without a seed the random source is
    backed by OS entropy; with a seed the output is reproducible.
    """

    def __init__(
        self, name_table: NameTable | None = None, *, seed: int | str | None = None
    ) -> None:
        self._name_table = name_table if name_table is not None else NameTable()
        if seed is None:
            self._rng: random.Random = random.SystemRandom()
        else:
            self._rng = random.Random(seed)

    def header_row(self) -> Sequence[str]:
        """Return the header row to write."""
        return HEADERS

    def data_rows(self) -> Iterator[Sequence[str]]:
        """Yield rows indefinitely."""
        while True:
            yield self.make_row()

    def make_row(self) -> Sequence[str]:
        """Build a single ``(id, name, age)`` row."""
        return (self._make_id(), self._name_table.choose(self._rng), self._make_age())

    def _make_id(self) -> str:
        # sha256 over random bytes: a fixed-width 64 hex char token, not a security measure
        random_bytes = self._rng.randbytes(ID_SOURCE_BYTES)
        return hashlib.sha256(random_bytes).hexdigest()

    def _make_age(self) -> str:
        return f"{self._rng.randint(MIN_AGE, MAX_AGE):02d}"
