"""CSV file generator that grows a file until it reaches a target size."""

from __future__ import annotations

import csv
from itertools import islice
from pathlib import Path
from typing import TextIO

from csv_generator.generators.base import RowContentGenerator
from csv_generator.models import (
    CsvGenerationRequest,
    CsvGenerationResult,
    FileGenerator,
    ProgressReporter,
)
from csv_generator.services.exceptions import GenerationCancelledError
from csv_generator.utils.rows import PersonRowGenerator
from csv_generator.utils.size_helpers import SizeTracker, format_gib

DEFAULT_BUFFER_BYTES = 4 * 1024 * 1024  # 4 MiB buffers balance memory vs. throughput


class CsvFileGenerator(FileGenerator):  # pylint: disable=too-few-public-methods
    """Write ``id,name,age`` rows in batches until the file reaches its target size.

    The file size is only checked after a whole batch has been flushed, so the
    result overshoots the target by less than one batch worth of rows. At least
    one batch is always written, even for a zero-byte target.
    """

    def __init__(self, buffer_bytes: int = DEFAULT_BUFFER_BYTES) -> None:
        self._buffer_bytes = buffer_bytes

    def generate(
        self, request: CsvGenerationRequest, progress: ProgressReporter
    ) -> CsvGenerationResult:
        destination = Path(request.destination)
        destination.parent.mkdir(parents=True, exist_ok=True)

        row_generator: RowContentGenerator = PersonRowGenerator(
            request.name_table, seed=request.seed
        )
        tracker = SizeTracker(request.size_constraint, destination)
        size_label = request.size_label or format_gib(tracker.target_bytes)
        rows_written = 0

        progress(
            f"Starting to generate a {size_label} CSV file at {destination}...",
            percent_complete=0.0,
        )
        progress(
            "This process will take a significant amount of time and disk space.",
            percent_complete=0.0,
        )

        with destination.open(
            "w", encoding="utf-8", newline="", buffering=self._buffer_bytes
        ) as handle:
            writer = self._writer_for(handle)
            writer.writerow(row_generator.header_row())
            rows = iter(row_generator.data_rows())

            while True:
                for row in islice(rows, request.batch_size):
                    writer.writerow(row)
                    rows_written += 1

                handle.flush()
                tracker.refresh()

                if rows_written % request.progress_interval == 0:
                    progress(
                        f"Generated {rows_written:,} rows. "
                        f"Current file size: {format_gib(tracker.observed_bytes)}",
                        percent_complete=tracker.percent_complete(),
                    )
                if not tracker.should_continue():
                    break
                if request.cancel_requested and request.cancel_requested():
                    raise GenerationCancelledError("Generation cancelled by user.")

        result = CsvGenerationResult(
            destination=destination,
            rows_written=rows_written,
            target_bytes=tracker.target_bytes,
            final_size_bytes=tracker.refresh(),
        )
        self._emit_completion(result, progress)
        return result

    @staticmethod
    def _writer_for(handle: TextIO):
        # QUOTE_MINIMAL quotes fields holding the delimiter, quotechar or a newline
        return csv.writer(handle, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)

    @staticmethod
    def _emit_completion(result: CsvGenerationResult, progress: ProgressReporter) -> None:
        progress("-" * 50, percent_complete=100.0)
        progress(f"Successfully generated {result.destination}", percent_complete=100.0)
        progress(f"Total rows generated: {result.rows_written:,}", percent_complete=100.0)
        progress(
            f"Final file size: {format_gib(result.final_size_bytes)} "
            f"({result.final_size_bytes:,} bytes)",
            percent_complete=100.0,
        )
        progress("-" * 50, percent_complete=100.0)
