"""Command-line entry point for generating large CSV datasets."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from csv_generator.models import (
    DEFAULT_BATCH_SIZE,
    PROGRESS_INTERVAL,
    CsvGenerationRequest,
    CsvGenerationResult,
)
from csv_generator.services.exceptions import GenerationError
from csv_generator.services.generation_service import create_default_service
from csv_generator.utils.names import NameTable, load_name_table
from csv_generator.utils.size_helpers import SizeConstraint, SizeValue, format_gib

DEFAULT_OUTPUT = "large_data.csv"
DEFAULT_SIZE_GB = 10.0
SIZE_UNITS = ("B", "KB", "MB", "GB", "KiB", "MiB", "GiB")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-generator",
        description="Generate an id,name,age CSV file until it reaches a target size.",
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="destination CSV path")
    parser.add_argument(
        "-s",
        "--size",
        type=_non_negative_float,
        default=DEFAULT_SIZE_GB,
        help="target file size (default: %(default)s)",
    )
    parser.add_argument(
        "-u", "--unit", choices=SIZE_UNITS, default="GB", help="unit for --size (binary multiples)"
    )
    parser.add_argument(
        "--names-file", type=Path, help="name list (.txt, .csv, .xlsx or .xlsm)"
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=DEFAULT_BATCH_SIZE,
        help="rows written between size checks (default: %(default)s)",
    )
    parser.add_argument(
        "--progress-interval",
        type=_positive_int,
        default=PROGRESS_INTERVAL,
        help="rows between progress lines (default: %(default)s)",
    )
    parser.add_argument("--seed", help="seed for reproducible output")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="print only the completion summary"
    )
    return parser


def _console_reporter(quiet: bool):
    def reporter(message: str, percent_complete: float | None = None) -> None:
        del percent_complete
        if not quiet:
            print(message, flush=True)

    return reporter


def _print_summary(result: CsvGenerationResult) -> None:
    print(f"Successfully generated {result.destination}")
    print(f"Total rows generated: {result.rows_written:,}")
    print(f"Final file size: {format_gib(result.final_size_bytes)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator and return the process exit status."""
    args = build_parser().parse_args(argv)
    size_value = SizeValue(amount=args.size, unit=args.unit)

    try:
        name_table = load_name_table(args.names_file) if args.names_file else NameTable()
        request = CsvGenerationRequest(
            destination=Path(args.output),
            size_constraint=SizeConstraint(target_bytes=size_value.to_bytes()),
            name_table=name_table,
            batch_size=args.batch_size,
            progress_interval=args.progress_interval,
            seed=args.seed,
            size_label=size_value.describe(),
        )
        result = create_default_service().generate(request, _console_reporter(args.quiet))
    except (GenerationError, ValueError, OSError) as exc:
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1
    if args.quiet:
        _print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
