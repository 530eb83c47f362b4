"""High level orchestration for file generation."""

from __future__ import annotations

import csv

from csv_generator.generators.delimited import CsvFileGenerator
from csv_generator.models import (
    CsvGenerationRequest,
    CsvGenerationResult,
    FileGenerator,
    ProgressReporter,
)
from csv_generator.services.exceptions import GenerationError


class GenerationService:  # pylint: disable=too-few-public-methods
    """Facade that validates requests and reports failures as ``GenerationError``."""

    def __init__(self, generator: FileGenerator):
        self._generator = generator

    def generate(
        self, request: CsvGenerationRequest, progress: ProgressReporter
    ) -> CsvGenerationResult:
        """Validate the request and run the generator."""
        self.validate(request)
        try:
            return self._generator.generate(request, progress)
        except (OSError, csv.Error, ValueError) as exc:
            raise GenerationError(str(exc)) from exc

    @staticmethod
    def validate(request: CsvGenerationRequest) -> None:
        """Reject requests that cannot be generated before touching the filesystem."""
        if request.size_constraint.target_bytes < 0:
            raise ValueError("Target size must not be negative.")
        if request.batch_size < 1:
            raise ValueError("Batch size must be at least one row.")
        if request.progress_interval < 1:
            raise ValueError("Progress interval must be at least one row.")

        destination_suffix = request.destination.suffix.lower().lstrip(".")
        if destination_suffix and destination_suffix != "csv":
            raise ValueError(
                f"Destination extension '.{destination_suffix}' does not match "
                "requested file type 'csv'."
            )


def create_default_service() -> GenerationService:
    """Factory providing a GenerationService backed by the CSV generator."""
    return GenerationService(CsvFileGenerator())
