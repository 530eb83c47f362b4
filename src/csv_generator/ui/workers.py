"""Background worker objects for long-running tasks."""

from __future__ import annotations

try:
    from PyQt6.QtCore import QThread, pyqtSignal
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 must be installed to use background workers.") from exc

from csv_generator.models import CsvGenerationRequest
from csv_generator.services.exceptions import GenerationCancelledError
from csv_generator.services.generation_service import GenerationService


class GenerationWorker(QThread):
    """Runs CSV generation off the GUI thread.

    Cancellation is polled by the generator between batches through the
    request's ``cancel_requested`` callback; the worker only relays outcomes.
    """

    progress = pyqtSignal(str, float)
    finished_successfully = pyqtSignal(int, int)
    cancelled = pyqtSignal()
    errored = pyqtSignal(str)

    def __init__(
        self,
        service: GenerationService,
        request: CsvGenerationRequest,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._service = service
        self._request = request

    def run(self) -> None:
        try:
            result = self._service.generate(self._request, self._relay_progress)
        except GenerationCancelledError:
            self.cancelled.emit()
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self.errored.emit(str(exc))
        else:
            self.finished_successfully.emit(result.rows_written, result.final_size_bytes)

    def _relay_progress(self, message: str, percent_complete: float | None = None) -> None:
        self.progress.emit(message, -1.0 if percent_complete is None else percent_complete)
