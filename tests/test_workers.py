from typing import Any

import pytest

QtCore = pytest.importorskip("PyQt6.QtCore")

from csv_generator.models import CsvGenerationRequest  # noqa: E402
from csv_generator.services.generation_service import create_default_service  # noqa: E402
from csv_generator.ui.workers import GenerationWorker  # noqa: E402
from csv_generator.utils.size_helpers import SizeConstraint  # noqa: E402


@pytest.fixture(name="qt_app")
def fixture_qt_app():
    return QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])


def _run_worker(request: CsvGenerationRequest) -> list[Any]:
    outcomes: list[Any] = []
    worker = GenerationWorker(create_default_service(), request)
    worker.finished_successfully.connect(lambda rows, size: outcomes.append(("done", rows)))
    worker.cancelled.connect(lambda: outcomes.append(("cancelled",)))
    worker.errored.connect(lambda message: outcomes.append(("error", message)))
    worker.run()
    return outcomes


def test_worker_reports_success_when_cancel_arrives_after_last_batch(tmp_path, qt_app) -> None:
    del qt_app
    request = CsvGenerationRequest(
        destination=tmp_path / "done.csv",
        size_constraint=SizeConstraint(target_bytes=1),
        batch_size=20,
        cancel_requested=lambda: True,
    )

    assert _run_worker(request) == [("done", 20)]


def test_worker_reports_cancellation_between_batches(tmp_path, qt_app) -> None:
    del qt_app
    request = CsvGenerationRequest(
        destination=tmp_path / "cancelled.csv",
        size_constraint=SizeConstraint(target_bytes=10**9),
        batch_size=20,
        cancel_requested=lambda: True,
    )

    assert _run_worker(request) == [("cancelled",)]
    assert len((tmp_path / "cancelled.csv").read_text(encoding="utf-8").splitlines()) == 21
