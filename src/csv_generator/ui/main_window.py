"""Main application window for the CSV Generator."""

from __future__ import annotations

from pathlib import Path
from shutil import disk_usage

try:
    from PyQt6.QtCore import QSettings
    from PyQt6.QtWidgets import (
        QComboBox,
        QDoubleSpinBox,
        QFileDialog,
        QFormLayout,
        QHBoxLayout,
        QLabel,
        QLineEdit,
        QMainWindow,
        QMessageBox,
        QPlainTextEdit,
        QProgressBar,
        QPushButton,
        QSizePolicy,
        QSpinBox,
        QWidget,
    )
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 must be installed to run the GUI components.") from exc

from csv_generator.models import DEFAULT_BATCH_SIZE, CsvGenerationRequest
from csv_generator.services.generation_service import GenerationService, create_default_service
from csv_generator.ui.workers import GenerationWorker
from csv_generator.utils.names import NameTable, load_name_table
from csv_generator.utils.size_helpers import SizeConstraint, SizeValue

NAME_FILE_FILTER = "Name lists (*.txt *.csv *.xlsx *.xlsm)"


class MainWindow(QMainWindow):
    """PyQt6 main window responsible for coordinating user interactions."""

    # pylint: disable=too-many-instance-attributes,too-few-public-methods

    def __init__(self, service: GenerationService | None = None) -> None:
        super().__init__()
        self.setWindowTitle("CSV Generator")
        self.resize(640, 480)

        self._service = service or create_default_service()
        self._settings = QSettings("CsvGenerator", "GeneratorApp")
        self._worker: GenerationWorker | None = None
        self._cancel_flag = False

        self._setup_ui()
        self._connect_signals()
        self._load_settings()

    def _setup_ui(self) -> None:  # pylint: disable=too-many-statements
        container = QWidget(self)
        layout = QFormLayout()
        layout.setFieldGrowthPolicy(QFormLayout.FieldGrowthPolicy.AllNonFixedFieldsGrow)
        container.setLayout(layout)

        path_layout = QHBoxLayout()
        self.path_edit = QLineEdit()
        self.path_edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.browse_button = QPushButton("Browse…")
        path_layout.addWidget(self.path_edit)
        path_layout.addWidget(self.browse_button)
        layout.addRow(QLabel("Output Path"), path_layout)

        size_layout = QHBoxLayout()
        self.size_spin = QDoubleSpinBox()
        self.size_spin.setRange(0.0, 100_000.0)
        self.size_spin.setValue(10.0)
        self.size_spin.setDecimals(1)
        self.unit_combo = QComboBox()
        self.unit_combo.addItems(["MB", "GB"])
        self.unit_combo.setCurrentText("GB")
        size_layout.addWidget(self.size_spin)
        size_layout.addWidget(self.unit_combo)
        layout.addRow(QLabel("Target Size"), size_layout)

        names_layout = QHBoxLayout()
        self.names_edit = QLineEdit()
        self.names_edit.setPlaceholderText("Built-in first names")
        self.names_button = QPushButton("Browse…")
        names_layout.addWidget(self.names_edit)
        names_layout.addWidget(self.names_button)
        layout.addRow(QLabel("Name List"), names_layout)

        self.batch_spin = QSpinBox()
        self.batch_spin.setRange(1, 1_000_000)
        self.batch_spin.setValue(DEFAULT_BATCH_SIZE)
        layout.addRow(QLabel("Batch Size"), self.batch_spin)

        self.seed_edit = QLineEdit()
        self.seed_edit.setPlaceholderText("Leave blank for random output")
        layout.addRow(QLabel("Seed"), self.seed_edit)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        layout.addRow(QLabel("Progress"), self.progress_bar)

        self.log_output = QPlainTextEdit()
        self.log_output.setReadOnly(True)
        self.log_output.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.log_output.setFixedHeight(180)
        layout.addRow(QLabel("Activity Log"), self.log_output)

        button_layout = QHBoxLayout()
        self.generate_button = QPushButton("Generate")
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setEnabled(False)
        button_layout.addWidget(self.generate_button)
        button_layout.addWidget(self.cancel_button)
        layout.addRow(button_layout)

        self._input_widgets = [
            self.path_edit,
            self.browse_button,
            self.size_spin,
            self.unit_combo,
            self.names_edit,
            self.names_button,
            self.batch_spin,
            self.seed_edit,
        ]

        self.setCentralWidget(container)

    def _connect_signals(self) -> None:
        self.browse_button.clicked.connect(self._browse_for_path)
        self.names_button.clicked.connect(self._browse_for_names)
        self.generate_button.clicked.connect(self._on_generate_clicked)
        self.cancel_button.clicked.connect(self._on_cancel_clicked)

    def _browse_for_path(self) -> None:
        suggested_path = self.path_edit.text().strip() or str(Path.home() / "large_data.csv")
        filename, _selected_filter = QFileDialog.getSaveFileName(
            self,
            caption="Select Output File",
            directory=suggested_path,
            filter="Comma-separated (*.csv)",
        )
        if filename:
            self.path_edit.setText(filename)

    def _browse_for_names(self) -> None:
        filename, _selected_filter = QFileDialog.getOpenFileName(
            self,
            caption="Select Name List",
            directory=self.names_edit.text().strip() or str(Path.home()),
            filter=NAME_FILE_FILTER,
        )
        if filename:
            self.names_edit.setText(filename)

    def _on_generate_clicked(self) -> None:
        if self._worker and self._worker.isRunning():
            QMessageBox.warning(
                self,
                "Generation in progress",
                "A generation job is already running.",
            )
            return

        self._cancel_flag = False
        try:
            request = self._build_request()
        except (ValueError, OSError) as exc:
            QMessageBox.warning(self, "Invalid input", str(exc))
            return

        self.log_output.clear()
        self._set_running_state(True)

        self._worker = GenerationWorker(self._service, request, parent=self)
        self._worker.progress.connect(self._handle_progress)
        self._worker.finished_successfully.connect(self._handle_success)
        self._worker.cancelled.connect(self._handle_cancelled)
        self._worker.errored.connect(self._handle_error)
        self._worker.start()
        self._save_settings()

    def _on_cancel_clicked(self) -> None:
        if self._worker and self._worker.isRunning():
            self._append_log("Cancelling generation…")
            self._cancel_flag = True
            self.cancel_button.setEnabled(False)

    def _build_request(self) -> CsvGenerationRequest:
        path_str = self.path_edit.text().strip()
        if not path_str:
            raise ValueError("Please choose a destination file path.")
        destination = Path(path_str)
        if destination.suffix.lower() != ".csv":
            destination = destination.with_suffix(".csv")
            self.path_edit.setText(str(destination))

        size_value = SizeValue(amount=self.size_spin.value(), unit=self.unit_combo.currentText())
        target_bytes = size_value.to_bytes()
        self._ensure_disk_space(destination, target_bytes)

        names_path = self.names_edit.text().strip()
        name_table = load_name_table(names_path) if names_path else NameTable()
        seed = self.seed_edit.text().strip() or None

        return CsvGenerationRequest(
            destination=destination,
            size_constraint=SizeConstraint(target_bytes=target_bytes),
            name_table=name_table,
            batch_size=int(self.batch_spin.value()),
            seed=seed,
            size_label=size_value.describe(),
            cancel_requested=lambda: self._cancel_flag,
        )

    def _set_running_state(self, running: bool) -> None:
        for widget in self._input_widgets:
            widget.setEnabled(not running)
        self.generate_button.setEnabled(not running)
        self.cancel_button.setEnabled(running)
        self.progress_bar.setValue(0)

    def _append_log(self, message: str) -> None:
        self.log_output.appendPlainText(message)
        scrollbar = self.log_output.verticalScrollBar()
        scrollbar.setValue(scrollbar.maximum())

    def _handle_progress(self, message: str, percent: float) -> None:
        self._append_log(message)
        if percent >= 0:
            self.progress_bar.setValue(int(min(percent, 100.0)))

    def _handle_success(self, rows_written: int, final_size: int) -> None:
        self.progress_bar.setValue(100)
        self._set_running_state(False)
        self._cancel_flag = False
        QMessageBox.information(
            self,
            "Success",
            f"Wrote {rows_written:,} rows ({final_size:,} bytes).",
        )

    def _handle_cancelled(self) -> None:
        self._append_log("Generation cancelled; the partial file was left on disk.")
        self._set_running_state(False)
        self._cancel_flag = False
        QMessageBox.information(self, "Cancelled", "Generation was cancelled.")

    def _handle_error(self, message: str) -> None:
        self._append_log(f"An error occurred: {message}")
        self._set_running_state(False)
        self._cancel_flag = False
        QMessageBox.critical(self, "Error", f"Failed to generate file:\n{message}")

    def _load_settings(self) -> None:
        """Restore the last-used configuration from persistent storage."""
        self.path_edit.setText(self._settings.value("output_path", "", type=str))
        self.names_edit.setText(self._settings.value("names_path", "", type=str))
        self.seed_edit.setText(self._settings.value("seed", "", type=str))

        stored_size = self._settings.value("target_size", 10.0, type=float)
        if stored_size >= 0:
            self.size_spin.setValue(stored_size)

        unit_index = self.unit_combo.findText(self._settings.value("size_unit", "GB", type=str))
        if unit_index >= 0:
            self.unit_combo.setCurrentIndex(unit_index)

        stored_batch = self._settings.value("batch_size", DEFAULT_BATCH_SIZE, type=int)
        if stored_batch > 0:
            self.batch_spin.setValue(stored_batch)

    def _save_settings(self) -> None:
        """Persist the current form values."""
        self._settings.setValue("output_path", self.path_edit.text().strip())
        self._settings.setValue("names_path", self.names_edit.text().strip())
        self._settings.setValue("seed", self.seed_edit.text().strip())
        self._settings.setValue("target_size", float(self.size_spin.value()))
        self._settings.setValue("size_unit", self.unit_combo.currentText())
        self._settings.setValue("batch_size", int(self.batch_spin.value()))
        self._settings.sync()

    @staticmethod
    def _ensure_disk_space(destination: Path, required_bytes: int) -> None:
        """Raise an error if the target location lacks sufficient disk space."""
        parent = destination.parent if destination.parent.exists() else Path.home()
        try:
            usage = disk_usage(parent)
        except FileNotFoundError as exc:
            raise ValueError(f"Unable to read disk usage for {parent}") from exc

        if required_bytes > usage.free:
            raise ValueError(
                f"Not enough free space on {parent}. Needed: {required_bytes:,} bytes; "
                f"available: {usage.free:,} bytes."
            )

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt API  # pylint: disable=invalid-name
        """Ensure background jobs stop before the window shuts down."""
        if self._worker and self._worker.isRunning():
            self._cancel_flag = True
            self._worker.wait(1500)
        self._save_settings()
        super().closeEvent(event)
