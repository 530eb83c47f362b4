"""Application bootstrap for the CSV Generator GUI."""

from __future__ import annotations

import sys


def run() -> None:
    """Entry point for launching the PyQt6 application."""
    from PyQt6.QtWidgets import QApplication  # pylint: disable=import-error,import-outside-toplevel

    from csv_generator.ui.main_window import MainWindow  # pylint: disable=import-outside-toplevel

    app = QApplication(sys.argv)
    app.setApplicationName("CSV Generator")
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
