from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox

from systimeline.io import load_trace
from systimeline.timeline import build_timeline
from systimeline.validate import ConfigValidationError, validate_config


def open_trace_dialog(window) -> None:
    path_str, _ = QFileDialog.getOpenFileName(
        window,
        "Open trace",
        "",
        "Trace files (*.json *.jsonl);;All files (*)",
    )
    if not path_str:
        return
    # Call the window method (not the helper) so tests can monkeypatch
    # `MainWindow._load_trace` and observe the call.
    window._load_trace(Path(path_str))  # noqa: SLF001


def load_trace_file(window, path: Path) -> None:
    try:
        trace = load_trace(path)
        validate_config(trace.config)
        timeline = build_timeline(trace.events, config=trace.config)
    except ConfigValidationError as e:
        window._set_load_failed(path, f"Invalid config: {e}")  # noqa: SLF001
        return
    except Exception as e:  # noqa: BLE001
        window._set_load_failed(path, f"Error: {e}")  # noqa: SLF001
        return

    window._set_timeline(path, timeline)  # noqa: SLF001


def show_load_error(window, path: Path, message: str) -> None:
    QMessageBox.critical(window, "Could not load trace", f"{path.name}\n\n{message}")
