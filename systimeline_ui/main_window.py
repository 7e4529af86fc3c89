from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QLabel, QMainWindow, QScrollArea, QStatusBar

from systimeline.types import SeriesStyle, Timeline

from systimeline_ui.main_window_file_io import (
    load_trace_file as _load_trace_file,
    open_trace_dialog as _open_trace_dialog,
    show_load_error as _show_load_error,
)
from systimeline_ui.main_window_menus import build_menus
from systimeline_ui.timeline_view import TimelineView


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self._loaded_path: Path | None = None
        self._timeline: Timeline | None = None

        build_menus(self, on_open_trace=self._open_trace_dialog, on_exit=self.close)

        self._view = TimelineView()
        self._view.setObjectName("timeline_view")
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._view)
        self.setCentralWidget(scroll)

        self._status_label = QLabel("No trace loaded", self)
        self._status_label.setObjectName("trace_status")
        status = QStatusBar(self)
        status.addWidget(self._status_label, 1)
        self.setStatusBar(status)

        self.setWindowTitle("SysTimeline")

    def _open_trace_dialog(self) -> None:
        _open_trace_dialog(self)

    def _load_trace(self, path: Path) -> None:
        _load_trace_file(self, path)

    def _set_timeline(self, path: Path, timeline: Timeline) -> None:
        self._loaded_path = path
        self._timeline = timeline
        self._view.set_timeline(timeline)
        self.setWindowTitle(f"SysTimeline - {path.name}")
        self._status_label.setText(_status_text(timeline))

    def _set_load_failed(self, path: Path, message: str) -> None:
        self._status_label.setText(f"{path.name}: {message}")
        _show_load_error(self, path, message)


def _status_text(timeline: Timeline) -> str:
    intervals = sum(1 for s in timeline.series if s.style is SeriesStyle.INTERVAL)
    rng = timeline.time_range
    if rng.empty:
        return f"{intervals} series, no processed events"
    return f"{intervals} series, range {rng.min} .. {rng.max}"
