from __future__ import annotations

import platform
from collections.abc import Callable

import PySide6
from PySide6.QtWidgets import QMainWindow, QMessageBox, QWidget

from systimeline.version import __version__


def build_menus(
    window: QMainWindow,
    *,
    on_open_trace: Callable[[], None],
    on_exit: Callable[[], None],
) -> None:
    file_menu = window.menuBar().addMenu("File")
    open_action = file_menu.addAction("Open trace…")
    open_action.triggered.connect(on_open_trace)
    file_menu.addSeparator()
    exit_action = file_menu.addAction("Exit")
    exit_action.triggered.connect(on_exit)

    help_menu = window.menuBar().addMenu("Help")
    about_action = help_menu.addAction("About…")
    about_action.triggered.connect(lambda: show_about_dialog(window))


def show_about_dialog(parent: QWidget) -> None:
    # Non-modal: `exec()` runs a nested event loop, which hangs headless tests.
    box = QMessageBox(parent)
    box.setWindowTitle("About SysTimeline")
    box.setText(about_text())
    setattr(parent, "_about_dialog", box)
    box.open()


def about_text() -> str:
    py_ver = platform.python_version()
    pyside_ver = getattr(PySide6, "__version__", "(unknown)")

    # Plain text so tests can assert substrings.
    return "\n".join(
        [
            f"Version: {__version__}",
            "",
            f"Python: {py_ver}",
            f"PySide6 (Qt for Python): {pyside_ver}",
        ]
    )
