from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from systimeline_ui.main_window import MainWindow


def run_app(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv
    app = QApplication(args)
    app.setApplicationName("SysTimeline")
    app.setOrganizationName("SysTimeline")
    app.setStyle("Fusion")

    window = MainWindow()
    window.resize(1100, 720)
    window.show()

    # Optional trace path after the program name.
    if len(args) > 1:
        window._load_trace(Path(args[1]))  # noqa: SLF001

    return app.exec()
