from __future__ import annotations

import json
from pathlib import Path


def _ensure_qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def _write_trace(tmp_path: Path, *, config: dict | None = None) -> Path:
    raw = {
        "events": [
            {"id": 6, "ts": 1, "core_id": 0, "ctx_name": "A"},
            {"id": 6, "ts": 4, "core_id": 0, "ctx_name": "scheduler"},
            {"id": 6, "ts": 6, "core_id": 1, "ctx_name": "IDLE1"},
        ],
        "config": config or {},
    }
    p = tmp_path / "trace.json"
    p.write_text(json.dumps(raw), encoding="utf-8")
    return p


def test_main_window_loads_trace_into_view(tmp_path: Path) -> None:
    _ensure_qapp()

    from systimeline_ui.main_window import MainWindow

    w = MainWindow()
    assert w.windowTitle() == "SysTimeline"
    assert w._status_label.text() == "No trace loaded"  # noqa: SLF001

    path = _write_trace(tmp_path)
    w._load_trace(path)  # noqa: SLF001

    assert w._loaded_path == path  # noqa: SLF001
    assert w._timeline is not None  # noqa: SLF001
    assert w._view._layout is not None  # noqa: SLF001
    assert w._view._layout.row_count == 3  # noqa: SLF001
    assert w.windowTitle() == "SysTimeline - trace.json"
    assert w._status_label.text() == "3 series, range 1.0 .. 6.0"  # noqa: SLF001
    w.close()


def test_main_window_reports_invalid_config(monkeypatch, tmp_path: Path) -> None:
    _ensure_qapp()

    from PySide6.QtWidgets import QMessageBox

    from systimeline_ui.main_window import MainWindow

    shown: list[str] = []
    monkeypatch.setattr(
        QMessageBox, "critical", lambda _parent, _title, text: shown.append(text)
    )

    w = MainWindow()
    path = _write_trace(tmp_path, config={"overflow_id": 6, "ignore_ids": [6]})
    w._load_trace(path)  # noqa: SLF001

    assert w._timeline is None  # noqa: SLF001
    assert "Invalid config" in w._status_label.text()  # noqa: SLF001
    assert shown and "Invalid config" in shown[0]
    w.close()


def test_main_window_reports_unreadable_file(monkeypatch, tmp_path: Path) -> None:
    _ensure_qapp()

    from PySide6.QtWidgets import QMessageBox

    from systimeline_ui.main_window import MainWindow

    shown: list[str] = []
    monkeypatch.setattr(
        QMessageBox, "critical", lambda _parent, _title, text: shown.append(text)
    )

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    w = MainWindow()
    w._load_trace(bad)  # noqa: SLF001

    assert w._status_label.text().startswith("bad.json: Error:")  # noqa: SLF001
    assert len(shown) == 1
    w.close()


def test_open_dialog_routes_to_load_or_does_nothing(monkeypatch, tmp_path: Path) -> None:
    _ensure_qapp()

    from PySide6.QtWidgets import QFileDialog

    from systimeline_ui.main_window import MainWindow

    loaded: list[Path] = []
    monkeypatch.setattr(MainWindow, "_load_trace", lambda self, p: loaded.append(p))

    w = MainWindow()
    monkeypatch.setattr(QFileDialog, "getOpenFileName", lambda *_a, **_k: ("", ""))
    w._open_trace_dialog()  # noqa: SLF001
    assert loaded == []

    target = tmp_path / "x.json"
    monkeypatch.setattr(
        QFileDialog, "getOpenFileName", lambda *_a, **_k: (str(target), "")
    )
    w._open_trace_dialog()  # noqa: SLF001
    assert loaded == [target]
    w.close()


def test_menus_and_about_text() -> None:
    _ensure_qapp()

    from systimeline.version import __version__
    from systimeline_ui.main_window import MainWindow
    from systimeline_ui.main_window_menus import about_text, show_about_dialog

    w = MainWindow()
    titles = [a.text() for a in w.menuBar().actions()]
    assert titles == ["File", "Help"]

    txt = about_text()
    assert f"Version: {__version__}" in txt
    assert "PySide6" in txt

    show_about_dialog(w)
    assert getattr(w, "_about_dialog").text() == txt
    w.close()
