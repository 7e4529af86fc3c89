from __future__ import annotations

import time


def _ensure_qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def _spin(app, *, seconds: float = 0.05) -> None:
    """Let Qt process paint/update events deterministically."""

    deadline = time.monotonic() + seconds
    while time.monotonic() < deadline:
        app.processEvents()


def _timeline():
    from systimeline.config import TimelineConfig
    from systimeline.model import TraceEvent
    from systimeline.timeline import build_timeline

    events = [
        TraceEvent(id=2, ts=0, core_id=0, ctx_name="A"),
        TraceEvent(id=2, ts=5, core_id=0, ctx_name="B"),
        TraceEvent(id=2, ts=7, core_id=1, ctx_name="A"),
        TraceEvent(id=2, ts=9, core_id=0, ctx_name="A"),
    ]
    return build_timeline(events, config=TimelineConfig(overflow_id=1))


def test_timeline_view_paints_loaded_and_cleared_states() -> None:
    app = _ensure_qapp()

    from PySide6.QtWidgets import QMainWindow

    from systimeline_ui.timeline_view import TimelineView

    host = QMainWindow()
    view = TimelineView(host)
    host.setCentralWidget(view)
    host.resize(640, 320)
    host.show()
    _spin(app)

    # Empty state renders without a layout.
    assert view._layout is None  # noqa: SLF001
    assert not view.grab().isNull()

    view.set_timeline(_timeline())
    _spin(app)
    assert view._layout is not None  # noqa: SLF001
    assert view._layout.row_count == 3  # noqa: SLF001
    assert not view.grab().isNull()

    view.set_timeline(None)
    _spin(app)
    assert view._layout is None  # noqa: SLF001

    host.close()


def test_timeline_view_handles_single_timestamp() -> None:
    app = _ensure_qapp()

    from systimeline.model import TraceEvent
    from systimeline.timeline import build_timeline

    from systimeline_ui.timeline_view import TimelineView

    view = TimelineView()
    view.resize(300, 200)
    view.set_timeline(build_timeline([TraceEvent(id=2, ts=3, core_id=0, ctx_name="A")]))
    view.show()
    _spin(app)

    assert view._layout is not None  # noqa: SLF001
    assert view._layout.x_min == view._layout.x_max == 3.0  # noqa: SLF001
    assert not view.grab().isNull()
    view.close()
