from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from systimeline.types import SeriesStyle, Timeline

from systimeline_ui.timeline_layout import TimelineLayout, build_layout


class TimelineView(QWidget):
    """Painted swimlane chart: one band per core lane, one row per context."""

    _LABEL_W = 150
    _MARGIN = 8
    _MIN_ROW_H = 14

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(120)

        # Exposed for tests.
        self._layout: TimelineLayout | None = None

    def set_timeline(self, timeline: Timeline | None) -> None:
        self._layout = build_layout(timeline) if timeline is not None else None
        if self._layout is not None:
            self.setMinimumHeight(
                max(120, self._layout.row_count * self._MIN_ROW_H + 2 * self._MARGIN)
            )
        self.update()

    def _plot_rect(self) -> QRectF:
        r = QRectF(self.rect())
        return r.adjusted(
            self._LABEL_W + self._MARGIN, self._MARGIN, -self._MARGIN, -self._MARGIN
        )

    def paintEvent(self, event) -> None:  # type: ignore[override]
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        p.fillRect(self.rect(), self.palette().base())

        layout = self._layout
        if layout is None or layout.row_count == 0:
            p.setPen(self.palette().text().color())
            p.drawText(self.rect(), int(Qt.AlignmentFlag.AlignCenter), "No trace loaded")
            return

        plot = self._plot_rect()
        row_h = plot.height() / layout.row_count
        span = layout.x_max - layout.x_min
        x_scale = plot.width() / span if span > 0 else 0.0

        def px(x: float) -> float:
            return plot.left() + (x - layout.x_min) * x_scale

        def py(row: int) -> float:
            return plot.top() + (row + 0.5) * row_h

        text_color = self.palette().text().color()
        grid_color = QColor(text_color)
        grid_color.setAlpha(60)

        for lane in layout.lanes:
            top = plot.top() + lane.first_row * row_h
            p.setPen(_pen(grid_color, 1.0))
            p.drawLine(QPointF(0, top), QPointF(plot.right(), top))
            p.setPen(text_color)
            for i, label in enumerate(lane.labels):
                rect = QRectF(self._MARGIN, top + i * row_h, self._LABEL_W, row_h)
                p.drawText(
                    rect,
                    int(Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft),
                    label,
                )

        for seg in layout.segments:
            color = QColor(seg.color)
            color.setAlphaF(seg.opacity)
            if seg.style is SeriesStyle.INTERVAL:
                # Interval bars scale with the row so dense lanes stay legible.
                width = min(seg.width, row_h * 0.7)
                pen = _pen(color, width)
                pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            else:
                pen = _pen(color, max(1.0, seg.width))
            p.setPen(pen)
            p.drawLine(QPointF(px(seg.x0), py(seg.row0)), QPointF(px(seg.x1), py(seg.row1)))


def _pen(color: QColor, width: float) -> QPen:
    pen = QPen(color)
    pen.setWidthF(width)
    return pen
