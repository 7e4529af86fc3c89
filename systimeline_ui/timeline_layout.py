from __future__ import annotations

"""Qt-free geometry for the timeline view.

Turns assembled series into lanes of labelled rows and straight line segments
in data coordinates (x = timestamp, y = global row index). The widget only
scales and paints what this module produces, which keeps the mapping testable
without a display.
"""

from dataclasses import dataclass

from systimeline.types import STYLE_OPACITY, STYLE_WIDTH, SeriesStyle, Timeline

# Used for series the classifier leaves uncolored (interrupts).
FALLBACK_COLORS: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
)


@dataclass(frozen=True)
class Segment:
    x0: float
    row0: int
    x1: float
    row1: int
    color: str
    width: float
    opacity: float
    style: SeriesStyle


@dataclass(frozen=True)
class LaneLayout:
    lane: str
    first_row: int
    labels: tuple[str, ...]


@dataclass(frozen=True)
class TimelineLayout:
    lanes: tuple[LaneLayout, ...]
    segments: tuple[Segment, ...]
    x_min: float
    x_max: float

    @property
    def row_count(self) -> int:
        return sum(len(lane.labels) for lane in self.lanes)

    @property
    def is_empty(self) -> bool:
        return not self.segments


def _lane_rows(timeline: Timeline) -> dict[str, list[str]]:
    rows: dict[str, list[str]] = {}
    for s in timeline.series:
        lane = s.lane or "y"
        labels = rows.setdefault(lane, [])
        if s.style is SeriesStyle.INTERVAL and s.name is not None and s.name not in labels:
            labels.append(s.name)
    return rows


def build_layout(timeline: Timeline) -> TimelineLayout:
    lane_rows = _lane_rows(timeline)

    lanes: list[LaneLayout] = []
    row_of: dict[tuple[str, str], int] = {}
    next_row = 0
    for lane, labels in lane_rows.items():
        lanes.append(LaneLayout(lane=lane, first_row=next_row, labels=tuple(labels)))
        for label in labels:
            row_of[(lane, label)] = next_row
            next_row += 1

    segments: list[Segment] = []
    fallback_idx = 0
    for s in timeline.series:
        lane = s.lane or "y"
        color = s.color
        if color is None:
            color = FALLBACK_COLORS[fallback_idx % len(FALLBACK_COLORS)]
            fallback_idx += 1

        points = list(zip(s.x, s.y))
        for (xa, ya), (xb, yb) in zip(points, points[1:]):
            if xa is None or xb is None or ya is None or yb is None:
                continue
            ra = row_of.get((lane, ya))
            rb = row_of.get((lane, yb))
            if ra is None or rb is None:
                continue
            segments.append(
                Segment(
                    x0=float(xa),
                    row0=ra,
                    x1=float(xb),
                    row1=rb,
                    color=color,
                    width=STYLE_WIDTH[s.style],
                    opacity=STYLE_OPACITY[s.style],
                    style=s.style,
                )
            )

    rng = timeline.time_range
    x_min = float(rng.min) if rng.min is not None else 0.0
    x_max = float(rng.max) if rng.max is not None else 0.0
    # Overflow markers can close intervals past the last processed event.
    for seg in segments:
        x_max = max(x_max, seg.x1)

    return TimelineLayout(
        lanes=tuple(lanes),
        segments=tuple(segments),
        x_min=x_min,
        x_max=x_max,
    )
