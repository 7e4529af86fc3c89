from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from systimeline.config import TimelineConfig
from systimeline.model import TraceEvent, parse_events
from systimeline.types import STYLE_OPACITY, STYLE_WIDTH, Series, SeriesStyle, Timeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceFile:
    events: list[TraceEvent]
    config: TimelineConfig


def read_trace(path: Path) -> tuple[list[Any], dict[str, Any] | None]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".jsonl":
        records: list[Any] = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                logger.warning("skipping malformed trace line %d: %s", lineno, e)
        return records, None

    raw = json.loads(text)
    if isinstance(raw, list):
        return raw, None
    if isinstance(raw, dict):
        events = raw.get("events")
        if not isinstance(events, list):
            raise ValueError(f"{path}: trace object must have an 'events' list")
        return events, raw.get("config")
    raise ValueError(f"{path}: trace must be a JSON array or object")


def load_trace(path: Path) -> TraceFile:
    records, config_raw = read_trace(path)
    config = TimelineConfig.from_json(config_raw)
    events = parse_events(records, overflow_id=config.overflow_id)
    return TraceFile(events=events, config=config)


def load_config(path: Path) -> TimelineConfig:
    return TimelineConfig.from_json(json.loads(path.read_text(encoding="utf-8")))


def series_to_json(series: Series) -> dict[str, Any]:
    """Plotly-style trace dict for one series."""

    out: dict[str, Any] = {
        "name": series.name,
        "x": list(series.x),
        "y": list(series.y),
        "type": "scattergl",
        "mode": "lines",
        "opacity": STYLE_OPACITY[series.style],
        "line": {"width": STYLE_WIDTH[series.style]},
        "xaxis": "x",
        "yaxis": series.lane,
        "style": series.style.value,
    }
    if series.color is not None:
        out["line"]["color"] = series.color
    if series.style is SeriesStyle.CONNECTOR:
        out["hoverinfo"] = "skip"
    return out


def timeline_to_json(timeline: Timeline) -> dict[str, Any]:
    return {
        "range": {"min": timeline.time_range.min, "max": timeline.time_range.max},
        "series": [series_to_json(s) for s in timeline.series],
    }


def write_timeline_json(path: Path, timeline: Timeline) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(timeline_to_json(timeline), indent=2), encoding="utf-8")
