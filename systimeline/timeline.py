from __future__ import annotations

# Public timeline entrypoint: registry -> synthesis -> classification -> assembly.

from collections.abc import Sequence

from systimeline.assemble import assemble_series
from systimeline.classify import classify_tasks
from systimeline.colors import ColorSource, default_color_source
from systimeline.config import TimelineConfig
from systimeline.model import TraceEvent
from systimeline.registry import LaneForCore, build_registry, default_lane
from systimeline.synth import synthesize
from systimeline.types import Timeline


def build_timeline(
    events: Sequence[TraceEvent],
    *,
    config: TimelineConfig | None = None,
    color_source: ColorSource | None = None,
    lane_for_core: LaneForCore = default_lane,
) -> Timeline:
    cfg = config or TimelineConfig()
    colors = color_source or default_color_source(cfg.color_seed)

    registry = build_registry(
        events, lane_for_core=lane_for_core, expected_cores=cfg.expected_cores
    )
    time_range = synthesize(
        events,
        registry,
        ignore_ids=cfg.ignore_ids,
        overflow_id=cfg.overflow_id,
    )
    order = classify_tasks(registry, color_source=colors)
    return Timeline(series=assemble_series(registry, order), time_range=time_range)
