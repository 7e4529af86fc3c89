from __future__ import annotations

# Context registry: first pass over the trace, discovering cores and contexts.

import logging
from collections.abc import Callable, Iterable

from systimeline.config import DEFAULT_EXPECTED_CORES
from systimeline.model import TraceEvent
from systimeline.types import CoreState, Series

logger = logging.getLogger(__name__)

LaneForCore = Callable[[int], str]


def default_lane(core_id: int) -> str:
    """Axis name per core: core 0 -> "y", core 1 -> "y2", core n -> f"y{n+1}"."""

    return "y" if core_id == 0 else f"y{core_id + 1}"


class Registry:
    def __init__(
        self,
        *,
        lane_for_core: LaneForCore = default_lane,
        expected_cores: Iterable[int] = DEFAULT_EXPECTED_CORES,
    ) -> None:
        self._lane_for_core = lane_for_core
        self._expected = frozenset(expected_cores)
        # Discovery order.
        self.cores: dict[int, CoreState] = {}

    def ensure_core(self, core_id: int) -> CoreState:
        core = self.cores.get(core_id)
        if core is None:
            if core_id not in self._expected:
                logger.warning(
                    "trace references unexpected core %r; adding a lane for it",
                    core_id,
                )
            core = CoreState(core_id=core_id, lane=self._lane_for_core(core_id))
            self.cores[core_id] = core
        return core

    def register(self, event: TraceEvent) -> None:
        if event.core_id is None:
            return
        core = self.ensure_core(event.core_id)
        if event.ctx_name is not None:
            core.series_for(event.ctx_name, event.in_irq)

    def series_for(self, event: TraceEvent) -> Series:
        assert event.core_id is not None and event.ctx_name is not None
        return self.ensure_core(event.core_id).series_for(event.ctx_name, event.in_irq)

    def sorted_core_ids(self) -> list[int]:
        return sorted(self.cores)


def build_registry(
    events: Iterable[TraceEvent],
    *,
    lane_for_core: LaneForCore = default_lane,
    expected_cores: Iterable[int] = DEFAULT_EXPECTED_CORES,
) -> Registry:
    registry = Registry(lane_for_core=lane_for_core, expected_cores=expected_cores)
    for event in events:
        registry.register(event)
    return registry
