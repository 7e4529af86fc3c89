from __future__ import annotations

# Second pass: the per-core interval state machine.

import logging
from collections.abc import Iterable

from systimeline.model import TraceEvent
from systimeline.registry import Registry
from systimeline.types import CoreState, Series, TimeRange

logger = logging.getLogger(__name__)

IRQ_PREFIX = "IRQ: "


def display_name(event: TraceEvent) -> str:
    assert event.ctx_name is not None
    return f"{IRQ_PREFIX}{event.ctx_name}" if event.in_irq else event.ctx_name


def _open_series(core: CoreState) -> Series | None:
    prev = core.last_event
    if prev is None:
        return None
    assert prev.ctx_name is not None
    table = core.irq if prev.in_irq else core.ctx
    return table[prev.ctx_name]


def _close_open_interval(core: CoreState, ts: float) -> None:
    prev = _open_series(core)
    if prev is None:
        return
    assert prev.name is not None
    prev.append(ts, prev.name)
    prev.separate()


def _halt_all(registry: Registry, ts: float) -> None:
    for core in registry.cores.values():
        _close_open_interval(core, ts)
    for core in registry.cores.values():
        core.last_event = None


def synthesize(
    events: Iterable[TraceEvent],
    registry: Registry,
    *,
    ignore_ids: frozenset[int] | set[int],
    overflow_id: int,
) -> TimeRange:
    """Populate the registry's series from `events` in arrival order.

    Every processed event closes the open interval on its core and starts a new
    one. The overflow event closes the open interval on every core and forgets
    the active contexts, so nothing after it links back to before it.

    Returns the range of processed timestamps.
    """

    time_range = TimeRange()

    for event in events:
        if event.id in ignore_ids:
            continue

        if event.id == overflow_id:
            logger.info("overflow event at ts=%s; closing all open intervals", event.ts)
            _halt_all(registry, event.ts)
            continue

        if not event.is_complete:
            logger.warning("skipping event without core/context: %r", event)
            continue

        time_range.include(event.ts)

        current = registry.series_for(event)
        core = registry.cores[event.core_id]
        if not current.initialized:
            current.name = display_name(event)
            current.lane = core.lane
        assert current.name is not None

        prev = _open_series(core)
        _close_open_interval(core, event.ts)

        if prev is not None and prev.name != current.name:
            connector = core.connector
            connector.append(event.ts, prev.name)
            connector.append(event.ts, current.name)
            connector.separate()

        current.append(event.ts, current.name)
        core.last_event = event

    return time_range
