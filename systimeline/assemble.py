from __future__ import annotations

from systimeline.registry import Registry
from systimeline.types import Series


def assemble_series(registry: Registry, task_order: dict[int, list[str]]) -> list[Series]:
    """Flatten per-core series into render order.

    Cores go in ascending id order. Within a core: interrupts, ordered tasks,
    then the connector series. Placeholders never touched by a processed event
    are dropped.
    """

    out: list[Series] = []
    for core_id in registry.sorted_core_ids():
        core = registry.cores[core_id]
        out.extend(s for s in core.irq.values() if s.initialized)
        for name in task_order.get(core_id, []):
            series = core.ctx[name]
            if series.initialized:
                out.append(series)
        out.append(core.connector)
    return out
