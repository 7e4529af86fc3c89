from __future__ import annotations

import re

from systimeline.colors import IDLE_COLOR, SCHEDULER_COLOR, ColorSource
from systimeline.registry import Registry
from systimeline.types import CoreState

SCHEDULER_NAME = "scheduler"
IDLE_PATTERN = re.compile(r"^IDLE[0-9]*")


def is_idle(name: str) -> bool:
    return IDLE_PATTERN.match(name) is not None


def _set_color(core: CoreState, name: str, color: str) -> None:
    series = core.ctx.get(name)
    if series is not None and series.initialized:
        series.color = color


def partition_tasks(names: list[str]) -> tuple[list[str], list[str], list[str]]:
    """Split task names into (application, scheduler, idle), keeping order."""

    idle = [n for n in names if is_idle(n)]
    scheduler = [n for n in names if n == SCHEDULER_NAME]
    apps = [n for n in names if n != SCHEDULER_NAME and not is_idle(n)]
    return apps, scheduler, idle


def classify_tasks(registry: Registry, *, color_source: ColorSource) -> dict[int, list[str]]:
    """Order each core's task series for display and color them.

    Display order per core is application tasks (discovery order), then the
    scheduler, then idle loops. An application task's color is chosen once and
    applied to the same-named task on every core. Interrupt series are left as
    they are.
    """

    assigned: dict[str, str] = {}
    order: dict[int, list[str]] = {}

    for core_id, core in registry.cores.items():
        apps, scheduler, idle = partition_tasks(list(core.ctx))

        for name in idle:
            _set_color(core, name, IDLE_COLOR)
        for name in scheduler:
            _set_color(core, name, SCHEDULER_COLOR)

        for name in apps:
            color = assigned.get(name)
            if color is None:
                color = color_source.color_for(name)
                assigned[name] = color
            for other in registry.cores.values():
                _set_color(other, name, color)

        order[core_id] = apps + scheduler + idle

    return order
