from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from systimeline.model import TraceEvent


class SeriesStyle(str, Enum):
    INTERVAL = "interval"
    CONNECTOR = "connector"


# Display attributes per style: (line width, opacity).
STYLE_WIDTH: dict[SeriesStyle, float] = {
    SeriesStyle.INTERVAL: 20.0,
    SeriesStyle.CONNECTOR: 0.5,
}
STYLE_OPACITY: dict[SeriesStyle, float] = {
    SeriesStyle.INTERVAL: 0.9,
    SeriesStyle.CONNECTOR: 0.5,
}

CONNECTOR_NAME = "context-switch"
CONNECTOR_COLOR = "blue"


@dataclass
class Series:
    """Line series of closed intervals, `None` pairs separating them.

    `name` stays `None` until the first processed event touches the series.
    """

    x: list[float | None] = field(default_factory=list)
    y: list[str | None] = field(default_factory=list)
    name: str | None = None
    lane: str | None = None
    color: str | None = None
    style: SeriesStyle = SeriesStyle.INTERVAL

    @property
    def initialized(self) -> bool:
        return self.name is not None

    def append(self, x: float, label: str) -> None:
        self.x.append(x)
        self.y.append(label)

    def separate(self) -> None:
        self.x.append(None)
        self.y.append(None)


@dataclass
class CoreState:
    core_id: int
    lane: str
    irq: dict[str, Series] = field(default_factory=dict)
    ctx: dict[str, Series] = field(default_factory=dict)
    last_event: TraceEvent | None = None
    connector: Series = field(init=False)

    def __post_init__(self) -> None:
        self.connector = Series(
            name=CONNECTOR_NAME,
            lane=self.lane,
            color=CONNECTOR_COLOR,
            style=SeriesStyle.CONNECTOR,
        )

    def series_for(self, ctx_name: str, in_irq: bool) -> Series:
        table = self.irq if in_irq else self.ctx
        series = table.get(ctx_name)
        if series is None:
            series = Series()
            table[ctx_name] = series
        return series


@dataclass
class TimeRange:
    min: float | None = None
    max: float | None = None

    def include(self, ts: float) -> None:
        if self.min is None or ts < self.min:
            self.min = ts
        if self.max is None or ts > self.max:
            self.max = ts

    @property
    def empty(self) -> bool:
        return self.min is None


@dataclass(frozen=True)
class Timeline:
    series: list[Series]
    time_range: TimeRange
