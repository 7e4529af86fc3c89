from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable

logger = logging.getLogger(__name__)


class EventValidationError(ValueError):
    pass


def _require(obj: dict[str, Any], key: str) -> Any:
    if key not in obj or obj[key] is None:
        raise EventValidationError(f"trace event is missing required field '{key}'")
    return obj[key]


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise EventValidationError(f"trace event {key} must be an integer (got {value!r})")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise EventValidationError(f"trace event {key} must be an integer: {e}") from e


def _as_timestamp(value: Any) -> float:
    if isinstance(value, bool):
        raise EventValidationError(f"trace event ts must be a number (got {value!r})")
    try:
        ts = float(value)
    except (TypeError, ValueError) as e:
        raise EventValidationError(f"trace event has a non-numeric ts: {e}") from e
    if not math.isfinite(ts):
        raise EventValidationError(f"trace event ts must be finite (got {value!r})")
    return ts


@dataclass(frozen=True)
class TraceEvent:
    id: int
    ts: float
    core_id: int | None = None
    ctx_name: str | None = None
    in_irq: bool = False

    @property
    def is_complete(self) -> bool:
        return self.core_id is not None and self.ctx_name is not None

    @staticmethod
    def from_json(obj: dict[str, Any], *, overflow_id: int | None = None) -> "TraceEvent":
        """Build an event from a decoded record.

        `id` and `ts` are always required. Overflow records may omit the
        context fields; every other record must carry `core_id` and `ctx_name`.
        """

        if not isinstance(obj, dict):
            raise EventValidationError(
                f"trace event must be an object (got {type(obj).__name__})"
            )
        event_id = _as_int(_require(obj, "id"), "id")
        ts = _as_timestamp(_require(obj, "ts"))

        if event_id == overflow_id:
            core_raw = obj.get("core_id")
            ctx_raw = obj.get("ctx_name")
        else:
            core_raw = _require(obj, "core_id")
            ctx_raw = _require(obj, "ctx_name")

        core_id = _as_int(core_raw, "core_id") if core_raw is not None else None

        in_irq = obj.get("in_irq", False)
        if not isinstance(in_irq, bool):
            raise EventValidationError(
                f"trace event in_irq must be true or false (got {in_irq!r})"
            )

        return TraceEvent(
            id=event_id,
            ts=ts,
            core_id=core_id,
            ctx_name=str(ctx_raw) if ctx_raw is not None else None,
            in_irq=in_irq,
        )


def parse_events(
    records: Iterable[dict[str, Any]], *, overflow_id: int | None = None
) -> list[TraceEvent]:
    """Decode records in arrival order, skipping malformed ones."""

    events: list[TraceEvent] = []
    for index, rec in enumerate(records):
        try:
            events.append(TraceEvent.from_json(rec, overflow_id=overflow_id))
        except EventValidationError as e:
            logger.warning("skipping malformed trace record #%d: %s", index, e)
    return events
