from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# SEGGER SystemView reports a dropped-buffer condition as event id 1.
DEFAULT_OVERFLOW_ID = 1
DEFAULT_EXPECTED_CORES: tuple[int, ...] = (0, 1)


@dataclass(frozen=True)
class TimelineConfig:
    ignore_ids: frozenset[int] = frozenset()
    overflow_id: int = DEFAULT_OVERFLOW_ID
    expected_cores: tuple[int, ...] = DEFAULT_EXPECTED_CORES
    # None selects hash-derived task colors.
    color_seed: int | None = None

    @staticmethod
    def from_json(obj: dict[str, Any] | None) -> "TimelineConfig":
        if not obj:
            return TimelineConfig()
        if not isinstance(obj, dict):
            raise TypeError("config must be an object")

        ignore_raw = obj.get("ignore_ids", [])
        if not isinstance(ignore_raw, (list, tuple)):
            raise TypeError("ignore_ids must be a list of event ids")
        cores_raw = obj.get("expected_cores", list(DEFAULT_EXPECTED_CORES))
        if not isinstance(cores_raw, (list, tuple)):
            raise TypeError("expected_cores must be a list of core ids")
        seed = obj.get("color_seed")

        return TimelineConfig(
            ignore_ids=frozenset(int(i) for i in ignore_raw),
            overflow_id=int(obj.get("overflow_id", DEFAULT_OVERFLOW_ID)),
            expected_cores=tuple(int(c) for c in cores_raw),
            color_seed=int(seed) if seed is not None else None,
        )

    def with_overrides(
        self,
        *,
        ignore_ids: list[int] | None = None,
        overflow_id: int | None = None,
        color_seed: int | None = None,
    ) -> "TimelineConfig":
        return TimelineConfig(
            ignore_ids=frozenset(ignore_ids) if ignore_ids else self.ignore_ids,
            overflow_id=overflow_id if overflow_id is not None else self.overflow_id,
            expected_cores=self.expected_cores,
            color_seed=color_seed if color_seed is not None else self.color_seed,
        )
