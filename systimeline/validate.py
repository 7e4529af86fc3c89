from __future__ import annotations

from systimeline.config import TimelineConfig


class ConfigValidationError(ValueError):
    pass


def validate_config(config: TimelineConfig) -> None:
    if config.overflow_id in config.ignore_ids:
        raise ConfigValidationError(
            (
                f"overflow_id {config.overflow_id} is also in ignore_ids; "
                "the halt marker would never be seen"
            )
        )

    for event_id in config.ignore_ids:
        if event_id < 0:
            raise ConfigValidationError(f"ignore_ids must be >= 0 (got {event_id})")

    if not config.expected_cores:
        raise ConfigValidationError("expected_cores must name at least one core")

    for core_id in config.expected_cores:
        if core_id < 0:
            raise ConfigValidationError(f"expected_cores must be >= 0 (got {core_id})")

    if len(set(config.expected_cores)) != len(config.expected_cores):
        raise ConfigValidationError(
            f"expected_cores has duplicates: {list(config.expected_cores)}"
        )

    if config.color_seed is not None and config.color_seed < 0:
        raise ConfigValidationError(f"color_seed must be >= 0 (got {config.color_seed})")
