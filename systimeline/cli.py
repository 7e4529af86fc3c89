from __future__ import annotations

import argparse
import logging
from pathlib import Path

from systimeline.config import TimelineConfig
from systimeline.io import load_config, read_trace, write_timeline_json
from systimeline.model import parse_events
from systimeline.timeline import build_timeline
from systimeline.validate import validate_config


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="systimeline", description="Per-core timeline builder for system traces"
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    render = sub.add_parser("render", help="Build timeline series from a trace")
    render.add_argument("--trace", required=True, type=Path)
    render.add_argument("--out", required=True, type=Path)
    render.add_argument(
        "--config",
        required=False,
        type=Path,
        help="JSON config; replaces any config embedded in the trace file",
    )
    render.add_argument(
        "--ignore-id",
        dest="ignore_ids",
        action="append",
        type=int,
        default=None,
        help="Event id to skip entirely (repeatable)",
    )
    render.add_argument("--overflow-id", required=False, type=int, default=None)
    render.add_argument("--color-seed", required=False, type=int, default=None)
    return p


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "render":
        records, embedded = read_trace(args.trace)
        if args.config:
            config = load_config(args.config)
        else:
            config = TimelineConfig.from_json(embedded)
        config = config.with_overrides(
            ignore_ids=args.ignore_ids,
            overflow_id=args.overflow_id,
            color_seed=args.color_seed,
        )
        validate_config(config)

        # Overflow records may omit context fields, so parse with the final id.
        events = parse_events(records, overflow_id=config.overflow_id)
        timeline = build_timeline(events, config=config)
        write_timeline_json(args.out, timeline)
        return 0

    raise AssertionError(f"Unhandled command: {args.cmd}")
