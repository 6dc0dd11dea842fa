#!/usr/bin/env python3
"""Replay CLI — push recorded broker events through filter + write.

Usage:
    python -m scripts.replay events.jsonl
    python -m scripts.replay events.jsonl --config config/settings.yaml
    python -m scripts.replay events.jsonl --names names.yaml \\
        --param element_type=host_status,service_status --param category_type=neb

Events file: one JSON object per line, as the broker hands them over::

    {"category": 1, "element": 14, "host_id": 1, "state": 2, "state_type": 1,
     "acknowledged": false, "scheduled_downtime_depth": 0, "current_state": 2,
     "last_check": 1700000000, "output": "CRITICAL - host down"}
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from snow_connector.cache.names import StaticNameCache
from snow_connector.core.config import Settings, load_settings, settings_from_parameters
from snow_connector.core.logging import setup_logging
from snow_connector.core.types import NormalizedAlert
from snow_connector.engine.factory import create_engine
from snow_connector.monitor.channels import AlertSink


class ConsoleSink(AlertSink):
    """Prints each alert on one line."""

    def deliver(self, alert: NormalizedAlert) -> bool:
        print(
            f"  [ALERT]  node={alert.node} resource={alert.resource}"
            f" severity={int(alert.severity)} time={alert.time_of_event}"
        )
        return True


def load_events(path: str | Path) -> list[dict[str, Any]]:
    """Load broker events from a JSON-lines file, skipping blank lines."""
    events: list[dict[str, Any]] = []
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events


def parse_param(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got {text!r}")
    return key.strip(), value.strip()


def apply_parameters(settings: Settings, params: dict[str, str]) -> Settings:
    """Overlay broker-style parameters on the filter section of *settings*."""
    if not params:
        return settings
    overlay = settings_from_parameters(params, require_credentials=False).filter
    updates = {name: getattr(overlay, name) for name in overlay.model_fields_set}
    return settings.model_copy(
        update={"filter": settings.filter.model_copy(update=updates)},
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Replay broker events through the ServiceNow classification filter.",
    )
    parser.add_argument(
        "events",
        help="Path to a JSON-lines file of broker events",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: built-in defaults)",
    )
    parser.add_argument(
        "--names",
        default=None,
        help="Path to a host/service names YAML",
    )
    parser.add_argument(
        "--param",
        action="append",
        type=parse_param,
        default=[],
        metavar="KEY=VALUE",
        help="Broker parameter override, e.g. element_type=host_status (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    return parser.parse_args(argv)


def run_replay(args: argparse.Namespace) -> dict[str, object]:
    setup_logging(level=args.log_level, fmt="console", logfile="")
    settings = apply_parameters(load_settings(args.config), dict(args.param))

    names = StaticNameCache.from_yaml(args.names) if args.names else StaticNameCache()
    engine = create_engine(settings, names, sink=ConsoleSink())

    events = load_events(args.events)
    print(f"Replaying {len(events)} events from {args.events}")
    print()

    for payload in events:
        category = payload.get("category", 0)
        element = payload.get("element", 0)
        if not engine.filter(category, element):
            reason = engine.filter_reason(category, element)
            print(f"  [FILTER] {category}:{element} {reason.value if reason else ''}")
            continue

        if not engine.write(payload):
            reasons = ",".join(r.value for r in engine.evaluate(payload).reasons)
            print(f"  [REJECT] {category}:{element} {reasons}")

    engine.close()
    summary = engine.stats.summary()
    print()
    print(
        f"Replay complete: {summary['accepted']} accepted,"
        f" {summary['rejected']} rejected, {summary['filtered_out']} filtered out"
    )
    return summary


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    run_replay(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
