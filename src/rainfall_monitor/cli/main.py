"""Command line interface for Rainfall Monitor.

Usage examples:

  rainfall-monitor assess --intensity 12.5 --rainfall 50
  rainfall-monitor city-status --rainfall 60
  rainfall-monitor scale
  rainfall-monitor init-db
  rainfall-monitor push --rainfall 75 --duration 3 --region "Northern District" \
      --city Mumbai:120:1200000 --city Pune:30:300000
  rainfall-monitor show
  rainfall-monitor watch --interval 5 --max-iterations 3
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Tuple

from pymongo.errors import PyMongoError

from rainfall_monitor.domain.city import classify_city
from rainfall_monitor.domain.hazard import assess_hazard, hazard_scale
from rainfall_monitor.errors import RainfallMonitorError
from rainfall_monitor.persistence.database import ScadaDatabase
from rainfall_monitor.services.controller import RainfallController
from rainfall_monitor.services.monitor import DashboardMonitor


def _parse_city(value: str) -> Tuple[str, float, int]:
    """Parse ``NAME:RAINFALL:POPULATION`` (the name may itself contain colons)."""
    try:
        name, rainfall, population = value.rsplit(":", 2)
        return name, float(rainfall), int(population)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected NAME:RAINFALL:POPULATION, got {value!r}")


def _cmd_assess(args: argparse.Namespace) -> int:
    assessment = assess_hazard(args.intensity, args.rainfall)
    if args.json:
        print(json.dumps(assessment.model_dump(mode="json"), indent=2))
        return 0
    print(f"Hazard level: {assessment.level.value.upper()}")
    print(assessment.description)
    for line in assessment.numbered_recommendations():
        print(f"  {line}")
    return 0


def _cmd_city_status(args: argparse.Namespace) -> int:
    print(classify_city(args.rainfall).value)
    return 0


def _cmd_scale(args: argparse.Namespace) -> int:
    for row in hazard_scale(args.intensity):
        marker = "*" if row["current"] else " "
        print(f"{marker} {row['label']:<9} {row['range']:<14} {row['description']}")
    return 0


def _cmd_init_db(_: argparse.Namespace) -> int:
    """Create the record collection with validator and indexes (idempotent)."""
    db = ScadaDatabase()
    try:
        db.initialize()
        print(f"Initialized MongoDB collection: {db.records.full_name}")
        return 0
    except PyMongoError as exc:
        print(f"Database initialization failed: {exc}")
        return 1
    finally:
        db.close()


def _cmd_push(args: argparse.Namespace) -> int:
    controller = RainfallController()
    try:
        controller.set_duration(args.duration)
        controller.set_rainfall(args.rainfall)
        controller.set_region(args.region)
        controller.set_weather(args.wind, args.humidity, args.temperature)
        for name, rainfall, population in args.city or []:
            city = controller.add_city(name, rainfall, population)
            print(f"Added {city.name}: {city.status.value}")
        result = controller.submit()
    except RainfallMonitorError as exc:
        print(f"Update failed: {exc}")
        return 1
    print(f"{result.get('message', 'Data updated')} (id={result.get('id')}, "
          f"intensity={controller.record.intensity:.2f} mm/hr, "
          f"hazard={controller.record.hazard_level.value})")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    try:
        monitor = DashboardMonitor()
    except RainfallMonitorError as exc:
        print(exc)
        return 1
    record = monitor.poll_once()
    if args.json:
        print(json.dumps(monitor.snapshot(), indent=2, default=str))
    else:
        print(monitor.generate_alert_report())
    return 0 if record is not None else 1


def _cmd_watch(args: argparse.Namespace) -> int:
    try:
        monitor = DashboardMonitor()
    except RainfallMonitorError as exc:
        print(exc)
        return 1
    monitor.run(interval_seconds=args.interval, max_iterations=args.max_iterations,
                on_update=lambda m: print(m.generate_alert_report()))
    return 0 if monitor.last_error is None else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rainfall-monitor",
        description="Rainfall hazard monitoring CLI",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_assess = sub.add_parser(
        "assess", help="Classify an intensity and print the hazard assessment")
    p_assess.add_argument("--intensity", type=float, required=True,
                          help="Rainfall intensity (mm/hr)")
    p_assess.add_argument("--rainfall", type=float, default=0.0,
                          help="Total rainfall (mm), informational")
    p_assess.add_argument("--json", action="store_true",
                          help="Print the assessment as JSON")
    p_assess.set_defaults(func=_cmd_assess)

    p_city = sub.add_parser(
        "city-status", help="Classify a city's rainfall amount")
    p_city.add_argument("--rainfall", type=float, required=True,
                        help="City rainfall (mm)")
    p_city.set_defaults(func=_cmd_city_status)

    p_scale = sub.add_parser("scale", help="Print the hazard scale")
    p_scale.add_argument("--intensity", type=float, default=0.0,
                         help="Mark the level for this intensity (mm/hr)")
    p_scale.set_defaults(func=_cmd_scale)

    p_init = sub.add_parser(
        "init-db", help="Create the MongoDB record collection & indexes (idempotent)")
    p_init.set_defaults(func=_cmd_init_db)

    p_push = sub.add_parser(
        "push", help="Build a record and broadcast it to all displays")
    p_push.add_argument("--rainfall", type=float, required=True,
                        help="Rainfall (mm)")
    p_push.add_argument("--duration", type=float, required=True,
                        help="Duration (hours)")
    p_push.add_argument("--region", required=True, help="Region name")
    p_push.add_argument("--wind", type=float, help="Wind speed (km/h)")
    p_push.add_argument("--humidity", type=float, help="Humidity (%%)")
    p_push.add_argument("--temperature", type=float,
                        help="Temperature (deg C)")
    p_push.add_argument("--city", type=_parse_city, action="append",
                        help="City as NAME:RAINFALL:POPULATION (repeatable)")
    p_push.set_defaults(func=_cmd_push)

    p_show = sub.add_parser(
        "show", help="Fetch the shared record and print the alert report")
    p_show.add_argument("--json", action="store_true",
                        help="Print all facets as JSON")
    p_show.set_defaults(func=_cmd_show)

    p_watch = sub.add_parser(
        "watch", help="Poll the shared record (bounded loop)")
    p_watch.add_argument("--interval", type=float, default=None,
                         help="Seconds between polls (default POLL_INTERVAL_MS)")
    p_watch.add_argument("--max-iterations", type=int, default=1,
                         help="Run this many polls (default 1)")
    p_watch.set_defaults(func=_cmd_watch)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
