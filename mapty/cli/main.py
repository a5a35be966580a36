"""Terminal entrypoint for Mapty."""

from __future__ import annotations

import argparse
from pathlib import Path

from loguru import logger

from mapty.core.logger import setup_logger
from mapty.ui.geolocation import parse_fixed_location
from mapty.workout.render import build_entry
from mapty.workout.storage import FileStorage
from mapty.workout.store import WorkoutStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mapty workout map")
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for the web UI",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8080,
        help="Port for the web UI",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=None,
        help="Directory holding stored workouts (default: ~/.mapty/storage)",
    )
    parser.add_argument(
        "--location",
        default=None,
        metavar="LAT,LNG",
        help="Use a fixed position instead of asking the browser",
    )
    parser.add_argument(
        "--geolocation-timeout",
        type=float,
        default=60.0,
        help="Seconds to wait for the browser to report its position",
    )
    parser.add_argument("--list", action="store_true", help="Print stored workouts and exit")
    parser.add_argument("--reset", action="store_true", help="Delete stored workouts and exit")
    parser.add_argument("--log-level", default="INFO", help="Log level (DEBUG, INFO, ...)")
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write a per-run log file into this directory",
    )
    return parser


def run_list(storage_dir: Path | None) -> int:
    store = WorkoutStore(FileStorage(storage_dir))
    store.load()
    if not len(store):
        print("No workouts stored")
        return 0

    for workout in reversed(store.workouts):
        entry = build_entry(workout)
        details = "  ".join(f"{d.value} {d.unit}" for d in entry.details)
        print(f"{entry.id}  {entry.title:<24} {details}")
    return 0


def run_reset(storage_dir: Path | None) -> int:
    store = WorkoutStore(FileStorage(storage_dir))
    store.clear()
    print("Stored workouts deleted")
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    setup_logger(level=args.log_level.upper(), log_dir=args.log_dir)

    if args.list:
        return run_list(args.storage_dir)
    if args.reset:
        return run_reset(args.storage_dir)

    location = None
    if args.location is not None:
        try:
            location = parse_fixed_location(args.location)
        except ValueError as exc:
            parser.error(str(exc))
        logger.info(f"Using fixed location {location[0]}, {location[1]}")

    from mapty.ui.web_app import run_web_ui

    return run_web_ui(
        storage_dir=args.storage_dir,
        host=args.web_host,
        port=args.web_port,
        location=location,
        geolocation_timeout=max(1.0, args.geolocation_timeout),
    )


if __name__ == "__main__":
    raise SystemExit(main())
