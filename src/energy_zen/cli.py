"""CLI entry point for energy-zen."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime

from .config import Config
from .phases import (
    BOOST_TAGS,
    DRAIN_TAGS,
    phase_for_hour,
    reflection_prompts,
    suggested_activities,
)
from .progress.formatter import format_report
from .progress.snapshot import build_snapshot, challenge_just_completed
from .progress.streak import compute_streak, unique_day_count
from .store import LogStore, LogStoreError

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(message)s",
        level=level,
        stream=sys.stderr,
    )


def _load_config(args: argparse.Namespace) -> Config:
    overrides = {}
    if getattr(args, "log_file", None):
        overrides["log_file"] = args.log_file
    if getattr(args, "verbose", False):
        overrides["verbose"] = True
    return Config.load(overrides)


def _handle_log(args: argparse.Namespace, config: Config) -> int:
    """Handle log command."""
    store = LogStore(config.log_file)
    days_before = unique_day_count(store.logs)

    entry = store.record(
        energy_level=args.level,
        symptoms=args.drain,
        positive_factors=args.boost,
        activities=args.activity,
        notes=args.notes,
    )

    logs = store.logs
    streak = compute_streak(logs, entry.date)
    print(f"Logged energy {entry.energy_level}/10. Current streak: {streak} day(s)")

    if challenge_just_completed(days_before, unique_day_count(logs)):
        print(
            "Congratulations! You've completed 7 days of energy tracking. "
            "Your personalised energy insights are now unlocked."
        )
    return 0


def _handle_report(args: argparse.Namespace, config: Config) -> int:
    """Handle report command."""
    store = LogStore(config.log_file)
    now = datetime.now().astimezone()
    snapshot = build_snapshot(store.logs, now)

    if args.json:
        print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))
        return 0

    created = now.strftime("%Y-%m-%d")
    markdown = format_report(snapshot, created)
    if args.write:
        config.report_dir.mkdir(parents=True, exist_ok=True)
        output_path = config.report_dir / f"ENERGY-{created}.md"
        output_path.write_text(markdown, encoding="utf-8")
        logger.info("Wrote: %s", output_path)
        print(f"Wrote report to {output_path}")
    else:
        print(markdown)
    return 0


def _handle_suggest(args: argparse.Namespace) -> int:
    """Handle suggest command."""
    hour = args.hour if args.hour is not None else datetime.now().hour
    phase = phase_for_hour(hour)
    start, end = phase.hours

    print(f"{phase.title} ({start}:00-{end}:59)")
    print(phase.description)
    print("")
    print("Focus:")
    for item in phase.focus:
        print(f"- {item}")
    print("")
    print("Suggested activities:")
    for item in suggested_activities(phase):
        print(f"- {item}")
    print("")
    print(f"Energy drains: {', '.join(DRAIN_TAGS)}")
    print(f"Energy boosters: {', '.join(BOOST_TAGS)}")
    print("")
    print("Reflection:")
    for prompt in reflection_prompts(phase):
        print(f"- {prompt}")
    return 0


def _energy_level(value: str) -> int:
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid energy level: {value!r}")
    if not 1 <= level <= 10:
        raise argparse.ArgumentTypeError("energy level must be between 1 and 10")
    return level


def _hour(value: str) -> int:
    try:
        hour = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hour: {value!r}")
    if not 0 <= hour <= 23:
        raise argparse.ArgumentTypeError("hour must be between 0 and 23")
    return hour


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="energy-zen",
        description="Log daily energy and track streaks, points and achievements",
    )
    subparsers = parser.add_subparsers(dest="command")

    # log subcommand
    log_parser = subparsers.add_parser("log", help="Record an energy observation")
    log_parser.add_argument(
        "--level", "-l", type=_energy_level, required=True,
        help="Energy level from 1 (drained) to 10 (energised)"
    )
    log_parser.add_argument(
        "--drain", action="append", default=[],
        help="Energy drain tag (repeatable)"
    )
    log_parser.add_argument(
        "--boost", action="append", default=[],
        help="Energy booster tag (repeatable)"
    )
    log_parser.add_argument(
        "--activity", action="append", default=[],
        help="Completed activity (repeatable)"
    )
    log_parser.add_argument("--notes", type=str, default="", help="Free-text notes")
    log_parser.add_argument("--log-file", type=str, dest="log_file", help="Override log file path")
    log_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    # report subcommand
    report_parser = subparsers.add_parser("report", help="Show progress and insights")
    report_parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    report_parser.add_argument(
        "--write", action="store_true",
        help="Write the Markdown report to the report directory"
    )
    report_parser.add_argument("--log-file", type=str, dest="log_file", help="Override log file path")
    report_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    # suggest subcommand
    suggest_parser = subparsers.add_parser(
        "suggest", help="Show suggestions for the current energy phase"
    )
    suggest_parser.add_argument(
        "--hour", type=_hour, default=None,
        help="Hour of day (0-23) instead of the current hour"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "suggest":
        _setup_logging(False)
        return _handle_suggest(args)

    config = _load_config(args)
    _setup_logging(config.verbose)
    try:
        if args.command == "log":
            return _handle_log(args, config)
        if args.command == "report":
            return _handle_report(args, config)
    except LogStoreError as e:
        print(f"Log store error: {e}")
        return 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
