"""Consecutive-day logging streaks."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from energy_zen.models import EnergyLog, local_day


def logged_days(logs: Sequence[EnergyLog]) -> list[str]:
    """Distinct calendar days (YYYY-MM-DD) with at least one log, newest first."""
    return sorted({log.day for log in logs}, reverse=True)


def unique_day_count(logs: Sequence[EnergyLog]) -> int:
    return len({log.day for log in logs})


def compute_streak(logs: Sequence[EnergyLog], now: datetime) -> int:
    """Count consecutive logged days ending today.

    A history whose most recent day is not today has a streak of 0, no
    matter how long the run before it was. Several logs on the same day
    count once; only dates matter.

    Args:
        logs: Log history in insertion order.
        now: The current instant; its local calendar day is "today".

    Returns:
        Streak length in days.
    """
    days = logged_days(logs)
    if not days:
        return 0

    today = local_day(now)
    if days[0] != today:
        return 0

    day_set = set(days)
    streak = 1
    cursor = date.fromisoformat(today) - timedelta(days=1)
    while cursor.isoformat() in day_set:
        streak += 1
        cursor -= timedelta(days=1)
    return streak
