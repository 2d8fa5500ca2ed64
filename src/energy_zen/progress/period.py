"""Preferred time-of-day classification."""

from __future__ import annotations

from collections.abc import Sequence

from energy_zen.models import EnergyLog

MORNING = "morning"
AFTERNOON = "afternoon"
EVENING = "evening"

PERIOD_WINDOWS: dict[str, tuple[int, int]] = {
    MORNING: (5, 11),
    AFTERNOON: (12, 16),
    EVENING: (17, 23),
}


def bucket_for_hour(hour: int) -> str:
    """Logging period for an hour. Hours before 5 count as evening."""
    if 5 <= hour < 12:
        return MORNING
    if 12 <= hour < 17:
        return AFTERNOON
    return EVENING


def most_common_first_seen(counts: dict[str, int]) -> str | None:
    """Key with the highest count; ties go to the key inserted first."""
    if not counts:
        return None
    return max(counts, key=counts.__getitem__)


def classify_preferred_period(logs: Sequence[EnergyLog]) -> str | None:
    """The period the user logs in most often, or None for no logs."""
    counts: dict[str, int] = {}
    for log in logs:
        bucket = bucket_for_hour(log.hour)
        counts[bucket] = counts.get(bucket, 0) + 1
    return most_common_first_seen(counts)


def period_window(period: str | None) -> tuple[int, int]:
    """Inclusive hour window for a period; morning when unknown."""
    return PERIOD_WINDOWS.get(period or MORNING, PERIOD_WINDOWS[MORNING])
