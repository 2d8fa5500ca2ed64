"""Energy point scoring."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from energy_zen.models import EnergyLog

BASE_POINTS = 10
STREAK_MULTIPLIER = 2
NOTES_BONUS = 2
ACTIVITIES_BONUS = 3
FACTORS_BONUS = 3
CONSISTENCY_BONUS = 5

BATTERY_FULL_LOGS = 30  # a month of daily logs fills the battery


def compute_points(logs: Sequence[EnergyLog], streak: int) -> int:
    """Total points over the whole history.

    Every log earns the base points and its detail bonuses. While the
    streak is longer than one day, each log also earns ``2 * streak``, so
    the bonus grows with the number of logs rather than being paid once.
    A log earns the consistency bonus when its hour of day appears more
    than once across the history (itself included).
    """
    hour_counts = Counter(log.hour for log in logs)
    streak_bonus = STREAK_MULTIPLIER * streak if streak > 1 else 0

    total = 0
    for log in logs:
        points = BASE_POINTS + streak_bonus
        if log.notes:
            points += NOTES_BONUS
        if log.activities:
            points += ACTIVITIES_BONUS
        if log.positive_factors:
            points += FACTORS_BONUS
        if hour_counts[log.hour] > 1:
            points += CONSISTENCY_BONUS
        total += points
    return total


def battery_level(logs: Sequence[EnergyLog]) -> int:
    """Percentage of a 30-log month filled, capped at 100."""
    if not logs:
        return 0
    return min(100, round(len(logs) / BATTERY_FULL_LOGS * 100))
