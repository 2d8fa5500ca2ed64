"""Achievement evaluation.

Six milestones, each a fixed threshold over the full history. The
count-based ones can only become true as logs are appended. Consistency
Champion follows the current streak and Peak Performer follows the
preferred period, so both can turn false again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from energy_zen.models import EnergyLog
from energy_zen.progress.models import Achievement
from energy_zen.progress.period import AFTERNOON, EVENING, MORNING, period_window

logger = logging.getLogger(__name__)

PEAK_PERFORMER = "peak_performer"
ENERGY_ALCHEMIST = "energy_alchemist"
BALANCE_KEEPER = "balance_keeper"
CONSISTENCY_CHAMPION = "consistency_champion"
REFLECTION_SAGE = "reflection_sage"
MINDFUL_OBSERVER = "mindful_observer"

ACHIEVEMENT_KEYS = (
    PEAK_PERFORMER,
    ENERGY_ALCHEMIST,
    BALANCE_KEEPER,
    CONSISTENCY_CHAMPION,
    REFLECTION_SAGE,
    MINDFUL_OBSERVER,
)

_TITLES = {
    ENERGY_ALCHEMIST: (
        "Energy Alchemist",
        "Transform your energy: Record 10 days with levels of 8 or higher",
    ),
    BALANCE_KEEPER: ("Balance Keeper", "Balance work and breaks for 7 days"),
    CONSISTENCY_CHAMPION: (
        "Consistency Champion",
        "Maintain a 14-day logging streak",
    ),
    REFLECTION_SAGE: ("Reflection Sage", "Write detailed reflections for 5 days"),
    MINDFUL_OBSERVER: (
        "Mindful Observer",
        "Track multiple factors affecting your energy for 5 days",
    ),
}

_PEAK_TITLES = {
    MORNING: (
        "Morning Peak Performer",
        "Maintain high energy (7+) during morning hours for 5 days",
    ),
    AFTERNOON: (
        "Afternoon Achiever",
        "Maintain high energy (7+) during afternoon hours for 5 days",
    ),
    EVENING: (
        "Evening Excellence",
        "Maintain high energy (7+) during evening hours for 5 days",
    ),
    None: (
        "Peak Performer",
        "Maintain high energy (7+) during your preferred hours for 5 days",
    ),
}


def _count(logs: Sequence[EnergyLog], predicate: Callable[[EnergyLog], bool]) -> int:
    return sum(1 for log in logs if predicate(log))


def _is_balanced(log: EnergyLog) -> bool:
    return (
        any("Break" in a for a in log.activities)
        and any("Work" in a for a in log.activities)
    )


def evaluate_achievements(
    logs: Sequence[EnergyLog],
    current_streak: int,
    preferred_period: str | None,
) -> dict[str, bool]:
    """Evaluate all six achievements.

    Args:
        logs: Full log history.
        current_streak: Streak as computed for the same history.
        preferred_period: Classified period; None uses the morning window.

    Returns:
        Mapping of achievement key to unlocked flag, in display order.
    """
    start, end = period_window(preferred_period)

    flags = {
        PEAK_PERFORMER: _count(
            logs,
            lambda log: start <= log.hour <= end and log.energy_level >= 7,
        ) >= 5,
        ENERGY_ALCHEMIST: _count(logs, lambda log: log.energy_level >= 8) >= 10,
        BALANCE_KEEPER: _count(logs, _is_balanced) >= 7,
        CONSISTENCY_CHAMPION: current_streak >= 14,
        REFLECTION_SAGE: _count(logs, lambda log: len(log.notes) > 50) >= 5,
        MINDFUL_OBSERVER: _count(
            logs,
            lambda log: len(log.positive_factors) >= 3 and len(log.symptoms) >= 2,
        ) >= 5,
    }
    logger.debug(
        "Achievements for %d log(s): %d unlocked",
        len(logs), unlocked_count(flags),
    )
    return flags


def unlocked_count(flags: dict[str, bool]) -> int:
    return sum(1 for unlocked in flags.values() if unlocked)


def mastery_pct(flags: dict[str, bool]) -> int:
    """Share of achievements unlocked, as a whole percentage."""
    if not flags:
        return 0
    return round(unlocked_count(flags) / len(flags) * 100)


def describe_achievements(
    flags: dict[str, bool], preferred_period: str | None
) -> list[Achievement]:
    """Attach display titles to evaluated flags.

    The Peak Performer title names the preferred period.
    """
    result = []
    for key in ACHIEVEMENT_KEYS:
        if key == PEAK_PERFORMER:
            title, description = _PEAK_TITLES.get(preferred_period, _PEAK_TITLES[None])
        else:
            title, description = _TITLES[key]
        result.append(
            Achievement(
                key=key,
                title=title,
                description=description,
                unlocked=flags.get(key, False),
            )
        )
    return result
