"""Narrative insights and activity impact ranking.

The best-factor insight ranks factors by the *sum* of energy levels while
the activity ranking uses the *average*. Frequent factors therefore win
insights even with modest levels. Both behaviours are kept as they are.
"""

from __future__ import annotations

from collections.abc import Sequence

from energy_zen.models import EnergyLog
from energy_zen.progress.models import ActivityImpact, TrendPoint
from energy_zen.progress.period import AFTERNOON, EVENING, MORNING, most_common_first_seen

PEAK_ENERGY_LEVEL = 8
TREND_LENGTH = 7


def _time_block(hour: int) -> str:
    if hour < 12:
        return MORNING
    if hour < 17:
        return AFTERNOON
    return EVENING


def best_time_insight(logs: Sequence[EnergyLog]) -> str | None:
    """When peak-energy (8+) logs happen most often."""
    counts: dict[str, int] = {}
    for log in logs:
        if log.energy_level >= PEAK_ENERGY_LEVEL:
            block = _time_block(log.hour)
            counts[block] = counts.get(block, 0) + 1

    best = most_common_first_seen(counts)
    if best is None:
        return None
    return f"You tend to have highest energy levels during the {best}"


def best_factor_insight(logs: Sequence[EnergyLog]) -> str | None:
    """Positive factor with the highest summed energy level."""
    totals: dict[str, int] = {}
    for log in logs:
        for factor in log.positive_factors:
            totals[factor] = totals.get(factor, 0) + log.energy_level

    best = most_common_first_seen(totals)
    if best is None:
        return None
    return f'"{best}" consistently helps improve your energy levels'


def generate_insights(logs: Sequence[EnergyLog]) -> list[str]:
    insights = []
    for insight in (best_time_insight(logs), best_factor_insight(logs)):
        if insight:
            insights.append(insight)
    return insights


def activity_impact_ranking(logs: Sequence[EnergyLog]) -> list[ActivityImpact]:
    """Average energy level per activity, highest first.

    Activities with equal averages keep first-seen order.
    """
    levels: dict[str, list[int]] = {}
    for log in logs:
        for activity in log.activities:
            levels.setdefault(activity, []).append(log.energy_level)

    ranking = [
        ActivityImpact(
            activity=activity,
            impact=sum(values) / len(values),
            count=len(values),
        )
        for activity, values in levels.items()
        if values
    ]
    ranking.sort(key=lambda item: item.impact, reverse=True)
    return ranking


def energy_trend(
    logs: Sequence[EnergyLog], limit: int = TREND_LENGTH
) -> list[TrendPoint]:
    """The most recent ``limit`` logs as chart points, oldest first."""
    if limit <= 0:
        return []
    return [
        TrendPoint(label=log.day, energy_level=log.energy_level)
        for log in list(logs)[-limit:]
    ]
