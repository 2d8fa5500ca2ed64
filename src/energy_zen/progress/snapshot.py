"""Compute a full progress snapshot from a log history.

Everything is recomputed from the whole history on every call. Nothing is
cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from energy_zen.models import EnergyLog
from energy_zen.progress.achievements import (
    describe_achievements,
    evaluate_achievements,
    mastery_pct,
)
from energy_zen.progress.insights import (
    activity_impact_ranking,
    energy_trend,
    generate_insights,
)
from energy_zen.progress.models import ChallengeProgress, ProgressSnapshot
from energy_zen.progress.period import classify_preferred_period
from energy_zen.progress.points import battery_level, compute_points
from energy_zen.progress.streak import compute_streak, unique_day_count

logger = logging.getLogger(__name__)

CHALLENGE_DAYS = 7


def compute_challenge(unique_days: int) -> ChallengeProgress:
    """Progress through the 7-day challenge that unlocks milestones."""
    return ChallengeProgress(
        unique_days=unique_days,
        days_remaining=max(0, CHALLENGE_DAYS - unique_days),
        progress_pct=min(100, round(unique_days / CHALLENGE_DAYS * 100)),
        unlocked=unique_days >= CHALLENGE_DAYS,
    )


def challenge_just_completed(days_before: int, days_after: int) -> bool:
    """True when an append took the unique-day count to exactly 7."""
    return days_before < CHALLENGE_DAYS and days_after == CHALLENGE_DAYS


def build_snapshot(
    logs: Sequence[EnergyLog], now: datetime | None = None
) -> ProgressSnapshot:
    """Derive every progress metric for ``logs``.

    Args:
        logs: Full log history in insertion order.
        now: Current instant for the streak. Defaults to the local time.

    Returns:
        ProgressSnapshot for the history.
    """
    if now is None:
        now = datetime.now().astimezone()

    days = unique_day_count(logs)
    streak = compute_streak(logs, now)
    period = classify_preferred_period(logs)
    flags = evaluate_achievements(logs, streak, period)

    snapshot = ProgressSnapshot(
        log_count=len(logs),
        unique_day_count=days,
        current_streak=streak,
        total_points=compute_points(logs, streak),
        battery_level=battery_level(logs),
        preferred_period=period,
        achievements=flags,
        insights=generate_insights(logs),
        activity_impact_ranking=activity_impact_ranking(logs),
        challenge=compute_challenge(days),
        achievement_details=describe_achievements(flags, period),
        mastery_pct=mastery_pct(flags),
        energy_trend=energy_trend(logs),
    )
    logger.debug(
        "Snapshot: %d log(s), %d day(s), streak %d, %d point(s)",
        snapshot.log_count, days, streak, snapshot.total_points,
    )
    return snapshot
