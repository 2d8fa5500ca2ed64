"""Tests for point scoring and battery level."""

from __future__ import annotations

from datetime import datetime

from energy_zen.models import EnergyLog
from energy_zen.progress.points import battery_level, compute_points


def _log(
    when: datetime,
    notes: str = "",
    activities: tuple[str, ...] = (),
    factors: tuple[str, ...] = (),
) -> EnergyLog:
    return EnergyLog(
        date=when,
        energy_level=5,
        activities=activities,
        positive_factors=factors,
        notes=notes,
    )


def test_empty_history() -> None:
    assert compute_points([], 0) == 0
    assert compute_points([], 5) == 0


def test_base_points_only() -> None:
    logs = [_log(datetime(2026, 2, 11, 9, 0))]
    assert compute_points(logs, 1) == 10


def test_detail_bonuses() -> None:
    logs = [
        _log(
            datetime(2026, 2, 11, 9, 0),
            notes="ok",
            activities=("Exercise",),
            factors=("Good Sleep",),
        )
    ]
    assert compute_points(logs, 0) == 10 + 2 + 3 + 3


def test_each_detail_bonus_independent() -> None:
    when = datetime(2026, 2, 11, 9, 0)
    assert compute_points([_log(when, notes="x")], 0) == 12
    assert compute_points([_log(when, activities=("Reading",))], 0) == 13
    assert compute_points([_log(when, factors=("Meditation",))], 0) == 13


def test_consistency_bonus_for_repeated_hour() -> None:
    logs = [
        _log(datetime(2026, 2, 9, 9, 5)),
        _log(datetime(2026, 2, 10, 9, 40)),
        _log(datetime(2026, 2, 11, 14, 0)),
    ]
    # Two 9 o'clock logs earn the bonus, the 14 o'clock one does not
    assert compute_points(logs, 0) == 15 + 15 + 10


def test_streak_bonus_applied_per_log() -> None:
    logs = [
        _log(datetime(2026, 2, 9, 8, 0)),
        _log(datetime(2026, 2, 10, 12, 0)),
        _log(datetime(2026, 2, 11, 18, 0)),
    ]
    assert compute_points(logs, 3) == 3 * (10 + 2 * 3)


def test_no_streak_bonus_for_one_day() -> None:
    logs = [_log(datetime(2026, 2, 11, 8, 0))]
    assert compute_points(logs, 1) == 10


def test_streak_change_recomputes_every_log() -> None:
    logs = [_log(datetime(2026, 2, d, 8 + d, 0)) for d in range(1, 6)]
    assert compute_points(logs, 5) - compute_points(logs, 0) == 5 * 10


def test_points_floor() -> None:
    logs = [_log(datetime(2026, 2, 11, h, 0)) for h in range(0, 24, 3)]
    for streak in (0, 1, 2, 14):
        assert compute_points(logs, streak) >= 10 * len(logs)


class TestBatteryLevel:
    def test_empty(self) -> None:
        assert battery_level([]) == 0

    def test_rounding(self) -> None:
        when = datetime(2026, 2, 11, 9, 0)
        assert battery_level([_log(when)]) == 3
        assert battery_level([_log(when)] * 2) == 7
        assert battery_level([_log(when)] * 15) == 50

    def test_capped_at_100(self) -> None:
        when = datetime(2026, 2, 11, 9, 0)
        assert battery_level([_log(when)] * 30) == 100
        assert battery_level([_log(when)] * 45) == 100
