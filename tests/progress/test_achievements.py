"""Tests for achievement evaluation."""

from __future__ import annotations

from datetime import datetime, timedelta

from energy_zen.models import EnergyLog
from energy_zen.progress.achievements import (
    ACHIEVEMENT_KEYS,
    describe_achievements,
    evaluate_achievements,
    mastery_pct,
    unlocked_count,
)
from energy_zen.progress.period import classify_preferred_period

START = datetime(2026, 1, 1)


def _log(
    index: int,
    hour: int = 9,
    level: int = 5,
    symptoms: tuple[str, ...] = (),
    factors: tuple[str, ...] = (),
    activities: tuple[str, ...] = (),
    notes: str = "",
) -> EnergyLog:
    return EnergyLog(
        date=(START + timedelta(days=index)).replace(hour=hour),
        energy_level=level,
        symptoms=symptoms,
        positive_factors=factors,
        activities=activities,
        notes=notes,
    )


def _evaluate(logs: list[EnergyLog], streak: int = 0) -> dict[str, bool]:
    return evaluate_achievements(logs, streak, classify_preferred_period(logs))


def test_empty_history_all_locked() -> None:
    flags = evaluate_achievements([], 0, None)
    assert list(flags) == list(ACHIEVEMENT_KEYS)
    assert not any(flags.values())


class TestEnergyAlchemist:
    def test_nine_high_logs_not_enough(self) -> None:
        logs = [_log(i, level=8) for i in range(9)]
        assert _evaluate(logs)["energy_alchemist"] is False

    def test_ten_high_logs(self) -> None:
        logs = [_log(i, level=8) for i in range(10)]
        assert _evaluate(logs)["energy_alchemist"] is True

    def test_level_seven_does_not_count(self) -> None:
        logs = [_log(i, level=7) for i in range(12)]
        assert _evaluate(logs)["energy_alchemist"] is False


class TestPeakPerformer:
    def test_five_high_morning_logs(self) -> None:
        logs = [_log(i, hour=7, level=7) for i in range(5)]
        assert _evaluate(logs)["peak_performer"] is True

    def test_level_below_seven(self) -> None:
        logs = [_log(i, hour=7, level=6) for i in range(8)]
        assert _evaluate(logs)["peak_performer"] is False

    def test_window_follows_preferred_period(self) -> None:
        morning = [_log(i, hour=8, level=9) for i in range(5)]
        evening = [_log(i + 5, hour=20, level=3) for i in range(6)]
        logs = morning + evening
        assert classify_preferred_period(logs) == "evening"
        assert _evaluate(logs)["peak_performer"] is False

    def test_none_period_uses_morning_window(self) -> None:
        logs = [_log(i, hour=10, level=8) for i in range(5)]
        assert evaluate_achievements(logs, 0, None)["peak_performer"] is True

    def test_window_ends_inclusive(self) -> None:
        logs = [_log(i, hour=11, level=7) for i in range(5)]
        assert evaluate_achievements(logs, 0, "morning")["peak_performer"] is True
        logs = [_log(i, hour=23, level=7) for i in range(5)]
        assert evaluate_achievements(logs, 0, "evening")["peak_performer"] is True

    def test_can_be_lost_again(self) -> None:
        logs = [_log(i, hour=8, level=9) for i in range(5)]
        assert _evaluate(logs)["peak_performer"] is True
        logs += [_log(i + 5, hour=14, level=2) for i in range(6)]
        assert _evaluate(logs)["peak_performer"] is False


def test_mixed_morning_scenario() -> None:
    hours = [6, 7, 8, 9, 10, 11, 18, 19, 20, 21]
    logs = [_log(i, hour=h, level=8) for i, h in enumerate(hours)]
    assert classify_preferred_period(logs) == "morning"
    flags = _evaluate(logs)
    assert flags["energy_alchemist"] is True
    assert flags["peak_performer"] is True


class TestBalanceKeeper:
    def test_seven_balanced_logs(self) -> None:
        logs = [_log(i, activities=("Short Break", "Deep Work")) for i in range(7)]
        assert _evaluate(logs)["balance_keeper"] is True

    def test_six_balanced_logs(self) -> None:
        logs = [_log(i, activities=("Short Break", "Deep Work")) for i in range(6)]
        assert _evaluate(logs)["balance_keeper"] is False

    def test_needs_both_tags(self) -> None:
        logs = [_log(i, activities=("Short Break",)) for i in range(10)]
        assert _evaluate(logs)["balance_keeper"] is False

    def test_substring_match_is_case_sensitive(self) -> None:
        logs = [_log(i, activities=("Coffee break chats", "Review work")) for i in range(10)]
        assert _evaluate(logs)["balance_keeper"] is False


class TestConsistencyChampion:
    def test_thirteen_day_streak(self) -> None:
        assert evaluate_achievements([], 13, None)["consistency_champion"] is False

    def test_fourteen_day_streak(self) -> None:
        assert evaluate_achievements([], 14, None)["consistency_champion"] is True


class TestReflectionSage:
    def test_long_notes(self) -> None:
        logs = [_log(i, notes="x" * 51) for i in range(5)]
        assert _evaluate(logs)["reflection_sage"] is True

    def test_fifty_characters_not_enough(self) -> None:
        logs = [_log(i, notes="x" * 50) for i in range(10)]
        assert _evaluate(logs)["reflection_sage"] is False


class TestMindfulObserver:
    def test_enough_factors_and_symptoms(self) -> None:
        logs = [
            _log(i, factors=("A", "B", "C"), symptoms=("X", "Y"))
            for i in range(5)
        ]
        assert _evaluate(logs)["mindful_observer"] is True

    def test_too_few_factors(self) -> None:
        logs = [_log(i, factors=("A", "B"), symptoms=("X", "Y")) for i in range(8)]
        assert _evaluate(logs)["mindful_observer"] is False

    def test_too_few_symptoms(self) -> None:
        logs = [_log(i, factors=("A", "B", "C"), symptoms=("X",)) for i in range(8)]
        assert _evaluate(logs)["mindful_observer"] is False


def test_count_based_achievements_never_relock() -> None:
    history = []
    for i in range(30):
        history.append(
            _log(
                i,
                hour=(6 + i * 5) % 24,
                level=3 + i % 8,
                symptoms=("Stress", "Fatigue")[: i % 3],
                factors=("Exercise", "Reading", "Meditation")[: i % 4],
                activities=("Short Break", "Focused Work")[: i % 3],
                notes="n" * (i * 7 % 80),
            )
        )

    keys = ("energy_alchemist", "reflection_sage", "mindful_observer", "balance_keeper")
    previous = {key: False for key in keys}
    for n in range(1, len(history) + 1):
        flags = _evaluate(history[:n])
        for key in keys:
            assert flags[key] or not previous[key], key
            previous[key] = flags[key]


class TestDescribeAchievements:
    def test_titles_follow_period(self) -> None:
        flags = evaluate_achievements([], 0, None)
        titles = {
            period: describe_achievements(flags, period)[0].title
            for period in ("morning", "afternoon", "evening", None)
        }
        assert titles == {
            "morning": "Morning Peak Performer",
            "afternoon": "Afternoon Achiever",
            "evening": "Evening Excellence",
            None: "Peak Performer",
        }

    def test_flags_carried_over(self) -> None:
        flags = evaluate_achievements([], 14, "evening")
        details = describe_achievements(flags, "evening")
        assert [a.key for a in details] == list(ACHIEVEMENT_KEYS)
        unlocked = [a.title for a in details if a.unlocked]
        assert unlocked == ["Consistency Champion"]


class TestMastery:
    def test_counts(self) -> None:
        flags = dict.fromkeys(ACHIEVEMENT_KEYS, False)
        assert unlocked_count(flags) == 0
        assert mastery_pct(flags) == 0
        flags["energy_alchemist"] = True
        flags["reflection_sage"] = True
        flags["balance_keeper"] = True
        assert unlocked_count(flags) == 3
        assert mastery_pct(flags) == 50

    def test_empty_flags(self) -> None:
        assert mastery_pct({}) == 0
