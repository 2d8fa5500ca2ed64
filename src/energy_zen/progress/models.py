"""Data models for progress analytics."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass
class ActivityImpact:
    """Average energy level recorded alongside an activity."""

    activity: str
    impact: float  # mean energy_level
    count: int = 0


@dataclass
class Achievement:
    """A milestone with its display text."""

    key: str
    title: str
    description: str
    unlocked: bool = False


@dataclass
class ChallengeProgress:
    """Progress through the 7-day logging challenge."""

    unique_days: int = 0
    days_remaining: int = 7
    progress_pct: int = 0
    unlocked: bool = False


@dataclass
class TrendPoint:
    """One point of the recent energy trend."""

    label: str  # YYYY-MM-DD
    energy_level: int


@dataclass
class ProgressSnapshot:
    """Everything derived from a log history at one moment."""

    log_count: int = 0
    unique_day_count: int = 0
    current_streak: int = 0
    total_points: int = 0
    battery_level: int = 0
    preferred_period: str | None = None  # morning/afternoon/evening
    achievements: dict[str, bool] = field(default_factory=dict)
    insights: list[str] = field(default_factory=list)
    activity_impact_ranking: list[ActivityImpact] = field(default_factory=list)
    challenge: ChallengeProgress = field(default_factory=ChallengeProgress)
    achievement_details: list[Achievement] = field(default_factory=list)
    mastery_pct: int = 0
    energy_trend: list[TrendPoint] = field(default_factory=list)

    @property
    def has_unlocked_milestones(self) -> bool:
        return self.challenge.unlocked

    def to_dict(self) -> dict:
        """Return a JSON-ready dictionary."""
        return asdict(self)
