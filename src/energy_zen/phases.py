"""Static energy phase configuration.

The three phases of the day, their suggestion lists, and the preset tags
offered when logging. Loaded once at import time and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class EnergyPhase:
    """One phase of the day with its suggestion lists."""

    name: str
    title: str
    description: str
    hours: tuple[int, int]  # inclusive [start, end]
    intensity: str  # low/medium/high
    focus: tuple[str, ...] = ()
    activities: tuple[str, ...] = ()
    breaks: tuple[str, ...] = ()
    social: tuple[str, ...] = ()

    def contains(self, hour: int) -> bool:
        start, end = self.hours
        return start <= hour <= end


_MORNING = EnergyPhase(
    name="morning",
    title="Morning Peak",
    description=(
        "Natural energy peak after waking. "
        "Best for complex tasks and creative work."
    ),
    hours=(6, 11),
    intensity="high",
    focus=(
        "Complex problem solving",
        "Creative work",
        "Important meetings",
        "Strategic planning",
    ),
    activities=(
        "Exercise",
        "Focused work session",
        "Learning new skills",
        "Important presentations",
    ),
    breaks=(
        "Morning meditation",
        "Stretching routine",
        "Quick walk",
        "Healthy breakfast break",
    ),
    social=(
        "Team check-in",
        "Collaborative planning",
        "Mentoring session",
        "Knowledge sharing",
    ),
)

_AFTERNOON = EnergyPhase(
    name="afternoon",
    title="Afternoon Transition",
    description="Natural dip in energy. Focus on lighter tasks and rejuvenation.",
    hours=(12, 16),
    intensity="medium",
    focus=(
        "Administrative tasks",
        "Email management",
        "Team coordination",
        "Documentation",
    ),
    activities=(
        "Light exercise",
        "Organisation tasks",
        "Review work",
        "Planning",
    ),
    breaks=(
        "Power nap (15-20 min)",
        "Mindful breathing",
        "Desk stretches",
        "Lunch away from desk",
    ),
    social=(
        "Lunch with colleagues",
        "Walking meetings",
        "Coffee break chats",
        "Team brainstorming",
    ),
)

_EVENING = EnergyPhase(
    name="evening",
    title="Evening Recovery",
    description=(
        "Wind down period. "
        "Focus on reflection and preparation for tomorrow."
    ),
    hours=(17, 22),
    intensity="low",
    focus=(
        "Review daily achievements",
        "Light reading",
        "Planning next day",
        "Personal development",
    ),
    activities=(
        "Gentle exercise",
        "Hobby projects",
        "Reading",
        "Journaling",
    ),
    breaks=(
        "Evening walk",
        "Relaxation exercises",
        "Screen-free time",
        "Mindful dinner",
    ),
    social=(
        "Family dinner",
        "Social calls",
        "Group hobby activities",
        "Community events",
    ),
)

ENERGY_PHASES = MappingProxyType({
    phase.name: phase for phase in (_MORNING, _AFTERNOON, _EVENING)
})

DRAIN_TAGS = (
    "Fatigue",
    "Stress",
    "Poor Sleep",
    "Dehydration",
    "Hunger",
    "Screen Fatigue",
    "Physical Tension",
    "Mental Fog",
    "Feeling Overwhelmed",
    "Low Motivation",
)

BOOST_TAGS = (
    "Good Sleep",
    "Exercise",
    "Healthy Meal",
    "Meditation",
    "Socialising",
    "Nature Walk",
    "Focused Work",
    "Reading",
    "Creative Activity",
    "Short Break",
)

MORNING_PROMPTS = (
    "What energy state would best serve my goals today?",
    "How can I align my tasks with my natural energy rhythm?",
    "What boundaries do I need to set to protect my energy?",
)

EVENING_PROMPTS = (
    "What activities energized or drained me today?",
    "How did my emotions influence my energy levels?",
    "What patterns am I noticing in my energy management?",
)


def get_phase(name: str) -> EnergyPhase:
    """Look up a phase by name. Raises KeyError for unknown names."""
    return ENERGY_PHASES[name]


def phase_for_hour(hour: int) -> EnergyPhase:
    """Phase whose hour range contains ``hour``; morning outside all ranges."""
    for phase in ENERGY_PHASES.values():
        if phase.contains(hour):
            return phase
    return ENERGY_PHASES["morning"]


def suggested_activities(phase: EnergyPhase) -> list[str]:
    """Activities, breaks and social suggestions, in that order."""
    return [*phase.activities, *phase.breaks, *phase.social]


def reflection_prompts(phase: EnergyPhase) -> tuple[str, ...]:
    """Priming questions before midday, reflection questions afterwards."""
    if phase.name == "morning":
        return MORNING_PROMPTS
    return EVENING_PROMPTS
