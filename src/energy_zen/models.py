"""Energy log entry model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class EnergyLog:
    """A single energy observation.

    Entries are created once, stamped with the time they were logged, and
    never edited afterwards. ``energy_level`` is expected to be within
    1..10; the log store enforces that, the analytics assume it.
    """

    date: datetime
    energy_level: int
    symptoms: tuple[str, ...] = ()  # drains
    positive_factors: tuple[str, ...] = ()  # boosts
    activities: tuple[str, ...] = ()
    notes: str = ""

    @property
    def local_time(self) -> datetime:
        """Timestamp in local time. Naive timestamps are already local."""
        if self.date.tzinfo is None:
            return self.date
        return self.date.astimezone()

    @property
    def day(self) -> str:
        """Calendar day as YYYY-MM-DD."""
        return self.local_time.strftime("%Y-%m-%d")

    @property
    def hour(self) -> int:
        return self.local_time.hour

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "energy_level": self.energy_level,
            "symptoms": list(self.symptoms),
            "positive_factors": list(self.positive_factors),
            "activities": list(self.activities),
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EnergyLog:
        """Build an entry from its stored form.

        Accepts the trailing ``Z`` UTC designator in ``date``.

        Raises:
            KeyError: If ``date`` or ``energy_level`` is missing.
            TypeError: If a field has the wrong type, e.g. a float level
                or a bare string where a tag list belongs.
            ValueError: If ``date`` is not an ISO-8601 timestamp.
        """
        raw_date = data["date"]
        if isinstance(raw_date, str):
            date = datetime.fromisoformat(raw_date.replace("Z", "+00:00"))
        elif isinstance(raw_date, datetime):
            date = raw_date
        else:
            raise TypeError(f"date must be an ISO-8601 string, got {raw_date!r}")

        level = data["energy_level"]
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError(f"energy_level must be an integer, got {level!r}")

        notes = data.get("notes") or ""
        if not isinstance(notes, str):
            raise TypeError(f"notes must be a string, got {notes!r}")

        return cls(
            date=date,
            energy_level=level,
            symptoms=_tag_tuple(data, "symptoms"),
            positive_factors=_tag_tuple(data, "positive_factors"),
            activities=_tag_tuple(data, "activities"),
            notes=notes,
        )


def _tag_tuple(data: dict[str, Any], key: str) -> tuple[str, ...]:
    tags = data.get(key, [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise TypeError(f"{key} must be a list of strings, got {tags!r}")
    return tuple(tags)


def local_day(moment: datetime) -> str:
    """Calendar day (YYYY-MM-DD) of ``moment`` in local time."""
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime("%Y-%m-%d")
