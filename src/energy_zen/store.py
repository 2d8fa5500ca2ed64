"""Append-only energy log store with optional JSON persistence."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from .models import EnergyLog

logger = logging.getLogger(__name__)

MIN_ENERGY_LEVEL = 1
MAX_ENERGY_LEVEL = 10


class LogStoreError(Exception):
    """Raised when the log store cannot be read or written."""


class InvalidLogError(LogStoreError):
    """Raised when an entry violates the log contract."""


def normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Strip tags, drop empty ones and repeats, keep first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


def _load_logs(path: Path) -> list[EnergyLog]:
    """Load stored entries. A missing file is an empty history."""
    if not path.exists():
        return []
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise LogStoreError(f"Expected a JSON array in {path}")
        return [EnergyLog.from_dict(item) for item in data]
    except (json.JSONDecodeError, OSError) as e:
        raise LogStoreError(f"Failed to read log store {path}: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        raise LogStoreError(f"Malformed entry in {path}: {e}") from e


def _save_logs(path: Path, logs: Iterable[EnergyLog]) -> None:
    """Write all entries to the store file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump([log.to_dict() for log in logs], f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise LogStoreError(f"Failed to write log store {path}: {e}") from e


class LogStore:
    """Ordered, append-only history of energy logs.

    With ``path=None`` the history lives only as long as the object.
    Otherwise it is loaded from and saved to a JSON file on every append.
    """

    def __init__(self, path: Path | None = None):
        self.path = path
        self._logs: list[EnergyLog] = []
        if path:
            for entry in _load_logs(path):
                try:
                    self._validate(entry)
                except InvalidLogError as e:
                    raise LogStoreError(f"Invalid entry in {path}: {e}") from e
                self._logs.append(entry)
            logger.info("Loaded %d log(s) from %s", len(self._logs), path)

    @property
    def logs(self) -> tuple[EnergyLog, ...]:
        return tuple(self._logs)

    def __len__(self) -> int:
        return len(self._logs)

    def append(self, entry: EnergyLog) -> EnergyLog:
        """Validate and append an entry, persisting when file-backed.

        Raises:
            InvalidLogError: If the level is not an int in 1..10, or the
                entry is dated before the last one.
            LogStoreError: If the file cannot be written. The entry is
                then not added.
        """
        self._validate(entry)
        if self.path:
            _save_logs(self.path, [*self._logs, entry])
        self._logs.append(entry)
        logger.info(
            "Logged energy %d at %s", entry.energy_level, entry.date.isoformat()
        )
        return entry

    def record(
        self,
        energy_level: int,
        symptoms: Iterable[str] = (),
        positive_factors: Iterable[str] = (),
        activities: Iterable[str] = (),
        notes: str = "",
        now: datetime | None = None,
    ) -> EnergyLog:
        """Create an entry stamped with ``now`` and append it."""
        entry = EnergyLog(
            date=now or datetime.now().astimezone(),
            energy_level=energy_level,
            symptoms=normalize_tags(symptoms),
            positive_factors=normalize_tags(positive_factors),
            activities=normalize_tags(activities),
            notes=notes.strip(),
        )
        return self.append(entry)

    def _validate(self, entry: EnergyLog) -> None:
        level = entry.energy_level
        if isinstance(level, bool) or not isinstance(level, int):
            raise InvalidLogError(f"Energy level must be an integer, got {level!r}")
        if not MIN_ENERGY_LEVEL <= level <= MAX_ENERGY_LEVEL:
            raise InvalidLogError(
                f"Energy level must be between {MIN_ENERGY_LEVEL} and "
                f"{MAX_ENERGY_LEVEL}, got {level}"
            )
        if self._logs:
            last = self._logs[-1].date
            try:
                earlier = entry.date < last
            except TypeError as e:
                raise InvalidLogError(
                    "Cannot mix timezone-aware and naive log dates"
                ) from e
            if earlier:
                raise InvalidLogError(
                    f"Entry dated {entry.date.isoformat()} precedes the last "
                    f"entry at {last.isoformat()}"
                )
