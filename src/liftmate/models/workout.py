"""Workout data models.

A workout is a nested, ordered tree: Workout -> Section -> Exercise -> Set.
All entities are frozen; updates go through ``dataclasses.replace`` so a
caller's reference is never changed underneath it.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterator

from ..errors import WorkoutParseError

# A weight/reps value: a number, or None when the field has been cleared
# by the user and should render empty rather than "0".
Number = int | float
SetValue = Number | None

SET_FIELDS = ("weight", "reps")


def _expect_mapping(data: Any, path: str) -> dict:
    if not isinstance(data, dict):
        raise WorkoutParseError(f"expected object, got {type(data).__name__}", path)
    return data


def _expect_list(data: dict, key: str, path: str) -> list:
    if key not in data:
        raise WorkoutParseError(f"missing '{key}'", path)
    value = data[key]
    if not isinstance(value, list):
        raise WorkoutParseError(f"'{key}' must be a list", path)
    return value


def _expect_str(data: dict, key: str, path: str) -> str:
    if key not in data:
        raise WorkoutParseError(f"missing '{key}'", path)
    value = data[key]
    if not isinstance(value, str):
        raise WorkoutParseError(f"'{key}' must be a string", path)
    return value


def _expect_id(data: dict, path: str) -> str:
    if "id" not in data:
        raise WorkoutParseError("missing 'id'", path)
    value = data["id"]
    # Generated ids are sometimes emitted as bare integers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str) or not value:
        raise WorkoutParseError("'id' must be a non-empty string", path)
    return value


def _expect_set_value(data: dict, key: str, path: str) -> SetValue:
    if key not in data:
        raise WorkoutParseError(f"missing '{key}'", path)
    value = data[key]
    if value is None or value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WorkoutParseError(f"'{key}' must be a number", path)
    # json.loads accepts NaN and Infinity, which cannot be written back as JSON
    if not math.isfinite(value):
        raise WorkoutParseError(f"'{key}' must be a finite number", path)
    return value


def _parse_date(value: Any, path: str) -> date:
    if not isinstance(value, str):
        raise WorkoutParseError("'date' must be an ISO 8601 string", path)
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise WorkoutParseError(f"invalid date '{value}'", path) from None


@dataclass(frozen=True)
class WorkoutSet:
    """A single set of an exercise."""

    id: str
    weight: SetValue = 0
    reps: SetValue = 0
    is_completed: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "weight": self.weight,
            "reps": self.reps,
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "set") -> "WorkoutSet":
        """Create from dictionary."""
        data = _expect_mapping(data, path)
        is_completed = data.get("isCompleted", False)
        if not isinstance(is_completed, bool):
            raise WorkoutParseError("'isCompleted' must be a boolean", path)
        return cls(
            id=_expect_id(data, path),
            weight=_expect_set_value(data, "weight", path),
            reps=_expect_set_value(data, "reps", path),
            is_completed=is_completed,
        )

    @property
    def volume(self) -> Number:
        """Weight x reps, treating cleared values as zero."""
        return (self.weight or 0) * (self.reps or 0)


@dataclass(frozen=True)
class Exercise:
    """An exercise and its ordered sets."""

    id: str
    name: str
    sets: tuple[WorkoutSet, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "exercise") -> "Exercise":
        """Create from dictionary."""
        data = _expect_mapping(data, path)
        return cls(
            id=_expect_id(data, path),
            name=_expect_str(data, "name", path),
            sets=tuple(
                WorkoutSet.from_dict(s, f"{path}.sets[{i}]")
                for i, s in enumerate(_expect_list(data, "sets", path))
            ),
        )


@dataclass(frozen=True)
class Section:
    """A titled group of exercises, e.g. warm-up or cool-down."""

    title: str
    exercises: tuple[Exercise, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "section") -> "Section":
        """Create from dictionary."""
        data = _expect_mapping(data, path)
        return cls(
            title=_expect_str(data, "title", path),
            exercises=tuple(
                Exercise.from_dict(ex, f"{path}.exercises[{i}]")
                for i, ex in enumerate(_expect_list(data, "exercises", path))
            ),
        )


@dataclass(frozen=True)
class Workout:
    """A single day's workout."""

    id: str
    date: date
    theme: str
    reason: str
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "theme": self.theme,
            "reason": self.reason,
            "sections": [section.to_dict() for section in self.sections],
        }

    @classmethod
    def from_dict(cls, data: Any, id: str | None = None) -> "Workout":
        """Create from dictionary.

        Args:
            data: Decoded JSON object
            id: Identifier to use instead of the payload's own ``id``

        Raises:
            WorkoutParseError: If the payload does not match the schema
        """
        data = _expect_mapping(data, "workout")
        if "date" not in data:
            raise WorkoutParseError("missing 'date'", "workout")
        return cls(
            id=id if id is not None else _expect_id(data, "workout"),
            date=_parse_date(data["date"], "workout"),
            theme=_expect_str(data, "theme", "workout"),
            reason=_expect_str(data, "reason", "workout"),
            sections=tuple(
                Section.from_dict(section, f"sections[{i}]")
                for i, section in enumerate(_expect_list(data, "sections", "workout"))
            ),
        )

    def iter_sets(self) -> Iterator[tuple[Section, Exercise, WorkoutSet]]:
        """Yield every set in display order with its parents."""
        for section in self.sections:
            for exercise in section.exercises:
                for workout_set in exercise.sets:
                    yield section, exercise, workout_set

    def total_volume(self) -> Number:
        """Total weight x reps across all sets."""
        return sum(s.volume for _, _, s in self.iter_sets())

    def completed_set_count(self) -> int:
        """Number of sets marked completed."""
        return sum(1 for _, _, s in self.iter_sets() if s.is_completed)

    def set_count(self) -> int:
        return sum(1 for _ in self.iter_sets())

    def get_summary(self) -> str:
        """Generate a plain-text summary of the workout."""
        summary = f"{self.date.isoformat()}  {self.theme}\n"
        if self.reason:
            summary += f"{self.reason}\n"
        summary += "\n"

        for section in self.sections:
            summary += f"[{section.title}]\n"
            for exercise in section.exercises:
                summary += f"  {exercise.name} ({exercise.id})\n"
                for index, s in enumerate(exercise.sets, start=1):
                    mark = "x" if s.is_completed else " "
                    weight = "" if s.weight is None else s.weight
                    reps = "" if s.reps is None else s.reps
                    summary += f"    [{mark}] {index}. {weight} kg x {reps}  ({s.id})\n"
            summary += "\n"

        return summary


@dataclass(frozen=True)
class StoredWorkout:
    """A completed workout as persisted in the record store."""

    id: str
    user_id: str
    workout: Workout
    created_at: datetime | None = None

    @property
    def date(self) -> date:
        return self.workout.date

    @property
    def theme(self) -> str:
        return self.workout.theme

    def to_dict(self) -> dict:
        data = self.workout.to_dict()
        data["id"] = self.id
        data["user_id"] = self.user_id
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data
