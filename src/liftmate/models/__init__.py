"""Data models for liftmate."""

from .profile import Goal, Language, Level, Profile
from .workout import (
    SET_FIELDS,
    Exercise,
    Section,
    StoredWorkout,
    Workout,
    WorkoutSet,
)

__all__ = [
    "Exercise",
    "Goal",
    "Language",
    "Level",
    "Profile",
    "SET_FIELDS",
    "Section",
    "StoredWorkout",
    "Workout",
    "WorkoutSet",
]
