"""Database layer for liftmate."""

from .engine import get_db_path, init_db
from .repositories import ProfileRepository, WorkoutRepository

__all__ = [
    "get_db_path",
    "init_db",
    "ProfileRepository",
    "WorkoutRepository",
]
