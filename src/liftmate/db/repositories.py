"""Data access layer for liftmate."""

import json
import logging
from contextlib import asynccontextmanager
from datetime import date, datetime
from pathlib import Path
from typing import AsyncIterator
from uuid import uuid4

import aiosqlite

from ..errors import RemoteStoreError
from ..models.profile import Language, Profile
from ..models.workout import Section, StoredWorkout, Workout
from .engine import get_db_path

logger = logging.getLogger(__name__)


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


@asynccontextmanager
async def _connect(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection, reporting any database failure as RemoteStoreError."""
    try:
        async with aiosqlite.connect(db_path) as db:
            db.row_factory = aiosqlite.Row
            yield db
    except aiosqlite.Error as e:
        logger.error("Record store failure on %s: %s", db_path, e)
        raise RemoteStoreError(str(e)) from e


class WorkoutRepository:
    """Repository for completed workouts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: Workout, user_id: str) -> str:
        """Store a completed workout and return its new ID.

        The workout's own (draft) ID is not reused.
        """
        workout_id = uuid4().hex
        data = workout.to_dict()
        async with _connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO workouts (id, user_id, date, theme, reason, sections)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    workout_id,
                    user_id,
                    data["date"],
                    data["theme"],
                    data["reason"],
                    json.dumps(data["sections"], ensure_ascii=False),
                ),
            )
            await db.commit()
        logger.info("Stored workout %s for user %s", workout_id, user_id)
        return workout_id

    async def get(self, workout_id: str, user_id: str) -> StoredWorkout | None:
        """Get a workout by ID, scoped to its owner."""
        async with _connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ? AND user_id = ?",
                (workout_id, user_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_for_user(
        self, user_id: str, descending: bool = True
    ) -> list[StoredWorkout]:
        """List all workouts of a user ordered by date."""
        order = "DESC" if descending else "ASC"
        async with _connect(self.db_path) as db:
            cursor = await db.execute(
                f"""
                SELECT * FROM workouts WHERE user_id = ?
                ORDER BY date {order}, created_at {order}
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def recent_history(self, user_id: str, limit: int = 5) -> list[tuple[date, str]]:
        """Most recent (date, theme) pairs, newest first."""
        async with _connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT date, theme FROM workouts WHERE user_id = ?
                ORDER BY date DESC, created_at DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
            rows = await cursor.fetchall()
            return [(date.fromisoformat(row["date"]), row["theme"]) for row in rows]

    async def delete(self, workout_id: str, user_id: str) -> bool:
        """Delete a workout. Returns False if nothing matched."""
        async with _connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM workouts WHERE id = ? AND user_id = ?",
                (workout_id, user_id),
            )
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted workout %s", workout_id)
        return deleted

    def _row_to_workout(self, row: aiosqlite.Row) -> StoredWorkout:
        """Convert a database row to a StoredWorkout."""
        workout = Workout(
            id=row["id"],
            date=date.fromisoformat(row["date"]),
            theme=row["theme"],
            reason=row["reason"] or "",
            sections=tuple(
                Section.from_dict(section, f"sections[{i}]")
                for i, section in enumerate(json.loads(row["sections"]))
            ),
        )
        return StoredWorkout(
            id=row["id"],
            user_id=row["user_id"],
            workout=workout,
            created_at=_parse_timestamp(row["created_at"]),
        )


class ProfileRepository:
    """Repository for user profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, user_id: str) -> Profile | None:
        """Get a user's profile."""
        async with _connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM profiles WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def upsert(self, profile: Profile) -> None:
        """Create the profile or update it in place."""
        data = profile.to_dict()
        async with _connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO profiles (user_id, goal, level, personal_info, language)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    goal = excluded.goal,
                    level = excluded.level,
                    personal_info = excluded.personal_info,
                    language = excluded.language,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (
                    data["user_id"],
                    data["goal"],
                    data["level"],
                    data["personal_info"],
                    data["language"],
                ),
            )
            await db.commit()

    async def set_language(self, user_id: str, language: Language) -> None:
        """Change only the language preference."""
        async with _connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO profiles (user_id, language) VALUES (?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    language = excluded.language,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (user_id, language.value),
            )
            await db.commit()

    def _row_to_profile(self, row: aiosqlite.Row) -> Profile:
        """Convert a database row to a Profile."""
        data = {
            "user_id": row["user_id"],
            "goal": row["goal"],
            "level": row["level"],
            "personal_info": row["personal_info"],
            "language": row["language"],
        }
        return Profile.from_dict(
            data,
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )
