"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import settings
from ..errors import RemoteStoreError

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = settings.DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "liftmate.db"


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Run database migrations for schema updates."""
    # Profiles created before language support
    cursor = await db.execute("PRAGMA table_info(profiles)")
    columns = await cursor.fetchall()
    profile_columns = {col[1] for col in columns}

    if "language" not in profile_columns:
        await db.execute("ALTER TABLE profiles ADD COLUMN language TEXT DEFAULT 'ja'")
    if "personal_info" not in profile_columns:
        await db.execute("ALTER TABLE profiles ADD COLUMN personal_info TEXT DEFAULT ''")

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    try:
        async with aiosqlite.connect(db_path) as db:
            # Completed workouts
            await db.execute("""
                CREATE TABLE IF NOT EXISTS workouts (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    date TEXT NOT NULL,
                    theme TEXT NOT NULL,
                    reason TEXT DEFAULT '',
                    sections TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # Training preferences, one row per user
            await db.execute("""
                CREATE TABLE IF NOT EXISTS profiles (
                    user_id TEXT PRIMARY KEY,
                    goal TEXT,
                    level TEXT,
                    personal_info TEXT DEFAULT '',
                    language TEXT DEFAULT 'ja',
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            await db.execute("""
                CREATE INDEX IF NOT EXISTS idx_workouts_user_date
                ON workouts(user_id, date)
            """)

            await db.commit()

            await _run_migrations(db)
    except aiosqlite.Error as e:
        raise RemoteStoreError(f"Could not initialize database: {e}") from e

    logger.debug("Database ready at %s", db_path)
