"""Configuration settings for liftmate."""

import os
from pathlib import Path

# Default data directory (next to the source checkout)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings:
    """Application settings."""

    # Storage
    DATA_DIR: Path = DEFAULT_DATA_DIR
    USER_ID: str = "local"

    # Generative AI
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None
    MENU_MODEL: str = "gpt-4o"
    FAST_MODEL: str = "gpt-4o-mini"
    AI_TIMEOUT: float = 60.0

    def __init__(self):
        data_dir = os.getenv("LIFTMATE_DATA_DIR")
        self.DATA_DIR = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self.USER_ID = os.getenv("LIFTMATE_USER_ID", "local")

        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
        self.OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL") or None
        self.MENU_MODEL = os.getenv("LIFTMATE_MENU_MODEL", "gpt-4o")
        self.FAST_MODEL = os.getenv("LIFTMATE_FAST_MODEL", "gpt-4o-mini")
        try:
            self.AI_TIMEOUT = float(os.getenv("LIFTMATE_AI_TIMEOUT", "60"))
        except ValueError:
            self.AI_TIMEOUT = 60.0

    @property
    def db_path(self) -> Path:
        """Path of the SQLite record store."""
        return self.DATA_DIR / "liftmate.db"

    @property
    def storage_dir(self) -> Path:
        """Directory holding the local draft and preferences."""
        return self.DATA_DIR / "local"


settings = Settings()
