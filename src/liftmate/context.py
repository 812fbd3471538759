"""Per-user application context.

Built once by an entry point (CLI invocation or web app startup) and handed
to services at construction time.
"""

from dataclasses import dataclass, field

from .config import Settings, settings as default_settings
from .models.profile import Language


@dataclass
class AppContext:
    """Who is acting, in which language, with which settings."""

    user_id: str
    language: Language = Language.JA
    settings: Settings = field(default_factory=lambda: default_settings)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AppContext":
        settings = settings or default_settings
        return cls(user_id=settings.USER_ID, settings=settings)
