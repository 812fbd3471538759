"""User profile data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Goal(str, Enum):
    """Primary training goal."""

    MUSCLE_HYPERTROPHY = "muscle_hypertrophy"  # Build muscle size
    STRENGTH = "strength"  # Lift heavier
    DIET = "diet"  # Burn fat
    HEALTH = "health"  # General activity


class Level(str, Enum):
    """Training experience level."""

    BEGINNER = "beginner"  # up to 6 months
    INTERMEDIATE = "intermediate"  # 6 months to 2 years
    ADVANCED = "advanced"  # 2+ years


class Language(str, Enum):
    """Language for generated content."""

    JA = "ja"
    EN = "en"
    IT = "it"

    @property
    def display_name(self) -> str:
        """English name of the language, as used in prompts."""
        return {"ja": "Japanese", "en": "English", "it": "Italian"}[self.value]

    @classmethod
    def parse(cls, value: str | None) -> "Language":
        """Parse a language code, falling back to Japanese."""
        try:
            return cls(value)
        except ValueError:
            return cls.JA


@dataclass
class Profile:
    """Training preferences for one user."""

    user_id: str
    goal: Goal | None = None
    level: Level | None = None
    personal_info: str = ""
    language: Language = Language.JA
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_onboarded(self) -> bool:
        """Whether goal and level have been chosen."""
        return self.goal is not None and self.level is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "goal": self.goal.value if self.goal else None,
            "level": self.level.value if self.level else None,
            "personal_info": self.personal_info,
            "language": self.language.value,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Profile":
        """Create from dictionary."""
        return cls(
            user_id=data["user_id"],
            goal=Goal(data["goal"]) if data.get("goal") else None,
            level=Level(data["level"]) if data.get("level") else None,
            personal_info=data.get("personal_info") or "",
            language=Language.parse(data.get("language")),
            created_at=created_at,
            updated_at=updated_at,
        )

    def get_summary(self) -> str:
        """Generate a short summary for display."""
        summary = f"User: {self.user_id}\n"
        summary += f"Goal: {self.goal.value if self.goal else 'not set'}\n"
        summary += f"Level: {self.level.value if self.level else 'not set'}\n"
        summary += f"Language: {self.language.value}\n"
        if self.personal_info:
            summary += f"Personal info: {self.personal_info}\n"
        return summary
