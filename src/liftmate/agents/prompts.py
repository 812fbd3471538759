"""Prompt templates for the generative-AI service.

Everything here is plain string assembly; nothing calls the network.
"""

import json
from dataclasses import dataclass, field
from datetime import date

from ..models.profile import Goal, Language, Level

MAX_HISTORY = 5

GOAL_DESCRIPTIONS = {
    Goal.MUSCLE_HYPERTROPHY: "muscle hypertrophy (build muscle size)",
    Goal.STRENGTH: "strength (lift heavier weights)",
    Goal.DIET: "fat loss (burn body fat)",
    Goal.HEALTH: "general health (stay active)",
}

LEVEL_DESCRIPTIONS = {
    Level.BEGINNER: "beginner (up to 6 months of training)",
    Level.INTERMEDIATE: "intermediate (6 months to 2 years)",
    Level.ADVANCED: "advanced (more than 2 years)",
}


@dataclass(frozen=True)
class HistoryEntry:
    """A past workout as shown to the model."""

    date: date
    theme: str


@dataclass
class MenuRequest:
    """Everything needed to ask for today's workout."""

    training_time: int  # minutes
    goal: Goal
    level: Level
    history: list[HistoryEntry] = field(default_factory=list)
    user_request: str = ""
    personal_info: str = ""
    language: Language = Language.JA

    def __post_init__(self):
        if isinstance(self.training_time, bool) or not isinstance(self.training_time, int):
            raise ValueError("Training time must be a whole number of minutes")
        if self.training_time <= 0:
            raise ValueError("Training time must be positive")


WORKOUT_SYSTEM_ROLE = """You are a world-class AI personal trainer who genuinely cares about the user's progress.
Propose the best possible training menu for today based on the user information and constraints below.
Your proposal must not be a mere list of exercises: give high-quality information that motivates the user and explains your choices."""


def _workout_schema_example(today: date) -> str:
    example = {
        "id": "unique id string",
        "date": today.isoformat(),
        "theme": "string",
        "reason": "string",
        "sections": [
            {
                "title": "section name (e.g. warm-up)",
                "exercises": [
                    {
                        "id": "unique id string",
                        "name": "exercise name (e.g. treadmill)",
                        "sets": [
                            {"id": "unique id string", "weight": 0, "reps": 0, "isCompleted": False}
                        ],
                    }
                ],
            }
        ],
    }
    return json.dumps(example, indent=2)


def format_history(history: list[HistoryEntry]) -> str:
    """Format the most recent workouts, newest first, one per line."""
    recent = sorted(history, key=lambda h: h.date, reverse=True)[:MAX_HISTORY]
    if not recent:
        return "None"
    return "\n".join(f"- {entry.date.isoformat()}: {entry.theme}" for entry in recent)


def create_workout_prompt(request: MenuRequest, today: date | None = None) -> str:
    """Build the menu generation prompt.

    Args:
        request: Training time, profile and history for today's menu
        today: Date to plan for (defaults to the current date)

    Returns:
        Prompt text asking for a single workout JSON object
    """
    today = today or date.today()
    language = request.language.display_name

    lines = [
        WORKOUT_SYSTEM_ROLE,
        "",
        "## User information",
        f"- Goal: {GOAL_DESCRIPTIONS[request.goal]}",
        f"- Level: {LEVEL_DESCRIPTIONS[request.level]}",
        "- Recent training history (date: theme):",
        format_history(request.history),
    ]

    if request.personal_info.strip():
        lines += [
            "",
            "## Personal information (HIGHEST PRIORITY)",
            "Injuries, medical conditions, disliked exercises or focus areas. "
            "These constraints override every other consideration:",
            request.personal_info.strip(),
        ]

    lines += [
        "",
        "## Today's constraints",
        f"- Available training time: {request.training_time} minutes",
        f'- The "date" field MUST be today\'s date: {today.isoformat()}',
    ]

    if request.user_request.strip():
        lines.append(f"- Today's request / condition from the user: {request.user_request.strip()}")

    lines += [
        "",
        "## Required content",
        f'0. date: today\'s date in "YYYY-MM-DD" format ({today.isoformat()}).',
        "1. theme: a short, appealing theme for today's session.",
        "2. reason: why this theme was chosen, referring to the recent history, "
        "written as if speaking to the user.",
        "3. sections: split the session into sections.",
        "   - You MUST include a warm-up section first and a cool-down section last.",
        "   - Choose sets and reps for each exercise to fit the user's goal and level.",
        '   - Every set has "weight": 0, "reps": 0 and "isCompleted": false.',
        "   - Every exercise and every set has an \"id\" unique within its parent list.",
        "",
        "## Output rules",
        f"- Write every human-readable field (theme, reason, section titles, exercise names) in {language}.",
        "- Output ONLY a single JSON object that follows the schema below. "
        "Do not include any other text.",
        "",
        "```json",
        _workout_schema_example(today),
        "```",
    ]

    return "\n".join(lines)


def create_alternatives_prompt(exercise_name: str, language: Language = Language.JA) -> str:
    """Prompt for three substitute exercises."""
    return (
        f'Suggest 3 alternative strength-training exercises for "{exercise_name}".\n'
        f"Write the exercise names in {language.display_name}.\n"
        "Output ONLY a JSON array of 3 strings in the following form, with no other text:\n"
        '["Alternative A", "Alternative B", "Alternative C"]'
    )


def create_question_prompt(
    exercise_name: str, question: str, language: Language = Language.JA
) -> str:
    """Prompt for a free-text answer about an exercise."""
    return (
        "You are a knowledgeable AI personal trainer.\n"
        f'The user is asking about the exercise "{exercise_name}".\n'
        f'Question: "{question}"\n\n'
        f"Please answer clearly and concisely in {language.display_name}."
    )
