"""Generative-AI prompts, client and response decoding."""

from .client import GenerativeClient
from .decoder import parse_alternatives, parse_workout_response
from .prompts import (
    HistoryEntry,
    MenuRequest,
    create_alternatives_prompt,
    create_question_prompt,
    create_workout_prompt,
)

__all__ = [
    "create_alternatives_prompt",
    "create_question_prompt",
    "create_workout_prompt",
    "GenerativeClient",
    "HistoryEntry",
    "MenuRequest",
    "parse_alternatives",
    "parse_workout_response",
]
