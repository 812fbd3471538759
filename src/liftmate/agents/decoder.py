"""Decoding of generative-AI responses into liftmate models."""

import json
import re
from typing import Any

from ..errors import WorkoutParseError
from ..models.workout import Workout

_FENCE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)


def _load_json(text: str) -> Any:
    """Parse JSON, tolerating a surrounding markdown code fence."""
    if text is None or not text.strip():
        raise WorkoutParseError("empty response")
    match = _FENCE.search(text)
    payload = match.group(1) if match else text.strip()
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise WorkoutParseError(f"response is not valid JSON ({e.msg})") from e


def parse_workout_response(text: str, workout_id: str | None = None) -> Workout:
    """Decode a menu response.

    Args:
        text: Raw response text
        workout_id: Identifier to assign instead of the one in the payload

    Raises:
        WorkoutParseError: If the response is not a workout object
    """
    return Workout.from_dict(_load_json(text), id=workout_id)


def parse_alternatives(text: str) -> list[str]:
    """Decode a JSON array of alternative exercise names."""
    data = _load_json(text)
    if not isinstance(data, list):
        raise WorkoutParseError("expected a JSON array of exercise names")
    names = []
    for i, item in enumerate(data):
        if not isinstance(item, str) or not item.strip():
            raise WorkoutParseError("must be a non-empty string", f"[{i}]")
        names.append(item.strip())
    return names
