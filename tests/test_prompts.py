"""Tests for prompt assembly."""

from datetime import date, timedelta

import pytest

from liftmate.agents.prompts import (
    HistoryEntry,
    MenuRequest,
    create_alternatives_prompt,
    create_question_prompt,
    create_workout_prompt,
    format_history,
)
from liftmate.models.profile import Goal, Language, Level

TODAY = date(2026, 10, 19)


def make_request(**overrides) -> MenuRequest:
    values = {
        "training_time": 45,
        "goal": Goal.STRENGTH,
        "level": Level.BEGINNER,
    }
    values.update(overrides)
    return MenuRequest(**values)


class TestMenuRequest:
    """Tests for MenuRequest validation."""

    @pytest.mark.parametrize("minutes", [0, -10])
    def test_non_positive_time_is_rejected(self, minutes):
        with pytest.raises(ValueError):
            make_request(training_time=minutes)

    @pytest.mark.parametrize("minutes", ["45", 45.0, True])
    def test_non_integer_time_is_rejected(self, minutes):
        with pytest.raises(ValueError):
            make_request(training_time=minutes)


class TestFormatHistory:
    """Tests for format_history."""

    def test_empty_history(self):
        assert format_history([]) == "None"

    def test_newest_first(self):
        history = [
            HistoryEntry(date(2026, 10, 15), "Legs"),
            HistoryEntry(date(2026, 10, 17), "Back"),
        ]

        assert format_history(history) == "- 2026-10-17: Back\n- 2026-10-15: Legs"

    def test_at_most_five_entries(self):
        history = [
            HistoryEntry(TODAY - timedelta(days=offset), f"Session {offset}")
            for offset in range(1, 9)
        ]
        lines = format_history(history).splitlines()

        assert len(lines) == 5
        assert lines[0].endswith("Session 1")
        assert lines[-1].endswith("Session 5")


class TestWorkoutPrompt:
    """Tests for create_workout_prompt."""

    def test_basic_request(self):
        prompt = create_workout_prompt(make_request(), today=TODAY)

        assert "45" in prompt
        assert "2026-10-19" in prompt
        assert "ONLY a single JSON object" in prompt
        assert "warm-up" in prompt
        assert "cool-down" in prompt

    def test_goal_and_level_are_described(self):
        prompt = create_workout_prompt(make_request(), today=TODAY)

        assert "strength" in prompt
        assert "beginner" in prompt

    def test_history_is_included(self):
        history = [HistoryEntry(date(2026, 10, 17), "Upper body push")]
        prompt = create_workout_prompt(make_request(history=history), today=TODAY)

        assert "2026-10-17: Upper body push" in prompt

    def test_empty_history_says_none(self):
        prompt = create_workout_prompt(make_request(), today=TODAY)

        assert "(date: theme):\nNone" in prompt

    def test_personal_info_is_highest_priority(self):
        prompt = create_workout_prompt(
            make_request(personal_info="Left knee injury, no jumping"), today=TODAY
        )

        assert "HIGHEST PRIORITY" in prompt
        assert "Left knee injury, no jumping" in prompt

    def test_blank_personal_info_is_omitted(self):
        prompt = create_workout_prompt(make_request(personal_info="   "), today=TODAY)

        assert "HIGHEST PRIORITY" not in prompt

    def test_user_request(self):
        prompt = create_workout_prompt(make_request(user_request="Focus on chest"), today=TODAY)

        assert "Focus on chest" in prompt

    @pytest.mark.parametrize(
        "language, name",
        [(Language.JA, "Japanese"), (Language.EN, "English"), (Language.IT, "Italian")],
    )
    def test_output_language(self, language, name):
        prompt = create_workout_prompt(make_request(language=language), today=TODAY)

        assert f"in {name}" in prompt

    def test_schema_example_uses_blank_sets(self):
        prompt = create_workout_prompt(make_request(), today=TODAY)

        assert '"isCompleted": false' in prompt
        assert '"date": "2026-10-19"' in prompt

    def test_prompt_is_deterministic(self):
        request = make_request(history=[HistoryEntry(date(2026, 10, 1), "Legs")])

        assert create_workout_prompt(request, today=TODAY) == create_workout_prompt(
            request, today=TODAY
        )


class TestHelperPrompts:
    """Tests for the alternatives and question prompts."""

    def test_alternatives_prompt(self):
        prompt = create_alternatives_prompt("Bench Press", Language.EN)

        assert '"Bench Press"' in prompt
        assert "JSON array of 3 strings" in prompt
        assert "English" in prompt

    def test_question_prompt(self):
        prompt = create_question_prompt("Squat", "How deep should I go?", Language.IT)

        assert "Squat" in prompt
        assert "How deep should I go?" in prompt
        assert "Italian" in prompt
