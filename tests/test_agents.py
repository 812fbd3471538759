"""Tests for response decoding and the AI client wrapper."""

from types import SimpleNamespace

import openai
import pytest

from liftmate.agents.client import GenerativeClient
from liftmate.agents.decoder import parse_alternatives, parse_workout_response
from liftmate.errors import GenerationError, WorkoutParseError


class TestParseWorkoutResponse:
    """Tests for parse_workout_response."""

    def test_parses_menu(self, menu_response):
        workout = parse_workout_response(menu_response)

        assert workout.id == "ai-generated"
        assert [s.title for s in workout.sections] == ["Warm-up", "Main", "Cool-down"]
        assert workout.sections[1].exercises[0].sets[1].id == "2"

    def test_assigns_workout_id(self, menu_response):
        assert parse_workout_response(menu_response, workout_id="abc").id == "abc"

    def test_tolerates_code_fence(self, menu_response):
        fenced = f"Here you go:\n```json\n{menu_response}\n```"

        assert parse_workout_response(fenced).theme == "Full body basics"

    @pytest.mark.parametrize("text", ["", "   ", "not json at all", "[1, 2, 3]"])
    def test_rejects_non_workouts(self, text):
        with pytest.raises(WorkoutParseError):
            parse_workout_response(text)

    @pytest.mark.parametrize(
        "old, new",
        [('"weight": 0', '"weight": NaN'), ('"reps": 0', '"reps": Infinity'), ('"weight": 0', '"weight": -Infinity')],
    )
    def test_rejects_non_finite_numbers(self, menu_response, old, new):
        with pytest.raises(WorkoutParseError, match="finite") as excinfo:
            parse_workout_response(menu_response.replace(old, new, 1))
        assert excinfo.value.path == "sections[0].exercises[0].sets[0]"

    def test_parse_error_is_a_generation_error(self):
        with pytest.raises(GenerationError):
            parse_workout_response("{}")


class TestParseAlternatives:
    """Tests for parse_alternatives."""

    def test_parses_names(self):
        assert parse_alternatives('["Push-up", " Dips ", "Cable Fly"]') == [
            "Push-up",
            "Dips",
            "Cable Fly",
        ]

    def test_rejects_object(self):
        with pytest.raises(WorkoutParseError):
            parse_alternatives('{"a": 1}')

    def test_rejects_blank_name(self):
        with pytest.raises(WorkoutParseError, match=r"\[1\]"):
            parse_alternatives('["Push-up", ""]')


def fake_openai(content=None, error=None):
    """Minimal stand-in for AsyncOpenAI's chat completions surface."""
    calls = []

    async def create(**kwargs):
        calls.append(kwargs)
        if error:
            raise error
        message = SimpleNamespace(content=content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return client, calls


class TestGenerativeClient:
    """Tests for GenerativeClient."""

    async def test_generate_json_requests_json_mode(self, test_settings):
        fake, calls = fake_openai(content='{"ok": true}')
        client = GenerativeClient(test_settings, client=fake)

        assert await client.generate_json("prompt") == '{"ok": true}'
        assert calls[0]["model"] == test_settings.MENU_MODEL
        assert calls[0]["response_format"] == {"type": "json_object"}
        assert calls[0]["messages"] == [{"role": "user", "content": "prompt"}]

    async def test_generate_text_uses_fast_model(self, test_settings):
        fake, calls = fake_openai(content="Keep your back straight.")
        client = GenerativeClient(test_settings, client=fake)

        assert await client.generate_text("q") == "Keep your back straight."
        assert calls[0]["model"] == test_settings.FAST_MODEL
        assert "response_format" not in calls[0]

    async def test_empty_content_is_an_error(self, test_settings):
        fake, _ = fake_openai(content="  ")
        client = GenerativeClient(test_settings, client=fake)

        with pytest.raises(GenerationError):
            await client.generate_text("q")

    async def test_api_error_is_wrapped(self, test_settings):
        fake, _ = fake_openai(error=openai.OpenAIError("quota exceeded"))
        client = GenerativeClient(test_settings, client=fake)

        with pytest.raises(GenerationError, match="quota exceeded"):
            await client.generate_json("prompt")

    async def test_missing_api_key(self, test_settings):
        client = GenerativeClient(test_settings)

        with pytest.raises(GenerationError, match="OPENAI_API_KEY"):
            await client.generate_json("prompt")
