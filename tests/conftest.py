"""Pytest configuration and fixtures."""

import json
from datetime import date, datetime, timedelta, timezone

import pytest

from liftmate.config import Settings
from liftmate.context import AppContext
from liftmate.models.workout import Exercise, Section, Workout, WorkoutSet


class FakeAI:
    """Stands in for GenerativeClient; replays canned responses."""

    def __init__(self, json_response: str = "", text_response: str = ""):
        self.json_response = json_response
        self.text_response = text_response
        self.error: Exception | None = None
        self.prompts: list[str] = []

    async def generate_json(self, prompt: str, model: str | None = None) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.json_response

    async def generate_text(self, prompt: str, model: str | None = None) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text_response


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 10, 19, 9, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakeHandle:
    def __init__(self, delay: float, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Collects scheduled callbacks so tests decide when they run."""

    def __init__(self):
        self.calls: list[FakeHandle] = []

    def schedule(self, delay: float, callback) -> FakeHandle:
        handle = FakeHandle(delay, callback)
        self.calls.append(handle)
        return handle

    def run_pending(self) -> None:
        for handle in list(self.calls):
            if not handle.cancelled:
                handle.cancelled = True
                handle.callback()


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a temporary data directory."""
    settings = Settings()
    settings.DATA_DIR = tmp_path / "data"
    settings.USER_ID = "user-1"
    settings.OPENAI_API_KEY = None
    return settings


@pytest.fixture
def app_context(test_settings):
    return AppContext(user_id=test_settings.USER_ID, settings=test_settings)


@pytest.fixture
def sample_workout():
    """A small three-section workout."""
    return Workout(
        id="w-1",
        date=date(2026, 10, 19),
        theme="Push day",
        reason="Legs were trained two days ago.",
        sections=(
            Section(
                title="Warm-up",
                exercises=(
                    Exercise(id="e1", name="Treadmill", sets=(WorkoutSet(id="s1", weight=0, reps=5),)),
                ),
            ),
            Section(
                title="Chest",
                exercises=(
                    Exercise(
                        id="e2",
                        name="Bench Press",
                        sets=(
                            WorkoutSet(id="s1", weight=60, reps=10),
                            WorkoutSet(id="s2", weight=60, reps=8),
                            WorkoutSet(id="s3", weight=57.5, reps=8),
                        ),
                    ),
                    Exercise(
                        id="e3",
                        name="Dumbbell Fly",
                        sets=(WorkoutSet(id="s1", weight=12, reps=12),),
                    ),
                ),
            ),
            Section(
                title="Cool-down",
                exercises=(
                    Exercise(id="e4", name="Stretching", sets=(WorkoutSet(id="s1"),)),
                ),
            ),
        ),
    )


@pytest.fixture
def menu_response():
    """A menu as the AI service would return it."""
    return json.dumps(
        {
            "id": "ai-generated",
            "date": "2026-10-19",
            "theme": "Full body basics",
            "reason": "No recent history, so we start with the fundamentals.",
            "sections": [
                {
                    "title": "Warm-up",
                    "exercises": [
                        {"id": "1", "name": "Bike", "sets": [{"id": "1", "weight": 0, "reps": 0, "isCompleted": False}]}
                    ],
                },
                {
                    "title": "Main",
                    "exercises": [
                        {
                            "id": "2",
                            "name": "Goblet Squat",
                            "sets": [
                                {"id": "1", "weight": 0, "reps": 0, "isCompleted": False},
                                {"id": "2", "weight": 0, "reps": 0, "isCompleted": False},
                            ],
                        }
                    ],
                },
                {
                    "title": "Cool-down",
                    "exercises": [
                        {"id": "3", "name": "Stretch", "sets": [{"id": "1", "weight": 0, "reps": 0, "isCompleted": False}]}
                    ],
                },
            ],
        }
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def fake_ai(menu_response):
    return FakeAI(json_response=menu_response)
