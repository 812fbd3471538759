"""Tests for the web API."""

import json

import pytest
from fastapi.testclient import TestClient

from liftmate.errors import GenerationError
from liftmate.session.store import NotificationPermission
from liftmate.web import create_app
from liftmate.web.app import MAX_PENDING_NOTIFICATIONS


@pytest.fixture
def client(test_settings, fake_ai):
    app = create_app(test_settings, ai=fake_ai)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def onboarded(client):
    response = client.put(
        "/profile", json={"goal": "strength", "level": "beginner", "language": "en"}
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def with_draft(onboarded):
    response = onboarded.post("/api/generate-menu", json={"trainingTime": 45})
    assert response.status_code == 200
    return onboarded


class TestProfileRoutes:
    """Tests for /profile."""

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_empty_profile(self, client):
        data = client.get("/profile").json()

        assert data["onboarded"] is False
        assert data["language"] == "ja"

    def test_save_profile(self, client):
        response = client.put(
            "/profile",
            json={"goal": "diet", "level": "advanced", "personalInfo": "  Asthma  "},
        )

        data = response.json()
        assert data["onboarded"] is True
        assert data["personal_info"] == "Asthma"
        assert client.get("/profile").json()["goal"] == "diet"

    def test_invalid_goal(self, client):
        assert client.put("/profile", json={"goal": "bulk"}).status_code == 422

    def test_language_only_keeps_other_fields(self, onboarded, fake_ai):
        response = onboarded.put("/profile", json={"language": "it"})

        data = response.json()
        assert data["language"] == "it"
        assert data["goal"] == "strength"
        assert data["onboarded"] is True
        onboarded.post("/api/generate-menu", json={"trainingTime": 45})
        assert "in Italian" in fake_ai.prompts[-1]

    def test_language_only_without_profile(self, client):
        data = client.put("/profile", json={"language": "en"}).json()

        assert data["language"] == "en"
        assert data["onboarded"] is False
        assert client.get("/profile").json()["language"] == "en"


class TestMenuRoutes:
    """Tests for /api."""

    def test_generate_requires_profile(self, client):
        response = client.post("/api/generate-menu", json={"trainingTime": 45})

        assert response.status_code == 409
        assert response.json()["redirect"] == "/profile"

    def test_generate_menu(self, onboarded, fake_ai):
        response = onboarded.post(
            "/api/generate-menu", json={"trainingTime": 45, "userRequest": "No squats"}
        )

        assert response.status_code == 200
        assert response.json()["theme"] == "Full body basics"
        assert "No squats" in fake_ai.prompts[-1]
        assert "in English" in fake_ai.prompts[-1]
        assert onboarded.get("/workout").json()["theme"] == "Full body basics"

    @pytest.mark.parametrize("minutes", [0, -5, "soon"])
    def test_invalid_training_time(self, onboarded, minutes):
        response = onboarded.post("/api/generate-menu", json={"trainingTime": minutes})

        assert response.status_code == 422

    def test_generation_failure(self, onboarded, fake_ai):
        fake_ai.error = GenerationError("service unavailable")

        response = onboarded.post("/api/generate-menu", json={"trainingTime": 45})
        assert response.status_code == 502

    def test_unparseable_menu(self, onboarded, fake_ai):
        fake_ai.json_response = "not a workout"

        response = onboarded.post("/api/generate-menu", json={"trainingTime": 45})
        assert response.status_code == 502

    def test_change_exercise(self, client, fake_ai):
        fake_ai.text_response = json.dumps(["Push-up", "Dips", "Cable Fly"])

        response = client.post("/api/change-exercise", json={"exerciseName": "Bench Press"})
        assert response.json() == ["Push-up", "Dips", "Cable Fly"]

    def test_ask_question(self, client, fake_ai):
        fake_ai.text_response = "Lower the bar to mid-chest."

        response = client.post(
            "/api/ask-question",
            json={"exerciseName": "Bench Press", "question": "Where should the bar touch?"},
        )
        assert response.json() == {"answer": "Lower the bar to mid-chest."}


class TestWorkoutRoutes:
    """Tests for /workout."""

    def test_no_draft(self, client):
        assert client.get("/workout").status_code == 404

    def test_update_set(self, with_draft):
        response = with_draft.patch(
            "/workout/sets",
            json={"exerciseId": "2", "setId": "1", "field": "weight", "value": "20"},
        )

        sets = response.json()["sections"][1]["exercises"][0]["sets"]
        assert sets[0]["weight"] == 20
        assert sets[1]["weight"] == 0

    def test_clear_set_field(self, with_draft):
        response = with_draft.patch(
            "/workout/sets",
            json={"exerciseId": "2", "setId": "1", "field": "reps", "value": ""},
        )

        assert response.json()["sections"][1]["exercises"][0]["sets"][0]["reps"] is None

    def test_non_numeric_value(self, with_draft):
        response = with_draft.patch(
            "/workout/sets",
            json={"exerciseId": "2", "setId": "1", "field": "reps", "value": "ten"},
        )

        assert response.status_code == 422

    def test_unknown_field(self, with_draft):
        response = with_draft.patch(
            "/workout/sets",
            json={"exerciseId": "2", "setId": "1", "field": "rpe", "value": "8"},
        )

        assert response.status_code == 422

    def test_toggle_starts_timer(self, with_draft):
        response = with_draft.post("/workout/sets/toggle", json={"exerciseId": "2", "setId": "1"})

        data = response.json()
        assert data["workout"]["sections"][1]["exercises"][0]["sets"][0]["isCompleted"] is True
        assert data["timer"]["state"] == "running"
        assert data["timer"]["display"] in ("01:30", "01:29")
        minutes, seconds = divmod(data["timer"]["remainingSeconds"], 60)
        assert data["timer"]["display"] == f"{minutes:02d}:{seconds:02d}"

    def test_dismiss_timer(self, with_draft):
        with_draft.post("/workout/sets/toggle", json={"exerciseId": "2", "setId": "1"})

        data = with_draft.delete("/workout/timer").json()
        assert data["state"] == "idle"
        assert data["display"] == "00:00"
        assert with_draft.get("/workout/notifications").json() == {"notifications": []}

    def test_unpolled_notifications_are_capped(self, client):
        session = client.app.state.trainer.session
        session.preferences.notification_permission = NotificationPermission.GRANTED
        for _ in range(MAX_PENDING_NOTIFICATIONS + 5):
            session.timer.on_expire()

        pending = client.get("/workout/notifications").json()["notifications"]
        assert len(pending) == MAX_PENDING_NOTIFICATIONS
        assert pending[0] == {"title": "Rest over", "body": "Time for your next set."}
        assert client.get("/workout/notifications").json() == {"notifications": []}

    def test_toggle_unknown_set(self, with_draft):
        response = with_draft.post("/workout/sets/toggle", json={"exerciseId": "2", "setId": "9"})

        assert response.status_code == 200
        assert response.json()["timer"]["state"] == "idle"

    def test_substitute(self, with_draft):
        response = with_draft.post(
            "/workout/exercises/substitute", json={"exerciseId": "2", "newName": "Leg Press"}
        )

        exercise = response.json()["sections"][1]["exercises"][0]
        assert exercise["name"] == "Leg Press"
        assert len(exercise["sets"]) == 2

    def test_complete_and_history(self, with_draft):
        workout_id = with_draft.post("/workout/complete").json()["id"]

        assert with_draft.get("/workout").status_code == 404
        history = with_draft.get("/history").json()
        assert [entry["id"] for entry in history] == [workout_id]
        assert with_draft.get(f"/history/{workout_id}").json()["theme"] == "Full body basics"

    def test_discard(self, with_draft):
        assert with_draft.delete("/workout").json() == {"status": "discarded"}
        assert with_draft.get("/workout").status_code == 404


class TestHistoryRoutes:
    """Tests for /history and /dashboard."""

    def test_missing_entry(self, client):
        assert client.get("/history/nope").status_code == 404
        assert client.delete("/history/nope").status_code == 404

    def test_delete_entry(self, with_draft):
        workout_id = with_draft.post("/workout/complete").json()["id"]

        assert with_draft.delete(f"/history/{workout_id}").status_code == 200
        assert with_draft.get("/history").json() == []

    def test_dashboard(self, with_draft):
        with_draft.patch(
            "/workout/sets",
            json={"exerciseId": "2", "setId": "1", "field": "weight", "value": "20"},
        )
        with_draft.patch(
            "/workout/sets",
            json={"exerciseId": "2", "setId": "1", "field": "reps", "value": "10"},
        )
        with_draft.post("/workout/complete")

        points = with_draft.get("/dashboard").json()
        assert len(points) == 1
        assert points[0]["volume"] == 200
        assert points[0]["theme"] == "Full body basics"
