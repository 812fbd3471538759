"""Workout generation, execution and history."""

import logging
from uuid import uuid4

from ..agents.client import GenerativeClient
from ..agents.decoder import parse_alternatives, parse_workout_response
from ..agents.prompts import (
    HistoryEntry,
    MenuRequest,
    create_alternatives_prompt,
    create_question_prompt,
    create_workout_prompt,
)
from ..context import AppContext
from ..db.repositories import ProfileRepository, WorkoutRepository
from ..errors import ProfileRequiredError
from ..models.profile import Profile
from ..models.workout import StoredWorkout, Workout
from ..session.workout_session import WorkoutSession

logger = logging.getLogger(__name__)


class TrainerService:
    """Coordinates the AI service, the record store and the draft."""

    def __init__(
        self,
        context: AppContext,
        session: WorkoutSession,
        workouts: WorkoutRepository,
        profiles: ProfileRepository,
        ai: GenerativeClient,
    ):
        self.context = context
        self.session = session
        self.workouts = workouts
        self.profiles = profiles
        self.ai = ai

    async def get_profile(self) -> Profile:
        """The user's profile, requiring goal and level to be set."""
        profile = await self.profiles.get(self.context.user_id)
        if profile is None or not profile.is_onboarded:
            raise ProfileRequiredError("Set your goal and level first")
        return profile

    async def create_menu(self, training_time: int, user_request: str = "") -> Workout:
        """Generate today's workout and make it the draft.

        Raises:
            ProfileRequiredError: If onboarding is not complete
            RemoteStoreError: If profile or history cannot be read
            GenerationError: If the AI call fails or returns a non-workout
        """
        profile = await self.get_profile()
        history = await self.workouts.recent_history(self.context.user_id)

        request = MenuRequest(
            training_time=training_time,
            goal=profile.goal,
            level=profile.level,
            history=[HistoryEntry(date=d, theme=theme) for d, theme in history],
            user_request=user_request,
            personal_info=profile.personal_info,
            language=profile.language,
        )
        prompt = create_workout_prompt(request)

        logger.info(
            "Generating %d-minute menu for %s (%d history entries)",
            training_time,
            self.context.user_id,
            len(history),
        )
        text = await self.ai.generate_json(prompt)
        workout = parse_workout_response(text, workout_id=uuid4().hex)

        self.session.begin(workout)
        return workout

    async def suggest_alternatives(self, exercise_name: str) -> list[str]:
        """Ask for three substitutes for an exercise."""
        if not exercise_name.strip():
            raise ValueError("Exercise name is required")
        prompt = create_alternatives_prompt(exercise_name.strip(), self.context.language)
        text = await self.ai.generate_text(prompt)
        return parse_alternatives(text)

    async def ask_question(self, exercise_name: str, question: str) -> str:
        """Answer a free-form question about an exercise."""
        if not exercise_name.strip() or not question.strip():
            raise ValueError("Exercise name and question are required")
        prompt = create_question_prompt(
            exercise_name.strip(), question.strip(), self.context.language
        )
        return (await self.ai.generate_text(prompt)).strip()

    async def complete_workout(self) -> str:
        """Store the draft remotely, then drop it.

        The draft is kept if the store rejects the write.

        Returns:
            The stored workout's ID
        """
        workout = self.session.workout
        workout_id = await self.workouts.create(workout, self.context.user_id)
        self.session.finish()
        return workout_id

    async def history(self) -> list[StoredWorkout]:
        """All completed workouts, newest first."""
        return await self.workouts.list_for_user(self.context.user_id)

    async def history_detail(self, workout_id: str) -> StoredWorkout | None:
        return await self.workouts.get(workout_id, self.context.user_id)

    async def delete_workout(self, workout_id: str) -> bool:
        """Delete a completed workout. The draft is not touched."""
        return await self.workouts.delete(workout_id, self.context.user_id)
