"""The in-progress workout: draft state, edits and the rest timer together."""

import logging

from ..errors import NoDraftError
from ..models.workout import Workout
from .mutations import locate, set_field, substitute_exercise, toggle_completion
from .rest_timer import RestTimer
from .store import Preferences, SessionStore

logger = logging.getLogger(__name__)


class WorkoutSession:
    """Applies user edits to the draft and keeps it persisted.

    The draft is written back after every change, so a restart resumes
    exactly where the user left off.
    """

    def __init__(
        self,
        store: SessionStore,
        timer: RestTimer,
        preferences: Preferences | None = None,
    ):
        self.store = store
        self.timer = timer
        self.preferences = preferences
        self._workout: Workout | None = None

    @property
    def workout(self) -> Workout:
        """The current draft, loaded lazily from storage."""
        if self._workout is None:
            self.reload()
        if self._workout is None:
            raise NoDraftError("No workout in progress")
        return self._workout

    def has_draft(self) -> bool:
        return self._workout is not None or self.store.has_draft()

    def begin(self, workout: Workout) -> None:
        """Make a freshly generated workout the draft."""
        self.timer.cancel()
        self.store.save(workout)
        self._workout = workout

    def edit_set(self, exercise_id: str, set_id: str, field: str, raw_value: str) -> Workout:
        """Change weight or reps of a set."""
        return self._commit(set_field(self.workout, exercise_id, set_id, field, raw_value))

    def toggle_set(self, exercise_id: str, set_id: str) -> Workout:
        """Toggle a set; completing it starts a rest interval."""
        updated = toggle_completion(self.workout, exercise_id, set_id)
        location = locate(updated, exercise_id, set_id)
        if location is None:
            return updated

        self._commit(updated)
        if location.set.is_completed:
            if self._timer_enabled():
                self.timer.start()
        else:
            self.timer.cancel()
        return updated

    def substitute(self, exercise_id: str, new_name: str) -> Workout:
        """Replace an exercise's name, keeping its sets."""
        new_name = new_name.strip()
        if not new_name:
            raise ValueError("Exercise name must not be empty")
        return self._commit(substitute_exercise(self.workout, exercise_id, new_name))

    def finish(self) -> None:
        """Drop the draft once it has been stored remotely."""
        self.timer.cancel()
        self.store.clear()
        self._workout = None

    def reload(self) -> Workout | None:
        """Discard the in-memory copy and read the draft again."""
        self._workout = self.store.load()
        return self._workout

    def _commit(self, workout: Workout) -> Workout:
        if workout is not self._workout:
            self.store.save(workout)
            self._workout = workout
        return workout

    def _timer_enabled(self) -> bool:
        return self.preferences is None or self.preferences.rest_timer_enabled
