"""Draft workout persistence and local preferences."""

import json
import logging
from enum import Enum

from ..errors import WorkoutParseError
from ..models.workout import Workout
from .storage import LocalStorage

logger = logging.getLogger(__name__)

DRAFT_KEY = "currentWorkout"
REST_TIMER_KEY = "restTimerEnabled"
NOTIFICATION_KEY = "notificationPermission"


class SessionStore:
    """Holds the single in-progress workout (the draft).

    The draft lives in one storage slot. It exists from menu creation until
    the workout is completed, and survives restarts in between.
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def load(self) -> Workout | None:
        """Read the draft.

        Returns None when there is no draft or when the stored payload is
        not a well-formed workout.
        """
        raw = self.storage.get_item(DRAFT_KEY)
        if raw is None:
            return None
        try:
            return Workout.from_dict(json.loads(raw))
        except (json.JSONDecodeError, WorkoutParseError) as e:
            logger.warning("Ignoring malformed draft workout: %s", e)
            return None

    def save(self, workout: Workout) -> None:
        """Overwrite the draft."""
        self.storage.set_item(
            DRAFT_KEY, json.dumps(workout.to_dict(), ensure_ascii=False)
        )

    def clear(self) -> None:
        """Remove the draft."""
        self.storage.remove_item(DRAFT_KEY)

    def has_draft(self) -> bool:
        """Whether a draft exists, without parsing it."""
        return self.storage.has_item(DRAFT_KEY)


class NotificationPermission(str, Enum):
    """Whether rest-over notifications may be shown."""

    DEFAULT = "default"  # not asked yet
    GRANTED = "granted"
    DENIED = "denied"


class Preferences:
    """Device-local settings that do not belong in the user profile."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    @property
    def rest_timer_enabled(self) -> bool:
        raw = self.storage.get_item(REST_TIMER_KEY)
        if raw is None:
            return True
        return raw.strip().lower() in ("true", "1", "yes", "on")

    @rest_timer_enabled.setter
    def rest_timer_enabled(self, value: bool) -> None:
        self.storage.set_item(REST_TIMER_KEY, "true" if value else "false")

    @property
    def notification_permission(self) -> NotificationPermission:
        raw = self.storage.get_item(NOTIFICATION_KEY)
        try:
            return NotificationPermission((raw or "").strip())
        except ValueError:
            return NotificationPermission.DEFAULT

    @notification_permission.setter
    def notification_permission(self, value: NotificationPermission) -> None:
        self.storage.set_item(NOTIFICATION_KEY, NotificationPermission(value).value)
