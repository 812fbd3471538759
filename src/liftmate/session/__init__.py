"""In-progress workout state for liftmate."""

from .mutations import (
    SetLocation,
    locate,
    parse_set_value,
    set_field,
    substitute_exercise,
    toggle_completion,
)
from .notifications import RestNotifier
from .rest_timer import REST_INTERVAL, AsyncioScheduler, RestTimer, TimerState
from .storage import LocalStorage
from .store import NotificationPermission, Preferences, SessionStore
from .workout_session import WorkoutSession

__all__ = [
    "AsyncioScheduler",
    "LocalStorage",
    "locate",
    "NotificationPermission",
    "parse_set_value",
    "Preferences",
    "REST_INTERVAL",
    "RestNotifier",
    "RestTimer",
    "SessionStore",
    "set_field",
    "SetLocation",
    "substitute_exercise",
    "TimerState",
    "toggle_completion",
    "WorkoutSession",
]
