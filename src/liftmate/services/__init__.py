"""Application services for liftmate."""

from ..agents.client import GenerativeClient
from ..context import AppContext
from ..db.repositories import ProfileRepository, WorkoutRepository
from ..session.notifications import NotificationSink, RestNotifier
from ..session.rest_timer import RestTimer, Scheduler
from ..session.storage import LocalStorage
from ..session.store import Preferences, SessionStore
from ..session.workout_session import WorkoutSession
from .dashboard import DashboardService, VolumePoint
from .trainer import TrainerService


def build_trainer(
    context: AppContext,
    notify: NotificationSink | None = None,
    scheduler: Scheduler | None = None,
    ai: GenerativeClient | None = None,
) -> TrainerService:
    """Wire a TrainerService from the context's settings.

    Args:
        context: Acting user and settings
        notify: Receives (title, body) when a rest interval ends and
            notifications are permitted
        scheduler: Timer scheduler (defaults to the running event loop)
        ai: AI client (defaults to one built from settings)
    """
    settings = context.settings
    settings.DATA_DIR.mkdir(parents=True, exist_ok=True)

    storage = LocalStorage(settings.storage_dir)
    preferences = Preferences(storage)
    on_expire = RestNotifier(preferences, notify) if notify else None
    session = WorkoutSession(
        store=SessionStore(storage),
        timer=RestTimer(scheduler=scheduler, on_expire=on_expire),
        preferences=preferences,
    )
    return TrainerService(
        context=context,
        session=session,
        workouts=WorkoutRepository(settings.db_path),
        profiles=ProfileRepository(settings.db_path),
        ai=ai or GenerativeClient(settings),
    )


__all__ = [
    "build_trainer",
    "DashboardService",
    "TrainerService",
    "VolumePoint",
]
