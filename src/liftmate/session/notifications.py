"""Rest-over notifications gated by the user's permission."""

import logging
from typing import Callable

from .store import NotificationPermission, Preferences

logger = logging.getLogger(__name__)

REST_OVER_TITLE = "Rest over"
REST_OVER_BODY = "Time for your next set."

NotificationSink = Callable[[str, str], None]


class RestNotifier:
    """Forwards the rest timer's expiry signal to a notification sink."""

    def __init__(self, preferences: Preferences, sink: NotificationSink):
        self.preferences = preferences
        self.sink = sink

    def __call__(self) -> None:
        permission = self.preferences.notification_permission
        if permission is not NotificationPermission.GRANTED:
            logger.debug("Rest over, notification suppressed (%s)", permission.value)
            return
        self.sink(REST_OVER_TITLE, REST_OVER_BODY)
