"""Rest interval countdown between completed sets.

States: idle -> running(expiry) -> idle. A running timer leaves the running
state either by expiring (the ``on_expire`` callback fires once) or by being
cancelled (no callback). Only one timer runs at a time: starting a new one
replaces the old one.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

REST_INTERVAL = timedelta(seconds=90)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_seconds(seconds: int) -> str:
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class ScheduledCall(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once after a delay."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall: ...


class AsyncioScheduler:
    """Scheduler backed by the running event loop's ``call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def schedule(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(delay, 0.0), callback)


class RestTimer:
    """Single system-wide rest countdown."""

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        on_expire: Callable[[], None] | None = None,
        clock: Callable[[], datetime] = utc_now,
        interval: timedelta = REST_INTERVAL,
    ):
        self.scheduler = scheduler or AsyncioScheduler()
        self.on_expire = on_expire
        self.clock = clock
        self.interval = interval
        self._expiry: datetime | None = None
        self._handle: ScheduledCall | None = None

    @property
    def state(self) -> TimerState:
        return TimerState.RUNNING if self._expiry is not None else TimerState.IDLE

    @property
    def expiry(self) -> datetime | None:
        return self._expiry

    @property
    def is_running(self) -> bool:
        return self._expiry is not None

    def start(self) -> datetime:
        """Start a fresh interval, replacing any running one."""
        self._drop_handle()
        now = self.clock()
        self._expiry = now + self.interval
        self._handle = self.scheduler.schedule(
            self.interval.total_seconds(), self._fire
        )
        logger.debug("Rest timer running until %s", self._expiry.isoformat())
        return self._expiry

    def cancel(self) -> None:
        """Stop the countdown without signalling."""
        if self._expiry is not None:
            logger.debug("Rest timer cancelled")
        self._drop_handle()
        self._expiry = None

    def remaining(self) -> timedelta:
        """Time left, zero when idle or past expiry."""
        if self._expiry is None:
            return timedelta(0)
        return max(self._expiry - self.clock(), timedelta(0))

    def remaining_seconds(self) -> int:
        """Whole seconds left, rounded up so a fresh interval reads 90."""
        return int(-(-self.remaining().total_seconds() // 1))

    def display(self) -> str:
        """Remaining time as MM:SS."""
        return format_seconds(self.remaining_seconds())

    def check_expired(self) -> bool:
        """Fire expiry now if the wall clock has passed it.

        Lets callers that poll (re-render ticks) observe expiry even when the
        scheduled callback has not run yet.
        """
        if self._expiry is not None and self.clock() >= self._expiry:
            self._drop_handle()
            self._fire()
            return True
        return False

    def _fire(self) -> None:
        if self._expiry is None:
            return
        self._handle = None
        self._expiry = None
        logger.debug("Rest timer expired")
        if self.on_expire:
            self.on_expire()

    def _drop_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
