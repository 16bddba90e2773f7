"""Transient notifications with a single auto-dismiss timer."""

import threading
from typing import Any, Callable, Protocol

from src.models.notification import Notification


class TimerHandle(Protocol):
    def cancel(self) -> Any: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]
Listener = Callable[[Notification], None]


def thread_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Run callback after delay seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class Notifier:
    """
    Publishes notifications and dismisses them after a fixed delay.

    At most one dismissal is pending: a new notification cancels the
    previous timer, so the last notification wins.
    """

    def __init__(
        self,
        dismiss_after: float = 4.0,
        scheduler: Scheduler = thread_scheduler,
    ):
        """
        Args:
            dismiss_after: Seconds a notification stays visible
            scheduler: Callable (delay, callback) returning a handle with cancel();
                for an asyncio loop, pass loop.call_later
        """
        self._dismiss_after = dismiss_after
        self._scheduler = scheduler
        self._current: Notification | None = None
        self._pending: TimerHandle | None = None
        self._on_show: list[Listener] = []
        self._on_dismiss: list[Listener] = []
        # timers may fire on another thread; notify and dismiss run one at a time
        self._lock = threading.RLock()

    @property
    def current(self) -> Notification | None:
        """The notification being shown, or None."""
        return self._current

    def on_show(self, listener: Listener) -> None:
        self._on_show.append(listener)

    def on_dismiss(self, listener: Listener) -> None:
        self._on_dismiss.append(listener)

    def notify(self, message: str, is_error: bool = False) -> Notification:
        """Show a notification, replacing any that is still visible."""
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None

            notification = Notification(message=message, is_error=is_error)
            self._current = notification
            for listener in self._on_show:
                listener(notification)

            self._pending = self._scheduler(
                self._dismiss_after, lambda: self._dismiss(notification)
            )
            return notification

    def _dismiss(self, notification: Notification) -> None:
        with self._lock:
            # a timer that fired while being cancelled must not hide a newer message
            if self._current is not notification:
                return
            self._current = None
            self._pending = None
            for listener in self._on_dismiss:
                listener(notification)
