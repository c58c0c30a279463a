"""Trailing-edge debouncer for coalescing rapid input into one action."""

import logging
import threading
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class Timer(Protocol):
    """The subset of threading.Timer the debouncer relies on."""

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def _daemon_timer(interval: float, function: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


class Debouncer:
    """Run only the last scheduled action, delay seconds after it was scheduled.

    Each call() replaces the pending action and its timer wholesale; earlier
    actions are dropped, not queued.
    """

    def __init__(self, delay: float, timer_factory: TimerFactory = _daemon_timer):
        """
        Initialize debouncer.

        Args:
            delay: Quiet period in seconds before the action runs
            timer_factory: Callable (interval, function) -> timer, e.g.
                threading.Timer (dependency injection for tests)
        """
        self.delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Timer | None = None
        self._action: Callable[[], Any] | None = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._action is not None

    def call(self, fn: Callable[..., Any], *args, **kwargs) -> None:
        """Schedule fn(*args, **kwargs), superseding any pending action."""
        action = lambda: fn(*args, **kwargs)  # noqa: E731
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._action = action
            self._timer = self._timer_factory(self.delay, lambda: self._fire(action))
            self._timer.start()

    def cancel(self) -> bool:
        """Drop the pending action. Returns True if one was pending."""
        with self._lock:
            had_action = self._action is not None
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._action = None
        return had_action

    def flush(self) -> bool:
        """Run the pending action now. Returns True if one ran."""
        with self._lock:
            action = self._action
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._action = None
        if action is None:
            return False
        action()
        return True

    def _fire(self, action: Callable[[], Any]) -> None:
        with self._lock:
            # A newer call() or cancel() already replaced this action
            if self._action is not action:
                return
            self._timer = None
            self._action = None
        logger.debug("Debounced action firing")
        action()
