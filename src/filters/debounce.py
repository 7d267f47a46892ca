"""Trailing-edge debounce timer.

A burst of calls collapses into one callback carrying the arguments of the last
call, fired once the quiet period elapses with no further calls. Every call
cancels the pending timer and starts a new one.

Timers are created through a factory with the ``threading.Timer`` signature
``factory(interval, function)`` returning an object with ``start()`` and
``cancel()``. Hosts that own their event loop (a Streamlit fragment, a test)
pass ``PolledTimer`` instead and drive it with ``Debouncer.poll()``.
"""

import threading
import time
from typing import Any, Callable, Optional, Tuple

from config.logging_config import get_logger

logger = get_logger("filters.debounce")

TimerFactory = Callable[[float, Callable[[], None]], Any]


class PolledTimer:
    """Timer that fires only when polled at or after its deadline."""

    def __init__(
        self,
        interval: float,
        function: Callable[[], None],
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize a polled timer.

        Args:
            interval: Seconds from start() until the timer is due.
            function: Callable invoked when the timer fires.
            clock: Monotonic clock, injectable for tests.
        """
        self.interval = interval
        self.function = function
        self.clock = clock
        self.deadline: Optional[float] = None
        self.cancelled = False
        self.fired = False

    def start(self) -> None:
        self.deadline = self.clock() + self.interval

    def cancel(self) -> None:
        self.cancelled = True

    def due(self) -> bool:
        """Check if the timer is started, live and past its deadline."""
        return (
            self.deadline is not None
            and not self.cancelled
            and not self.fired
            and self.clock() >= self.deadline
        )

    def poll(self) -> bool:
        """Fire the timer if it is due. Returns True if it fired."""
        if not self.due():
            return False
        self.fired = True
        self.function()
        return True


def _thread_timer(interval: float, function: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


class Debouncer:
    """Reset-on-activity debounce around a callback."""

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        timer_factory: Optional[TimerFactory] = None,
    ):
        """
        Initialize the debouncer.

        Args:
            delay: Quiet period in seconds.
            callback: Called with the last call's arguments when the period elapses.
            timer_factory: Timer constructor; defaults to a daemon threading.Timer.
        """
        self.delay = delay
        self.callback = callback
        self.timer_factory = timer_factory or _thread_timer
        self._lock = threading.Lock()
        self._timer: Optional[Any] = None
        self._args: Optional[Tuple[Any, ...]] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """Check if a call is waiting for its quiet period."""
        with self._lock:
            return self._timer is not None

    def call(self, *args: Any) -> None:
        """Schedule the callback, replacing any pending call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._args = args
            self._timer = self.timer_factory(self.delay, lambda: self._fire(generation))
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Cancelled pending debounced call")
            self._timer = None
            self._args = None
            self._generation += 1

    def flush(self) -> bool:
        """
        Fire the pending call immediately.

        Returns:
            True if a pending call was fired.
        """
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            generation = self._generation
        return self._fire(generation)

    def poll(self) -> bool:
        """
        Fire the pending call if its polled timer is due.

        Returns:
            True if the callback fired. Always False for thread timers,
            which fire on their own.
        """
        with self._lock:
            timer = self._timer
        if isinstance(timer, PolledTimer):
            return timer.poll()
        return False

    def _fire(self, generation: int) -> bool:
        with self._lock:
            # A newer call or a cancel superseded this timer
            if generation != self._generation or self._timer is None:
                return False
            args = self._args or ()
            self._timer = None
            self._args = None
        self.callback(*args)
        return True
