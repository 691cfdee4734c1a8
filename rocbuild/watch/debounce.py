"""Debouncer — collapses bursts of change events into one action run.

IDLE --trigger--> DEBOUNCING --trigger--> DEBOUNCING (timer re-armed)
DEBOUNCING --timer expiry--> IDLE, then the action runs under ``run_lock``.

Debouncers sharing a ``run_lock`` never run their actions concurrently; an
expiry that arrives while another action is running waits for it.
``cancel()`` never interrupts a running action; it returns once the action
has finished.
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)

TimerFactory = Callable[..., Any]


class DebounceState(enum.Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"


class Debouncer:
    def __init__(
        self,
        delay: float,
        action: Callable[[], None],
        run_lock: threading.Lock | None = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self.delay = delay
        self.action = action
        self.run_lock = run_lock or threading.Lock()
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Any = None
        # Bumped on every trigger; a timer only fires if it is still current
        self._generation = 0
        self.state = DebounceState.IDLE
        self.runs = 0

    def trigger(self) -> None:
        """Arm the timer, or re-arm it if one is already pending."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = self._timer_factory(self.delay, self._expire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            self.state = DebounceState.DEBOUNCING
            timer.start()

    def cancel(self) -> None:
        """Drop any pending run, then wait for an action already running to finish.

        Must not be called from inside an action.
        """
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1
            self.state = DebounceState.IDLE
        with self.run_lock:
            pass

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            self.state = DebounceState.IDLE

        with self.run_lock:
            # Superseded or cancelled while waiting for another action
            with self._lock:
                if generation != self._generation:
                    return
            self.runs += 1
            logger.debug("Debounce expired after %.3fs, running %s", self.delay, self.action)
            self.action()
