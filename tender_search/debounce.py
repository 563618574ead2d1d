"""
Trailing-edge debouncer built on threading.Timer.

Each trigger() cancels the pending action and schedules a new one, so a
burst of triggers runs the action once, *delay* seconds after the last.
"""
from __future__ import annotations

import threading
from typing import Callable, Optional

from tender_search.config import SEARCH_DEBOUNCE_SECONDS


class Debouncer:
    """Run *action* once per burst of trigger() calls."""

    def __init__(self, action: Callable[[], None], delay: float = SEARCH_DEBOUNCE_SECONDS) -> None:
        self.action = action
        self.delay = delay
        self._timer: Optional[threading.Timer] = None
        self._token = 0
        self._lock = threading.Lock()

    def trigger(self) -> None:
        """(Re)schedule the action, cancelling any pending one."""
        with self._lock:
            self._token += 1
            token = self._token
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire, args=(token,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending action, if any."""
        with self._lock:
            self._token += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _fire(self, token: int) -> None:
        with self._lock:
            # superseded after the timer thread had already woken up
            if token != self._token:
                return
            self._timer = None
        self.action()
