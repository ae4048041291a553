"""In-memory sliding-window rate limiting for investor interest submissions."""

import time
from collections import deque
from threading import Lock
from typing import Callable, Deque, Dict

# Default limits: max 5 submissions per client per hour
RATE_LIMIT_MAX_REQUESTS = 5
RATE_LIMIT_WINDOW_SECONDS = 60 * 60
SWEEP_INTERVAL = 1000  # Run a stale-key sweep every N checks


class RateLimiter:
    """
    Tracks submission timestamps per client identifier within a sliding window.

    Each check re-evaluates the window from "now", so slots open as soon as
    the oldest recorded timestamp ages out rather than on a fixed boundary.
    Rejected attempts are not recorded.
    """

    def __init__(
        self,
        max_requests: int = RATE_LIMIT_MAX_REQUESTS,
        window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
        clock: Callable[[], float] = time.time,
        sweep_interval: int = SWEEP_INTERVAL,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._store: Dict[str, Deque[float]] = {}
        self._lock = Lock()
        self._checks = 0

    def allow(self, client_id: str) -> bool:
        """
        Record a submission attempt for client_id if it fits in the window.

        Args:
            client_id: Opaque client identifier (usually an IP address)

        Returns:
            True if the attempt is admitted, False if the cap is reached
        """
        now = self._clock()
        with self._lock:
            self._checks += 1
            if self.sweep_interval and self._checks % self.sweep_interval == 0:
                self._sweep(now)

            request_times = self._store.setdefault(client_id, deque())
            self._prune(request_times, now)
            if len(request_times) >= self.max_requests:
                return False
            request_times.append(now)
            return True

    def retry_after(self, client_id: str) -> int:
        """Whole seconds until client_id gets a free slot (at least 1)."""
        now = self._clock()
        with self._lock:
            request_times = self._store.get(client_id)
            if not request_times:
                return 1
            self._prune(request_times, now)
            if len(request_times) < self.max_requests:
                return 1
            retry_after = int(request_times[0] + self.window_seconds - now) + 1
            return max(retry_after, 1)

    def sweep(self) -> int:
        """Drop client identifiers with no timestamps left in the window."""
        now = self._clock()
        with self._lock:
            return self._sweep(now)

    def reset(self) -> None:
        with self._lock:
            self._store.clear()
            self._checks = 0

    def __len__(self) -> int:
        return len(self._store)

    def _prune(self, request_times: Deque[float], now: float) -> None:
        while request_times and request_times[0] <= now - self.window_seconds:
            request_times.popleft()

    def _sweep(self, now: float) -> int:
        stale = []
        for client_id, request_times in self._store.items():
            self._prune(request_times, now)
            if not request_times:
                stale.append(client_id)
        for client_id in stale:
            del self._store[client_id]
        return len(stale)
