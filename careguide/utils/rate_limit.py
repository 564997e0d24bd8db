from __future__ import annotations

from collections import deque
from threading import Lock
import time


class InMemorySlidingWindowLimiter:
    """
    Per-client rate limiter for the triage endpoints.
    State lives in process memory, so each worker counts on its own.
    Clients that have gone quiet for a full window are forgotten.
    """

    def __init__(self, max_requests: int, window_seconds: int) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._events: dict[str, deque[float]] = {}
        self._lock = Lock()
        self._last_sweep = 0.0

    @property
    def enabled(self) -> bool:
        return self.max_requests > 0

    def check(self, key: str) -> tuple[bool, int]:
        if not self.enabled:
            return True, 0

        now = time.time()
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(now)

            q = self._events.setdefault(key, deque())
            self._expire(q, now)

            if len(q) >= self.max_requests:
                retry_after = int(self.window_seconds - (now - q[0])) + 1
                return False, max(retry_after, 1)

            q.append(now)
            return True, 0

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._events)

    def reset(self) -> None:
        with self._lock:
            self._events.clear()

    def _expire(self, q: deque[float], now: float) -> None:
        while q and now - q[0] > self.window_seconds:
            q.popleft()

    def _sweep(self, now: float) -> None:
        for key in list(self._events):
            q = self._events[key]
            self._expire(q, now)
            if not q:
                del self._events[key]
        self._last_sweep = now
