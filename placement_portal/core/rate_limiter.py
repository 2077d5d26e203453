import threading
import time


class InMemoryRateLimiter:
    """
    Fixed-window counter keyed by client and route.
    State is per process, so each worker keeps its own counts.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # key -> (requests seen in window, window start)
        self._windows: dict[str, tuple[int, float]] = {}

    def allow(self, key: str, limit: int, window_seconds: int) -> tuple[bool, int]:
        """Count one request for key. Returns (allowed, seconds until the window reopens)."""
        now = time.time()
        with self._lock:
            used, started = self._windows.get(key, (0, now))
            elapsed = now - started
            if elapsed >= window_seconds:
                used, started, elapsed = 0, now, 0.0
            if used < limit:
                self._windows[key] = (used + 1, started)
                return True, 0
            return False, max(1, int(window_seconds - elapsed))

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()


# Shared by the login and register middleware
auth_rate_limiter = InMemoryRateLimiter()
