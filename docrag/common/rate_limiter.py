"""Client-side throttling for the Gemini embedding and completion calls."""

import threading
import time


class RateLimiter:
    """Token bucket holding up to ``requests_per_minute`` tokens.

    Tokens refill continuously. ``None`` or a non-positive rate turns the
    limiter into a no-op.
    """

    def __init__(self, requests_per_minute: int | None) -> None:
        rate = requests_per_minute or 0
        self.capacity = float(rate) if rate > 0 else 0.0
        self.tokens = self.capacity
        self._per_second = self.capacity / 60.0
        self._updated = time.monotonic()
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.capacity > 0

    def _take(self) -> float:
        """Take a token if one is available; otherwise return seconds to wait."""
        now = time.monotonic()
        self.tokens = min(self.capacity, self.tokens + (now - self._updated) * self._per_second)
        self._updated = now
        if self.tokens >= 1:
            self.tokens -= 1
            return 0.0
        return (1 - self.tokens) / self._per_second

    def acquire(self) -> None:
        """Block until a request may be sent."""
        if not self.enabled:
            return
        while True:
            with self._lock:
                wait = self._take()
            if wait == 0.0:
                return
            time.sleep(wait)


def is_rate_limit_error(exc: Exception) -> bool:
    """Whether a provider exception means we were throttled (429 or quota)."""
    if getattr(exc, "code", None) == 429 or getattr(exc, "status_code", None) == 429:
        return True
    message = str(exc).lower()
    return any(marker in message for marker in ("quota", "rate limit", "resource_exhausted", "429"))
