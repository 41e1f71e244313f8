"""Per-key fixed-window rate limiting.

Counters live in process memory; each worker limits independently.
"""

import time
from typing import Callable


class RateLimiter:
    """Allows ``limit`` hits per key within each ``window_seconds`` window."""

    def __init__(
        self,
        limit: int,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize rate limiter.

        Args:
            limit: Hits allowed per window (0 disables limiting)
            window_seconds: Window length
            clock: Monotonic time source
        """
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, tuple[float, int]] = {}

    def hit(self, key: str) -> bool:
        """Count a hit for key.

        Returns:
            True if the hit is within the limit
        """
        if self.limit <= 0:
            return True

        now = self._clock()
        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window_seconds:
            started, count = now, 0

        if count >= self.limit:
            self._windows[key] = (started, count)
            return False

        self._windows[key] = (started, count + 1)
        self._prune(now)
        return True

    def _prune(self, now: float) -> None:
        # Drop expired windows once the table grows
        if len(self._windows) < 10_000:
            return
        self._windows = {
            k: v for k, v in self._windows.items() if now - v[0] < self.window_seconds
        }
