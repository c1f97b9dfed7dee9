"""Fixed-Window Rate Counter - bounded request count per source within a fixed window.

Invariants:
    - A window opens on the first request from a source and lasts window_seconds
    - Every request counts, including rejected ones
    - hit() never awaits: on a single event loop each call is atomic
    - Excess requests are rejected, never queued

Design Decisions:
    - Time is passed in (`now`) so the counter stays deterministic under test
    - Expired windows pruned lazily once the table grows past PRUNE_THRESHOLD
"""

import math
from dataclasses import dataclass

PRUNE_THRESHOLD = 10_000


@dataclass(frozen=True)
class WindowDecision:
    """Outcome of counting one request."""
    allowed: bool
    limit: int
    remaining: int
    reset_after_seconds: int


class FixedWindowCounter:
    """Counts requests per source key in fixed windows."""

    def __init__(self, max_requests: int, window_seconds: int):
        if max_requests < 1:
            raise ValueError("max_requests must be >= 1")
        if window_seconds < 1:
            raise ValueError("window_seconds must be >= 1")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._windows: dict[str, tuple[float, int]] = {}

    def hit(self, key: str, now: float) -> WindowDecision:
        """Count one request from `key` at time `now` (seconds)."""
        if len(self._windows) > PRUNE_THRESHOLD:
            self.prune(now)

        started_at, count = self._windows.get(key, (now, 0))
        if now - started_at >= self.window_seconds:
            started_at, count = now, 0
        count += 1
        self._windows[key] = (started_at, count)

        return WindowDecision(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset_after_seconds=max(
                0, math.ceil(started_at + self.window_seconds - now),
            ),
        )

    def prune(self, now: float) -> None:
        """Drop windows that have already expired."""
        expired = [
            key for key, (started_at, _) in self._windows.items()
            if now - started_at >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]

    def reset(self) -> None:
        self._windows.clear()

    def __len__(self) -> int:
        return len(self._windows)
