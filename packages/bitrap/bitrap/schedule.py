"""Non-blocking redraw scheduling.

The host loop calls ``run_due`` every frame; requests never sleep on the
calling thread.
"""
from __future__ import annotations

import heapq
import itertools
import time
from typing import Callable


class RedrawScheduler:
    """Timer queue of pending redraw requests."""

    def __init__(
        self,
        on_redraw: Callable[[], None],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._on_redraw = on_redraw
        self._clock = clock
        self._queue: list[tuple[float, int]] = []
        self._seq = itertools.count()
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def next_due(self) -> float | None:
        """Due time of the earliest request, or None when nothing is queued."""
        return self._queue[0][0] if self._queue else None

    @property
    def closed(self) -> bool:
        return self._closed

    def request_redraw_after(self, delay: float) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        if self._closed:
            raise InterruptedError("redraw scheduler is closed")
        heapq.heappush(self._queue, (self._clock() + delay, next(self._seq)))

    def run_due(self, now: float | None = None) -> int:
        """Fire every request due at ``now``. Returns the number fired."""
        if now is None:
            now = self._clock()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            heapq.heappop(self._queue)
            fired += 1
            self._on_redraw()
        return fired

    def close(self) -> None:
        self._closed = True
        self._queue.clear()
