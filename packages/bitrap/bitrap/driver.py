"""FrameDriver - keeps redraws coming while a node is animating."""
from __future__ import annotations

import sys
from typing import Callable

from bitrap.types import RedrawHost


class FrameDriver:
    def __init__(self, host: RedrawHost, delay: float) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._host = host
        self._delay = delay
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def delay(self) -> float:
        return self._delay

    def start(self) -> None:
        if not self._running:
            self._running = True
            self._request_redraw(0.0)

    def stop(self) -> None:
        self._running = False

    def tick(self, draw_and_advance: Callable[[], None]) -> None:
        """Run one draw + advance step and queue the next redraw."""
        if not self._running:
            return
        draw_and_advance()
        self._request_redraw(self._delay)

    def _request_redraw(self, delay: float) -> None:
        """Best effort: a refused request drops this redraw only."""
        try:
            self._host.request_redraw_after(delay)
        except InterruptedError:
            print(
                f"bitrap: redraw request dropped: {sys.exc_info()[1]}",
                file=sys.stderr,
            )
