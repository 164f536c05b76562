"""ScaleState - per-node progress that animates one full unit per cycle."""
from __future__ import annotations

import math

from bitrap.types import OnCycleComplete, OnStart, ScaleStateError


class ScaleState:
    """Progress value that moves toward ``committed_progress + direction``.

    ``direction`` is non-zero only while a cycle is running. A cycle lasts
    exactly ``ceil(1 / step)`` ticks, after which progress is snapped onto
    the next whole value and committed.
    """

    def __init__(self, step: float) -> None:
        if not 0.0 < step <= 1.0:
            raise ValueError(f"step must be in (0, 1], got {step}")
        self._step = step
        self._cycle_ticks = math.ceil(1.0 / step)
        self._progress = 0.0
        self._direction = 0.0
        self._committed = 0.0
        self._ticks = 0

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def direction(self) -> float:
        return self._direction

    @property
    def committed_progress(self) -> float:
        return self._committed

    @property
    def step(self) -> float:
        return self._step

    @property
    def cycle_ticks(self) -> int:
        return self._cycle_ticks

    @property
    def idle(self) -> bool:
        return self._direction == 0

    def update(self, on_cycle_complete: OnCycleComplete) -> None:
        if self._direction == 0:
            return
        self._ticks += 1
        # Derived from the tick count so float drift never delays the snap.
        self._progress = self._committed + self._direction * self._ticks * self._step
        if self._ticks >= self._cycle_ticks:
            self._committed = self._committed + self._direction
            self._progress = self._committed
            self._direction = 0.0
            self._ticks = 0
            on_cycle_complete(self._committed)

    def start_updating(self, on_start: OnStart) -> None:
        if self._direction != 0:
            return
        if self._committed not in (0.0, 1.0):
            raise ScaleStateError(
                f"Cannot start from committed progress {self._committed!r}, "
                "expected 0.0 or 1.0"
            )
        self._direction = 1.0 - 2.0 * self._committed
        on_start()

    def __repr__(self) -> str:
        return (
            f"ScaleState(progress={self._progress!r}, "
            f"direction={self._direction!r}, committed={self._committed!r})"
        )
