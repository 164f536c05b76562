"""Shared type aliases and protocols for the fill engine."""

from __future__ import annotations

from typing import Callable, Protocol

Color = tuple[int, int, int]

OnStart = Callable[[], None]
OnCycleComplete = Callable[[float], None]


class Canvas(Protocol):
    """Host drawing surface. Carries its own style (stroke, palette)."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self, color: Color) -> None: ...

    def draw_shape(
        self, color_index: int, progress: float, width: float, height: float
    ) -> None: ...


class RedrawHost(Protocol):
    """Anything able to schedule a redraw after a delay in seconds.

    May raise InterruptedError when the request cannot be honoured.
    """

    def request_redraw_after(self, delay: float) -> None: ...


class ScaleStateError(ValueError):
    """Raised when a ScaleState is started from a non-committed progress."""
