"""PygameHost - window, input routing and redraw scheduling.

Renders only when a redraw has been requested, the way a retained-mode view
redraws after being invalidated. The first frame after attach is always
rendered.
"""
from __future__ import annotations

import time
from typing import Callable

import pygame

from bitrap.config import DEFAULT_CONFIG, FillConfig
from bitrap.renderer import Renderer
from bitrap.schedule import RedrawScheduler
from bitrap_pygame.canvas import PygameCanvas

_PRESS_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)
_REPAINT_EVENTS = (
    pygame.VIDEOEXPOSE,
    pygame.VIDEORESIZE,
    pygame.WINDOWEXPOSED,
    pygame.WINDOWRESTORED,
    pygame.WINDOWSIZECHANGED,
)


class PygameHost:
    def __init__(
        self,
        surface: pygame.Surface,
        config: FillConfig = DEFAULT_CONFIG,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._canvas = PygameCanvas(surface, config)
        self._scheduler = RedrawScheduler(self._invalidate, clock=clock)
        self._renderer = Renderer(self._scheduler, config)
        self._dirty = True

    @classmethod
    def create(
        cls,
        size: tuple[int, int] = (0, 0),
        fullscreen: bool = True,
        config: FillConfig = DEFAULT_CONFIG,
    ) -> PygameHost:
        """Open the display window and attach a host to it."""
        pygame.init()
        flags = pygame.FULLSCREEN if fullscreen else 0
        screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption("Linked Bi-Trapezoid Fill")
        return cls(screen, config)

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def scheduler(self) -> RedrawScheduler:
        return self._scheduler

    @property
    def canvas(self) -> PygameCanvas:
        return self._canvas

    @property
    def dirty(self) -> bool:
        return self._dirty

    def _invalidate(self) -> None:
        self._dirty = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route one input event. Returns False when the host should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        if event.type in _PRESS_EVENTS:
            self._renderer.handle_tap()
        elif event.type in _REPAINT_EVENTS:
            self._invalidate()
        return True

    def update(self, now: float | None = None) -> bool:
        """Fire due redraws and render one frame if needed.

        Returns True when a frame was rendered.
        """
        self._scheduler.run_due(now)
        if not self._dirty:
            return False
        self._dirty = False
        self._renderer.render_frame(self._canvas)
        return True

    def close(self) -> None:
        self._scheduler.close()

    def run(self, fps: int = 60) -> None:
        """Blocking event loop. Returns when the window is closed."""
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(fps)
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
            if self.update():
                pygame.display.flip()
        self.close()
        pygame.quit()
