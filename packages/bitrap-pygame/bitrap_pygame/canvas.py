"""Canvas implementation backed by a pygame Surface."""
from __future__ import annotations

import pygame

from bitrap.config import DEFAULT_CONFIG, Color, FillConfig
from bitrap.geometry import bi_trapezoid


class PygameCanvas:
    def __init__(self, surface: pygame.Surface, config: FillConfig = DEFAULT_CONFIG) -> None:
        self._surface = surface
        self._config = config

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def clear(self, color: Color) -> None:
        self._surface.fill(color)

    def draw_shape(
        self, color_index: int, progress: float, width: float, height: float
    ) -> None:
        """Draw the bi-trapezoid of palette entry ``color_index``."""
        color = self._config.colors[color_index % len(self._config.colors)]
        frame = bi_trapezoid(progress, width, height, self._config)
        line_w = max(1, round(frame.stroke_width))

        for polygon in frame.fills:
            pygame.draw.polygon(self._surface, color, polygon)
        for start, end in frame.lines:
            pygame.draw.line(self._surface, color, start, end, line_w)
