"""Renderer - wires chain cursor and frame driver to a host surface."""
from __future__ import annotations

from bitrap.chain import ChainCursor, build_chain
from bitrap.config import DEFAULT_CONFIG, FillConfig
from bitrap.driver import FrameDriver
from bitrap.types import Canvas, RedrawHost


class Renderer:
    """Entry points for the host: ``render_frame`` and ``handle_tap``."""

    def __init__(self, host: RedrawHost, config: FillConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self._cursor = ChainCursor(build_chain(config))
        self._driver = FrameDriver(host, config.delay)

    @property
    def config(self) -> FillConfig:
        return self._config

    @property
    def cursor(self) -> ChainCursor:
        return self._cursor

    @property
    def driver(self) -> FrameDriver:
        return self._driver

    def render_frame(self, canvas: Canvas) -> None:
        canvas.clear(self._config.back_color)
        self._cursor.active.draw(canvas)
        self._driver.tick(self._advance)

    def handle_tap(self) -> None:
        self._cursor.start_updating(self._driver.start)

    def _advance(self) -> None:
        self._cursor.update(lambda _committed: self._driver.stop())
