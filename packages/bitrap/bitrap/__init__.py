"""bitrap - Tap-driven linked bi-trapezoid fill animation engine."""

from bitrap.chain import ChainCursor, ShapeNode, build_chain
from bitrap.config import DEFAULT_CONFIG, Color, FillConfig, parse_color
from bitrap.driver import FrameDriver
from bitrap.geometry import ShapeFrame, bi_trapezoid
from bitrap.renderer import Renderer
from bitrap.scale import ScaleState
from bitrap.schedule import RedrawScheduler
from bitrap.stages import divide_scale, max_scale, sinify, stage_scales
from bitrap.types import Canvas, RedrawHost, ScaleStateError

__all__ = [
    "Renderer",
    "ChainCursor",
    "ShapeNode",
    "build_chain",
    "ScaleState",
    "FrameDriver",
    "RedrawScheduler",
    "FillConfig",
    "DEFAULT_CONFIG",
    "Color",
    "parse_color",
    "ShapeFrame",
    "bi_trapezoid",
    "max_scale",
    "divide_scale",
    "sinify",
    "stage_scales",
    "Canvas",
    "RedrawHost",
    "ScaleStateError",
]
