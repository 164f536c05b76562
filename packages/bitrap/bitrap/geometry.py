"""Bi-trapezoid geometry at a given progress.

Two trapezoids share their long base on the horizontal axis through the
surface center, one opening upward and one downward. Drawing is split into
``config.parts`` sequential stages (see ``bitrap.stages``):

    0  base line grows outward from the center
    1  left legs grow from the base corners
    2  right legs grow from the base corners
    3  top edges grow from their outer ends toward the center
    4  upper trapezoid fills from the base
    5  lower trapezoid fills from the base
    6  whole shape rotates by ``config.rot`` degrees

Stages past the sixth only stretch the timeline; with fewer parts the later
stages are skipped.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from bitrap.config import FillConfig
from bitrap.stages import sinify, stage_scales

Point = tuple[float, float]
Segment = tuple[Point, Point]
Polygon = tuple[Point, ...]

_BASE, _LEFT, _RIGHT, _TOP, _FILL_UP, _FILL_DOWN, _ROTATE = range(7)

# sin(pi) is ~1.2e-16, not 0; below this the envelope counts as closed.
_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class ShapeFrame:
    stroke_width: float
    angle: float
    lines: tuple[Segment, ...]
    fills: tuple[Polygon, ...]

    @property
    def empty(self) -> bool:
        return not self.lines and not self.fills


def _lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def bi_trapezoid(
    progress: float, width: float, height: float, config: FillConfig
) -> ShapeFrame:
    """Compute the lines and fills of the shape in surface coordinates."""
    edge = min(width, height)
    size = edge / config.size_factor
    stroke = edge / config.stroke_factor

    envelope = sinify(progress)
    if envelope < _EPSILON:
        envelope = 0.0
    stages = stage_scales(envelope, config.parts)

    def stage(i: int) -> float:
        return stages[i] if i < len(stages) else 0.0

    base_half = size / 2
    top_half = size / 4
    rise = size / 2

    lines: list[Segment] = []
    fills: list[Polygon] = []

    s = stage(_BASE)
    if s > 0:
        lines.append(((-base_half * s, 0.0), (base_half * s, 0.0)))

    # sign +1 is the upper trapezoid (screen y grows downward)
    for sign, fill_stage in ((1, _FILL_UP), (-1, _FILL_DOWN)):
        left_base = (-base_half, 0.0)
        right_base = (base_half, 0.0)
        left_top = (-top_half, -rise * sign)
        right_top = (top_half, -rise * sign)

        s = stage(_LEFT)
        if s > 0:
            lines.append((left_base, _lerp(left_base, left_top, s)))
        s = stage(_RIGHT)
        if s > 0:
            lines.append((right_base, _lerp(right_base, right_top, s)))
        s = stage(_TOP)
        if s > 0:
            lines.append((left_top, (-top_half * (1 - s), left_top[1])))
            lines.append((right_top, (top_half * (1 - s), right_top[1])))
        s = stage(fill_stage)
        if s > 0:
            fills.append(
                (
                    left_base,
                    right_base,
                    _lerp(right_base, right_top, s),
                    _lerp(left_base, left_top, s),
                )
            )

    angle = config.rot * stage(_ROTATE)
    rad = math.radians(angle)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    cx = width / 2
    cy = height / 2

    def place(p: Point) -> Point:
        x, y = p
        return (cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a)

    return ShapeFrame(
        stroke_width=stroke,
        angle=angle,
        lines=tuple((place(a), place(b)) for a, b in lines),
        fills=tuple(tuple(place(p) for p in poly) for poly in fills),
    )
