"""Stage mapping: split one progress value into sequential sub-stages."""
from __future__ import annotations

import math


def max_scale(scale: float, i: int, n: int) -> float:
    return max(0.0, scale - i / n)


def divide_scale(scale: float, i: int, n: int) -> float:
    """Local progress of stage ``i`` of ``n``.

    Stays 0 until ``scale`` reaches ``i / n``, ramps to 1 over the next
    ``1 / n`` and then holds at 1.
    """
    return min(1.0 / n, max_scale(scale, i, n)) * n


def sinify(scale: float) -> float:
    """Ease envelope rising 0 -> 1 -> 0 as scale goes 0 -> 1."""
    return math.sin(scale * math.pi)


def stage_scales(scale: float, n: int) -> list[float]:
    return [divide_scale(scale, i, n) for i in range(n)]
