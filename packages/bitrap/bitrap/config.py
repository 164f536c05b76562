"""Immutable configuration for the fill animation."""

from __future__ import annotations

from dataclasses import dataclass

from bitrap.types import Color

PALETTE_HEX = ("#F44336", "#4CAF50", "#673AB7", "#FFC107", "#2196F3")
BACK_HEX = "#BDBDBD"
PARTS = 7


def parse_color(value: str) -> Color:
    """Parse ``#RRGGBB`` (``#`` optional) into an RGB tuple."""
    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {value!r}")
    try:
        raw = int(digits, 16)
    except ValueError:
        raise ValueError(f"Expected #RRGGBB color, got {value!r}") from None
    return ((raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF)


@dataclass(frozen=True, slots=True)
class FillConfig:
    colors: tuple[Color, ...] = tuple(parse_color(c) for c in PALETTE_HEX)
    parts: int = PARTS
    stroke_factor: float = 90.0
    size_factor: float = 2.9
    step: float = 0.02 / PARTS
    delay: float = 0.02  # seconds
    back_color: Color = parse_color(BACK_HEX)
    rot: float = 90.0  # degrees

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError("colors must not be empty")
        if self.parts < 1:
            raise ValueError(f"parts must be >= 1, got {self.parts}")
        if not 0.0 < self.step <= 1.0:
            raise ValueError(f"step must be in (0, 1], got {self.step}")
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")
        if self.stroke_factor <= 0 or self.size_factor <= 0:
            raise ValueError("stroke_factor and size_factor must be positive")

    @property
    def chain_length(self) -> int:
        return len(self.colors)


DEFAULT_CONFIG = FillConfig()
