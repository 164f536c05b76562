"""bitrap-pygame - pygame host for the bitrap fill animation."""
from __future__ import annotations

from bitrap_pygame.canvas import PygameCanvas
from bitrap_pygame.host import PygameHost

__all__ = ["PygameCanvas", "PygameHost"]
