"""Linked Bi-Trapezoid Fill - tap-driven shape chain demo.

Exercises bitrap (chain, scale state, frame driver) through the pygame host.

Controls:
  Click / Tap  Animate the current shape, then move along the chain
  Esc          Quit
"""
from __future__ import annotations

import argparse
import sys

from bitrap import DEFAULT_CONFIG
from bitrap_pygame import PygameHost


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Linked Bi-Trapezoid Fill — bitrap demo")
    p.add_argument("--width", type=int, default=600, help="Window width (default: 600)")
    p.add_argument("--height", type=int, default=800, help="Window height (default: 800)")
    p.add_argument("--fps", type=int, default=60, help="Frame rate cap (default: 60)")
    p.add_argument("--fullscreen", action="store_true", help="Run full screen")
    args = p.parse_args()
    args.width = max(100, args.width)
    args.height = max(100, args.height)
    args.fps = max(10, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    size = (0, 0) if args.fullscreen else (args.width, args.height)
    host = PygameHost.create(size, fullscreen=args.fullscreen, config=DEFAULT_CONFIG)
    host.run(fps=args.fps)
    sys.exit()


if __name__ == "__main__":
    main()
