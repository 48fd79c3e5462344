from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from .colors import Color
from .errors import DegenerateSegment

WIDTH = 1280
HEIGHT = 720
CHANNELS = 4


class Canvas:
    """Fixed-size RGBA pixel buffer with clipped access.

    ``pixels`` is a ``(height, width, 4)`` uint8 array that can be handed
    straight to an image encoder.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.channels = CHANNELS
        self.pixels = np.zeros((self.height, self.width, self.channels), dtype=np.uint8)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, x: float, y: float) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color | None:
        if not self.contains(x, y):
            return None
        return Color(*(int(v) for v in self.pixels[y, x]))

    def set(self, x: int, y: int, color: Color) -> None:
        if not self.contains(x, y):
            return
        self.pixels[y, x] = color

    def fill(self, color: Color) -> None:
        self.pixels[:, :] = color

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()


def draw_pixel(canvas: Canvas, x: int, y: int, c: Color) -> None:
    canvas.set(int(x), int(y), c)


def draw_point(canvas: Canvas, x: int, y: int, c: Color, lightness: float = 1.0) -> None:
    """Stamp a 3x3 block centred on ``(x, y)``."""
    c = c.scaled(lightness)
    x, y = int(x), int(y)
    for cx in (-1, 0, 1):
        for cy in (-1, 0, 1):
            draw_pixel(canvas, x + cx, y + cy, c)


def _step(x0: float, y0: float, x1: float, y1: float) -> Tuple[float, float, float]:
    dx, dy = x1 - x0, y1 - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        raise DegenerateSegment(f"Zero-length segment at ({x0}, {y0})")
    return dx / steps, dy / steps, steps


# Stamps reach one pixel past their centre and int() truncates towards zero,
# so centres in (-2, size + 1) can still touch the canvas.
_MARGIN = 2


def _visible_steps(canvas: Canvas, x0: float, y0: float, sx: float, sy: float, n: int) -> Tuple[int, int] | None:
    """Liang-Barsky clip of steps ``0..n-1`` against the margin-padded canvas."""
    lo, hi = 0.0, float(n - 1)
    for start, delta, limit in ((x0, sx, canvas.width), (y0, sy, canvas.height)):
        low, high = -_MARGIN, limit + _MARGIN - 1
        if delta == 0:
            if start < low or start > high:
                return None
            continue
        t0, t1 = (low - start) / delta, (high - start) / delta
        if t0 > t1:
            t0, t1 = t1, t0
        lo, hi = max(lo, t0), min(hi, t1)
        if lo > hi:
            return None
    return max(0, math.floor(lo) - 1), min(n - 1, math.ceil(hi) + 1)


def draw_line(canvas: Canvas, x0: float, y0: float, x1: float, y1: float, c: Color) -> None:
    """DDA line from ``(x0, y0)`` towards ``(x1, y1)``, one point per step.

    Steps whose stamp cannot reach the canvas are skipped.
    """
    sx, sy, steps = _step(x0, y0, x1, y1)
    visible = _visible_steps(canvas, x0, y0, sx, sy, math.ceil(steps))
    if visible is None:
        return
    first, last = visible
    if first:
        x0 += first * sx
        y0 += first * sy
    for _ in range(last - first + 1):
        draw_point(canvas, int(x0), int(y0), c)
        x0 += sx
        y0 += sy


def draw_ray(canvas: Canvas, x0: float, y0: float, x1: float, y1: float, c: Color) -> None:
    """Like :func:`draw_line` but keeps going until it leaves the canvas."""
    sx, sy, _ = _step(x0, y0, x1, y1)
    while canvas.contains(x0, y0):
        draw_point(canvas, int(x0), int(y0), c)
        x0 += sx
        y0 += sy


def draw_background(canvas: Canvas, c: Color) -> None:
    canvas.fill(c)


def draw_grid(canvas: Canvas, c: Color) -> None:
    for x in range(0, canvas.width, max(canvas.width // 8, 1)):
        canvas.pixels[:, x] = c
    for y in range(0, canvas.height, max(canvas.height // 8, 1)):
        canvas.pixels[y, :] = c
