from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from .canvas import Canvas, draw_background, draw_grid, draw_line, draw_pixel, draw_point
from .cloud import Cloud
from .colors import (
    CLOUD_PALETTE, COLOR_BACKGROUND, COLOR_GRID, Color, Palette, angle_color, dist_color,
)
from .errors import InvalidScale
from .glyphs import CHAR_MAT, glyph
from .transform import Origin, auto_scale, polar_to_pixel
from .utils import get_logger, round_half_away

_log = get_logger()

BAR_WIDTH = 80
MARK_EVERY = 16


class PlotStyle(str, Enum):
    CONNECTED = "connected"
    BARS = "bars"
    MARKERS = "markers"


@dataclass(frozen=True)
class SceneColors:
    background: Color = COLOR_BACKGROUND
    grid: Color = COLOR_GRID
    cloud: Palette = CLOUD_PALETTE


def _center(canvas: Canvas) -> Origin:
    return Origin(canvas.width // 2, canvas.height // 2)


def draw_connected_cloud(
    canvas: Canvas,
    cloud: Cloud,
    scale: float = 0.0,
    origin: Optional[Tuple[int, int]] = None,
    lightness: float = 1.0,
    palette: Palette = CLOUD_PALETTE,
) -> float:
    """Draw the scan as a closed polygon in acquisition order.

    Edges touching a zero-distance sample are left out. Edge colour follows
    the sample index, not its angle. Returns the scale used.
    """
    if cloud.count == 0:
        return scale
    if scale == 0:
        scale = auto_scale(cloud, canvas.height)
    if origin is None:
        origin = _center(canvas)

    pts = [polar_to_pixel(p.angle, p.distance, scale, origin) for p in cloud.points]
    n = cloud.count
    # (i - 1 -> i) for i in 1..n-1, then the closing edge (n-1 -> 0) coloured at n / n
    edges = [(i - 1, i, i) for i in range(1, n)] + [(n - 1, 0, n)]
    for a, b, k in edges:
        if cloud.points[a].distance == 0 or cloud.points[b].distance == 0:
            continue
        (x0, y0), (x1, y1) = pts[a], pts[b]
        if (x0, y0) == (x1, y1):
            continue
        c = angle_color(k / n, lightness, palette)
        draw_line(canvas, float(x0), float(y0), float(x1), float(y1), c)
    return scale


def draw_cloud_bars(
    canvas: Canvas,
    cloud: Cloud,
    bar_width: int = BAR_WIDTH,
    lightness: float = 1.0,
    palette: Palette = CLOUD_PALETTE,
) -> None:
    """One horizontal bar per canvas row, nearest-sample resampled."""
    if cloud.count == 0:
        return
    if not cloud.max_distance > 0:
        raise InvalidScale("Cannot draw bars: cloud has no sample with a positive distance.")
    for j in range(canvas.height):
        idx = j * cloud.count // canvas.height
        dist = cloud.points[idx].distance
        width = round_half_away(dist / cloud.max_distance * bar_width)
        if width <= 0:
            continue
        c = angle_color(idx / cloud.count, lightness, palette)
        canvas.pixels[j, :min(width, canvas.width)] = c


def draw_mark(
    canvas: Canvas,
    x: int,
    y: int,
    a: int,
    b: int,
    c: Color,
    table: Sequence[Sequence[str]] = CHAR_MAT,
) -> None:
    """Point at ``(x, y)`` labelled ``"a.b"`` just below-left of it."""
    draw_point(canvas, x, y, c)
    x -= 12
    y += 5
    for ch in f"{a}.{b}":
        rows = glyph(ch, table)
        for cy, row in enumerate(rows):
            for cx, cell in enumerate(row):
                if cell == "#":
                    draw_pixel(canvas, x + cx, y + cy, c)
        x += len(rows[0]) + 1


def draw_cloud_marks(
    canvas: Canvas,
    cloud: Cloud,
    scale: float = 0.0,
    origin: Optional[Tuple[int, int]] = None,
    mark_every: int = MARK_EVERY,
    lightness: float = 1.0,
    palette: Palette = CLOUD_PALETTE,
    table: Sequence[Sequence[str]] = CHAR_MAT,
) -> float:
    """Draw valid samples as points, coloured by distance.

    Every ``mark_every``-th valid sample is labelled with its distance in
    metres to one decimal. Returns the scale used.
    """
    if cloud.count == 0:
        return scale
    if scale == 0:
        scale = auto_scale(cloud, canvas.height)
    if origin is None:
        origin = _center(canvas)

    valid = 0
    for p in cloud.points:
        if p.distance <= 0:
            continue
        x, y = polar_to_pixel(p.angle, p.distance, scale, origin)
        c = dist_color(p.distance, cloud.max_distance, lightness, palette)
        if mark_every > 0 and valid % mark_every == 0:
            metres, rest = divmod(int(p.distance), 1000)
            draw_mark(canvas, x, y, metres, rest // 100, c, table)
        else:
            draw_point(canvas, x, y, c)
        valid += 1
    return scale


@dataclass
class SceneRenderer:
    """Compose background, grid and one plot style into a canvas per frame."""
    canvas: Canvas
    colors: SceneColors = field(default_factory=SceneColors)
    style: PlotStyle = PlotStyle.CONNECTED
    scale: float = 0.0
    origin: Optional[Origin] = None
    grid: bool = True
    lightness: float = 1.0
    bar_width: int = BAR_WIDTH
    mark_every: int = MARK_EVERY

    def __post_init__(self) -> None:
        self.style = PlotStyle(self.style)
        if self.origin is None:
            self.origin = _center(self.canvas)

    def clear(self) -> None:
        draw_background(self.canvas, self.colors.background)
        if self.grid:
            draw_grid(self.canvas, self.colors.grid)

    def render(self, cloud: Cloud, style: Optional[PlotStyle] = None) -> Canvas:
        style = PlotStyle(style) if style is not None else self.style
        self.clear()
        if style is PlotStyle.CONNECTED:
            used = draw_connected_cloud(
                self.canvas, cloud, self.scale, self.origin, self.lightness, self.colors.cloud
            )
            _log.debug("Connected plot: %d points at scale %.4f", cloud.count, used)
        elif style is PlotStyle.BARS:
            draw_cloud_bars(self.canvas, cloud, self.bar_width, self.lightness, self.colors.cloud)
        elif style is PlotStyle.MARKERS:
            used = draw_cloud_marks(
                self.canvas, cloud, self.scale, self.origin, self.mark_every, self.lightness, self.colors.cloud
            )
            _log.debug("Marker plot: %d points at scale %.4f", cloud.count, used)
        return self.canvas
