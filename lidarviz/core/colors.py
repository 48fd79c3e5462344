from __future__ import annotations
from typing import NamedTuple, Sequence, Tuple


def _channel(value: float) -> int:
    """Truncate to an integer and clamp into the 8-bit range."""
    return min(max(int(value), 0), 255)


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def scaled(self, lightness: float) -> "Color":
        """RGB multiplied by ``lightness``, truncated and clamped to [0, 255]; alpha untouched."""
        if lightness == 1.0:
            return self
        return Color(_channel(self.r * lightness), _channel(self.g * lightness), _channel(self.b * lightness), self.a)

    @classmethod
    def of(cls, value: Sequence[int]) -> "Color":
        return cls(*(int(v) for v in value))


WHITE = Color(255, 255, 255)
COLOR_BACKGROUND = Color(12, 12, 24)
COLOR_GRID = Color(40, 40, 64)
COLOR_CLOUD0 = Color(0, 200, 255)
COLOR_CLOUD1 = Color(255, 40, 160)
COLOR_CLOUD2 = Color(255, 210, 0)

Palette = Tuple[Color, Color, Color]
CLOUD_PALETTE: Palette = (COLOR_CLOUD0, COLOR_CLOUD1, COLOR_CLOUD2)

# Upper edge of the first band; weights are measured over a 0.34 wide band.
_BAND = 0.33
_WIDTH = 0.34


def angle_color(v: float, lightness: float = 1.0, palette: Palette = CLOUD_PALETTE) -> Color:
    """Map ``v`` in [0, 1] onto the three-stop cloud gradient.

    Values outside [0, 1] give opaque white.
    """
    c_0, c_1, c_2 = palette
    if 0 <= v <= _BAND:
        c0, c1 = c_0, c_1
    elif 0 <= v <= 2 * _BAND:
        v -= _BAND
        c0, c1 = c_2, c_0
    elif 0 <= v <= 1.0:
        v -= 2 * _BAND
        c0, c1 = c_1, c_2
    else:
        return WHITE

    w = v / _WIDTH
    r = int(c0.r * w) + int(c1.r * (1.0 - w))
    g = int(c0.g * w) + int(c1.g * (1.0 - w))
    b = int(c0.b * w) + int(c1.b * (1.0 - w))
    return Color(_channel(r * lightness), _channel(g * lightness), _channel(b * lightness))


def dist_color(dist: float, max_dist: float, lightness: float = 1.0, palette: Palette = CLOUD_PALETTE) -> Color:
    return angle_color(dist / max_dist, lightness, palette)
