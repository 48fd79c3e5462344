from __future__ import annotations
import math
from typing import NamedTuple, Tuple

from .canvas import HEIGHT
from .cloud import Cloud
from .errors import InvalidScale
from .utils import round_half_away

FIT_FRACTION = 0.7


class Origin(NamedTuple):
    x: int
    y: int


def polar_to_pixel(angle_deg: float, distance: float, scale: float, origin: Tuple[int, int] = (0, 0)) -> Tuple[int, int]:
    """Project a polar sample onto integer canvas coordinates.

    Angle 0 lies along +y and 90 degrees along +x.
    """
    phi = angle_deg * (math.pi / 180.0)
    x = round_half_away(distance * math.sin(phi) * scale) + origin[0]
    y = round_half_away(distance * math.cos(phi) * scale) + origin[1]
    return x, y


def auto_scale(cloud: Cloud, height: int = HEIGHT) -> float:
    """Scale that fits the farthest sample into 70% of the canvas height."""
    if not cloud.max_distance > 0:
        raise InvalidScale("Cannot fit scale: cloud has no sample with a positive distance.")
    if not math.isfinite(cloud.max_distance):
        raise InvalidScale(f"Cannot fit scale to a non-finite distance ({cloud.max_distance}).")
    return float(height) * FIT_FRACTION / cloud.max_distance
