from __future__ import annotations
from dataclasses import dataclass, field, replace
import math
from typing import Dict, Iterable, List, NamedTuple, Tuple

import numpy as np

from .errors import EmptyCloud


class Sample(NamedTuple):
    angle: float      # degrees
    distance: float   # millimetres, 0 means no return


@dataclass
class Cloud:
    """One 2D scan in acquisition order plus statistics over its distances.

    ``mean_distance`` and ``std_distance`` keep the arithmetic that existing
    scan tooling reports: the mean divides by every retained sample (invalid
    zero readings included) and the "standard deviation" is the root of the
    summed squares, without dividing by the count.  ``valid_mean_distance``
    and ``population_std_distance`` give the textbook values next to them.
    """
    points: List[Sample] = field(default_factory=list)
    count: int = 0
    max_distance: float = 0.0
    min_distance: float = math.inf
    mean_distance: float = 0.0
    std_distance: float = 0.0

    def __len__(self) -> int:
        return self.count

    def __iter__(self):
        return iter(self.points)

    def distances(self) -> np.ndarray:
        return np.fromiter((p.distance for p in self.points), dtype=np.float64, count=self.count)

    @property
    def valid_count(self) -> int:
        return sum(1 for p in self.points if p.distance > 0)

    @property
    def valid_mean_distance(self) -> float:
        d = self.distances()
        d = d[d > 0]
        if d.size == 0:
            return math.nan
        return float(d.mean())

    @property
    def population_std_distance(self) -> float:
        if self.count == 0:
            return math.nan
        return float(np.std(self.distances()))

    def summary(self) -> Dict[str, float]:
        return {
            "count": self.count,
            "valid": self.valid_count,
            "min": self.min_distance,
            "max": self.max_distance,
            "mean": self.mean_distance,
            "std": self.std_distance,
            "valid_mean": self.valid_mean_distance,
            "population_std": self.population_std_distance,
        }

    def rotated(self, delta_deg: float) -> "Cloud":
        cloud = replace(self, points=list(self.points))
        rotate(cloud, delta_deg)
        return cloud


def build_cloud(samples: Iterable[Tuple[float, float]], skip_invalid: bool = False) -> Cloud:
    """Accumulate ``(angle, distance)`` pairs into a finalized :class:`Cloud`.

    Raises :class:`EmptyCloud` when no sample is retained.
    """
    cloud = Cloud()
    total = 0.0
    for angle, dist in samples:
        angle = float(angle)
        dist = float(dist)
        if skip_invalid and dist == 0:
            continue
        if dist > cloud.max_distance:
            cloud.max_distance = dist
        if dist < cloud.min_distance and dist > 0:
            cloud.min_distance = dist
        cloud.count += 1
        total += dist
        cloud.points.append(Sample(angle, dist))

    if cloud.count == 0:
        raise EmptyCloud("Scan does not contain a valid cloud.")

    cloud.mean_distance = total / cloud.count
    sq = 0.0
    for pt in cloud.points:
        sq += (cloud.mean_distance - pt.distance) ** 2
    cloud.std_distance = math.sqrt(sq)
    return cloud


def rotate(cloud: Cloud, delta_deg: float) -> None:
    """Rotate every sample by ``delta_deg`` in place.

    Angles reaching 360 are wrapped by a single subtraction, so a single call
    expects ``|delta_deg| < 360``.
    """
    for i, pt in enumerate(cloud.points):
        angle = pt.angle + float(delta_deg)
        if angle >= 360:
            angle -= 360
        cloud.points[i] = Sample(angle, pt.distance)
