from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from ..core.cloud import build_cloud
from ..core.exporter import write_txt


def _room(angles_deg: np.ndarray, size_m: float) -> np.ndarray:
    half_w = size_m * 1000.0 / 2.0
    half_d = half_w * 0.6
    phi = np.deg2rad(angles_deg)
    with np.errstate(divide="ignore"):
        to_side = half_w / np.abs(np.sin(phi))
        to_front = half_d / np.abs(np.cos(phi))
    return np.minimum(to_side, to_front)


def _circle(angles_deg: np.ndarray, size_m: float) -> np.ndarray:
    return np.full_like(angles_deg, size_m * 1000.0 / 2.0)


_PRESETS = {
    "room": _room,
    "circle": _circle,
}


def generate_samples(
    preset: str = "room",
    size: float = 6.0,
    samples: int = 720,
    dropout: float = 0.0,
    seed: Optional[int] = None,
) -> List[Tuple[float, float]]:
    """One synthetic revolution as ``(angle_deg, distance_mm)`` pairs.

    ``dropout`` is the probability that a sample reads as "no return" (0 mm).
    """
    if preset not in _PRESETS:
        raise ValueError(f"Unknown preset '{preset}'. Choose from {sorted(_PRESETS)}.")
    if samples <= 0:
        raise ValueError("samples must be positive")
    if not (0.0 <= dropout < 1.0):
        raise ValueError("dropout must be within [0, 1)")
    angles = np.arange(samples, dtype=np.float64) * (360.0 / samples)
    dists = np.round(_PRESETS[preset](angles, size), 2)
    if dropout > 0:
        rng = np.random.default_rng(seed)
        dists[rng.random(samples) < dropout] = 0.0
    return list(zip(angles.tolist(), dists.tolist()))


def generate_scan(
    path: Path,
    preset: str = "room",
    size: float = 6.0,
    samples: int = 720,
    dropout: float = 0.0,
    seed: Optional[int] = None,
) -> Path:
    cloud = build_cloud(generate_samples(preset, size, samples, dropout, seed))
    return write_txt(cloud, path)
