from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from ..core.cloud import Cloud, build_cloud
from ..core.errors import EmptyCloud
from ..core.utils import get_logger
from .base import ScanDriver

_log = get_logger()

# Layout of one high-quality measurement node as delivered by the driver.
NODE_DTYPE = np.dtype([
    ("angle_z_q14", np.uint16),   # fraction of a full turn, 65536 == 360 deg
    ("dist_mm_q2", np.uint32),    # quarter millimetres
    ("quality", np.uint8),
    ("flag", np.uint8),
])


def decode_nodes(buffer: np.ndarray, count: Optional[int] = None) -> tuple[np.ndarray, np.ndarray]:
    """Convert fixed-point nodes into ``(angles_deg, distances_mm)`` arrays."""
    nodes = np.asarray(buffer)
    if nodes.dtype.names is None or not {"angle_z_q14", "dist_mm_q2"} <= set(nodes.dtype.names):
        raise ValueError("Buffer must be a structured array with 'angle_z_q14' and 'dist_mm_q2' fields.")
    if count is not None:
        if count < 0 or count > len(nodes):
            raise ValueError(f"count {count} outside buffer of length {len(nodes)}")
        nodes = nodes[:count]
    angles = nodes["angle_z_q14"].astype(np.float64) / 65536.0 * 360.0
    dists = nodes["dist_mm_q2"].astype(np.float64) / 4.0
    return angles, dists


def cloud_from_buffer(buffer: np.ndarray, count: Optional[int] = None, skip_invalid: bool = True) -> Cloud:
    """Build a :class:`Cloud` from one sensor buffer snapshot.

    Raises :class:`EmptyCloud` when nothing is retained.
    """
    angles, dists = decode_nodes(buffer, count)
    return build_cloud(zip(angles.tolist(), dists.tolist()), skip_invalid=skip_invalid)


@dataclass
class RPLidarSensor:
    """Turns successive driver scans into independent :class:`Cloud` frames."""

    driver: ScanDriver
    skip_invalid: bool = True

    def grab(self) -> Cloud:
        return cloud_from_buffer(self.driver.grab_scan_hq(), skip_invalid=self.skip_invalid)

    def frames(self, limit: Optional[int] = None) -> Iterator[Cloud]:
        """Pull up to ``limit`` scans from the driver (forever if None).

        Scans without a single usable sample are logged and dropped.
        """
        pulled = 0
        while limit is None or pulled < limit:
            pulled += 1
            try:
                cloud = self.grab()
            except EmptyCloud:
                _log.warning("Sensor returned an empty scan; dropping frame.")
                continue
            yield cloud
