from __future__ import annotations
from typing import Protocol
import numpy as np


class ScanDriver(Protocol):
    """Anything that hands back one full revolution of HQ measurement nodes."""

    def grab_scan_hq(self) -> np.ndarray: ...
