from __future__ import annotations
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.image as mpimg

from .canvas import Canvas
from .cloud import Cloud
from .utils import get_logger

_log = get_logger()

TXT_HEADER = (
    "# RPLIDAR SCAN DATA",
    "# Software: lidarviz",
    "# Units: degrees millimetres",
    "# Angle Distance",
)


def create_filename(directory: str | Path, dot_ext: str, cnt: int, now: Optional[datetime] = None) -> Path:
    """``<directory>/<cnt>-<dd.mm.YYYY-HH.MM.SS><dot_ext>``"""
    stamp = (now or datetime.now()).strftime("%d.%m.%Y-%H.%M.%S")
    return Path(directory) / f"{cnt}-{stamp}{dot_ext}"


def write_txt(cloud: Cloud, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for line in TXT_HEADER:
            f.write(line + "\n")
        for pt in cloud.points:
            f.write(f"{float(pt.angle)!r} {float(pt.distance)!r}\n")
    return path


def write_png(canvas: Canvas, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    mpimg.imsave(path, canvas.pixels, format="png")
    return path


class _NumberedWriter:
    """Writes numbered, timestamped files into one directory.

    The sequence number belongs to the writer instance.
    """
    dot_ext = ""

    def __init__(self, directory: str | Path, start: int = 0) -> None:
        self.directory = Path(directory)
        self.counter = start
        self.written: List[Path] = []

    def _next_path(self) -> Path:
        path = create_filename(self.directory, self.dot_ext, self.counter)
        self.counter += 1
        return path

    def _record(self, path: Path) -> Path:
        self.written.append(path)
        _log.info("Wrote %s", path)
        return path


class TxtWriter(_NumberedWriter):
    dot_ext = ".txt"

    def write(self, cloud: Cloud) -> Path:
        return self._record(write_txt(cloud, self._next_path()))


class PngWriter(_NumberedWriter):
    dot_ext = ".png"

    def write(self, canvas: Canvas) -> Path:
        return self._record(write_png(canvas, self._next_path()))
