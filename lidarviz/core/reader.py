from __future__ import annotations
import math
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from .cloud import Cloud, build_cloud
from .utils import get_logger

_log = get_logger()


def parse_samples(lines: Iterable[str], source: str = "<lines>") -> Iterator[Tuple[float, float]]:
    """Yield ``(angle, distance)`` pairs from whitespace separated scan lines.

    Empty lines and lines starting with ``#`` are comments. Lines that do not
    parse, or that hold ``inf``/``nan`` values, are logged and skipped.
    """
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or line.startswith("#"):
            continue
        parts = stripped.split()
        try:
            angle, dist = float(parts[0]), float(parts[1])
        except (IndexError, ValueError):
            _log.warning("%s:%d: skipping malformed line %r", source, lineno, stripped)
            continue
        if not (math.isfinite(angle) and math.isfinite(dist)):
            _log.warning("%s:%d: skipping non-finite sample %r", source, lineno, stripped)
            continue
        yield angle, dist


def load_cloud(path: str | Path, skip_invalid: bool = False) -> Cloud:
    """Read a plaintext scan file into a :class:`Cloud`.

    Raises :class:`~lidarviz.core.errors.EmptyCloud` if the file holds no samples.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        cloud = build_cloud(parse_samples(f, source=path.name), skip_invalid=skip_invalid)
    _log.info("Loaded %s: %d points (max %.1f mm)", path.name, cloud.count, cloud.max_distance)
    return cloud
