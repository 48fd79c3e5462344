from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from ..config import ScenarioConfig, load_config
from ..core.canvas import Canvas
from ..core.cloud import Cloud, rotate
from ..core.exporter import TxtWriter
from ..core.reader import load_cloud
from ..core.scene import PlotStyle
from ..core.utils import get_logger
from ..runtime.builders import build_renderer, build_writers

_log = get_logger()


@dataclass(frozen=True)
class RenderResult:
    """Outcome of rendering one scan driven by a configuration."""

    cloud: Cloud
    canvas: Canvas
    written: Dict[str, Path]
    config: ScenarioConfig


def render_from_config(
    config: Union[str, Path, ScenarioConfig],
    *,
    scan: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    style: Optional[str] = None,
) -> RenderResult:
    """Load a scan file, render it and write the configured outputs.

    Parameters
    ----------
    config:
        Path to a YAML file or a pre-loaded :class:`~lidarviz.config.schema.ScenarioConfig`.
    scan:
        Optional override for the scan file named in the configuration.
    output_dir:
        Optional override for the directory receiving screenshots and text dumps.
    style:
        Optional plot style override (``connected``, ``bars`` or ``markers``).

    Returns
    -------
    RenderResult
        The loaded (and possibly rotated) cloud, the rendered canvas, the files
        written keyed by format, and the resolved configuration.
    """

    cfg = load_config(config) if not isinstance(config, ScenarioConfig) else config.model_copy(deep=True)

    if scan is not None:
        cfg.input.path = Path(scan).resolve()
    if output_dir is not None:
        cfg.output.directory = Path(output_dir).resolve()
    if style is not None:
        cfg.render.style = PlotStyle(style).value
    if cfg.input.path is None:
        raise ValueError("No scan file given: set input.path or pass scan=")

    cloud = load_cloud(cfg.input.path, skip_invalid=cfg.input.skip_invalid)
    if cfg.render.rotate_deg:
        rotate(cloud, cfg.render.rotate_deg)

    renderer = build_renderer(cfg)
    canvas = renderer.render(cloud)

    written: Dict[str, Path] = {}
    for fmt, writer in build_writers(cfg).items():
        if fmt == "png":
            written[fmt] = writer.write(canvas)
        else:
            written[fmt] = writer.write(cloud)

    return RenderResult(cloud=cloud, canvas=canvas, written=written, config=cfg)


def record_frames(frames: Iterable[Cloud], writer: TxtWriter) -> int:
    """Dump every frame as its own numbered text file; returns the frame count."""
    n = 0
    for cloud in frames:
        writer.write(cloud)
        n += 1
    _log.info("Recorded %d frames into %s", n, writer.directory)
    return n
