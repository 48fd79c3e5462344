from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from ..config import ScenarioConfig
from ..core.canvas import Canvas
from ..core.colors import Color
from ..core.exporter import PngWriter, TxtWriter
from ..core.scene import PlotStyle, SceneColors, SceneRenderer
from ..core.transform import Origin

Writer = Union[PngWriter, TxtWriter]


def build_colors(cfg: ScenarioConfig) -> SceneColors:
    pal = cfg.palette
    c0, c1, c2 = (Color.of(c) for c in pal.cloud)
    return SceneColors(
        background=Color.of(pal.background),
        grid=Color.of(pal.grid),
        cloud=(c0, c1, c2),
    )


def build_canvas(cfg: ScenarioConfig) -> Canvas:
    return Canvas(cfg.canvas.width, cfg.canvas.height)


def build_renderer(cfg: ScenarioConfig, canvas: Optional[Canvas] = None) -> SceneRenderer:
    render_cfg = cfg.render
    return SceneRenderer(
        canvas=canvas if canvas is not None else build_canvas(cfg),
        colors=build_colors(cfg),
        style=PlotStyle(render_cfg.style),
        scale=render_cfg.scale,
        origin=Origin(*cfg.canvas.resolved_origin()),
        grid=render_cfg.grid,
        lightness=render_cfg.lightness,
        bar_width=render_cfg.bar_width,
        mark_every=render_cfg.mark_every,
    )


def build_writers(cfg: ScenarioConfig, directory: Optional[Path] = None) -> Dict[str, Writer]:
    out_dir = Path(directory) if directory is not None else cfg.output.directory
    writers: Dict[str, Writer] = {}
    for fmt in cfg.output.formats:
        if fmt == "png":
            writers["png"] = PngWriter(out_dir)
        elif fmt == "txt":
            writers["txt"] = TxtWriter(out_dir)
        else:
            raise ValueError(f"Unsupported output format: {fmt}")
    return writers
