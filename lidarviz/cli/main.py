from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from ..config import ScenarioConfig, load_config
from ..core.errors import LidarVizError
from ..core.scene import PlotStyle
from ..core.reader import load_cloud
from ..sdk import render_from_config
from ..examples.synthetic import generate_scan

app = typer.Typer(help="Lidar scan visualisation utilities")
scan_app = typer.Typer(help="Synthetic scan helpers")
app.add_typer(scan_app, name="scan")

_log = logging.getLogger("lidarviz")


def _configure_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format="[%(levelname)s] %(message)s")
    logging.getLogger("lidarviz").setLevel(numeric)


def _check_style(style: Optional[str]) -> Optional[str]:
    if style is None:
        return None
    allowed = [s.value for s in PlotStyle]
    if style not in allowed:
        raise typer.BadParameter(f"style must be one of {allowed}.", param_hint="--style")
    return style


def _run(cfg: ScenarioConfig, output_dir: Optional[Path], style: Optional[str]) -> None:
    try:
        result = render_from_config(cfg, output_dir=output_dir, style=style)
    except LidarVizError as exc:
        _log.error("%s", exc)
        raise typer.Exit(code=1)
    written = ", ".join(str(p) for p in result.written.values()) or "nothing"
    typer.echo(f"Rendered {result.cloud.count} points ({result.config.render.style}) → {written}")


@app.command("render")
def render(
    scan: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Scan file with 'angle distance' lines."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, readable=True, help="YAML configuration file."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory for screenshots and text dumps."),
    style: Optional[str] = typer.Option(None, "--style", help="Plot style: connected, bars or markers."),
    scale: Optional[float] = typer.Option(None, "--scale", "-s", help="Display scale (1 mm -> 1 px for 1.0, 0 fits automatically)."),
    rotate_deg: Optional[float] = typer.Option(None, "--rotate", help="Rotate the cloud by this many degrees."),
    no_grid: bool = typer.Option(False, "--no-grid", help="Do not draw the background grid."),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help="Drop zero-distance samples while loading."),
    txt: bool = typer.Option(False, "--txt", help="Also dump the (rotated) cloud as TXT."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Render one scan file to a PNG screenshot."""

    _configure_logging(log_level)
    style = _check_style(style)
    if scale is not None and scale < 0:
        raise typer.BadParameter("scale must be >= 0.", param_hint="--scale")
    if rotate_deg is not None and abs(rotate_deg) >= 360:
        raise typer.BadParameter("rotation must satisfy |deg| < 360.", param_hint="--rotate")

    cfg = load_config(config) if config is not None else ScenarioConfig()
    cfg.input.path = scan.resolve()
    cfg.input.skip_invalid = skip_invalid or cfg.input.skip_invalid
    if scale is not None:
        cfg.render.scale = scale
    if rotate_deg is not None:
        cfg.render.rotate_deg = rotate_deg
    if no_grid:
        cfg.render.grid = False
    if txt and "txt" not in cfg.output.formats:
        cfg.output.formats.append("txt")
    if output_dir is None and config is None:
        output_dir = Path.cwd()
    _run(cfg, output_dir, style)


@app.command("run")
def run(
    config: Path = typer.Argument(..., exists=True, readable=True, help="Path to YAML configuration file."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Override output directory."),
    style: Optional[str] = typer.Option(None, "--style", help="Override plot style."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Render the scan named in a YAML config."""

    _configure_logging(log_level)
    style = _check_style(style)
    cfg = load_config(config)
    if cfg.input.path is None:
        raise typer.BadParameter("configuration has no input.path", param_hint="CONFIG")
    _run(cfg, output_dir, style)


@app.command("stats")
def stats(
    scan: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Scan file with 'angle distance' lines."),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help="Drop zero-distance samples while loading."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Print scan statistics (legacy and textbook values)."""

    _configure_logging(log_level)
    try:
        cloud = load_cloud(scan, skip_invalid=skip_invalid)
    except LidarVizError as exc:
        _log.error("%s", exc)
        raise typer.Exit(code=1)
    for key, value in cloud.summary().items():
        typer.echo(f"{key:>15}: {value:g}")


@scan_app.command("generate")
def scan_generate(
    output: Path = typer.Argument(..., help="Output scan path (.txt)."),
    preset: str = typer.Option("room", "--preset", help="Synthetic scan preset (room, circle)."),
    size: float = typer.Option(6.0, "--size", help="Scene extent in metres."),
    samples: int = typer.Option(720, "--samples", help="Samples per revolution."),
    dropout: float = typer.Option(0.0, "--dropout", help="Probability of a zero-distance reading."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for dropouts."),
) -> None:
    """Generate a synthetic scan file useful for rendering demos."""

    try:
        out = generate_scan(output.resolve(), preset=preset, size=size, samples=samples, dropout=dropout, seed=seed)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    typer.echo(f"Wrote synthetic scan to {out}")


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
