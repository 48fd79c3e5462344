from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

RGB = tuple[int, int, int]


def _check_rgb(value: RGB) -> RGB:
    if any(c < 0 or c > 255 for c in value):
        raise ValueError(f"Colour channels must be within [0, 255], got {value}")
    return value


class InputConfig(BaseModel):
    path: Optional[Path] = None
    skip_invalid: bool = False


class CanvasConfig(BaseModel):
    width: int = 1280
    height: int = 720
    origin: Optional[tuple[int, int]] = None

    @field_validator("width", "height")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas dimensions must be positive")
        return v

    def resolved_origin(self) -> tuple[int, int]:
        if self.origin is not None:
            return self.origin
        return (self.width // 2, self.height // 2)


class PaletteConfig(BaseModel):
    background: RGB = (12, 12, 24)
    grid: RGB = (40, 40, 64)
    cloud: tuple[RGB, RGB, RGB] = ((0, 200, 255), (255, 40, 160), (255, 210, 0))

    @field_validator("background", "grid")
    @classmethod
    def _rgb(cls, v: RGB) -> RGB:
        return _check_rgb(v)

    @field_validator("cloud")
    @classmethod
    def _anchors(cls, v: tuple[RGB, RGB, RGB]) -> tuple[RGB, RGB, RGB]:
        for c in v:
            _check_rgb(c)
        return v


class RenderConfig(BaseModel):
    style: Literal["connected", "bars", "markers"] = "connected"
    scale: float = 0.0
    grid: bool = True
    lightness: float = 1.0
    rotate_deg: float = 0.0
    bar_width: int = 80
    mark_every: int = 16

    @model_validator(mode="after")
    def _validate_ranges(self) -> "RenderConfig":
        if self.scale < 0:
            raise ValueError("scale must be >= 0 (0 selects auto-fit)")
        if not (0.0 <= self.lightness <= 1.0):
            raise ValueError("lightness must be within [0, 1]")
        if abs(self.rotate_deg) >= 360:
            raise ValueError("rotate_deg must satisfy |rotate_deg| < 360")
        if self.bar_width <= 0:
            raise ValueError("bar_width must be positive")
        if self.mark_every < 0:
            raise ValueError("mark_every must be >= 0")
        return self


class OutputConfig(BaseModel):
    directory: Path = Path("screenshots")
    formats: List[Literal["png", "txt"]] = Field(default_factory=lambda: ["png"])


class ScenarioConfig(BaseModel):
    input: InputConfig = Field(default_factory=InputConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> ScenarioConfig:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Configuration root must be a mapping.")
    cfg = ScenarioConfig.model_validate(data)
    if not cfg.output.directory.is_absolute():
        cfg.output.directory = (path.parent / cfg.output.directory).resolve()
    if cfg.input.path is not None and not cfg.input.path.is_absolute():
        cfg.input.path = (path.parent / cfg.input.path).resolve()
    return cfg
