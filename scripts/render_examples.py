from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from lidarviz.config import ScenarioConfig
from lidarviz.examples.synthetic import generate_scan
from lidarviz.sdk import render_from_config


@dataclass(frozen=True)
class ExampleSpec:
    name: str
    preset: str
    style: str
    dropout: float = 0.0


PREVIEW_EXAMPLES: List[ExampleSpec] = [
    ExampleSpec(name="room_connected", preset="room", style="connected"),
    ExampleSpec(name="room_dropouts", preset="room", style="connected", dropout=0.05),
    ExampleSpec(name="room_bars", preset="room", style="bars"),
    ExampleSpec(name="circle_markers", preset="circle", style="markers"),
]

SCAN_DIR = Path("examples/scans")
IMAGE_DIR = Path("examples/images")


def _ensure_dirs() -> None:
    SCAN_DIR.mkdir(parents=True, exist_ok=True)
    IMAGE_DIR.mkdir(parents=True, exist_ok=True)


def run_example(spec: ExampleSpec, overwrite: bool = True) -> Path:
    scan_path = SCAN_DIR / f"{spec.name}.txt"
    if scan_path.exists() and not overwrite:
        logging.info("Reusing %s", scan_path)
    else:
        generate_scan(scan_path, preset=spec.preset, dropout=spec.dropout, seed=7)

    cfg = ScenarioConfig.model_validate({
        "input": {"path": str(scan_path.resolve())},
        "render": {"style": spec.style},
        "output": {"directory": str((IMAGE_DIR / spec.name).resolve()), "formats": ["png"]},
    })
    result = render_from_config(cfg)
    return result.written["png"]


def main() -> None:
    parser = argparse.ArgumentParser(description="Render preview images for the synthetic scans.")
    parser.add_argument("--keep", action="store_true", help="Reuse scan files that already exist.")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="[%(levelname)s] %(message)s")
    _ensure_dirs()
    for spec in PREVIEW_EXAMPLES:
        out = run_example(spec, overwrite=not args.keep)
        logging.info("%s → %s", spec.name, out)


if __name__ == "__main__":
    main()
