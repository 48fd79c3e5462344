"""Programmatic entry points for rendering and recording scans."""

from .run import RenderResult, record_frames, render_from_config

__all__ = ["RenderResult", "record_frames", "render_from_config"]
