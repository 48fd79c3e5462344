from __future__ import annotations


class LidarVizError(Exception):
    """Base class for errors raised by the rendering and analysis core."""


class EmptyCloud(LidarVizError, ValueError):
    """The source produced no usable samples."""


class DegenerateSegment(LidarVizError, ValueError):
    """A line or ray was requested between two identical points."""


class InvalidScale(LidarVizError, ValueError):
    """Scale auto-fit was requested for a cloud without a positive distance."""
