"""lidarviz – 2D lidar scan statistics and raster visualisation.

This package contains:
- Cloud, build_cloud and rotate (core.cloud)
- Plaintext scan loading (core.reader) and TXT/PNG export (core.exporter)
- Polar projection and scale auto-fit (core.transform)
- Canvas and the draw_* rasterizer primitives (core.canvas)
- The three-stop colour gradient (core.colors)
- SceneRenderer and the plot styles (core.scene)
- Sensor buffer decoding (sensors.rplidar)
"""

from .core.errors import LidarVizError, EmptyCloud, DegenerateSegment, InvalidScale
from .core.cloud import Sample, Cloud, build_cloud, rotate
from .core.reader import load_cloud, parse_samples
from .core.colors import Color, angle_color, dist_color
from .core.transform import Origin, polar_to_pixel, auto_scale
from .core.canvas import (Canvas, draw_pixel, draw_point, draw_line, draw_ray,
                          draw_background, draw_grid)
from .core.scene import PlotStyle, SceneColors, SceneRenderer
from .core.exporter import TxtWriter, PngWriter, write_txt, write_png
from .sensors.rplidar import NODE_DTYPE, RPLidarSensor, cloud_from_buffer
