import math

import numpy as np
import pytest

from lidarviz.core.canvas import (
    Canvas, draw_background, draw_grid, draw_line, draw_pixel, draw_point, draw_ray,
)
from lidarviz.core.colors import Color
from lidarviz.core.errors import DegenerateSegment

C = Color(200, 100, 50)


def test_canvas_buffer_layout() -> None:
    canvas = Canvas(16, 8)
    assert canvas.pixels.shape == (8, 16, 4)
    assert canvas.size == (16, 8)
    assert canvas.pixels.dtype == np.uint8
    assert not canvas.pixels.any()
    assert len(canvas.tobytes()) == 16 * 8 * 4


def test_canvas_rejects_empty_size() -> None:
    with pytest.raises(ValueError):
        Canvas(0, 10)


def test_draw_pixel_outside_canvas_is_silent_noop() -> None:
    canvas = Canvas(16, 8)
    before = canvas.pixels.copy()
    for x, y in [(-1, 0), (16, 0), (0, 8), (0, -1), (100, 100), (-5, -5)]:
        draw_pixel(canvas, x, y, C)
    np.testing.assert_array_equal(canvas.pixels, before)
    assert canvas.get(-1, 0) is None


def test_draw_pixel_sets_all_channels() -> None:
    canvas = Canvas(16, 8)
    draw_pixel(canvas, 3, 2, C)
    assert canvas.get(3, 2) == C
    assert canvas.pixels[2, 3].tolist() == [200, 100, 50, 255]


def test_draw_point_is_clipped_3x3_block() -> None:
    canvas = Canvas(16, 8)
    draw_point(canvas, 0, 0, C)
    lit = canvas.pixels[..., 3] > 0
    assert lit.sum() == 4
    assert lit[0:2, 0:2].all()

    draw_point(canvas, 8, 4, C)
    assert (canvas.pixels[3:6, 7:10, 3] > 0).all()


def test_draw_point_lightness_keeps_alpha() -> None:
    canvas = Canvas(16, 8)
    draw_point(canvas, 5, 5, C, lightness=0.5)
    assert canvas.get(5, 5) == Color(100, 50, 25, 255)


def test_draw_line_steps_along_major_axis() -> None:
    canvas = Canvas(16, 8)
    draw_line(canvas, 2, 4, 10, 4, C)
    # eight points at x = 2..9, each a 3x3 block
    assert canvas.get(1, 4) == C
    assert canvas.get(10, 4) == C
    assert canvas.get(11, 4) == Color(0, 0, 0, 0)
    assert canvas.get(5, 2) == Color(0, 0, 0, 0)
    assert (canvas.pixels[3:6, 1:11, 3] > 0).all()


def test_draw_line_diagonal_reaches_near_endpoint() -> None:
    canvas = Canvas(16, 16)
    draw_line(canvas, 1, 1, 11, 6, C)
    assert canvas.get(1, 1) == C
    assert canvas.get(10, 5) == C
    assert canvas.get(13, 8) == Color(0, 0, 0, 0)


def test_zero_length_segments_raise() -> None:
    canvas = Canvas(16, 8)
    with pytest.raises(DegenerateSegment):
        draw_line(canvas, 3, 3, 3, 3, C)
    with pytest.raises(DegenerateSegment):
        draw_ray(canvas, 3, 3, 3, 3, C)
    assert not canvas.pixels.any()


def test_draw_ray_runs_to_canvas_edge() -> None:
    canvas = Canvas(16, 8)
    draw_ray(canvas, 2, 2, 3, 2, C)
    assert canvas.get(15, 2) == C
    assert canvas.get(1, 2) == C
    assert canvas.get(0, 2) == Color(0, 0, 0, 0)


def test_draw_ray_from_outside_draws_nothing() -> None:
    canvas = Canvas(16, 8)
    draw_ray(canvas, -1, 2, 5, 2, C)
    assert not canvas.pixels.any()


def test_draw_background_fills_opaque() -> None:
    canvas = Canvas(16, 8)
    draw_background(canvas, C)
    assert (canvas.pixels == np.array(C, dtype=np.uint8)).all()


def test_draw_grid_eight_lines_each_way() -> None:
    canvas = Canvas(32, 16)
    draw_grid(canvas, C)
    lit = canvas.pixels[..., 3] > 0
    full_columns = [x for x in range(32) if lit[:, x].all()]
    full_rows = [y for y in range(16) if lit[y, :].all()]
    assert full_columns == [0, 4, 8, 12, 16, 20, 24, 28]
    assert full_rows == [0, 2, 4, 6, 8, 10, 12, 14]
    assert not lit[1, 1]


def test_draw_point_bright_lightness_saturates() -> None:
    canvas = Canvas(16, 16)
    draw_point(canvas, 5, 5, Color(200, 200, 200), lightness=1.5)
    assert canvas.get(5, 5) == Color(255, 255, 255, 255)
    assert canvas.get(4, 6) == Color(255, 255, 255, 255)


def _stepped_line(canvas: Canvas, x0: float, y0: float, x1: float, y1: float, c: Color) -> None:
    dx, dy = x1 - x0, y1 - y0
    steps = max(abs(dx), abs(dy))
    for _ in range(math.ceil(steps)):
        draw_point(canvas, int(x0), int(y0), c)
        x0 += dx / steps
        y0 += dy / steps


@pytest.mark.parametrize(
    "segment",
    [
        (-1000, 4, 10, 4),
        (20, 4, -3000, 4),
        (-1000, -500, 20, 10),
        (8, -400, 8, 400),
        (-2, -2, 17, 9),
        (15, 7, 0, 0),
    ],
)
def test_draw_line_clipping_matches_full_stepping(segment) -> None:
    clipped, full = Canvas(16, 8), Canvas(16, 8)
    draw_line(clipped, *segment, C)
    _stepped_line(full, *segment, C)
    np.testing.assert_array_equal(clipped.pixels, full.pixels)
    assert clipped.pixels.any()


def test_draw_line_far_off_canvas_is_skipped() -> None:
    canvas = Canvas(16, 8)
    draw_line(canvas, -2_000_000, -50, 2_000_000, -50, C)
    draw_line(canvas, -2_000_000, -2_000_000, -1_000, 2_000_000, C)
    assert not canvas.pixels.any()
