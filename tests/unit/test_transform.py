import pytest

from lidarviz.core.cloud import build_cloud
from lidarviz.core.errors import InvalidScale
from lidarviz.core.transform import Origin, auto_scale, polar_to_pixel
from lidarviz.core.utils import round_half_away


def test_angle_zero_projects_along_y() -> None:
    assert polar_to_pixel(0.0, 123.4, 1.0, (0, 0)) == (0, 123)
    assert polar_to_pixel(0.0, 100.5, 1.0, (0, 0)) == (0, 101)


def test_quarter_turns_with_scale_and_origin() -> None:
    origin = Origin(10, 20)
    assert polar_to_pixel(90.0, 100.0, 2.0, origin) == (210, 20)
    assert polar_to_pixel(180.0, 100.0, 1.0, origin) == (10, -80)
    assert polar_to_pixel(270.0, 100.0, 1.0, origin) == (-90, 20)


def test_projection_is_deterministic() -> None:
    a = polar_to_pixel(33.3, 777.7, 0.37, (5, 6))
    b = polar_to_pixel(33.3, 777.7, 0.37, (5, 6))
    assert a == b
    assert all(isinstance(v, int) for v in a)


def test_round_half_away_from_zero() -> None:
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.49) == 0
    assert round_half_away(-0.2) == 0


def test_auto_scale_fits_seventy_percent_of_height() -> None:
    cloud = build_cloud([(0.0, 1000.0), (90.0, 250.0)])
    assert auto_scale(cloud, 720) == pytest.approx(0.504)
    assert auto_scale(cloud) == pytest.approx(720 * 0.7 / 1000.0)


def test_auto_scale_without_valid_distance_raises() -> None:
    cloud = build_cloud([(0.0, 0.0), (10.0, 0.0)])
    with pytest.raises(InvalidScale):
        auto_scale(cloud, 100)


def test_auto_scale_with_infinite_distance_raises() -> None:
    cloud = build_cloud([(0.0, 100.0), (90.0, float("inf")), (180.0, 100.0)])
    with pytest.raises(InvalidScale):
        auto_scale(cloud, 100)
