from pathlib import Path

import numpy as np
import pytest

from lidarviz.core.errors import EmptyCloud
from lidarviz.core.exporter import TxtWriter
from lidarviz.sdk import record_frames
from lidarviz.sensors.rplidar import NODE_DTYPE, RPLidarSensor, cloud_from_buffer, decode_nodes


def _nodes(angles_q14, dists_q2) -> np.ndarray:
    nodes = np.zeros(len(angles_q14), dtype=NODE_DTYPE)
    nodes["angle_z_q14"] = angles_q14
    nodes["dist_mm_q2"] = dists_q2
    return nodes


class FakeDriver:
    def __init__(self, scans) -> None:
        self._scans = list(scans)

    def grab_scan_hq(self) -> np.ndarray:
        return self._scans.pop(0)


def test_decode_fixed_point_units() -> None:
    angles, dists = decode_nodes(_nodes([0, 16384, 32768], [400, 0, 801]))
    np.testing.assert_allclose(angles, [0.0, 90.0, 180.0])
    np.testing.assert_allclose(dists, [100.0, 0.0, 200.25])


def test_cloud_from_buffer_skip_policy() -> None:
    nodes = _nodes([0, 16384, 32768], [400, 0, 800])
    assert cloud_from_buffer(nodes, skip_invalid=True).count == 2
    full = cloud_from_buffer(nodes, skip_invalid=False)
    assert full.count == 3
    assert full.min_distance == 100.0
    assert full.max_distance == 200.0


def test_cloud_from_buffer_honours_count() -> None:
    nodes = _nodes([0, 16384, 32768], [400, 400, 400])
    cloud = cloud_from_buffer(nodes, count=1)
    assert cloud.count == 1
    with pytest.raises(ValueError):
        cloud_from_buffer(nodes, count=4)


def test_empty_sensor_frame_raises() -> None:
    with pytest.raises(EmptyCloud):
        cloud_from_buffer(_nodes([0, 100], [0, 0]), skip_invalid=True)
    with pytest.raises(EmptyCloud):
        cloud_from_buffer(_nodes([], []))


def test_plain_arrays_are_rejected() -> None:
    with pytest.raises(ValueError):
        cloud_from_buffer(np.zeros((3, 2)))


def test_sensor_frames_drop_empty_scans_and_record(tmp_path: Path) -> None:
    driver = FakeDriver([
        _nodes([0, 16384], [400, 800]),
        _nodes([0], [0]),
        _nodes([32768], [1200]),
    ])
    sensor = RPLidarSensor(driver)
    writer = TxtWriter(tmp_path)
    frames = sensor.frames(3)
    assert record_frames(frames, writer) == 2
    assert sorted(p.name.split("-")[0] for p in tmp_path.glob("*.txt")) == ["0", "1"]
