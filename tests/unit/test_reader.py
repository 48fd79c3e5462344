from pathlib import Path

import pytest

from lidarviz.core.errors import EmptyCloud
from lidarviz.core.reader import load_cloud, parse_samples


def test_parse_skips_comments_blanks_and_garbage() -> None:
    lines = [
        "# header\n",
        "\n",
        "0 100\n",
        "90.5\t250.25\n",
        "not a sample\n",
        "45\n",
        "180 0\n",
    ]
    assert list(parse_samples(lines)) == [(0.0, 100.0), (90.5, 250.25), (180.0, 0.0)]


def test_load_cloud_from_file(tmp_path: Path) -> None:
    path = tmp_path / "scan.txt"
    path.write_text("# Angle Distance\n0 1000\n90 0\n180 500\n", encoding="utf-8")
    cloud = load_cloud(path)
    assert cloud.count == 3
    assert cloud.max_distance == 1000.0
    assert cloud.min_distance == 500.0

    skipped = load_cloud(path, skip_invalid=True)
    assert skipped.count == 2


def test_load_cloud_without_samples_raises(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("# only comments\n\n", encoding="utf-8")
    with pytest.raises(EmptyCloud):
        load_cloud(path)


def test_parse_skips_non_finite_values() -> None:
    lines = ["0 100\n", "90 inf\n", "nan 200\n", "180 -inf\n", "270 300\n"]
    assert list(parse_samples(lines)) == [(0.0, 100.0), (270.0, 300.0)]
