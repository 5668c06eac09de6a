"""
hgtquery Test Configuration

Shared pytest fixtures for all tests.

Tiles are written as sparse files: only the samples a test sets are
materialised, the rest read back as zero.
"""

from pathlib import Path

import numpy as np
import pytest

# Sample under (48.7162, 21.2613) in a 1 arc-second tile
KOSICE = (48.7162, 21.2613)
KOSICE_ROW, KOSICE_COL = 1021, 940
KOSICE_ELEVATION = 205


def write_hgt(path: Path, grid_side: int, samples: dict[tuple[int, int], int] | None = None) -> Path:
    """Write a grid_side x grid_side HGT tile with the given {(row, col): value} samples"""
    path = Path(path)
    with path.open("wb") as f:
        f.truncate(grid_side * grid_side * 2)
        for (row, col), value in (samples or {}).items():
            f.seek((row * grid_side + col) * 2)
            f.write(np.array([value], dtype=">i2").tobytes())
    return path


@pytest.fixture
def write_tile():
    """Writer for extra HGT tiles: write_tile(path, grid_side, {(row, col): value})"""
    return write_hgt


@pytest.fixture
def tile_dir(tmp_path):
    """Directory holding N48E021.hgt (1 arc-second) and S57W001.hgt (3 arc-second)"""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    write_hgt(
        data_dir / "N48E021.hgt",
        3601,
        {
            (KOSICE_ROW, KOSICE_COL): KOSICE_ELEVATION,
            (0, 0): -32768,
        },
    )
    write_hgt(
        data_dir / "S57W001.hgt",
        1201,
        {
            (0, 0): 1500,
            (1200, 1200): -12,
        },
    )
    return data_dir


@pytest.fixture
def kosice_tile(tile_dir):
    """Path to the 1 arc-second N48E021 tile"""
    return tile_dir / "N48E021.hgt"


@pytest.fixture
def small_tile(tile_dir):
    """Path to the 3 arc-second S57W001 tile"""
    return tile_dir / "S57W001.hgt"
