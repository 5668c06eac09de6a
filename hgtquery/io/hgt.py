"""
HGT tile reader

Reads raw SRTM elevation tiles: a square grid of big-endian signed 16-bit
samples, rows ordered north to south, columns west to east.
"""

import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from hgtquery.core.exceptions import OutOfRangeError, VoidDataError
from hgtquery.core.result import ElevationSample
from hgtquery.grid.addressing import (
    SAMPLE_SIZE,
    VOID_VALUE,
    Resolution,
    byte_offset,
    parse_tile_key,
    tile_bounds,
)
from hgtquery.grid.validation import RangeValidator, default_range_validator

logger = logging.getLogger(__name__)

# On-disk sample layout
HGT_DTYPE = np.dtype(">i2")

# os.pread leaves the shared file position untouched
_HAS_PREAD = hasattr(os, "pread")


@dataclass
class FileOptions:
    """
    Options for a single opened tile

    Attributes:
        range_validator: Coordinate check run before each query (None disables it)
        ignore_tile_validation: Skip the range validator and the check that the
            coordinate lies inside the tile named by the file
    """

    range_validator: RangeValidator | None = field(default_factory=default_range_validator)
    ignore_tile_validation: bool = False


class HGTFile:
    """
    Single HGT tile opened for point queries

    The resolution is detected from the exact file size; tiles of any other
    size are rejected when opened.

    Attributes:
        path: Path to the tile file
        options: FileOptions in effect
        resolution: Detected Resolution
        grid_side: Samples along one edge (1201 or 3601)

    Examples:
        >>> with HGTFile("data/N48E021.hgt") as tile:
        ...     elevation, resolution = tile.elevation_at(48.7162, 21.2613)
        >>> elevation
        205
    """

    def __init__(self, path: str | os.PathLike, options: FileOptions | None = None):
        """
        Open an HGT tile

        Args:
            path: Path to the .hgt file
            options: Query options (default: FileOptions())

        Raises:
            FileNotFoundError: If the file doesn't exist
            UnsupportedResolutionError: If the file size is not a valid grid
        """
        self.path = str(path)
        self.options = options if options is not None else FileOptions()
        self._read_lock = threading.Lock()
        self._file = open(self.path, "rb")
        try:
            size = os.fstat(self._file.fileno()).st_size
            self.resolution = Resolution.from_byte_length(size)
        except Exception:
            logger.warning("Rejected HGT tile %s", self.path)
            self._file.close()
            raise
        self.grid_side = self.resolution.grid_side
        logger.debug("Opened HGT tile %s (%d arc-second)", self.path, self.resolution.value)

    @property
    def key(self) -> str:
        """File name without extension, e.g. 'N48E021'"""
        return Path(self.path).stem

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(minx, miny, maxx, maxy) claimed by the file name"""
        return tile_bounds(self.key)

    @property
    def closed(self) -> bool:
        return self._file.closed

    def elevation_at(self, lat: float, lon: float) -> ElevationSample:
        """
        Elevation of the sample covering (lat, lon)

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            ElevationSample(elevation, resolution)

        Raises:
            OutOfRangeError: If the validator rejects the coordinate or it lies
                outside the tile named by the file
            InvalidFileNameError: If tile validation is on and the file name
                is not a tile key
            VoidDataError: If no elevation is recorded for the sample
            ValueError: If the tile has been closed
        """
        if not self.options.ignore_tile_validation:
            if self.options.range_validator is not None:
                self.options.range_validator(lat, lon)
            self._check_tile_bounds(lat, lon)

        raw = self._read(byte_offset(lat, lon, self.grid_side), SAMPLE_SIZE)
        elevation = int(np.frombuffer(raw, dtype=HGT_DTYPE)[0])
        if elevation == VOID_VALUE:
            raise VoidDataError(f"No elevation recorded at ({lat}, {lon}) in {self.key}")

        return ElevationSample(elevation, self.resolution)

    def read_array(self) -> NDArray[np.int16]:
        """
        Read the whole tile

        Returns:
            (grid_side, grid_side) int16 array, row 0 is the northern edge.
            Void samples keep the -32768 sentinel.
        """
        raw = self._read(0, self.resolution.byte_length)
        grid = np.frombuffer(raw, dtype=HGT_DTYPE).reshape(self.grid_side, self.grid_side)
        return grid.astype(np.int16)

    def to_xarray(self):
        """
        Convert the tile to an xarray DataArray

        Returns:
            DataArray with dims (lat, lon), elevations in meters as float32
            and void samples as NaN. Coordinates come from the file name.

        Raises:
            InvalidFileNameError: If the file name is not a tile key
        """
        import xarray as xr

        minx, miny, maxx, maxy = self.bounds
        grid = self.read_array()
        void = grid == VOID_VALUE
        data = grid.astype(np.float32)
        data[void] = np.nan

        return xr.DataArray(
            data,
            dims=("lat", "lon"),
            coords={
                "lat": np.linspace(maxy, miny, self.grid_side),
                "lon": np.linspace(minx, maxx, self.grid_side),
            },
            name=self.key,
            attrs={
                "units": "m",
                "nodata": VOID_VALUE,
                "resolution_arcsec": self.resolution.value,
                "void_count": int(void.sum()),
            },
        )

    def close(self):
        """Release the file handle; safe to call more than once"""
        if not self._file.closed:
            self._file.close()
            logger.debug("Closed HGT tile %s", self.path)

    def _check_tile_bounds(self, lat: float, lon: float) -> None:
        """Accept [corner, corner + 1) from the signed south-west corner, so S57 covers [-57, -56)"""
        min_lat, min_lon = parse_tile_key(self.key)
        if not (min_lat <= lat < min_lat + 1 and min_lon <= lon < min_lon + 1):
            raise OutOfRangeError(f"({lat}, {lon}) is outside tile {self.key}")

    def _read(self, offset: int, size: int) -> bytes:
        if _HAS_PREAD:
            data = os.pread(self._file.fileno(), size, offset)
        else:
            with self._read_lock:
                self._file.seek(offset)
                data = self._file.read(size)
        if len(data) != size:
            raise OSError(f"Short read at offset {offset} in {self.path}")
        return data

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()

    def __repr__(self) -> str:
        """String representation"""
        state = " (closed)" if self.closed else ""
        return f"<HGTFile{state}: {self.path} ({self.resolution.value} arc-second)>"
