"""
Tile directory

Serves elevation queries from a flat directory of HGT tiles named by their
south-west corner (e.g. ``N48E021.hgt``).
"""

import errno
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Tuple

from hgtquery.catalog.cache import MemoryTileCache, TileCache
from hgtquery.core.result import ElevationSample
from hgtquery.grid.addressing import TILE_EXTENSION, tile_key
from hgtquery.grid.validation import RangeValidator, default_range_validator
from hgtquery.io.hgt import FileOptions, HGTFile

logger = logging.getLogger(__name__)


@dataclass
class DirectoryOptions:
    """
    Options for a TileDirectory

    Attributes:
        cache: Store for open tiles, may be shared between directories.
            None opens and closes the tile on every query.
        range_validator: Coordinate check run before addressing (None disables it)
    """

    cache: TileCache | None = field(default_factory=MemoryTileCache)
    range_validator: RangeValidator | None = field(default_factory=default_range_validator)


class TileDirectory:
    """
    Directory of HGT tiles

    Resolves the tile for each coordinate from its key and keeps opened tiles
    in the cache until ``close()``.

    Attributes:
        path: Directory holding the .hgt files
        options: DirectoryOptions in effect

    Examples:
        >>> with TileDirectory("data") as tiles:
        ...     tiles.elevation_at(48.7162, 21.2613)
        ElevationSample(elevation=205, resolution=<Resolution.ARC_SECOND_1: 1>)
    """

    def __init__(self, path: str | os.PathLike, options: DirectoryOptions | None = None):
        """
        Open a tile directory

        Args:
            path: Directory holding the .hgt files
            options: Directory options (default: DirectoryOptions())

        Raises:
            FileNotFoundError: If the directory doesn't exist
            NotADirectoryError: If path is not a directory
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(self.path))
        if not self.path.is_dir():
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(self.path))
        self.options = options if options is not None else DirectoryOptions()

    def tile_path(self, lat: float, lon: float) -> Path:
        """Path of the tile file covering (lat, lon)"""
        return self.path / (tile_key(lat, lon) + TILE_EXTENSION)

    def elevation_at(self, lat: float, lon: float) -> ElevationSample:
        """
        Elevation at (lat, lon)

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            ElevationSample(elevation, resolution)

        Raises:
            OutOfRangeError: If the range validator rejects the coordinate
            FileNotFoundError: If no tile covers the coordinate
            UnsupportedResolutionError: If the covering tile has an invalid size
            VoidDataError: If no elevation is recorded for the sample
        """
        if self.options.range_validator is not None:
            self.options.range_validator(lat, lon)

        key = tile_key(lat, lon)
        cache = self.options.cache
        if cache is None:
            with self._open_tile(key) as tile:
                return tile.elevation_at(lat, lon)

        tile = cache.get_or_open(key, lambda: self._open_tile(key))
        return tile.elevation_at(lat, lon)

    def elevations_at(self, coords: Iterable[Tuple[float, float]]) -> list[ElevationSample]:
        """
        Elevations for many (lat, lon) pairs

        Stops at the first failing coordinate and raises its error.
        """
        return [self.elevation_at(lat, lon) for lat, lon in coords]

    def close(self) -> None:
        """Close every cached tile"""
        if self.options.cache is not None:
            self.options.cache.clear_all()

    def _open_tile(self, key: str) -> HGTFile:
        # Name comes from tile_key, so the tile bounds already hold
        logger.debug("Opening tile %s from %s", key, self.path)
        return HGTFile(
            self.path / (key + TILE_EXTENSION),
            FileOptions(range_validator=None, ignore_tile_validation=True),
        )

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()

    def __repr__(self) -> str:
        """String representation"""
        return f"<TileDirectory: {self.path}>"
