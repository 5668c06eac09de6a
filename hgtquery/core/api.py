"""
hgtquery Public API Functions

Top-level functions for opening tiles and tile directories.
"""

import os

from hgtquery.catalog.directory import DirectoryOptions, TileDirectory
from hgtquery.io.hgt import FileOptions, HGTFile


def open_tile(path: str | os.PathLike, options: FileOptions | None = None) -> HGTFile:
    """
    Open a single HGT tile

    Args:
        path: Path to the .hgt file
        options: Query options. Defaults to the SRTM latitude band validator
            with tile validation enabled.

    Returns:
        HGTFile handle; close it or use it as a context manager

    Examples:
        >>> import hgtquery as hq
        >>>
        >>> with hq.open_tile("data/N48E021.hgt") as tile:
        ...     elevation, resolution = tile.elevation_at(48.7162, 21.2613)
        >>>
        >>> # Narrow the accepted latitudes
        >>> tile = hq.open_tile(
        ...     "data/N48E021.hgt",
        ...     hq.FileOptions(range_validator=hq.LatitudeBandValidator(48.5, 48.7)),
        ... )
    """
    return HGTFile(path, options)


def open_directory(
    path: str | os.PathLike, options: DirectoryOptions | None = None
) -> TileDirectory:
    """
    Open a directory of HGT tiles

    Args:
        path: Directory holding files named like N48E021.hgt
        options: Cache and range validator. Defaults to a fresh
            MemoryTileCache and the SRTM latitude band [-56, 60).

    Returns:
        TileDirectory handle; close() releases every cached tile

    Examples:
        >>> import hgtquery as hq
        >>>
        >>> with hq.open_directory("data") as tiles:
        ...     sample = tiles.elevation_at(48.7162, 21.2613)
        >>> sample.elevation
        205
        >>>
        >>> # Share one cache between directories
        >>> cache = hq.MemoryTileCache()
        >>> tiles = hq.open_directory("data", hq.DirectoryOptions(cache=cache))
    """
    return TileDirectory(path, options)
