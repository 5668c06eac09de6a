"""
hgtquery - Random-access elevation lookups in SRTM HGT tiles

Quick Start:
    >>> import hgtquery as hq
    >>>
    >>> # One tile
    >>> with hq.open_tile("data/N48E021.hgt") as tile:
    ...     elevation, resolution = tile.elevation_at(48.7162, 21.2613)
    >>>
    >>> # A directory of tiles, opened on demand and cached
    >>> with hq.open_directory("data") as tiles:
    ...     sample = tiles.elevation_at(48.7162, 21.2613)
"""

from hgtquery.core import (
    # Results
    ElevationSample,
    # Exceptions
    HGTQueryError,
    InvalidFileNameError,
    OutOfRangeError,
    UnsupportedResolutionError,
    VoidDataError,
    # Functions
    open_directory,
    open_tile,
)
from hgtquery.catalog import DirectoryOptions, MemoryTileCache, TileCache, TileDirectory
from hgtquery.grid import (
    LatitudeBandValidator,
    RangeValidator,
    Resolution,
    byte_offset,
    default_range_validator,
    parse_tile_key,
    tile_bounds,
    tile_filename,
    tile_key,
)
from hgtquery.io import FileOptions, HGTFile

__version__ = "0.1.0"

__all__ = [
    "DirectoryOptions",
    "ElevationSample",
    "FileOptions",
    "HGTFile",
    "HGTQueryError",
    "InvalidFileNameError",
    "LatitudeBandValidator",
    "MemoryTileCache",
    "OutOfRangeError",
    "RangeValidator",
    "Resolution",
    "TileCache",
    "TileDirectory",
    "UnsupportedResolutionError",
    "VoidDataError",
    "__version__",
    "byte_offset",
    "default_range_validator",
    "open_directory",
    "open_tile",
    "parse_tile_key",
    "tile_bounds",
    "tile_filename",
    "tile_key",
]
