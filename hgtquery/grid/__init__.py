"""
hgtquery Grid Module

Tile addressing and coordinate range validation.
"""

from hgtquery.grid.addressing import (
    Resolution,
    byte_offset,
    parse_tile_key,
    tile_bounds,
    tile_filename,
    tile_key,
)
from hgtquery.grid.validation import (
    LatitudeBandValidator,
    RangeValidator,
    default_range_validator,
)

__all__ = [
    "LatitudeBandValidator",
    "RangeValidator",
    "Resolution",
    "byte_offset",
    "default_range_validator",
    "parse_tile_key",
    "tile_bounds",
    "tile_filename",
    "tile_key",
]
