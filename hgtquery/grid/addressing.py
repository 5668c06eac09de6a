"""
HGT Tile Addressing

Maps WGS84 coordinates to 1°×1° tile keys and to byte offsets inside a tile.
"""

import math
import re
from enum import Enum
from typing import Tuple

from hgtquery.core.exceptions import InvalidFileNameError, UnsupportedResolutionError

# Bytes per sample (big-endian signed 16-bit)
SAMPLE_SIZE = 2

# Stored when no elevation was recorded for a sample
VOID_VALUE = -32768

TILE_EXTENSION = ".hgt"

TILE_KEY_PATTERN = re.compile(r"[NS]\d{2}[EW]\d{3}")


class Resolution(Enum):
    """
    Sample spacing of an HGT tile

    The value is the spacing in arc-seconds. Each tile stores one extra
    row and column that overlaps its neighbours, hence 3601 and 1201.
    """

    ARC_SECOND_1 = 1
    ARC_SECOND_3 = 3

    @property
    def grid_side(self) -> int:
        """Samples along one edge of the tile"""
        return 3600 // self.value + 1

    @property
    def byte_length(self) -> int:
        """Exact size in bytes of a tile at this resolution"""
        return self.grid_side * self.grid_side * SAMPLE_SIZE

    @classmethod
    def from_byte_length(cls, length: int) -> "Resolution":
        """
        Detect the resolution of a tile from its file size

        Args:
            length: File size in bytes

        Returns:
            Matching Resolution

        Raises:
            UnsupportedResolutionError: If the size matches neither grid

        Examples:
            >>> Resolution.from_byte_length(1201 * 1201 * 2)
            <Resolution.ARC_SECOND_3: 3>
        """
        for resolution in cls:
            if resolution.byte_length == length:
                return resolution
        raise UnsupportedResolutionError(f"Unsupported HGT file size: {length} bytes")


def _pad(coord: float, width: int) -> str:
    # abs(floor(coord)): -56.7 floors to -57 and is named 57
    return f"{abs(math.floor(coord)):0{width}d}"


def tile_key(lat: float, lon: float) -> str:
    """
    Convert WGS84 coordinates to the key of the tile containing them

    Args:
        lat: Latitude in decimal degrees (-90 to 90)
        lon: Longitude in decimal degrees (-180 to 180)

    Returns:
        Tile key in format "[NS]dd[EW]ddd" naming the south-west corner

    Examples:
        >>> tile_key(48.7162, 21.2613)
        'N48E021'
        >>> tile_key(-56.7, -0.5)
        'S57W001'
        >>> tile_key(0.0, 0.0)
        'N00E000'
    """
    ns = "S" if lat < 0 else "N"
    ew = "W" if lon < 0 else "E"
    return f"{ns}{_pad(lat, 2)}{ew}{_pad(lon, 3)}"


def tile_filename(lat: float, lon: float) -> str:
    """File name of the tile containing (lat, lon), e.g. 'N48E021.hgt'"""
    return tile_key(lat, lon) + TILE_EXTENSION


def byte_offset(lat: float, lon: float, grid_side: int) -> int:
    """
    Byte offset of the sample covering (lat, lon) inside its tile

    Rows are stored north to south, so the row index is inverted against
    latitude.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        grid_side: Samples along one edge of the tile (1201 or 3601)

    Returns:
        Offset in bytes from the start of the file

    Examples:
        >>> byte_offset(48.7162, 21.2613, 3601)
        7355122
    """
    # A fraction within float epsilon below 1.0 rounds up to 1.0
    x = min(math.floor((lon - math.floor(lon)) * grid_side), grid_side - 1)
    y = min(math.floor((lat - math.floor(lat)) * grid_side), grid_side - 1)
    return (x + (grid_side - y - 1) * grid_side) * SAMPLE_SIZE


def parse_tile_key(name: str) -> Tuple[int, int]:
    """
    Parse a tile key into its signed south-west corner

    Args:
        name: Tile key without extension (e.g., "N48E021")

    Returns:
        (lat, lon) of the south-west corner

    Raises:
        InvalidFileNameError: If name is not a 7 character tile key

    Examples:
        >>> parse_tile_key("N48E021")
        (48, 21)
        >>> parse_tile_key("S57W001")
        (-57, -1)
    """
    if len(name) != 7 or not TILE_KEY_PATTERN.fullmatch(name):
        raise InvalidFileNameError(f"Invalid tile name: {name!r}")

    lat = int(name[1:3])
    lon = int(name[4:7])
    if name[0] == "S":
        lat = -lat
    if name[3] == "W":
        lon = -lon
    return (lat, lon)


def tile_bounds(name: str) -> Tuple[float, float, float, float]:
    """
    Geographic bounds of a tile

    Args:
        name: Tile key (e.g., "N48E021")

    Returns:
        Bounding box as (minx, miny, maxx, maxy) in WGS84
    """
    lat, lon = parse_tile_key(name)
    return (float(lon), float(lat), float(lon + 1), float(lat + 1))
