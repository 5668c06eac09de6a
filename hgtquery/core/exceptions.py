"""
hgtquery Exceptions

Exception hierarchy for error handling.

I/O failures (missing tiles, failed reads) are not wrapped: they surface as
the built-in ``OSError`` subclasses raised by the operating system.
"""


class HGTQueryError(Exception):
    """Base exception for hgtquery"""

    pass


class UnsupportedResolutionError(HGTQueryError):
    """Tile byte length matches neither 1 nor 3 arc-second grids"""

    pass


class InvalidFileNameError(HGTQueryError):
    """Tile name is not a valid [NS]dd[EW]ddd key"""

    pass


class OutOfRangeError(HGTQueryError):
    """Coordinate rejected by a range validator or outside the tile"""

    pass


class VoidDataError(HGTQueryError):
    """Sample holds the void sentinel (no elevation recorded)"""

    pass
