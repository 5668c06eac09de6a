"""
Elevation query result
"""

from typing import NamedTuple

from hgtquery.grid.addressing import Resolution


class ElevationSample(NamedTuple):
    """
    Result of a point elevation query

    Unpacks like a plain tuple:

        >>> elevation, resolution = tile.elevation_at(48.7162, 21.2613)
    """

    elevation: int  # meters above sea level
    resolution: Resolution
