"""
hgtquery Core Module

Core API, result type and exceptions.
"""

from hgtquery.core.exceptions import (
    HGTQueryError,
    UnsupportedResolutionError,
    InvalidFileNameError,
    OutOfRangeError,
    VoidDataError,
)
from hgtquery.core.result import ElevationSample
from hgtquery.core.api import (
    open_tile,
    open_directory,
)

__all__ = [
    # Results
    "ElevationSample",
    # Functions
    "open_tile",
    "open_directory",
    # Exceptions
    "HGTQueryError",
    "UnsupportedResolutionError",
    "InvalidFileNameError",
    "OutOfRangeError",
    "VoidDataError",
]
