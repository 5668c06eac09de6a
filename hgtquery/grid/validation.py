"""
Range Validator Protocol

Pluggable coordinate checks run before a tile is addressed.
"""

from dataclasses import dataclass
from typing import Protocol

from hgtquery.core.exceptions import OutOfRangeError

# SRTM coverage band
SRTM_MIN_LAT = -56.0
SRTM_MAX_LAT = 60.0


class RangeValidator(Protocol):
    """
    Coordinate range check

    Any callable taking (lat, lon) qualifies. It returns None to accept the
    coordinate and raises OutOfRangeError to reject it.
    """

    def __call__(self, lat: float, lon: float) -> None: ...


@dataclass(frozen=True)
class LatitudeBandValidator:
    """
    Accepts latitudes in the half-open band [min_lat, max_lat)

    Examples:
        >>> validate = LatitudeBandValidator(48.5, 48.7)
        >>> validate(48.6, 21.0)
        >>> validate(48.7, 21.0)
        Traceback (most recent call last):
        ...
        hgtquery.core.exceptions.OutOfRangeError: Latitude 48.7 outside [48.5, 48.7)
    """

    min_lat: float = SRTM_MIN_LAT
    max_lat: float = SRTM_MAX_LAT

    def __post_init__(self):
        if self.min_lat >= self.max_lat:
            raise ValueError(
                f"min_lat must be below max_lat, got [{self.min_lat}, {self.max_lat})"
            )

    def __call__(self, lat: float, lon: float) -> None:
        if lat < self.min_lat or lat >= self.max_lat:
            raise OutOfRangeError(f"Latitude {lat} outside [{self.min_lat}, {self.max_lat})")


def default_range_validator() -> LatitudeBandValidator:
    """Validator restricting latitude to SRTM coverage, [-56, 60)"""
    return LatitudeBandValidator(SRTM_MIN_LAT, SRTM_MAX_LAT)
