"""
Geographic and planar point representations
"""

__all__ = ['GeoPoint', 'PlanarPoint']

import math
from typing import Tuple, Union

from geoplanar.dms import deg_to_dms, dms_to_deg
from geoplanar.errors import FormatError, ValidationError


def _parse_pos(text: str) -> Tuple[float, float]:
    """Parses a GML pos string, i.e. two whitespace-separated numbers"""
    parts = text.split() if isinstance(text, str) else []
    if len(parts) != 2:
        raise FormatError(f'Expected two whitespace-separated numbers, got {text!r}')

    try:
        return float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise FormatError(f'Invalid pos string: {text!r}') from exc


class GeoPoint:
    """
    A WGS84 latitude/longitude pair, in decimal degrees. Immutable.

    Args:
        latitude:
            The latitude, [-90, 90]

        longitude:
            The longitude, (-180, 180]

        validate: (Default False)
            If True, raise a ValidationError for non-finite or out-of-range values.
            Points produced by inverse projection are not validated, as their
            longitude may fall outside (-180, 180].
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        validate: bool = False,
    ):
        lat, lon = float(latitude), float(longitude)
        if validate:
            if not (math.isfinite(lat) and math.isfinite(lon)):
                raise ValidationError(f'Coordinates must be finite, got ({lat}, {lon})')
            if not -90 <= lat <= 90:
                raise ValidationError(f'Latitude {lat} is outside of [-90, 90]')
            if not -180 < lon <= 180:
                raise ValidationError(f'Longitude {lon} is outside of (-180, 180]')

        object.__setattr__(self, '_latitude', lat)
        object.__setattr__(self, '_longitude', lon)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @classmethod
    def from_dms(cls, latitude: str, longitude: str, validate: bool = False):
        """
        Creates a GeoPoint from a pair of DMS strings, e.g. ("45d30'0N", "10d15'0E")

        Args:
            latitude:
                The latitude, as DMS text

            longitude:
                The longitude, as DMS text

            validate: (Default False)
                Whether to range-check the resulting point

        Returns:
            GeoPoint
        """
        return cls(dms_to_deg(latitude), dms_to_deg(longitude), validate=validate)

    @classmethod
    def from_pos(cls, pos: str, validate: bool = False):
        """Creates a GeoPoint from a GML pos string, ordered "<latitude> <longitude>" """
        return cls(*_parse_pos(pos), validate=validate)

    def to_dms(self) -> Tuple[str, str]:
        """Converts this point to a (latitude, longitude) pair of DMS strings"""
        return deg_to_dms(self.latitude), deg_to_dms(self.longitude)

    def to_float(self) -> Tuple[float, float]:
        """Returns (latitude, longitude)"""
        return self.latitude, self.longitude

    def to_pos(self) -> str:
        """Converts this point to a GML pos string, "<latitude> <longitude>" """
        return f'{self.latitude} {self.longitude}'


class PlanarPoint:
    """
    A point on the projection plane, in meters relative to the projection
    center. x follows longitude displacement, y follows latitude displacement.
    Immutable.

    Infinite values are legitimate here: forward projection returns infinite
    x on its singularity.
    """

    __slots__ = ('_x', '_y')

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        validate: bool = False,
    ):
        _x, _y = float(x), float(y)
        if validate and (math.isnan(_x) or math.isnan(_y)):
            raise ValidationError(f'Planar coordinates must be numbers, got ({_x}, {_y})')

        object.__setattr__(self, '_x', _x)
        object.__setattr__(self, '_y', _y)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, PlanarPoint):
            return False

        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f'<PlanarPoint({self.x}, {self.y})>'

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @classmethod
    def from_pos(cls, pos: str, validate: bool = False):
        """Creates a PlanarPoint from a GML pos string, "<x> <y>" """
        return cls(*_parse_pos(pos), validate=validate)

    def to_float(self) -> Tuple[float, float]:
        """Returns (x, y)"""
        return self.x, self.y

    def to_pos(self) -> str:
        """Converts this point to a GML pos string, "<x> <y>" """
        return f'{self.x} {self.y}'
