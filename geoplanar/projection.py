"""
Oblique Mercator projection between WGS84 latitude/longitude and planar
x/y meters, centered on an arbitrary tangent point (zero azimuth).

Projection constants are derived once per center point and then shared by
every forward/inverse mapping made against that center. All functions here
are pure; a ProjectionConstants instance may be shared freely across threads.
"""

__all__ = [
    'ObliqueMercator', 'ProjectionConstants', 'derive_constants',
    'forward', 'forward_array', 'forward_batch',
    'inverse', 'inverse_array', 'inverse_batch',
]

from dataclasses import dataclass
from functools import cached_property
import math
from typing import Iterable, List

import numpy as np
from pydantic import validate_call

from geoplanar._const import (
    EQUATOR_TOLERANCE, MERIDIAN_TOLERANCE, POLAR_ASYMPTOTE, POLE_TOLERANCE,
    WGS84_A, WGS84_E, WGS84_E2
)
from geoplanar.angles import deg_to_rad, rad_to_deg
from geoplanar.coordinates import GeoPoint, PlanarPoint
from geoplanar.errors import ValidationError
from geoplanar.isometric import phi2, tsfn
from geoplanar.utils.logging import LOGGER, warn_once
from geoplanar.utils.mixins import LoggingMixin


def _reciprocal(val: float) -> float:
    """1 / val, giving infinity at zero as IEEE division does"""
    if val == 0:
        return math.copysign(math.inf, val)
    return 1.0 / val


@dataclass(frozen=True)
class ProjectionConstants:
    """
    The scalar constants of an Oblique Mercator projection for one center
    point. Produced by derive_constants(); never mutated.
    """
    A: float
    B: float
    D: float
    F: float
    E: float
    uc: float


@validate_call
def derive_constants(lat0: float, long_c: float, k0: float = 1.0) -> ProjectionConstants:
    """
    Derives the projection constants for a center point.

    Args:
        lat0:
            The center latitude, in degrees [-90, 90]

        long_c:
            The center longitude, in degrees. Does not influence the constants,
            but is validated along with the rest of the center.

        k0:
            The scale factor at the center. 1.0 yields true ground distances
            at the center point; larger values inflate scale.

    Returns:
        ProjectionConstants

    Raises:
        ValidationError: lat0 is out of range, k0 is not positive, or a
            value is not finite
    """
    if not all(math.isfinite(val) for val in (lat0, long_c, k0)):
        raise ValidationError(
            f'Projection center must be finite, got lat0={lat0}, long_c={long_c}, k0={k0}'
        )

    if not -90 <= lat0 <= 90:
        raise ValidationError(f'Center latitude {lat0} is outside of [-90, 90]')

    if k0 <= 0:
        raise ValidationError(f'Scale factor k0 must be positive, got {k0}')

    phi0 = deg_to_rad(lat0)
    if abs(phi0) > EQUATOR_TOLERANCE:
        sin_phi0, cos_phi0 = math.sin(phi0), math.cos(phi0)
        B = math.sqrt(1.0 + WGS84_E2 / (1.0 - WGS84_E2) * cos_phi0 ** 4)
        A = B * k0 * math.sqrt(1.0 - WGS84_E2) / (1.0 - WGS84_E2 * sin_phi0 ** 2)
        D = B * math.sqrt(1.0 - WGS84_E2) / (
            cos_phi0 * math.sqrt(1.0 - WGS84_E2 * sin_phi0 ** 2)
        )
        if D * D < 1.0:
            # Rounding error can push D just below 1
            D = 1.0

        root = math.sqrt(D * D - 1.0)
        # 1 / (D + root) == D - root, without the cancellation near the south pole
        F = 1.0 / (D + root) if phi0 < 0 else D + root
        E = tsfn(phi0, WGS84_E) ** B * F

    else:
        B = math.sqrt(1.0 - WGS84_E2)
        A = k0
        D = F = E = 1.0

    uc = abs(A / B * math.atan2(math.sqrt(D * D - 1.0), 1.0))
    if phi0 < 0:
        uc = -uc

    if abs(phi0) >= math.pi / 2.0 - POLE_TOLERANCE:
        warn_once(
            'Projection center lies on a pole; all forward projections collapse '
            'towards a single line (this warning will not repeat)'
        )

    constants = ProjectionConstants(A=A, B=B, D=D, F=F, E=E, uc=uc)
    LOGGER.debug('Derived %r for center (%s, %s), k0=%s', constants, lat0, long_c, k0)
    return constants


def forward(point: GeoPoint, constants: ProjectionConstants, lambda0: float) -> PlanarPoint:
    """
    Projects a latitude/longitude onto the plane.

    Where the point's isometric geometry puts |U| exactly at 1, x is returned
    as positive infinity rather than raising; callers that cannot consume
    non-finite values must filter them.

    Args:
        point:
            The point to project

        constants:
            The constants derived for the projection center

        lambda0:
            The center longitude, in radians

    Returns:
        PlanarPoint, in meters relative to the center
    """
    A, B, E, uc = constants.A, constants.B, constants.E, constants.uc
    phi = deg_to_rad(point.latitude)
    d_lambda = deg_to_rad(point.longitude) - lambda0

    if abs(phi) >= math.pi / 2.0 - POLE_TOLERANCE:
        v = A / B * POLAR_ASYMPTOTE
        u = phi * A / B - uc

    else:
        Q = E / tsfn(phi, WGS84_E) ** B
        S = (Q - _reciprocal(Q)) / 2.0
        T = (Q + _reciprocal(Q)) / 2.0
        U = -math.sin(B * d_lambda) / T
        if abs(U) != 1.0:
            v = A / (2.0 * B) * math.log((1.0 - U) / (1.0 + U))
        else:
            v = math.inf

        M = math.cos(B * d_lambda)
        if M > MERIDIAN_TOLERANCE:
            u = A / B * math.atan2(S, M)
        else:
            u = A * B * d_lambda
        u -= uc

    return PlanarPoint(v * WGS84_A, u * WGS84_A)


def inverse(
    point: PlanarPoint,
    constants: ProjectionConstants,
    lambda0: float,
    long_c: float
) -> GeoPoint:
    """
    Maps a planar point back to latitude/longitude.

    Points that land on a pole are returned with exactly +/-90 latitude and
    the center longitude, since a pole has no longitude of its own here.

    x may be infinite (as produced by forward() on its singularity) or far
    outside the projected area; the result is then the IEEE limit of the
    formulas rather than an exception.

    Args:
        point:
            The planar point, in meters relative to the center

        constants:
            The constants derived for the projection center

        lambda0:
            The center longitude, in radians

        long_c:
            The center longitude, in degrees

    Returns:
        GeoPoint

    Raises:
        ValidationError: y is not finite
    """
    if not math.isfinite(point.y):
        raise ValidationError(f'Planar y must be finite, got {point.y}')

    A, B, E = constants.A, constants.B, constants.E
    v = point.x / WGS84_A
    u = point.y / WGS84_A + constants.uc

    try:
        Qp = math.exp(-B * v / A)
    except OverflowError:
        Qp = math.inf
    Sp = (Qp - _reciprocal(Qp)) / 2.0
    Tp = (Qp + _reciprocal(Qp)) / 2.0
    Up = math.sin(B * u / A) / Tp

    if abs(abs(Up) - 1.0) < POLE_TOLERANCE:
        return GeoPoint(90.0 if Up > 0 else -90.0, long_c)

    t = E / math.sqrt((1.0 + Up) / (1.0 - Up))
    phi = phi2(t ** (1.0 / B), WGS84_E)
    lam = -1.0 / B * math.atan2(Sp, math.cos(B * u / A))

    return GeoPoint(rad_to_deg(phi), rad_to_deg(lam + lambda0))


def forward_batch(
    points: Iterable[GeoPoint],
    constants: ProjectionConstants,
    long_c: float
) -> List[PlanarPoint]:
    """
    Projects a sequence of points against a single center.

    Args:
        points:
            The points to project

        constants:
            The constants derived for the projection center

        long_c:
            The center longitude, in degrees

    Returns:
        List[PlanarPoint], in the same order as the input
    """
    lambda0 = deg_to_rad(long_c)
    return [forward(point, constants, lambda0) for point in points]


def inverse_batch(  # pylint: disable=unused-argument
    points: Iterable[PlanarPoint],
    constants: ProjectionConstants,
    long_c: float,
    lat0: float
) -> List[GeoPoint]:
    """
    Maps a sequence of planar points back to latitude/longitude.

    Args:
        points:
            The planar points

        constants:
            The constants derived for the projection center

        long_c:
            The center longitude, in degrees

        lat0:
            The center latitude, in degrees. Already captured by the
            constants; accepted so both batch operations take the full center.

    Returns:
        List[GeoPoint], in the same order as the input
    """
    lambda0 = deg_to_rad(long_c)
    return [inverse(point, constants, lambda0, long_c) for point in points]


def forward_array(lat_lon, constants: ProjectionConstants, long_c: float) -> np.ndarray:
    """
    Array counterpart of forward_batch().

    Args:
        lat_lon:
            An array-like of shape (n, 2), each row (latitude, longitude)

        constants:
            The constants derived for the projection center

        long_c:
            The center longitude, in degrees

    Returns:
        np.ndarray of shape (n, 2), each row (x, y)
    """
    rows = np.asarray(lat_lon, dtype=float).reshape(-1, 2)
    lambda0 = deg_to_rad(long_c)
    return np.array(
        [forward(GeoPoint(lat, lon), constants, lambda0).to_float() for lat, lon in rows],
        dtype=float
    ).reshape(-1, 2)


def inverse_array(xy, constants: ProjectionConstants, long_c: float) -> np.ndarray:
    """
    Array counterpart of inverse_batch().

    Args:
        xy:
            An array-like of shape (n, 2), each row (x, y)

        constants:
            The constants derived for the projection center

        long_c:
            The center longitude, in degrees

    Returns:
        np.ndarray of shape (n, 2), each row (latitude, longitude)
    """
    rows = np.asarray(xy, dtype=float).reshape(-1, 2)
    lambda0 = deg_to_rad(long_c)
    return np.array(
        [inverse(PlanarPoint(x, y), constants, lambda0, long_c).to_float() for x, y in rows],
        dtype=float
    ).reshape(-1, 2)


class ObliqueMercator(LoggingMixin):
    """
    An Oblique Mercator projection around a fixed center point. The projection
    constants are derived on first use and reused for every conversion.

    Args:
        lat0:
            The center latitude, in degrees

        long_c:
            The center longitude, in degrees

        k0: (Default 1.0)
            The scale factor at the center
    """

    def __init__(self, lat0: float, long_c: float, k0: float = 1.0):
        super().__init__()
        self.lat0 = float(lat0)
        self.long_c = float(long_c)
        self.k0 = float(k0)

    def __eq__(self, other):
        if not isinstance(other, ObliqueMercator):
            return False

        return (self.lat0, self.long_c, self.k0) == (other.lat0, other.long_c, other.k0)

    def __hash__(self):
        return hash((self.lat0, self.long_c, self.k0))

    def __repr__(self):
        return f'<ObliqueMercator({self.lat0}, {self.long_c}, k0={self.k0})>'

    @cached_property
    def constants(self) -> ProjectionConstants:
        """The projection constants for this center"""
        return derive_constants(self.lat0, self.long_c, self.k0)

    @cached_property
    def lambda0(self) -> float:
        """The center longitude, in radians"""
        return deg_to_rad(self.long_c)

    def _check_finite(self, point: PlanarPoint) -> PlanarPoint:
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            self.warn_once(
                'Forward projection produced a non-finite coordinate; '
                'the point lies on the projection singularity (this warning will not repeat)'
            )
        return point

    def forward(self, point: GeoPoint) -> PlanarPoint:
        """Projects a single point. See geoplanar.projection.forward()"""
        return self._check_finite(forward(point, self.constants, self.lambda0))

    def inverse(self, point: PlanarPoint) -> GeoPoint:
        """Inverts a single point. See geoplanar.projection.inverse()"""
        return inverse(point, self.constants, self.lambda0, self.long_c)

    def forward_batch(self, points: Iterable[GeoPoint]) -> List[PlanarPoint]:
        """Projects many points against this center"""
        return [self.forward(point) for point in points]

    def inverse_batch(self, points: Iterable[PlanarPoint]) -> List[GeoPoint]:
        """Inverts many points against this center"""
        return inverse_batch(points, self.constants, self.long_c, self.lat0)

    def forward_array(self, lat_lon) -> np.ndarray:
        """Projects an (n, 2) array of (latitude, longitude) rows"""
        return forward_array(lat_lon, self.constants, self.long_c)

    def inverse_array(self, xy) -> np.ndarray:
        """Inverts an (n, 2) array of (x, y) rows"""
        return inverse_array(xy, self.constants, self.long_c)
