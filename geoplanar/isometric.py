"""
Forward and inverse isometric latitude transforms on an ellipsoid of
eccentricity e, as used by conformal projections
"""

__all__ = ['phi2', 'tsfn']

import math

from geoplanar._const import PHI2_MAX_ITER, PHI2_TOLERANCE
from geoplanar.utils.logging import LOGGER


def _eccentricity_factor(phi: float, e: float) -> float:
    """((1 - e sin(phi)) / (1 + e sin(phi))) ** (e / 2)"""
    e_sin = e * math.sin(phi)
    return ((1.0 - e_sin) / (1.0 + e_sin)) ** (e / 2.0)


def tsfn(phi: float, e: float) -> float:
    """
    Encodes a latitude as the exponential of its negated isometric latitude.

    Args:
        phi: (float)
            The latitude, in radians

        e: (float)
            The ellipsoid eccentricity

    Returns:
        (float) tan(pi/4 - phi/2) / ((1 - e sin phi) / (1 + e sin phi)) ** (e/2)
    """
    return math.tan(math.pi / 4.0 - phi / 2.0) / _eccentricity_factor(phi, e)


def phi2(ts: float, e: float) -> float:
    """
    Inverts tsfn() by fixed-point iteration, starting from the spherical
    solution. Stops once two successive estimates differ by no more than
    PHI2_TOLERANCE, or after PHI2_MAX_ITER refinements. If the iteration has
    not converged by then, the last estimate is returned as-is.

    Args:
        ts: (float)
            A value produced by tsfn()

        e: (float)
            The ellipsoid eccentricity

    Returns:
        (float) the latitude, in radians
    """
    phi = math.pi / 2.0 - 2.0 * math.atan(ts)
    for _ in range(PHI2_MAX_ITER):
        next_phi = math.pi / 2.0 - 2.0 * math.atan(ts * _eccentricity_factor(phi, e))
        converged = abs(phi - next_phi) <= PHI2_TOLERANCE
        phi = next_phi
        if converged:
            return phi

    LOGGER.debug(
        'Inverse isometric latitude did not converge within %d steps (ts=%r)',
        PHI2_MAX_ITER, ts
    )
    return phi
