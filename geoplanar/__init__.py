from geoplanar._version import __version__  # noqa: F401
from geoplanar.utils.logging import LOGGER
from geoplanar.coordinates import GeoPoint, PlanarPoint
from geoplanar.dms import deg_to_dms, dms_to_deg
from geoplanar.errors import FormatError, ValidationError
from geoplanar.projection import (
    ObliqueMercator, ProjectionConstants, derive_constants,
    forward_batch, inverse_batch
)

__all__ = [
    'FormatError',
    'GeoPoint',
    'ObliqueMercator',
    'PlanarPoint',
    'ProjectionConstants',
    'ValidationError',
    'deg_to_dms',
    'derive_constants',
    'dms_to_deg',
    'forward_batch',
    'inverse_batch',
    'LOGGER',
]
