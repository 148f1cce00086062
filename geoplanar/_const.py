"""
Constants declarations for geoplanar
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_E = 0.0818192  # Eccentricity
WGS84_E2 = WGS84_E ** 2

# Center latitudes closer than this to zero use the equatorial constants
EQUATOR_TOLERANCE = 1e-10

# Latitudes within this distance of +/- pi/2 are treated as a pole
POLE_TOLERANCE = 1e-10

# Below this cos(B * dlambda), u falls back to the linear approximation
MERIDIAN_TOLERANCE = 1e-7

# Limit of ln(tan(pi/4 - eps/2)) used for v at the poles
POLAR_ASYMPTOTE = -4.2897288031186085136750723197195

# Inverse isometric latitude iteration
PHI2_TOLERANCE = 1.0e-10
PHI2_MAX_ITER = 15

# Rounding guard for DMS carries
DMS_CARRY_TOLERANCE = 1e-10
