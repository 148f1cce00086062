"""Degree/radian conversion with range reduction"""

__all__ = ['deg_to_rad', 'rad_to_deg']

import math


def deg_to_rad(deg: float) -> float:
    """
    Converts degrees to radians, first reducing the angle modulo 360. The
    remainder keeps the sign of the input, so the result lies in (-2pi, 2pi).

    Args:
        deg: (float)
            An angle, in degrees

    Returns:
        (float) the angle in radians
    """
    return math.fmod(deg, 360.0) * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    """
    Converts radians to degrees, reducing the result modulo 360 (sign follows
    the input, so the result lies in (-360, 360)).

    Args:
        rad: (float)
            An angle, in radians

    Returns:
        (float) the angle in degrees
    """
    return math.fmod(rad * 180.0 / math.pi, 360.0)
