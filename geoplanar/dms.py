"""
Conversion between decimal degrees and Degrees-Minutes-Seconds text.

Accepted DMS text takes the form

    <degrees><D|d|O|o><minutes><'|m><seconds>["]<N|S|E|W>

where everything after the degrees is optional (seconds require minutes,
and minutes require the degree separator). A trailing hemisphere letter
decides the sign when present (S/W negative, N/E positive); otherwise the
sign of the degrees token is used.
"""

__all__ = ['deg_to_dms', 'dms_to_deg']

import math
import re

import numpy as np

from geoplanar._const import DMS_CARRY_TOLERANCE
from geoplanar.errors import FormatError, ValidationError

_NUMBER = r'\d+(?:\.\d*)?|\.\d+'

_DMS_RE = re.compile(
    rf"""^\s*
    (?P<deg>[-+]?(?:{_NUMBER}))\s*
    (?:
        [DdOo]\s*
        (?:
            (?P<min>{_NUMBER})\s*
            (?:
                ['m]\s*
                (?:(?P<sec>{_NUMBER})\s*"?\s*)?
            )?
        )?
    )?
    (?P<hem>[NSEW])?
    \s*$""",
    re.VERBOSE,
)


def dms_to_deg(dms: str) -> float:
    """
    Parses Degrees-Minutes-Seconds text into decimal degrees.

    Args:
        dms: (str)
            The DMS text, e.g. 11d12'13"S

    Returns:
        (float) decimal degrees

    Raises:
        FormatError: the text does not match the DMS grammar
    """
    if not isinstance(dms, str):
        raise FormatError(f'DMS value must be a string, got {type(dms).__name__}')

    match = _DMS_RE.match(dms)
    if match is None:
        raise FormatError(f'Invalid DMS string: {dms!r}')

    degrees = float(match.group('deg'))
    minutes = float(match.group('min') or 0.)
    seconds = float(match.group('sec') or 0.)

    value = abs(degrees) + minutes / 60 + seconds / 3600

    hemisphere = match.group('hem')
    if hemisphere:
        return -value if hemisphere in ('S', 'W') else value

    # copysign keeps the sign of a '-0' degrees token
    return math.copysign(value, degrees)


def deg_to_dms(deg: float) -> str:
    """
    Formats decimal degrees as Degrees-Minutes-Seconds text, e.g. 11d12'13.0

    Minutes and seconds are always written, even when zero. No seconds symbol
    or hemisphere letter is appended; the sign is carried by the degrees.

    Args:
        deg: (float)
            The angle, in decimal degrees

    Returns:
        (str) the DMS text

    Raises:
        ValidationError: the angle is NaN or infinite
    """
    if not math.isfinite(deg):
        raise ValidationError(f'Cannot format a non-finite angle as DMS: {deg}')

    sign = '-' if math.copysign(1., deg) < 0 else ''
    fraction, whole = math.modf(abs(deg))
    degrees = int(whole)

    total_minutes = fraction * 60
    minutes = int(total_minutes)
    seconds = (total_minutes - minutes) * 60

    if seconds >= 60 - DMS_CARRY_TOLERANCE:
        minutes += 1
        seconds = 0.

    if minutes >= 60 - DMS_CARRY_TOLERANCE:
        degrees += 1
        minutes -= 60

    # Never scientific notation
    seconds_text = np.format_float_positional(seconds, trim="0")
    return f"{sign}{degrees}d{minutes}'{seconds_text}"
