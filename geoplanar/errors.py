"""Exceptions raised by geoplanar"""

__all__ = ['FormatError', 'ValidationError']


class ValidationError(ValueError):
    """A coordinate record or projection center is out of range or not finite"""


class FormatError(ValueError):
    """Text does not match the expected coordinate or DMS grammar"""
