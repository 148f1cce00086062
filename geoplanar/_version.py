"""
Exposes the version of geoplanar
"""
__version__ = 'v0.1.0'
