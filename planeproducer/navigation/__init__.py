"""
navigation - Great-circle geometry for planeproducer

Exposes the GeoPoint value type and the bearing/distance/advance functions.
"""

from .geo_vector import GeoPoint, bearing, distance, vector, advance, validate_point
from .exceptions import NavigationError, InvalidCoordinateError

__all__ = [
    'GeoPoint',
    'bearing',
    'distance',
    'vector',
    'advance',
    'validate_point',
    'NavigationError',
    'InvalidCoordinateError'
]
