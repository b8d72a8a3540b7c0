"""
constants - Shared numeric constants for planeproducer
"""

from .geodesy import GeodesyConstants

__all__ = ['GeodesyConstants']
