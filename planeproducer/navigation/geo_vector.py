# planeproducer/navigation/geo_vector.py
"""
Great-circle navigation between latitude/longitude points.

Every public function takes and returns degrees. Conversion to radians
happens once, at the top of each function, and results are converted back
to degrees before they are returned. Formulae follow
http://www.movable-type.co.uk/scripts/latlong.html
"""
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..constants.geodesy import GeodesyConstants
from .exceptions import InvalidCoordinateError

R = GeodesyConstants.EARTH_RADIUS_M


@dataclass(frozen=True)
class GeoPoint:
    """An absolute latitude/longitude position, in degrees."""
    latitude_deg: float
    longitude_deg: float

    def __str__(self) -> str:
        return f"GeoPoint(lat={self.latitude_deg:f}, lon={self.longitude_deg:f})"


def validate_point(point: GeoPoint) -> GeoPoint:
    """Rejects non-finite or out-of-range coordinates before they reach the trig calls."""
    lat, lon = point.latitude_deg, point.longitude_deg
    try:
        finite = math.isfinite(lat) and math.isfinite(lon)
    except TypeError:
        raise InvalidCoordinateError(lat, lon, "Coordinates must be numeric") from None
    if not finite:
        raise InvalidCoordinateError(lat, lon, "Coordinates must be finite")

    lat_min, lat_max = GeodesyConstants.LATITUDE_RANGE_DEG
    lon_min, lon_max = GeodesyConstants.LONGITUDE_RANGE_DEG
    if not lat_min <= lat <= lat_max:
        raise InvalidCoordinateError(lat, lon, "Latitude out of range")
    if not lon_min <= lon <= lon_max:
        raise InvalidCoordinateError(lat, lon, "Longitude out of range")
    return point


def normalize_lon_deg(lon_deg: float) -> float:
    return float((lon_deg + 180.0) % 360.0 - 180.0)


def bearing(origin: GeoPoint, destination: GeoPoint) -> float:
    """
    Initial great-circle bearing from origin to destination.

    θ = atan2(sin Δλ ⋅ cos φ2, cos φ1 ⋅ sin φ2 − sin φ1 ⋅ cos φ2 ⋅ cos Δλ)

    Returns:
        float: Bearing in degrees, in [0, 360). Coincident points give 0.
    """
    phi1 = np.radians(origin.latitude_deg)
    phi2 = np.radians(destination.latitude_deg)
    d_lambda = np.radians(destination.longitude_deg - origin.longitude_deg)

    y = np.sin(d_lambda) * np.cos(phi2)
    x = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(d_lambda)
    theta = np.arctan2(y, x)

    return float((np.degrees(theta) + 360.0) % 360.0)


def distance(origin: GeoPoint, destination: GeoPoint) -> float:
    """
    Haversine distance between two points, in nautical miles.

    a = sin²(Δφ/2) + cos φ1 ⋅ cos φ2 ⋅ sin²(Δλ/2)
    Altitude is ignored.
    """
    phi1 = np.radians(origin.latitude_deg)
    phi2 = np.radians(destination.latitude_deg)
    d_phi = np.radians(destination.latitude_deg - origin.latitude_deg)
    d_lambda = np.radians(destination.longitude_deg - origin.longitude_deg)

    a = np.sin(d_phi / 2)**2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2)**2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return float(R * c * GeodesyConstants.NMI_PER_METER)


def vector(origin: GeoPoint, destination: GeoPoint) -> Tuple[float, float]:
    """Returns (bearing_deg, distance_nmi) from origin to destination."""
    return bearing(origin, destination), distance(origin, destination)


def advance(point: GeoPoint, distance_nmi: float, bearing_deg: float) -> GeoPoint:
    """
    Position reached after travelling distance_nmi from point along bearing_deg.

    φ2 = asin(sin φ1 ⋅ cos δ + cos φ1 ⋅ sin δ ⋅ cos θ)
    λ2 = λ1 + atan2(sin θ ⋅ sin δ ⋅ cos φ1, cos δ − sin φ1 ⋅ sin φ2)
    where δ is the angular distance d/R.
    """
    if distance_nmi == 0:
        return point

    delta = (distance_nmi / GeodesyConstants.NMI_PER_METER) / R
    phi1 = np.radians(point.latitude_deg)
    lambda1 = np.radians(point.longitude_deg)
    theta = np.radians(bearing_deg)

    phi2 = np.arcsin(np.clip(
        np.sin(phi1) * np.cos(delta) + np.cos(phi1) * np.sin(delta) * np.cos(theta),
        -1.0, 1.0
    ))
    lambda2 = lambda1 + np.arctan2(
        np.sin(theta) * np.sin(delta) * np.cos(phi1),
        np.cos(delta) - np.sin(phi1) * np.sin(phi2)
    )

    return GeoPoint(
        latitude_deg=float(np.degrees(phi2)),
        longitude_deg=normalize_lon_deg(float(np.degrees(lambda2)))
    )
