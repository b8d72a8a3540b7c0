# planeproducer/constants/geodesy.py

class GeodesyConstants:
    """Shared constants for great-circle navigation."""

    EARTH_RADIUS_M = 6371e3
    NMI_PER_METER = 0.0005399565
    SECONDS_PER_HOUR = 3600

    LATITUDE_RANGE_DEG = (-90.0, 90.0)
    LONGITUDE_RANGE_DEG = (-180.0, 180.0)
