"""planeproducer/navigation/exceptions.py"""

class NavigationError(Exception):
    """Base exception for all navigation errors."""
    pass

class InvalidCoordinateError(NavigationError, ValueError):
    """Raised when a latitude/longitude pair is non-finite or out of range."""
    def __init__(self, latitude, longitude, message="Invalid coordinate"):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(f"{message}: ({latitude}, {longitude})")
