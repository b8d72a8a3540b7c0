class AircraftException(Exception):
    """Base exception for all aircraft-related errors"""
    pass

class InvalidAircraftError(AircraftException, ValueError):
    """Rejected construction input (empty identifiers, bad airports)"""
    def __init__(self, field_name: str, message: str = "Invalid aircraft input"):
        self.field_name = field_name
        super().__init__(f"{message}: {field_name}")

class ClearanceError(AircraftException):
    """Clearance gate misuse"""
    pass

class TelemetrySerializationError(AircraftException):
    """A telemetry report could not be encoded for the downstream stream"""
    def __init__(self, tail_number: str, message: str = "Report serialization failed"):
        self.tail_number = tail_number
        super().__init__(f"{message} [Tail: {tail_number}]")
