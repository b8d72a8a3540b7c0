# planeproducer/airplane/data_models.py
"""
Route and telemetry data structures for the aircraft simulation.

FlightReport is the wire contract for the downstream stream: short field
names and fixed-precision string values keep each record well inside the
per-record size limit.
"""
import json
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict

from ..navigation.geo_vector import GeoPoint, validate_point
from .constants import AircraftConstants
from .exceptions import InvalidAircraftError, TelemetrySerializationError

@dataclass(frozen=True)
class Airport:
    """A flight origin or destination: IATA-style code plus location."""
    code: str
    location: GeoPoint

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidAircraftError("airport code", "Airport code must be a non-empty string")
        validate_point(self.location)

    def __str__(self) -> str:
        return f"Airport IATA: {self.code}\t{self.location}"

# Short wire names, in the order they are serialised.
REPORT_FIELDS = OrderedDict([
    ('time', 'Time'),
    ('tail', 'Tail'),
    ('flight_id', 'FId'),
    ('origin', 'Or'),
    ('destination', 'Dest'),
    ('latitude', 'CLat'),
    ('longitude', 'CLong'),
    ('altitude', 'Alt'),
    ('bearing', 'Brng'),
    ('travelled', 'Trav'),
    ('remaining', 'Dist'),
    ('airspeed', 'ASpd'),
    ('vertical_speed', 'VSpd'),
    ('status', 'Sts'),
])

@dataclass(frozen=True)
class FlightReport:
    """Telemetry snapshot of one aircraft. All values are pre-formatted strings."""
    time: str
    tail: str
    flight_id: str
    origin: str
    destination: str
    latitude: str
    longitude: str
    altitude: str
    bearing: str
    travelled: str
    remaining: str
    airspeed: str
    vertical_speed: str
    status: str

    def to_dict(self) -> Dict[str, str]:
        return OrderedDict((wire, getattr(self, attr)) for attr, wire in REPORT_FIELDS.items())

    def to_json(self) -> bytes:
        """Compact UTF-8 JSON record, checked against the per-record size limit."""
        try:
            payload = json.dumps(self.to_dict(), separators=(',', ':'), ensure_ascii=False).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise TelemetrySerializationError(self.tail, f"Report could not be encoded: {e}") from e

        limit = AircraftConstants.REPORT['MAX_RECORD_BYTES']
        if len(payload) > limit:
            raise TelemetrySerializationError(
                self.tail, f"Report is {len(payload)} bytes, limit is {limit}"
            )
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "FlightReport":
        """Rebuilds a report from its wire form, e.g. on the consumer side."""
        missing = [wire for wire in REPORT_FIELDS.values() if wire not in data]
        if missing:
            raise KeyError(f"Report is missing fields: {', '.join(missing)}")
        return cls(**{attr: data[wire] for attr, wire in REPORT_FIELDS.items()})
