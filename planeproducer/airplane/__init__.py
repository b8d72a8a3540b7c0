"""
airplane - Aircraft entity, flight-state engine and telemetry records
"""

from .core import Aircraft
from .data_models import Airport, FlightReport
from .exceptions import AircraftException, InvalidAircraftError, ClearanceError, TelemetrySerializationError
from .systems import FlightPhase, ClearanceGate, ClearanceState, SimulatedClock, WallClock

__all__ = [
    'Aircraft',
    'Airport',
    'FlightReport',
    'FlightPhase',
    'ClearanceGate',
    'ClearanceState',
    'SimulatedClock',
    'WallClock',
    'AircraftException',
    'InvalidAircraftError',
    'ClearanceError',
    'TelemetrySerializationError'
]
