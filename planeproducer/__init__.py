"""
planeproducer - Single-aircraft flight simulator producing telemetry records
for a downstream data stream.
"""

from .airplane import Aircraft, Airport, FlightPhase, FlightReport
from .config import SimulationConfig, load_config
from .navigation import GeoPoint
from .simulation import SimulationDriver

__all__ = [
    'Aircraft',
    'Airport',
    'FlightPhase',
    'FlightReport',
    'GeoPoint',
    'SimulationConfig',
    'SimulationDriver',
    'load_config'
]
