# planeproducer/airplane/core.py

import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from ..config import SimulationConfig
from ..navigation.geo_vector import GeoPoint, advance, distance, vector
from .constants import AircraftConstants
from .data_models import Airport, FlightReport
from .exceptions import InvalidAircraftError
from .systems.clearance import ClearanceGate
from .systems.flight_state import FlightPhase, FlightStateMachine, PhasePolicy, PHASE_POLICIES

logger = logging.getLogger(__name__)

class Aircraft:
    """
    A single aircraft flying between two airports, advanced one simulated
    second at a time.

    All speeds are in knots, altitude in feet, vertical speed in ft/s and
    distances in nautical miles. Speeds are never set directly: they snap to
    the current phase's policy on every transition.
    """

    def __init__(self, tail_number: str, flight_id: str, origin: Airport, destination: Airport,
                 config: Optional[SimulationConfig] = None, clock=None):
        """
        Args:
            tail_number: Aircraft registration
            flight_id: Flight identifier
            origin: Departure airport; the aircraft starts here
            destination: Arrival airport
            config: Simulation settings (clearance delay, clock type)
            clock: Clock for clearance timers; built from config when omitted
        """
        self._validate_identity(tail_number, flight_id, origin, destination)
        self.config = config or SimulationConfig()
        self.const = AircraftConstants
        self.clock = clock if clock is not None else self.config.make_clock()
        self._lock = threading.RLock()

        self.tail_number = tail_number
        self.flight_id = flight_id
        self.origin = origin
        self.destination = destination

        self.position: GeoPoint = origin.location
        self.altitude_ft = 0.0
        self.distance_travelled_nmi = 0.0
        self.bearing_deg, self.distance_remaining_nmi = vector(origin.location, destination.location)

        self.phase = FlightPhase.IDLE
        policy = PHASE_POLICIES[FlightPhase.IDLE]
        self.speed_knots = float(policy.airspeed_kt)
        self.vertical_speed_ft_per_sec = float(policy.vertical_speed_fps)

        wait = self.config.clearance_wait_s
        self.takeoff_clearance = ClearanceGate("takeoff", wait, self.clock)
        self.landing_clearance = ClearanceGate("landing", wait, self.clock)
        self.flight_state = FlightStateMachine(self)
        self.elapsed_seconds = 0

        logger.info(
            f"Aircraft {tail_number} ({flight_id}) initialised at {origin.code}, "
            f"{self.distance_remaining_nmi:.2f} nmi to {destination.code} on {self.bearing_deg:.2f}°"
        )

    @staticmethod
    def _validate_identity(tail_number, flight_id, origin, destination):
        for name, value in (('tail_number', tail_number), ('flight_id', flight_id)):
            if not isinstance(value, str) or not value.strip():
                raise InvalidAircraftError(name, "Identifier must be a non-empty string")
        for name, value in (('origin', origin), ('destination', destination)):
            if not isinstance(value, Airport):
                raise InvalidAircraftError(name, "Expected an Airport")

    def request_takeoff_clearance(self) -> bool:
        """Asks the tower for departure clearance; the first departure needs this."""
        return self.takeoff_clearance.arm()

    def step(self) -> bool:
        """
        Simulates one second of flight.

        Returns:
            bool: True if the phase changed during this second
        """
        with self._lock:
            self.clock.advance(1)
            self.elapsed_seconds += 1

            # Holding for landing clearance: no positional change.
            if self.phase is not FlightPhase.AWAITING_LANDING:
                self._move(self.speed_knots / self.const.GEODESY.SECONDS_PER_HOUR)

            changed = self.flight_state.transition()
            logger.debug(
                f"{self.tail_number} t={self.elapsed_seconds}s {self.phase.name} "
                f"pos={self.position} alt={self.altitude_ft:.0f}ft remaining={self.distance_remaining_nmi:.2f}nmi"
            )
            return changed

    def _move(self, travelled_nmi: float):
        self.distance_travelled_nmi += travelled_nmi
        self.altitude_ft = max(
            float(self.const.THRESHOLDS['GROUND_LEVEL_FT']),
            self.altitude_ft + self.vertical_speed_ft_per_sec
        )
        self.position = advance(self.position, travelled_nmi, self.bearing_deg)
        self.bearing_deg, self.distance_remaining_nmi = vector(self.position, self.destination.location)

    def _enter_phase(self, phase: FlightPhase, policy: PhasePolicy):
        """Called by the flight state machine when a transition fires."""
        with self._lock:
            self.phase = phase
            self.speed_knots = float(policy.airspeed_kt)
            self.vertical_speed_ft_per_sec = float(policy.vertical_speed_fps)

    def distance_from_origin(self) -> float:
        with self._lock:
            return distance(self.position, self.origin.location)

    def report(self) -> FlightReport:
        """Snapshot of the current state for the telemetry stream"""
        with self._lock:
            pos = self.const.REPORT['POSITION_DECIMALS']
            val = self.const.REPORT['VALUE_DECIMALS']
            return FlightReport(
                time=datetime.now(timezone.utc).isoformat(timespec='seconds'),
                tail=self.tail_number,
                flight_id=self.flight_id,
                origin=self.origin.code,
                destination=self.destination.code,
                latitude=f"{self.position.latitude_deg:.{pos}f}",
                longitude=f"{self.position.longitude_deg:.{pos}f}",
                altitude=f"{self.altitude_ft:.{val}f}",
                bearing=f"{self.bearing_deg:.{val}f}",
                travelled=f"{self.distance_travelled_nmi:.{val}f}",
                remaining=f"{self.distance_remaining_nmi:.{val}f}",
                airspeed=f"{self.speed_knots:.{val}f}",
                vertical_speed=f"{self.vertical_speed_ft_per_sec:.{val}f}",
                status=self.phase.code
            )

    def shutdown(self):
        """Withdraws any outstanding clearance requests so no timer outlives the aircraft."""
        cancelled = [gate.name for gate in (self.takeoff_clearance, self.landing_clearance) if gate.cancel()]
        if cancelled:
            logger.info(f"{self.tail_number}: cancelled pending {', '.join(cancelled)} clearance")

    def __repr__(self) -> str:
        return (f"Aircraft(tail={self.tail_number!r}, flight={self.flight_id!r}, "
                f"{self.origin.code}->{self.destination.code}, phase={self.phase.name})")
