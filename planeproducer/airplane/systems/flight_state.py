# planeproducer/airplane/systems/flight_state.py

# Standard import
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

# Local import
from ..constants import AircraftConstants

logger = logging.getLogger(__name__)


class FlightPhase(Enum):
    """Flight lifecycle stages, declared in cycle order. Values are the one-byte wire codes."""
    IDLE = 'i'
    TAXI_OUT = 'o'
    TAKE_OFF = 't'
    CRUISING = 'c'
    AWAITING_LANDING = 'a'
    LANDING = 'l'
    TAXI_IN = 'x'

    @property
    def code(self) -> str:
        return self.value

    def next(self) -> "FlightPhase":
        """The single successor in the cycle; TaxiIn wraps around to Idle."""
        cycle = list(FlightPhase)
        return cycle[(cycle.index(self) + 1) % len(cycle)]

    @classmethod
    def from_code(cls, code: str) -> "FlightPhase":
        return cls(code)


@dataclass(frozen=True)
class PhasePolicy:
    """Kinematics every aircraft in a phase must hold"""
    airspeed_kt: float
    vertical_speed_fps: float


_SPEEDS = AircraftConstants.SPEEDS
_VSPEEDS = AircraftConstants.VERTICAL_SPEEDS

PHASE_POLICIES: Dict[FlightPhase, PhasePolicy] = {
    FlightPhase.IDLE: PhasePolicy(_SPEEDS['IDLE'], _VSPEEDS['LEVEL']),
    FlightPhase.TAXI_OUT: PhasePolicy(_SPEEDS['TAXI'], _VSPEEDS['LEVEL']),
    FlightPhase.TAKE_OFF: PhasePolicy(_SPEEDS['TAKEOFF'], _VSPEEDS['CLIMB']),
    FlightPhase.CRUISING: PhasePolicy(_SPEEDS['CRUISE'], _VSPEEDS['LEVEL']),
    FlightPhase.AWAITING_LANDING: PhasePolicy(_SPEEDS['HOLDING'], _VSPEEDS['LEVEL']),
    FlightPhase.LANDING: PhasePolicy(_SPEEDS['LANDING'], _VSPEEDS['DESCENT']),
    FlightPhase.TAXI_IN: PhasePolicy(_SPEEDS['TAXI'], _VSPEEDS['LEVEL']),
}


class FlightStateMachine:
    """
    Gated transitions around the phase cycle:
    Idle -> TaxiOut -> TakeOff -> Cruising -> AwaitingLanding -> Landing -> TaxiIn -> Idle

    Each phase has one guard. When it holds, the aircraft moves to the next
    phase and its speeds snap to that phase's policy. A failed guard is the
    normal "not ready yet" outcome and changes nothing.
    """

    def __init__(self, aircraft):
        """
        Args:
            aircraft: The Aircraft whose phase and kinematics this machine drives
        """
        self.aircraft = aircraft
        self.const = AircraftConstants
        self._rules: Dict[FlightPhase, Tuple[Callable[[], bool], Optional[Callable[[], None]]]] = {
            FlightPhase.IDLE: (self._has_takeoff_clearance, None),
            FlightPhase.TAXI_OUT: (self._is_clear_of_origin, None),
            FlightPhase.TAKE_OFF: (self._reached_cruising_altitude, None),
            FlightPhase.CRUISING: (self._is_near_destination, self._request_landing_clearance),
            FlightPhase.AWAITING_LANDING: (self._has_landing_clearance, None),
            FlightPhase.LANDING: (self._is_on_ground, None),
            FlightPhase.TAXI_IN: (self._is_at_gate, self._request_takeoff_clearance),
        }

    def transition(self) -> bool:
        """Attempts one transition. Returns True if the phase changed."""
        current = self.aircraft.phase
        guard, on_enter = self._rules[current]
        if not guard():
            return False

        target = current.next()
        self.aircraft._enter_phase(target, PHASE_POLICIES[target])
        logger.info(f"{self.aircraft.tail_number}: {current.name} -> {target.name}")
        if on_enter is not None:
            on_enter()
        return True

    # --- Guards ---
    # Clearance guards consume the grant in the same locked call that checks it.

    def _has_takeoff_clearance(self) -> bool:
        return self.aircraft.takeoff_clearance.consume()

    def _is_clear_of_origin(self) -> bool:
        return self.aircraft.distance_from_origin() >= self.const.THRESHOLDS['TAXI_DISTANCE_FROM_ORIGIN_NMI']

    def _reached_cruising_altitude(self) -> bool:
        return self.aircraft.altitude_ft >= self.const.THRESHOLDS['CRUISING_ALTITUDE_FT']

    def _is_near_destination(self) -> bool:
        return self.aircraft.distance_remaining_nmi <= self.const.THRESHOLDS['AWAITING_LANDING_DISTANCE_NMI']

    def _has_landing_clearance(self) -> bool:
        return self.aircraft.landing_clearance.consume()

    def _is_on_ground(self) -> bool:
        return self.aircraft.altitude_ft <= self.const.THRESHOLDS['GROUND_LEVEL_FT']

    def _is_at_gate(self) -> bool:
        return self.aircraft.distance_remaining_nmi <= self.const.THRESHOLDS['IDLE_DISTANCE_FROM_DESTINATION_NMI']

    # --- Entry actions (run once per phase occupancy) ---

    def _request_landing_clearance(self):
        self.aircraft.landing_clearance.arm()

    def _request_takeoff_clearance(self):
        self.aircraft.takeoff_clearance.arm()
