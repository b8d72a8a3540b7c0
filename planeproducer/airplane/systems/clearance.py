# planeproducer/airplane/systems/clearance.py

# Standard import
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Local import
from ..constants import AircraftConstants
from ..exceptions import ClearanceError
from .clock import DelayedTask, SimulatedClock

logger = logging.getLogger(__name__)


class ClearanceStatus(Enum):
    IDLE = "idle"
    PENDING = "pending"
    GRANTED = "granted"


@dataclass(frozen=True)
class ClearanceState:
    """Point-in-time view of a clearance gate"""
    armed: bool
    granted: bool


class ClearanceGate:
    """
    Air traffic control clearance that is granted a fixed delay after it is
    requested.

    IDLE --arm()--> PENDING --timer--> GRANTED --consume()--> IDLE

    The timer callback runs on the clock's execution context (the advancing
    thread for a SimulatedClock, a timer thread for a WallClock). All state
    access goes through the gate's lock.
    """

    def __init__(self, name: str, wait_seconds: float = AircraftConstants.CLEARANCE['WAIT_SECONDS'],
                 clock=None):
        if wait_seconds < 0:
            raise ClearanceError(f"Clearance wait must be non-negative for '{name}', got {wait_seconds}")
        self.name = name
        self.wait_seconds = wait_seconds
        self.clock = clock if clock is not None else SimulatedClock()
        self._lock = threading.Lock()
        self._status = ClearanceStatus.IDLE
        self._task: Optional[DelayedTask] = None

    @property
    def status(self) -> ClearanceStatus:
        with self._lock:
            return self._status

    @property
    def state(self) -> ClearanceState:
        with self._lock:
            return ClearanceState(
                armed=self._status is not ClearanceStatus.IDLE,
                granted=self._status is ClearanceStatus.GRANTED
            )

    @property
    def pending_task(self) -> Optional[DelayedTask]:
        with self._lock:
            return self._task

    def arm(self) -> bool:
        """Requests clearance. No-op (returns False) unless the gate is idle."""
        with self._lock:
            if self._status is not ClearanceStatus.IDLE:
                return False
            self._status = ClearanceStatus.PENDING
            self._task = self.clock.call_later(self.wait_seconds, self._grant)
        logger.info(f"{self.name} clearance requested, granted in {self.wait_seconds}s")
        return True

    def consume(self) -> bool:
        """Uses a granted clearance. Returns False without side effects otherwise."""
        with self._lock:
            if self._status is not ClearanceStatus.GRANTED:
                return False
            self._status = ClearanceStatus.IDLE
            self._task = None
        logger.info(f"{self.name} clearance consumed")
        return True

    def cancel(self) -> bool:
        """Withdraws a pending request so no timer is left behind on shutdown."""
        with self._lock:
            if self._status is not ClearanceStatus.PENDING:
                return False
            task, self._task = self._task, None
            self._status = ClearanceStatus.IDLE
        if task is not None:
            task.cancel()
        logger.info(f"{self.name} clearance request cancelled")
        return True

    def _grant(self):
        with self._lock:
            if self._status is not ClearanceStatus.PENDING:
                return
            self._status = ClearanceStatus.GRANTED
        logger.info(f"{self.name} clearance granted")

    def __repr__(self) -> str:
        return f"ClearanceGate(name={self.name!r}, status={self.status.value}, wait={self.wait_seconds}s)"
