# planeproducer/simulation/driver.py
"""
Runs an Aircraft through a number of one-second steps on a background
thread and hands the resulting telemetry report back through a Future.
"""
import logging
import threading
import time
from concurrent.futures import Future
from typing import Callable, Optional

from ..airplane.core import Aircraft
from ..airplane.data_models import FlightReport
from ..airplane.exceptions import TelemetrySerializationError
from ..config import SimulationConfig
from .exceptions import SimulationInProgressError

logger = logging.getLogger(__name__)

class SimulationDriver:
    """Advances one aircraft through N simulated seconds per run."""

    def __init__(self, aircraft: Aircraft, config: Optional[SimulationConfig] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.aircraft = aircraft
        self.config = config or aircraft.config
        self._sleep = sleep
        self._running = threading.Event()
        self._start_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._running.is_set()

    def travel(self, seconds: int, wait: bool = False) -> "Future[FlightReport]":
        """
        Simulates `seconds` of flight on a background thread.

        Args:
            seconds: Number of one-second steps to run
            wait: Pause config.real_time_step_s of wall time after every step

        Returns:
            Future resolving to the FlightReport taken after the last step, or
            to the exception that stopped the run.
        """
        future: "Future[FlightReport]" = Future()
        self._start(seconds, wait, future, encode=False)
        return future

    def travel_json(self, seconds: int, wait: bool = False) -> "Future[bytes]":
        """Like travel(), but resolves to the serialised wire record."""
        future: "Future[bytes]" = Future()
        self._start(seconds, wait, future, encode=True)
        return future

    def run(self, seconds: int, wait: bool = False) -> FlightReport:
        """Blocking form of travel()."""
        return self.travel(seconds, wait).result()

    def _start(self, seconds: int, wait: bool, future: Future, encode: bool):
        if seconds < 0:
            raise ValueError(f"Cannot simulate a negative number of seconds ({seconds})")
        with self._start_lock:
            if self._running.is_set():
                raise SimulationInProgressError(self.aircraft.tail_number)
            self._running.set()
        future.set_running_or_notify_cancel()

        worker = threading.Thread(
            target=self._run,
            args=(seconds, wait, future, encode),
            name=f"sim-{self.aircraft.tail_number}",
            daemon=True
        )
        worker.start()

    def _run(self, seconds: int, wait: bool, future: Future, encode: bool):
        try:
            for _ in range(seconds):
                self.aircraft.step()
                if wait:
                    self._sleep(self.config.real_time_step_s)

            report = self.aircraft.report()
            result = report.to_json() if encode else report
        except TelemetrySerializationError as e:
            logger.error(f"Report failed for aircraft {self.aircraft.tail_number}: {e}", exc_info=True)
            self._running.clear()
            future.set_exception(e)
        except Exception as e:
            logger.error(f"Simulation of {self.aircraft.tail_number} aborted: {e}", exc_info=True)
            self._running.clear()
            future.set_exception(e)
        else:
            logger.info(
                f"Simulated {seconds}s for {self.aircraft.tail_number}, "
                f"phase {self.aircraft.phase.name} after {self.aircraft.elapsed_seconds}s total"
            )
            self._running.clear()
            future.set_result(result)
