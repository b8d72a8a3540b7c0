#!/usr/bin/env python3
# planeproducer/simulation/tests/test_driver.py

import sys
from pathlib import Path
import json
import threading
import unittest
from unittest.mock import MagicMock, patch

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from planeproducer.airplane.core import Aircraft
from planeproducer.airplane.data_models import Airport, FlightReport
from planeproducer.airplane.exceptions import TelemetrySerializationError
from planeproducer.airplane.systems.flight_state import FlightPhase
from planeproducer.config import SimulationConfig
from planeproducer.navigation.geo_vector import GeoPoint
from planeproducer.simulation.driver import SimulationDriver
from planeproducer.simulation.exceptions import SimulationInProgressError

ATL = Airport("ATL", GeoPoint(33.640411, -84.419853))
LAX = Airport("LAX", GeoPoint(33.942791, -118.410042))

class TestSimulationDriver(unittest.TestCase):
    def setUp(self):
        self.aircraft = Aircraft("N123AB", "DL100", ATL, LAX)
        self.sleep = MagicMock()
        self.driver = SimulationDriver(self.aircraft, sleep=self.sleep)

    def tearDown(self):
        self.aircraft.shutdown()

    def test_travel_resolves_to_report(self):
        self.aircraft.request_takeoff_clearance()
        future = self.driver.travel(150)
        report = future.result(timeout=10)

        self.assertIsInstance(report, FlightReport)
        self.assertEqual(report.status, FlightPhase.TAXI_OUT.code)
        self.assertEqual(self.aircraft.elapsed_seconds, 150)
        self.assertFalse(self.driver.is_running)
        self.sleep.assert_not_called()

    def test_run_blocks_for_result(self):
        report = self.driver.run(10)
        self.assertEqual(report.status, 'i')
        self.assertEqual(self.aircraft.elapsed_seconds, 10)

    def test_zero_seconds_reports_current_state(self):
        report = self.driver.run(0)
        self.assertEqual(report.latitude, "33.64041")
        self.assertEqual(self.aircraft.elapsed_seconds, 0)

    def test_wait_pauses_after_each_step(self):
        self.driver.run(5, wait=True)
        self.assertEqual(self.sleep.call_count, 5)
        self.sleep.assert_called_with(1.0)

    def test_travel_json_resolves_to_bytes(self):
        payload = self.driver.travel_json(3).result(timeout=10)
        self.assertIsInstance(payload, bytes)
        self.assertEqual(json.loads(payload)['Tail'], "N123AB")

    def test_negative_seconds_rejected(self):
        with self.assertRaises(ValueError):
            self.driver.travel(-1)
        self.assertFalse(self.driver.is_running)

    def test_second_run_rejected_while_in_progress(self):
        started = threading.Event()
        release = threading.Event()

        def blocking_sleep(_):
            started.set()
            release.wait(timeout=5)

        driver = SimulationDriver(self.aircraft, sleep=blocking_sleep)
        future = driver.travel(2, wait=True)
        self.assertTrue(started.wait(timeout=5))
        self.assertTrue(driver.is_running)

        with self.assertRaises(SimulationInProgressError):
            driver.travel(1)

        release.set()
        future.result(timeout=10)
        self.assertFalse(driver.is_running)
        # A finished run frees the driver again
        driver.run(1)
        self.assertEqual(self.aircraft.elapsed_seconds, 3)

    def test_serialization_failure_reaches_future(self):
        error = TelemetrySerializationError("N123AB", "too large")
        with patch.object(FlightReport, 'to_json', side_effect=error):
            with self.assertLogs('planeproducer.simulation.driver', level='ERROR'):
                future = self.driver.travel_json(1)
                self.assertIs(future.exception(timeout=10), error)
        self.assertFalse(self.driver.is_running)

    def test_step_failure_reaches_future(self):
        with patch.object(self.aircraft, 'step', side_effect=RuntimeError("engine fire")):
            with self.assertLogs('planeproducer.simulation.driver', level='ERROR'):
                future = self.driver.travel(1)
                with self.assertRaises(RuntimeError):
                    future.result(timeout=10)

class TestSimulationDriverWallClock(unittest.TestCase):
    def test_clearance_granted_in_real_time(self):
        config = SimulationConfig(clearance_wait_s=0.05, real_time_step_s=0.05, clock='wall')
        aircraft = Aircraft("N9", "WX9", ATL, LAX, config=config)
        aircraft.request_takeoff_clearance()

        report = SimulationDriver(aircraft).run(10, wait=True)
        self.assertEqual(report.status, FlightPhase.TAXI_OUT.code)

if __name__ == '__main__':
    unittest.main()
