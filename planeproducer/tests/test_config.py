#!/usr/bin/env python3
# planeproducer/tests/test_config.py

import sys
from pathlib import Path
import json
import tempfile
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent
sys.path.append(str(project_root))

from planeproducer.airplane.systems.clock import SimulatedClock, WallClock
from planeproducer.config import SimulationConfig, load_config
from planeproducer.exceptions import ConfigurationError

class TestSimulationConfig(unittest.TestCase):
    def test_defaults(self):
        config = SimulationConfig()
        self.assertEqual(config.clearance_wait_s, 120)
        self.assertEqual(config.real_time_step_s, 1.0)
        self.assertIsInstance(config.make_clock(), SimulatedClock)

    def test_wall_clock(self):
        self.assertIsInstance(SimulationConfig(clock='wall').make_clock(), WallClock)

    def test_invalid_values(self):
        with self.assertRaises(ConfigurationError):
            SimulationConfig(clearance_wait_s=-1)
        with self.assertRaises(ConfigurationError):
            SimulationConfig(real_time_step_s=-0.5)
        with self.assertRaises(ConfigurationError) as ctx:
            SimulationConfig(clock='sundial')
        self.assertEqual(ctx.exception.config_name, 'clock')

    def test_dict_round_trip_rejects_unknown_keys(self):
        config = SimulationConfig(clearance_wait_s=30, clock='wall')
        self.assertEqual(SimulationConfig.from_dict(config.to_dict()), config)
        with self.assertRaises(ConfigurationError):
            SimulationConfig.from_dict({'cruise_speed': 500})

class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_none_gives_defaults(self):
        self.assertEqual(load_config(None), SimulationConfig())

    def test_loads_json(self):
        path = self.dir / "sim.json"
        path.write_text(json.dumps({'clearance_wait_s': 10, 'real_time_step_s': 0.5}), encoding='utf-8')

        config = load_config(path)
        self.assertEqual(config.clearance_wait_s, 10)
        self.assertEqual(config.real_time_step_s, 0.5)
        self.assertEqual(config.clock, 'simulated')

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(self.dir / "absent.json")

    def test_rejects_other_formats(self):
        path = self.dir / "sim.yaml"
        path.write_text("clock: wall\n", encoding='utf-8')
        with self.assertRaises(ConfigurationError):
            load_config(path)

    def test_rejects_non_object_root(self):
        path = self.dir / "sim.json"
        path.write_text("[1, 2]", encoding='utf-8')
        with self.assertRaises(ConfigurationError):
            load_config(path)

if __name__ == '__main__':
    unittest.main()
