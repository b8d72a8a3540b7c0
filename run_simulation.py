# run_simulation.py
import argparse
import logging
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from planeproducer import Aircraft, Airport, GeoPoint, SimulationDriver, load_config

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Single-aircraft telemetry simulation")
    parser.add_argument("seconds", type=int, nargs="?", default=600, help="Simulated seconds to run")
    parser.add_argument("--config", default=None, help="Path to config JSON")
    parser.add_argument("--wait", action="store_true", help="Pace each step against the wall clock")
    parser.add_argument("--tail", default="N123AB", help="Aircraft tail number")
    parser.add_argument("--flight", default="DL1234", help="Flight identifier")
    parser.add_argument("--verbose", action="store_true", help="Log every simulated second")
    return parser

def main(argv=None):
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    config = load_config(args.config)
    origin = Airport("ATL", GeoPoint(33.640411, -84.419853))
    destination = Airport("LAX", GeoPoint(33.942791, -118.410042))

    aircraft = Aircraft(args.tail, args.flight, origin, destination, config=config)
    aircraft.request_takeoff_clearance()

    print("--- Starting Flight Simulation ---")
    print(f"{origin}\n{destination}")
    print("-" * 40)

    try:
        payload = SimulationDriver(aircraft).travel_json(args.seconds, wait=args.wait).result()
    finally:
        aircraft.shutdown()

    print(payload.decode('utf-8'))
    print("-" * 40)
    print(f"{aircraft!r} after {aircraft.elapsed_seconds}s")

if __name__ == "__main__":
    main()
