from planeproducer.constants.geodesy import GeodesyConstants

class AircraftConstants:
    """Phase kinematics and transition thresholds for the simulated airliner"""

    # ===== AIRSPEEDS =====
    SPEEDS = {  # In knots
        'IDLE': 0,
        'TAXI': 15,
        'TAKEOFF': 150,
        'CRUISE': 300,
        'HOLDING': 200,     # Awaiting landing clearance
        'LANDING': 15       # Taxi-equivalent roll-out speed
    }

    # ===== VERTICAL SPEEDS =====
    VERTICAL_SPEEDS = {  # In ft/s
        'LEVEL': 0,
        'CLIMB': 15,
        'DESCENT': -15
    }

    # ===== TRANSITION GATES =====
    THRESHOLDS = {
        'TAXI_DISTANCE_FROM_ORIGIN_NMI': 2,
        'CRUISING_ALTITUDE_FT': 35_000,
        'AWAITING_LANDING_DISTANCE_NMI': 10,
        'IDLE_DISTANCE_FROM_DESTINATION_NMI': 0.01,     # ~18 m; exact zero is never hit in floating point
        'GROUND_LEVEL_FT': 0
    }

    # ===== AIR TRAFFIC CONTROL =====
    CLEARANCE = {
        'WAIT_SECONDS': 120
    }

    # ===== TELEMETRY =====
    REPORT = {
        'MAX_RECORD_BYTES': 1024,
        'POSITION_DECIMALS': 5,
        'VALUE_DECIMALS': 2
    }

    # ===== REUSED CONSTANTS =====
    GEODESY = GeodesyConstants
