#!/usr/bin/env python3
"""
Airplane Systems Package
Flight-state engine, clearance gates and the clocks that drive them
"""
from .clock import DelayedTask, SimulatedClock, WallClock
from .clearance import ClearanceGate, ClearanceState, ClearanceStatus
from .flight_state import FlightPhase, FlightStateMachine, PhasePolicy, PHASE_POLICIES

# Public API
__all__ = [
    'DelayedTask',
    'SimulatedClock',
    'WallClock',
    'ClearanceGate',
    'ClearanceState',
    'ClearanceStatus',
    'FlightPhase',
    'FlightStateMachine',
    'PhasePolicy',
    'PHASE_POLICIES'
]
