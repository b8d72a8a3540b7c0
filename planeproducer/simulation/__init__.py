"""
simulation - Drives aircraft through simulated time
"""

from .driver import SimulationDriver
from .exceptions import SimulationError, SimulationInProgressError

__all__ = ['SimulationDriver', 'SimulationError', 'SimulationInProgressError']
