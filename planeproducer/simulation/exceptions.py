# planeproducer/simulation/exceptions.py

class SimulationError(Exception):
    """Base exception for simulation run errors."""
    pass

class SimulationInProgressError(SimulationError):
    """Raised when a driver is asked to start a second concurrent run."""
    def __init__(self, tail_number: str):
        self.tail_number = tail_number
        super().__init__(f"A simulation run is already in progress for {tail_number}")
