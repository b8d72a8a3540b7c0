# planeproducer/config.py
"""Run-time configuration for aircraft simulations."""
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .airplane.constants import AircraftConstants
from .airplane.systems.clock import SimulatedClock, WallClock
from .exceptions import ConfigurationError

CLOCK_TYPES = ('simulated', 'wall')

@dataclass
class SimulationConfig:
    """Configuration parameters for one aircraft simulation."""
    clearance_wait_s: float = AircraftConstants.CLEARANCE['WAIT_SECONDS']
    real_time_step_s: float = 1.0
    clock: str = 'simulated'

    def __post_init__(self):
        if self.clearance_wait_s < 0:
            raise ConfigurationError('clearance_wait_s', "Clearance wait must be non-negative")
        if self.real_time_step_s < 0:
            raise ConfigurationError('real_time_step_s', "Real-time step must be non-negative")
        if self.clock not in CLOCK_TYPES:
            raise ConfigurationError('clock', f"Clock must be one of {CLOCK_TYPES}")

    def make_clock(self):
        """Builds the clock that clearance timers are scheduled on."""
        return WallClock() if self.clock == 'wall' else SimulatedClock()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(', '.join(sorted(unknown)), "Unknown configuration keys")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Optional[Union[str, Path]]) -> SimulationConfig:
    if path is None:
        return SimulationConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path.suffix.lower() != ".json":
        raise ConfigurationError(str(config_path), "Only JSON config files are supported")

    with config_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ConfigurationError(str(config_path), "Config root must be a JSON object")
    return SimulationConfig.from_dict(raw)
