"""Simulation configuration and validation."""

import json
import logging
import math
from dataclasses import asdict, dataclass, fields
from numbers import Integral, Real
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SIMULATION_MINUTES = 480  # 8 hour banking day
SERVICE_MIN = 2
SERVICE_MAX = 3
DRAIN_STAMPS = ('elapsed', 'close')


def require_non_negative(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a number >= 0, got {value!r}")


def require_int_at_least(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")


@dataclass
class SimulationConfig:
    """
    Parameters of one simulated banking day.

    Args:
        arrival_rate: Mean customer arrivals per minute (lambda).
        teller_count: Number of tellers; values below 1 are raised to 1.
        simulation_minutes: Length of the window in which customers arrive.
        service_min: Shortest service time in minutes.
        service_max: Longest service time in minutes.
        seed: Random seed, None for a fresh unpredictable run.
        drain_stamp: How service starts after closing are stamped.
            'elapsed' uses the actual minute, 'close' uses the closing
            minute for every customer served after hours.
    """
    arrival_rate: float
    teller_count: int = 1
    simulation_minutes: int = SIMULATION_MINUTES
    service_min: int = SERVICE_MIN
    service_max: int = SERVICE_MAX
    seed: Optional[int] = None
    drain_stamp: str = 'elapsed'

    def __post_init__(self):
        require_non_negative('arrival_rate', self.arrival_rate)
        self.arrival_rate = float(self.arrival_rate)

        if isinstance(self.teller_count, bool) or not isinstance(self.teller_count, Integral):
            raise ValueError(f"teller_count must be an integer, got {self.teller_count!r}")
        if self.teller_count < 1:
            logger.info("teller_count %d raised to 1", self.teller_count)
            self.teller_count = 1
        self.teller_count = int(self.teller_count)

        require_int_at_least('simulation_minutes', self.simulation_minutes, 0)
        require_int_at_least('service_min', self.service_min, 1)
        require_int_at_least('service_max', self.service_max, self.service_min)
        if self.seed is not None:
            require_int_at_least('seed', self.seed, 0)
        if self.drain_stamp not in DRAIN_STAMPS:
            raise ValueError(
                f"drain_stamp must be one of {', '.join(DRAIN_STAMPS)}, got {self.drain_stamp!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        """Build a configuration from a mapping of field names to values."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown configuration keys: {', '.join(unknown)}")
        if 'arrival_rate' not in data:
            raise ValueError("configuration is missing 'arrival_rate'")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: str) -> Dict[str, Any]:
    """Read raw configuration values from a JSON file."""
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"malformed configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"configuration file {path} must contain a JSON object")
    return data
