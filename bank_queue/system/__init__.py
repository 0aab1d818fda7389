"""Simulation engine and configuration."""

from .config import SimulationConfig, load_config
from .clock import Phase, SimulationClock, run_bank_day

__all__ = [
    'SimulationConfig',
    'load_config',
    'Phase',
    'SimulationClock',
    'run_bank_day',
]
