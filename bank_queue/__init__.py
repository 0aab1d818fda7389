"""Bank queue simulation package."""

from bank_queue.core import Customer, ServerSlot, WaitingLine, ServerPool, StatsAccumulator
from bank_queue.system import SimulationConfig, SimulationClock, Phase, run_bank_day

__all__ = [
    'Customer',
    'ServerSlot',
    'WaitingLine',
    'ServerPool',
    'StatsAccumulator',
    'SimulationConfig',
    'SimulationClock',
    'Phase',
    'run_bank_day'
]
