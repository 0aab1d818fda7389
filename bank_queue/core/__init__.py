"""Core components of the bank queue simulation."""

from .base import Customer, ServerSlot
from .queue import WaitingLine
from .pool import ServerPool
from .statistics import StatsAccumulator

__all__ = [
    'Customer',
    'ServerSlot',
    'WaitingLine',
    'ServerPool',
    'StatsAccumulator',
]
