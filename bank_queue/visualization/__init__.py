"""Visualization utilities for the bank queue simulation."""

from .plotting import (
    plot_wait_distribution,
    plot_queue_length,
    plot_arrival_fit,
    create_performance_report
)

__all__ = [
    'plot_wait_distribution',
    'plot_queue_length',
    'plot_arrival_fit',
    'create_performance_report'
]
