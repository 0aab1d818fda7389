"""Random variable distributions for the bank queue simulation."""

from .random_variables import (
    sample_poisson,
    sample_service_duration,
    poisson_distribution,
    service_duration_distribution,
    deterministic_distribution,
    scripted_distribution,
)

__all__ = [
    'sample_poisson',
    'sample_service_duration',
    'poisson_distribution',
    'service_duration_distribution',
    'deterministic_distribution',
    'scripted_distribution',
]
