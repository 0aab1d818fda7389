"""
Random variable generators for the bank queue simulation.
All draws come from a numpy Generator so a seeded run is reproducible.
"""

import math
from typing import Callable, Iterable, Optional

import numpy as np


# Largest rate drawn in one pass; exp(-rate) underflows near 708
POISSON_CHUNK_RATE = 500.0


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is None:
        return np.random.default_rng()
    return rng


# Basic distributions
def sample_poisson(rate: float, rng: Optional[np.random.Generator] = None) -> int:
    """
    Generate a Poisson distributed count for one time unit.

    Multiplies independent U(0,1) draws together until the running product
    falls to or below exp(-rate); the number of draws minus one is the count.
    Rates above POISSON_CHUNK_RATE are split into equal chunks whose counts
    are summed, since a sum of independent Poisson counts is Poisson.
    """
    if not math.isfinite(rate) or rate < 0:
        raise ValueError(f"Poisson rate must be a finite number >= 0, got {rate}")

    rng = _generator(rng)
    chunks = max(1, math.ceil(rate / POISSON_CHUNK_RATE))
    threshold = math.exp(-rate / chunks)
    total = 0
    for _ in range(chunks):
        product = 1.0
        k = 0
        while True:
            k += 1
            product *= rng.random()
            if product <= threshold:
                break
        total += k - 1
    return total


def sample_service_duration(min_m: int, max_m: int,
                            rng: Optional[np.random.Generator] = None) -> int:
    """Generate a uniform integer service time in [min_m, max_m]."""
    if max_m < min_m:
        raise ValueError(f"service range is empty: [{min_m}, {max_m}]")
    rng = _generator(rng)
    return int(rng.integers(min_m, max_m, endpoint=True))


# Distribution factory functions
def poisson_distribution(rate: float,
                         rng: Optional[np.random.Generator] = None) -> Callable[[], int]:
    """Create a per-minute Poisson arrival count function."""
    rng = _generator(rng)
    return lambda: sample_poisson(rate, rng)


def service_duration_distribution(min_m: int, max_m: int,
                                  rng: Optional[np.random.Generator] = None) -> Callable[[], int]:
    """Create a uniform integer service time function."""
    if max_m < min_m:
        raise ValueError(f"service range is empty: [{min_m}, {max_m}]")
    rng = _generator(rng)
    return lambda: sample_service_duration(min_m, max_m, rng)


def deterministic_distribution(value: int) -> Callable[[], int]:
    """Create a deterministic distribution (always returns same value)."""
    return lambda: value


def scripted_distribution(values: Iterable[int], default: int = 0) -> Callable[[], int]:
    """
    Create a distribution that replays a fixed sequence of values.

    Once the sequence is exhausted every further call returns ``default``.
    Handy for reproducing a known arrival pattern, e.g. ``[3]`` puts three
    customers in line at minute 0 and nobody afterwards.
    """
    iterator = iter(values)
    return lambda: next(iterator, default)
