"""Wait time statistics."""

from typing import Dict, List, Optional, Tuple

import numpy as np


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, halves away from zero (np.rint rounds to even)."""
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


class StatsAccumulator:
    """
    Collects one wait sample per completed customer.

    Samples keep their insertion order. Every statistic is computed from the
    full sample set when queried, so repeated queries give identical results
    and none of them reorders the stored samples.
    """

    def __init__(self):
        self._samples: List[float] = []
        self._max_wait: Optional[float] = None

    def add(self, wait: float) -> None:
        """Record a completed customer's wait in minutes."""
        wait = float(wait)
        self._samples.append(wait)
        if self._max_wait is None or wait > self._max_wait:
            self._max_wait = wait

    @property
    def samples(self) -> Tuple[float, ...]:
        return tuple(self._samples)

    @property
    def count(self) -> int:
        return len(self._samples)

    def has_data(self) -> bool:
        return bool(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def mean(self) -> float:
        """Arithmetic mean of the waits."""
        if not self._samples:
            return 0.0
        return float(np.mean(self._samples))

    def median(self) -> float:
        """Median of a sorted copy; average of the two middle values for even counts."""
        if not self._samples:
            return 0.0
        ordered = sorted(self._samples)
        n = len(ordered)
        if n % 2 == 0:
            return (ordered[n // 2 - 1] + ordered[n // 2]) / 2.0
        return ordered[n // 2]

    def mode(self) -> int:
        """
        Most frequent wait after rounding to whole minutes.
        Ties go to the smallest value.
        """
        if not self._samples:
            return 0
        rounded = round_half_away(np.asarray(self._samples, dtype=float)).astype(int)
        # unique sorts its values and argmax returns the first maximum,
        # so ties resolve to the lowest value
        values, counts = np.unique(rounded, return_counts=True)
        return int(values[np.argmax(counts)])

    def stddev(self) -> float:
        """Population standard deviation (divides by n)."""
        if not self._samples:
            return 0.0
        return float(np.std(self._samples, ddof=0))

    def max(self) -> float:
        """Longest wait recorded, 0 when empty."""
        if self._max_wait is None:
            return 0.0
        return self._max_wait

    def summary(self) -> Dict:
        """Get all wait statistics as a dictionary."""
        return {
            'count': self.count,
            'mean': self.mean(),
            'median': self.median(),
            'mode': self.mode(),
            'stddev': self.stddev(),
            'max': self.max(),
        }
