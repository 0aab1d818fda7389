"""Minute-by-minute simulation engine for one banking day."""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np

from bank_queue.core import Customer, ServerPool, StatsAccumulator, WaitingLine
from bank_queue.distributions.random_variables import (
    poisson_distribution,
    service_duration_distribution,
)
from bank_queue.system.config import SimulationConfig

logger = logging.getLogger(__name__)


class Phase(Enum):
    OPEN = 'open'
    DRAINING = 'draining'
    DONE = 'done'


class SimulationClock:
    """
    Drives the line and the tellers one minute at a time.

    While OPEN, every minute draws new arrivals. Once the window closes the
    clock keeps ticking with arrivals switched off (DRAINING) until nobody
    is waiting or being served, then stops (DONE).
    """

    def __init__(self,
                 config: SimulationConfig,
                 arrival_distribution: Optional[Callable[[], int]] = None,
                 service_time_distribution: Optional[Callable[[], int]] = None):
        self.config = config
        self.rng = np.random.default_rng(config.seed)

        if arrival_distribution is None:
            arrival_distribution = poisson_distribution(config.arrival_rate, self.rng)
        if service_time_distribution is None:
            service_time_distribution = service_duration_distribution(
                config.service_min, config.service_max, self.rng)
        self.arrival_distribution = arrival_distribution

        self.line = WaitingLine()
        self.pool = ServerPool(config.teller_count, service_time_distribution)
        self.stats = StatsAccumulator()

        self.phase = Phase.OPEN
        self.minute = 0
        self.total_arrived = 0
        self.next_customer_id = 0

        # Per-minute traces
        self.arrival_history: List[int] = []
        self.queue_length_history: List[int] = []

    @property
    def total_served(self) -> int:
        return self.stats.count

    def _service_start_minute(self) -> int:
        if self.phase is Phase.DRAINING and self.config.drain_stamp == 'close':
            return self.config.simulation_minutes
        return self.minute

    def _generate_arrivals(self) -> int:
        arrivals = int(self.arrival_distribution())
        if arrivals < 0:
            raise ValueError(f"arrival count must be >= 0, got {arrivals}")
        for _ in range(arrivals):
            self.line.push_back(Customer(customer_id=self.next_customer_id,
                                         arrival_minute=self.minute))
            self.next_customer_id += 1
        self.total_arrived += arrivals
        self.arrival_history.append(arrivals)
        return arrivals

    def step(self, arrivals_enabled: bool) -> None:
        """
        Simulate one minute: arrivals (if enabled), then service completions,
        then idle tellers take the next customers in line.
        """
        if self.phase is Phase.DONE:
            raise RuntimeError("simulation already finished")
        if arrivals_enabled and self.phase is not Phase.OPEN:
            raise RuntimeError(f"no arrivals allowed after closing (phase {self.phase.value})")

        if arrivals_enabled:
            self._generate_arrivals()
        self.pool.advance(self.stats)
        self.pool.refill(self.line, self._service_start_minute())

        self.queue_length_history.append(len(self.line))
        self.minute += 1

    def advance_phase(self) -> None:
        """Move OPEN -> DRAINING at closing time and DRAINING -> DONE once empty."""
        if self.phase is Phase.OPEN and self.minute >= self.config.simulation_minutes:
            self.phase = Phase.DRAINING
            logger.info("closed at minute %d with %d waiting and %d in service",
                        self.minute, len(self.line), self.pool.busy_count())
        if self.phase is Phase.DRAINING and self.line.is_empty() and not self.pool.any_busy():
            self.phase = Phase.DONE
            logger.info("last customer finished at minute %d", self.minute)

    def run(self) -> Dict:
        """Run the whole day and return the metrics summary."""
        logger.info("simulating %d minutes, lambda=%.3f, tellers=%d, seed=%s",
                    self.config.simulation_minutes, self.config.arrival_rate,
                    self.config.teller_count, self.config.seed)
        self.advance_phase()
        while self.phase is not Phase.DONE:
            self.step(arrivals_enabled=self.phase is Phase.OPEN)
            self.advance_phase()
        return self.get_metrics_summary()

    def get_metrics_summary(self) -> Dict:
        """Get a summary of the run's configuration, flow and wait statistics."""
        closing = self.config.simulation_minutes
        return {
            'config': self.config.to_dict(),
            'system': {
                'phase': self.phase.value,
                'end_minute': self.minute,
                'drain_minutes': max(self.minute - closing, 0),
                'total_arrived': self.total_arrived,
                'total_served': self.total_served,
                'customers_waiting': len(self.line),
                'customers_in_service': self.pool.busy_count(),
                'max_queue_length': self.line.max_length,
                'average_service_time': self.pool.average_service_time(),
                'server_utilization': self.pool.server_utilization(self.minute),
            },
            'waits': self.stats.summary() if self.stats.has_data() else None,
        }


def run_bank_day(config: SimulationConfig) -> SimulationClock:
    """Simulate one day and return the finished clock."""
    clock = SimulationClock(config)
    clock.run()
    return clock
