"""Teller pool implementation."""

import logging
from typing import Callable, List

from bank_queue.core.base import Customer, ServerSlot
from bank_queue.core.queue import WaitingLine
from bank_queue.core.statistics import StatsAccumulator

logger = logging.getLogger(__name__)


class ServerPool:
    """Fixed number of tellers working in parallel off a single line."""

    def __init__(self,
                 num_servers: int,
                 service_time_distribution: Callable[[], int]):
        if num_servers < 1:
            raise ValueError(f"num_servers must be >= 1, got {num_servers}")
        self.num_servers = num_servers
        self.service_time_distribution = service_time_distribution
        self.slots = [ServerSlot(slot_id=i) for i in range(num_servers)]

        # Additional metrics
        self.customers_served = 0
        self.total_service_time = 0
        self.busy_minutes = 0

    def advance(self, stats: StatsAccumulator) -> int:
        """
        Tick every busy teller down by one minute.

        Customers whose service ends have their wait recorded in ``stats``
        and leave; their tellers are idle again and can be refilled in the
        same minute. Returns the number of customers that finished.
        """
        finished = 0
        for slot in self.slots:
            if not slot.busy:
                continue
            self.busy_minutes += 1
            customer = slot.tick()
            if customer is not None:
                stats.add(customer.wait_time())
                self.customers_served += 1
                finished += 1
        return finished

    def refill(self, line: WaitingLine, minute: int) -> int:
        """
        Hand the head of the line to each idle teller, in teller order.
        Each teller takes at most one customer per call. Returns the
        number of customers assigned.
        """
        assigned = 0
        for slot in self.slots:
            if slot.busy:
                continue
            customer = line.pop_front()
            if customer is None:
                break
            service_time = self.service_time_distribution()
            slot.assign(customer, minute, service_time)
            self.total_service_time += service_time
            assigned += 1
            logger.debug("minute %d: teller %d serves customer %d for %d min",
                         minute, slot.slot_id, customer.customer_id, service_time)
        return assigned

    def any_busy(self) -> bool:
        """True while at least one teller is serving."""
        return any(slot.busy for slot in self.slots)

    def busy_count(self) -> int:
        """Number of tellers currently serving."""
        return sum(1 for slot in self.slots if slot.busy)

    def occupants(self) -> List[Customer]:
        """Customers in service, in teller order."""
        return [slot.occupant for slot in self.slots if slot.occupant is not None]

    def average_service_time(self) -> float:
        """Calculate average assigned service time."""
        started = self.customers_served + self.busy_count()
        if started > 0:
            return self.total_service_time / started
        return 0.0

    def server_utilization(self, elapsed_minutes: int) -> float:
        """Fraction of teller-minutes spent serving."""
        if elapsed_minutes > 0 and self.num_servers > 0:
            return min(self.busy_minutes / (elapsed_minutes * self.num_servers), 1.0)
        return 0.0
