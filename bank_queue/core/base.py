"""Base entities for the bank queue simulation."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    """Represents a customer from arrival until the end of service."""
    customer_id: int
    arrival_minute: int
    service_start_minute: Optional[int] = None

    def start_service(self, minute: int) -> None:
        """Stamp the minute a teller accepted this customer (only once)."""
        if self.service_start_minute is not None:
            raise RuntimeError(
                f"customer {self.customer_id} already started service "
                f"at minute {self.service_start_minute}"
            )
        self.service_start_minute = minute

    def wait_time(self) -> float:
        """Minutes spent in line before service started."""
        if self.service_start_minute is None:
            raise RuntimeError(f"customer {self.customer_id} has not started service")
        return float(self.service_start_minute - self.arrival_minute)


@dataclass
class ServerSlot:
    """One teller: idle, or busy with a customer and the minutes left."""
    slot_id: int
    remaining_minutes: int = 0
    occupant: Optional[Customer] = None

    @property
    def busy(self) -> bool:
        return self.occupant is not None

    def assign(self, customer: Customer, minute: int, service_time: int) -> None:
        """Start serving a customer taken from the line."""
        customer.start_service(minute)
        self.occupant = customer
        self.remaining_minutes = service_time

    def tick(self) -> Optional[Customer]:
        """
        Advance the slot by one minute.
        Returns the finished customer if service completed, else None.
        """
        if self.occupant is None:
            return None

        self.remaining_minutes -= 1
        if self.remaining_minutes > 0:
            return None

        finished = self.occupant
        self.occupant = None
        self.remaining_minutes = 0
        return finished
