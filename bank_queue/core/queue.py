"""Waiting line implementation."""

from collections import deque
from typing import Iterator, Optional

from bank_queue.core.base import Customer


class WaitingLine:
    """Unbounded FIFO line of customers waiting for a teller."""

    def __init__(self):
        self.queue = deque()
        self.max_length = 0

    def push_back(self, customer: Customer) -> None:
        """Add a customer to the tail of the line."""
        self.queue.append(customer)
        if len(self.queue) > self.max_length:
            self.max_length = len(self.queue)

    def pop_front(self) -> Optional[Customer]:
        """Remove and return the customer at the head, or None if empty."""
        if not self.queue:
            return None
        return self.queue.popleft()

    def is_empty(self) -> bool:
        """True when nobody is waiting."""
        return not self.queue

    def __len__(self) -> int:
        return len(self.queue)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self.queue)
