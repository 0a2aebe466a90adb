# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 5, 2026
# Last Update: Time-stamp: <2026-10-13 17:26:51 liux>
###############################################################

"""The waiting line."""

from collections import deque

from .customer import Customer
from .errors import InvariantViolation

__all__ = ["WaitingLine"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class WaitingLine(object):
    """A first-in-first-out line of customers waiting for service.

    The line may have a capacity, in which case an arriving customer
    is rejected if the line is already full. The line may also have a
    maximum wait, in which case a customer who has been waiting longer
    than that by the time a server could take it, leaves the line
    without being served (the customer balks). Customers put back by
    an eviction go to the front of the line and are always accepted,
    even if the line is full.

    """

    def __init__(self, capacity=None, max_wait=None):
        self.capacity = capacity
        self.max_wait = max_wait
        self._queue = deque()
        self.rejected = 0
        self.balked = 0

    def __len__(self):
        return len(self._queue)

    def __iter__(self):
        return iter(self._queue)

    def full(self):
        """Return whether the line has reached its capacity."""
        return self.capacity is not None and len(self._queue) >= self.capacity

    def try_admit(self, customer):
        """Append the customer to the end of the line, or reject it if the
        line is full. Return True if the customer has been admitted."""
        if self.full():
            customer.move_to(Customer.OWNER_GONE)
            self.rejected += 1
            log.debug("%s rejected (line full at %d)", customer, len(self._queue))
            return False
        customer.move_to(Customer.OWNER_LINE)
        self._queue.append(customer)
        return True

    def push_front(self, customers):
        """Put the customers back at the front of the line, keeping their
        order (the first in the list ends up at the head)."""
        for c in reversed(customers):
            c.move_to(Customer.OWNER_LINE)
            self._queue.appendleft(c)

    def next_servable(self, time):
        """Return the customer at the head of the line who is still willing
        to be served at the given time, or None if there is no one left.

        Customers at the head who have waited longer than the maximum
        wait are removed from the line and marked as abandoned. The
        returned customer stays at the head of the line; it's removed
        with pop() once it's been assigned to a server.

        """

        while self._queue:
            c = self._queue[0]
            if self.max_wait is not None and c.waited(time) > self.max_wait:
                self._queue.popleft()
                c.abandoned = True
                c.move_to(Customer.OWNER_GONE)
                self.balked += 1
                log.debug("%g: %s balks after waiting %g", time, c, c.waited(time))
            else:
                return c
        return None

    def pop(self):
        """Remove and return the customer at the head of the line."""
        if not self._queue:
            errmsg = "WaitingLine.pop() from empty line"
            log.error(errmsg)
            raise InvariantViolation(errmsg)
        return self._queue.popleft()
