# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 5, 2026
# Last Update: Time-stamp: <2026-10-14 11:05:29 liux>
###############################################################

"""Servers and the server pool."""

from .customer import Customer
from .errors import InvariantViolation
from .event import infinite_time

__all__ = ["Server", "ServerPool", "discard_service", "preserve_service"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

def discard_service(customer, left):
    """Eviction policy: the service of an evicted customer is thrown away
    and a new service time will be drawn when the customer is assigned
    to a server again."""
    customer.residual = None

def preserve_service(customer, left):
    """Eviction policy: an evicted customer keeps the service time that
    was left and resumes with it when assigned to a server again."""
    customer.residual = left

class Server(object):
    """A server slot, which is either idle or serving one customer."""

    def __init__(self, idx):
        self.idx = idx
        self.busy = False
        self.busy_until = infinite_time
        self.current = None

    def __str__(self):
        if self.busy:
            return "server(%d, busy until %g)" % (self.idx, self.busy_until)
        else:
            return "server(%d, idle)" % self.idx

class ServerPool(object):
    """A fixed number of server slots.

    At any time only the slots with index below the number of enabled
    servers (as given by the server schedule) may take new customers.
    Whenever there is a choice, the idle server with the lowest index
    is picked first.

    """

    def __init__(self, size, draw, eviction=discard_service):
        """Create a server pool with 'size' server slots; 'draw' is a
        function (with no arguments) that returns a fresh service time
        and 'eviction' is the policy applied to customers whose service
        is interrupted by a shrinking schedule."""

        self.servers = [Server(i) for i in range(size)]
        self.draw = draw
        self.eviction = eviction

    def __len__(self):
        return len(self.servers)

    def find_idle(self, active):
        """Return the index of the lowest idle server among the first
        'active' ones, or None if they are all busy."""
        for s in self.servers[:active]:
            if not s.busy:
                return s.idx
        return None

    def busy_count(self, active):
        """Return the number of busy servers among the first 'active' ones."""
        return sum(1 for s in self.servers[:active] if s.busy)

    def in_service(self):
        """Return the number of customers being served by all servers."""
        return sum(1 for s in self.servers if s.busy)

    def next_departure(self, active):
        """Return the earliest departure time among the first 'active'
        servers and the index of that server, or (infinity, None) if
        none of them is busy."""
        t, idx = infinite_time, None
        for s in self.servers[:active]:
            if s.busy and s.busy_until < t:
                t, idx = s.busy_until, s.idx
        return t, idx

    def assign(self, idx, customer, time):
        """Start serving the customer at the given server.

        The service time is either newly drawn, or the service time
        left from an earlier interrupted service if the eviction
        policy has kept one for the customer.

        """

        s = self.servers[idx]
        if s.busy:
            errmsg = "ServerPool.assign(%s) to busy %s" % (customer, s)
            log.error(errmsg)
            raise InvariantViolation(errmsg)

        if customer.residual is not None:
            duration = customer.residual
            customer.residual = None
        else:
            duration = self.draw()
        customer.move_to(Customer.OWNER_SERVER)
        customer.begin_service(idx, time, duration)
        s.busy = True
        s.busy_until = customer.departure_time
        s.current = customer
        log.debug("%g: %s starts service at server %d until %g",
                  time, customer, idx, s.busy_until)

    def release(self, idx):
        """Make the server idle and return the customer it was serving."""
        s = self.servers[idx]
        if not s.busy:
            errmsg = "ServerPool.release() from idle %s" % s
            log.error(errmsg)
            raise InvariantViolation(errmsg)
        c = s.current
        s.busy = False
        s.busy_until = infinite_time
        s.current = None
        return c

    def reconcile(self, time, active, line):
        """Evict the customers from the servers that are no longer enabled.

        Every busy server with index at or above 'active' is made idle;
        its customer is put back at the front of the waiting line (in
        order of arrival if there are more than one) after the eviction
        policy has decided what to do with the service left. Return the
        list of evicted customers.

        """

        evicted = []
        for s in self.servers[active:]:
            if s.busy:
                c = self.release(s.idx)
                left = c.interrupt(time)
                self.eviction(c, left)
                evicted.append(c)
                log.debug("%g: %s evicted from server %d (%g left)", time, c, s.idx, left)
        if evicted:
            evicted.sort(key=lambda c: c.arrival_time)
            line.push_front(evicted)
        return evicted
