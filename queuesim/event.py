# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 4, 2026
# Last Update: Time-stamp: <2026-10-14 09:12:44 liux>
###############################################################

"""Simulation events and the simulation clock."""

from .errors import InvariantViolation

__all__ = ["Event", "Clock", "infinite_time"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# the end of simulation time
infinite_time = float('inf')

class Event(object):
    """The next thing to happen in the simulation.

    There are only three kinds of events: a customer arrives, a server
    finishes serving its customer (in which case 'server' is the index
    of the server), or the server schedule switches to another shift.

    """

    ARRIVAL     = 0
    DEPARTURE   = 1
    SHIFT       = 2

    _names = ("arrival", "departure", "shift")

    def __init__(self, kind, time, server=None):
        self.kind = kind
        self.time = time
        self.server = server

    def __str__(self):
        if self.kind == Event.DEPARTURE:
            return "%g: %s(server=%d)" % (self.time, Event._names[self.kind], self.server)
        else:
            return "%g: %s" % (self.time, Event._names[self.kind])

    def __repr__(self):
        return self.__str__()

class Clock(object):
    """The simulation clock and the next-event selector.

    The clock keeps the current simulation time, the time of the last
    processed event, and the scheduled time of the next external
    arrival. Selecting the next event does not move the clock; the
    simulator moves the clock with advance() only after the elapsed
    interval has been accounted for in the statistics.

    """

    def __init__(self, init_time=0):
        self.now = init_time
        self.last = init_time
        self.next_arrival = infinite_time
        self.last_shift = init_time  # time of the last processed shift change

    def select_next(self, pool, schedule):
        """Return the next event, or None if nothing will ever happen.

        The next departure is the earliest 'busy_until' among the busy
        servers currently enabled by the schedule, ties going to the
        server with the lowest index. An arrival is chosen only if it
        comes strictly before the next departure. A shift change
        goes ahead of an arrival at the same time, but after a
        departure at the same time, so that a customer whose service
        ends right at the boundary completes rather than being evicted;
        either way no statistics interval straddles a shift boundary.

        """

        active = schedule.active_count(self.now)
        departure, server = pool.next_departure(active)
        shift = schedule.next_change(self.last_shift)

        if shift < departure and shift <= self.next_arrival:
            return Event(Event.SHIFT, shift)
        elif self.next_arrival < departure:
            return Event(Event.ARRIVAL, self.next_arrival)
        elif departure < infinite_time:
            return Event(Event.DEPARTURE, departure, server)
        else:
            return None

    def elapsed(self, time):
        """Return the interval from the current time to the given time."""
        intv = time-self.now
        if intv < 0:
            errmsg = "Clock.elapsed(time=%r) earlier than now (%r)" % (time, self.now)
            log.error(errmsg)
            raise InvariantViolation(errmsg)
        return intv

    def advance(self, time):
        """Move the clock to the given time, which must not be in the past."""
        if time < self.now:
            errmsg = "Clock.advance(time=%r) earlier than now (%r)" % (time, self.now)
            log.error(errmsg)
            raise InvariantViolation(errmsg)
        self.last = self.now
        self.now = time
