# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 3, 2026
# Last Update: Time-stamp: <2026-10-11 16:02:35 liux>
###############################################################

from .errors import InvariantViolation

__all__ = ["Customer"]

class Customer(object):
    """A customer arriving at the service facility.

    A customer is created at an arrival event and is owned by exactly
    one place at any time: the waiting line, one of the servers, or
    the archive of completed customers. The 'owner' attribute records
    where the customer currently is and is changed only through
    move_to(), which refuses to place a customer somewhere it already
    is; in this way the same customer can never be held by two
    containers at once.

    """

    # where the customer is
    OWNER_NONE      = 0  # just arrived, not yet admitted
    OWNER_LINE      = 1  # waiting in line
    OWNER_SERVER    = 2  # being served
    OWNER_ARCHIVE   = 3  # completed service
    OWNER_GONE      = 4  # rejected or abandoned

    _names = ("none", "line", "server", "archive", "gone")

    def __init__(self, cid, arrival_time):
        self.cid = cid
        self._arrival_time = arrival_time
        self.service_start_time = None
        self.service_time = None
        self.departure_time = None
        self.server = None
        self.served = False
        self.abandoned = False
        self.owner = Customer.OWNER_NONE

        # remaining service time carried over an eviction (only used
        # when the service is preserved across evictions)
        self.residual = None

    @property
    def arrival_time(self):
        return self._arrival_time

    def __str__(self):
        return "customer(%d, arrived=%g, at=%s)" % \
            (self.cid, self._arrival_time, Customer._names[self.owner])

    def __repr__(self):
        return self.__str__()

    def move_to(self, owner):
        """Transfer the ownership of this customer."""
        if owner == self.owner:
            raise InvariantViolation("%s moved to where it already is" % self)
        if self.owner in (Customer.OWNER_ARCHIVE, Customer.OWNER_GONE):
            raise InvariantViolation("%s moved after leaving the system" % self)
        self.owner = owner

    def begin_service(self, server, time, duration):
        """Start (or restart after an eviction) the service of this
        customer; the start time, the service time and the departure
        time are set all at once."""
        self.server = server
        self.service_start_time = time
        self.service_time = duration
        self.departure_time = time+duration
        self.served = True

    def interrupt(self, time):
        """The service is interrupted at the given time and the customer
        goes back to waiting; return the service time left."""
        left = self.departure_time-time
        self.server = None
        self.service_start_time = None
        self.service_time = None
        self.departure_time = None
        self.served = False
        return left

    def waited(self, time):
        """Return how long the customer has been in the system."""
        return time-self._arrival_time
