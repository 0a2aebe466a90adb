# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 7, 2026
# Last Update: Time-stamp: <2026-10-15 09:58:14 liux>
###############################################################

"""Simulation parameters and command-line options."""

import argparse
from numbers import Integral, Real

from .errors import ConfigurationError
from .schedule import make_schedule
from .server import discard_service

__all__ = ["SimulationConfig", "parse_args"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

def _positive(x):
    return isinstance(x, Real) and not isinstance(x, bool) and x > 0 and x != float('inf')

class SimulationConfig(object):
    """The parameters of a simulation run.

    Args:
        arrival_rate (float): the rate of customer arrivals (lambda);
            must be positive

        service_rate (float): the service rate of each server (mu);
            must be positive

        servers (int or list): either a fixed number of servers, or
            a list of (time, count) breakpoints of a shift schedule,
            starting at time zero with strictly increasing times; the
            default is one server

        capacity (int): the maximum number of customers waiting in
            line; if ignored, the line is unbounded

        max_wait (float): the longest a customer is willing to wait
            in line before service; if ignored, customers never balk

        horizon (float): stop the simulation at this time

        arrivals (int): stop accepting customers after this many
            arrivals, and then serve whoever remains in the system;
            exactly one of 'horizon' and 'arrivals' must be provided

        eviction (function): the policy for customers whose service is
            interrupted because their server is disabled by the
            schedule; the default is to discard the service

    The parameters are checked when the configuration is created; a
    ConfigurationError is raised if any of them is bad.

    """

    def __init__(self, arrival_rate, service_rate, servers=1, capacity=None,
                 max_wait=None, horizon=None, arrivals=None, eviction=discard_service):
        self.arrival_rate = arrival_rate
        self.service_rate = service_rate
        self.servers = servers
        self.capacity = capacity
        self.max_wait = max_wait
        self.horizon = horizon
        self.arrivals = arrivals
        self.eviction = eviction
        self.schedule = None
        self.validate()

    def __str__(self):
        s = "lambda=%g, mu=%g, %s" % (self.arrival_rate, self.service_rate, self.schedule)
        if self.capacity is not None:
            s += ", capacity=%d" % self.capacity
        if self.max_wait is not None:
            s += ", max_wait=%g" % self.max_wait
        if self.horizon is not None:
            s += ", horizon=%g" % self.horizon
        else:
            s += ", arrivals=%d" % self.arrivals
        return s

    def _fail(self, errmsg):
        log.error(errmsg)
        raise ConfigurationError(errmsg)

    def validate(self):
        """Check the parameters and build the server schedule."""

        if not _positive(self.arrival_rate):
            self._fail("SimulationConfig(arrival_rate=%r) non-positive rate" % (self.arrival_rate,))
        if not _positive(self.service_rate):
            self._fail("SimulationConfig(service_rate=%r) non-positive rate" % (self.service_rate,))
        if self.capacity is not None and \
           (isinstance(self.capacity, bool) or not isinstance(self.capacity, Integral) or
            self.capacity < 1):
            self._fail("SimulationConfig(capacity=%r) must be a positive integer" % (self.capacity,))
        if self.max_wait is not None and not _positive(self.max_wait):
            self._fail("SimulationConfig(max_wait=%r) non-positive threshold" % (self.max_wait,))

        if self.horizon is None and self.arrivals is None:
            self._fail("SimulationConfig() requires either horizon or arrivals")
        elif self.horizon is not None and self.arrivals is not None:
            self._fail("SimulationConfig(horizon=%r, arrivals=%r) duplicate specification" %
                       (self.horizon, self.arrivals))
        elif self.horizon is not None and not _positive(self.horizon):
            self._fail("SimulationConfig(horizon=%r) non-positive horizon" % (self.horizon,))
        elif self.arrivals is not None and \
             (isinstance(self.arrivals, bool) or not isinstance(self.arrivals, Integral) or
              self.arrivals < 1):
            self._fail("SimulationConfig(arrivals=%r) must be a positive integer" % (self.arrivals,))

        if not callable(self.eviction):
            self._fail("SimulationConfig(eviction=%r) not a function" % (self.eviction,))

        # make_schedule() raises ConfigurationError on its own
        self.schedule = make_schedule(self.servers)

def parse_args(argv=None, description=None):
    """Parse the common command-line options of simulation scripts.

    The options are '-s/--seed' for the random seed, '-v/--verbose'
    for informational logging, and '-vv/--debug' for debug logging
    (which traces every event). Unknown options are left alone and
    returned with the parsed ones, so that scripts can add their own.

    Returns:
        a tuple (args, remaining), where 'args' is the namespace of the
        parsed options and 'remaining' is a list of the options not
        recognized

    """

    parser = argparse.ArgumentParser(description=description, add_help=False)
    parser.add_argument("-s", "--seed", type=int, metavar='SEED', default=None,
                        help="set random seed")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable verbose information")
    parser.add_argument("-vv", "--debug", action="store_true",
                        help="enable debug information")
    args, remaining = parser.parse_known_args(argv)

    if args.seed is not None and (args.seed < 0 or args.seed >= 2**32):
        errmsg = "command-line argument --seed or -s must be a 32-bit integer"
        log.error(errmsg)
        raise ConfigurationError(errmsg)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    elif args.verbose:
        logging.basicConfig(level=logging.INFO)
    return args, remaining
