# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 8, 2026
# Last Update: Time-stamp: <2026-10-16 10:47:31 liux>
###############################################################

import time

from .customer import Customer
from .errors import InvariantViolation
from .event import Event, Clock, infinite_time
from .line import WaitingLine
from .server import ServerPool
from .stats import StatsAccumulator
from .variate import ExponentialSource

__all__ = ["simulator", "simulate"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class simulator:
    """A simulation run of a multi-server queue.

    The simulator models a single waiting line served by a number of
    servers (a coffee shop counter or a bank teller window, say).
    Customers arrive with exponential interarrival times and are
    served with exponential service times. The number of servers can
    be fixed or follow a shift schedule; the line can have a capacity
    beyond which arriving customers are rejected; and customers can
    have a maximum wait beyond which they leave without being served.
    All of these are given by a SimulationConfig.

    Each simulator instance is one run: it's created, run until its
    stopping condition is met, and then it provides the statistics
    collected during the run. The run is fully determined by the
    configuration and the random variate source.

    A run goes through three states. It's "running" while customers
    arrive. If the run is bounded by the number of arrivals, it turns
    "draining" once the last customer has arrived, during which only
    the customers remaining in the system are served, and it's
    "stopped" when the system is empty. If the run is bounded by a
    time horizon, it's stopped right at the horizon.

    """

    # simulation run state
    STATE_RUNNING   = 0
    STATE_DRAINING  = 1
    STATE_STOPPED   = 2

    _state_names = ("running", "draining", "stopped")

    def __init__(self, config, source=None, name=None):
        """Create a simulator.

        Args:
            config (SimulationConfig): the parameters of the run

            source: the random variate source, which must provide an
                exponential(rate) method; if ignored, a new
                ExponentialSource is created with a random seed

            name (string): an optional name of the simulator, which is
                used only for logging and reporting

        """

        self.config = config
        self.source = source if source is not None else ExponentialSource()
        self.name = name if name is not None else "sim%x" % (id(self) & 0xffff)
        self.schedule = config.schedule

        self.clock = Clock()
        self.line = WaitingLine(config.capacity, config.max_wait)
        self.pool = ServerPool(self.schedule.max_count, self._draw_service, config.eviction)
        self.stats = StatsAccumulator(self.schedule, config.capacity)
        self.archive = []   # customers who have completed service
        self.arrivals = 0
        self.state = simulator.STATE_RUNNING
        self._results = None

        # performance statistics
        self._runtime = {
            "start_clock": time.time(),
            "arrival_events": 0,
            "departure_events": 0,
            "shift_events": 0,
            "evictions": 0,
        }

        log.info("creating simulator '%s' (%s)" % (self.name, config))
        self.clock.next_arrival = self._draw_arrival()

    @property
    def now(self):
        """The current simulation time."""
        return self.clock.now

    def _draw_arrival(self):
        return self.clock.now+self.source.exponential(self.config.arrival_rate)

    def _draw_service(self):
        return self.source.exponential(self.config.service_rate)

    def in_system(self):
        """Return the number of customers in line or in service."""
        return len(self.line)+self.pool.in_service()

    def peek(self):
        """Return the time of the next event, or infinity if there will be
        no more events."""
        e = self.clock.select_next(self.pool, self.schedule)
        return e.time if e is not None else infinite_time

    def run(self):
        """Run the simulation until it stops and return the statistics (a
        SimulationResults record).

        Raises:
            DegenerateResultError: if the run collected too little data
                for the statistics (e.g., no customer completed service)

        """

        while self.state != simulator.STATE_STOPPED:
            self.step()
        return self.results()

    def step(self):
        """Process only one event and return it.

        The time elapsed since the previous event is accounted for in
        the statistics (with the state of the system before the event)
        before the clock is advanced and the event is processed. If the
        run has stopped, or stops without processing an event (because
        the horizon is reached or the system is drained), the method
        returns None.

        """

        if self.state == simulator.STATE_STOPPED:
            return None
        if self.state == simulator.STATE_DRAINING and self.in_system() == 0:
            self._stop()
            return None

        e = self.clock.select_next(self.pool, self.schedule)
        horizon = self.config.horizon
        if horizon is not None and (e is None or e.time >= horizon):
            self._integrate(horizon)
            self.clock.advance(horizon)
            self._stop()
            return None
        if e is None:
            # a draining run always has someone being served
            errmsg = "simulator.step() no event with %d customers in system at %g" % \
                     (self.in_system(), self.now)
            log.error(errmsg)
            raise InvariantViolation(errmsg)

        self._integrate(e.time)
        self.clock.advance(e.time)
        if e.kind == Event.ARRIVAL:
            self._arrive()
        elif e.kind == Event.DEPARTURE:
            self._depart(e.server)
        else:
            self._shift()

        # the schedule may have changed since the last event
        active = self.schedule.active_count(self.now)
        evicted = self.pool.reconcile(self.now, active, self.line)
        self._runtime["evictions"] += len(evicted)
        self._dispatch(active)
        self.stats.observe(len(self.line))
        return e

    def _integrate(self, t):
        active = self.schedule.active_count(self.now)
        self.stats.integrate(self.clock.elapsed(t), len(self.line),
                             self.pool.busy_count(active), active, at=self.now)

    def _dispatch(self, active):
        # assign waiting customers to idle enabled servers, lowest first
        while len(self.line) > 0:
            idx = self.pool.find_idle(active)
            if idx is None:
                break
            c = self.line.next_servable(self.now)
            if c is None:
                break
            self.line.pop()
            self.pool.assign(idx, c, self.now)

    def _arrive(self):
        self._runtime["arrival_events"] += 1
        self.arrivals += 1
        c = Customer(self.arrivals, self.now)
        log.debug("%g: %s arrives", self.now, c)
        # served after the event if an enabled server is idle
        self.line.try_admit(c)

        if self.config.arrivals is not None and self.arrivals >= self.config.arrivals:
            log.info("%g: simulator '%s' draining after %d arrivals" %
                     (self.now, self.name, self.arrivals))
            self.state = simulator.STATE_DRAINING
            self.clock.next_arrival = infinite_time
        else:
            self.clock.next_arrival = self._draw_arrival()

    def _depart(self, idx):
        self._runtime["departure_events"] += 1
        c = self.pool.release(idx)
        c.move_to(Customer.OWNER_ARCHIVE)
        self.archive.append(c)
        self.stats.record_completion(c)
        log.debug("%g: %s departs from server %d", self.now, c, idx)

    def _shift(self):
        self._runtime["shift_events"] += 1
        self.clock.last_shift = self.now
        log.info("%g: simulator '%s' switching to %d servers" %
                 (self.now, self.name, self.schedule.active_count(self.now)))

    def _stop(self):
        self.state = simulator.STATE_STOPPED
        log.info("%g: simulator '%s' stopped (arrivals=%d, completed=%d, rejected=%d, "
                 "balked=%d, in system=%d)" %
                 (self.now, self.name, self.arrivals, len(self.archive),
                  self.line.rejected, self.line.balked, self.in_system()))

    def results(self):
        """Return the statistics of the run (a SimulationResults record);
        the statistics are reduced only once, the first time this
        method is called after the run has stopped.

        Raises:
            InvariantViolation: if the run has not stopped yet

            DegenerateResultError: if the run collected too little data

        """

        if self.state != simulator.STATE_STOPPED:
            errmsg = "simulator.results() while %s" % simulator._state_names[self.state]
            log.error(errmsg)
            raise InvariantViolation(errmsg)
        if self._results is None:
            self._results = self.stats.finalize(self.now, self.arrivals, self.line.rejected,
                                                self.line.balked, self.in_system())
        return self._results

    def show_runtime_report(self, prefix=''):
        """Print a report on the simulator's runtime performance.

        Args:
            prefix (str): all print-out lines will be prefixed by this
                string (the default is empty)

        """

        t = time.time()-self._runtime["start_clock"]
        events = self._runtime["arrival_events"]+self._runtime["departure_events"]+ \
                 self._runtime["shift_events"]
        print('%s*********** simulator performance metrics ***********' % prefix)
        print('%ssimulator name: %s' % (prefix, self.name))
        print('%ssimulator state: %s' % (prefix, simulator._state_names[self.state]))
        print('%ssimulation time: %g' % (prefix, self.now))
        print('%sexecution time: %g' % (prefix, t))
        print('%sexecuted events: %d (rate=%g)' % (prefix, events, events/t if t > 0 else 0))
        print('%sarrivals: %d' % (prefix, self._runtime["arrival_events"]))
        print('%sdepartures: %d' % (prefix, self._runtime["departure_events"]))
        print('%sshift changes: %d' % (prefix, self._runtime["shift_events"]))
        print('%sevictions: %d' % (prefix, self._runtime["evictions"]))

def simulate(config, source=None, name=None):
    """Create a simulator for the given configuration, run it, and return
    its statistics."""
    return simulator(config, source, name).run()
