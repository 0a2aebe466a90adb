# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 6, 2026
# Last Update: Time-stamp: <2026-10-15 14:33:09 liux>
###############################################################

"""Statistics collection and reduction."""

from collections import namedtuple

import numpy as np

from .errors import InvariantViolation, DegenerateResultError

__all__ = ["StatsAccumulator", "SimulationResults", "PeriodResults",
           "average_results", "spread_results"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

SimulationResults = namedtuple("SimulationResults", [
    "avg_waiting_time",   # mean time in line of completed customers
    "avg_sojourn_time",   # mean time in system of completed customers
    "utilization",        # busy server-time over available server-time
    "idle_fraction",      # 1-utilization
    "avg_queue_length",   # time-average number in line
    "max_queue_length",   # largest number in line ever seen
    "prob_all_busy",      # fraction of time all enabled servers are busy
    "prob_full",          # fraction of time the line is full (None if unbounded)
    "prob_empty",         # fraction of time the line is empty
    "prob_rejection",     # rejected over arrivals
    "arrivals",
    "completed",
    "rejected",
    "balked",
    "in_system",          # customers still in line or in service at the end
    "elapsed",            # simulated time covered by the statistics
    "server_hours",       # available server-time over the run
    "periods",            # tuple of PeriodResults, one per shift period
])

PeriodResults = namedtuple("PeriodResults", [
    "start", "stop", "servers", "completed",
    "avg_waiting_time",   # None if no customer departed in the period
    "avg_sojourn_time",   # ... also None
    "utilization", "avg_queue_length", "prob_all_busy",
])

class _PeriodSums(object):
    """Running sums for one shift period."""

    def __init__(self):
        self.queue_area = 0.0
        self.busy_area = 0.0
        self.all_busy = 0.0
        self.completed = 0
        self.wait = 0.0
        self.sojourn = 0.0

class StatsAccumulator(object):
    """Collect the statistics of one simulation run.

    Time-weighted statistics are integrated with integrate(), which is
    expected to be called once for every event with the time elapsed
    since the previous event and the state of the system *during* that
    interval (that is, before the event changes it). Per-customer
    statistics are added with record_completion() when a customer
    leaves after service. The statistics are reduced to a
    SimulationResults record by finalize(), which can be done only
    once; afterwards the accumulator can no longer be updated.

    """

    def __init__(self, schedule, capacity=None):
        self.schedule = schedule
        self.capacity = capacity

        self.queue_area = 0.0     # integral of line length
        self.busy_area = 0.0      # integral of number of busy servers
        self.all_busy_time = 0.0
        self.full_time = 0.0
        self.empty_time = 0.0
        self.elapsed = 0.0

        self.completed = 0
        self.wait_sum = 0.0
        self.sojourn_sum = 0.0
        self.busy_sum = 0.0       # sum of service times of completed customers
        self.max_queue_length = 0

        self._periods = [_PeriodSums() for _ in schedule.breakpoints]
        self._final = None

    def _check_open(self, fn):
        if self._final is not None:
            errmsg = "StatsAccumulator.%s() after finalize()" % fn
            log.error(errmsg)
            raise InvariantViolation(errmsg)

    def integrate(self, interval, queue_length, busy, active, at=0):
        """Account for an interval during which there were 'queue_length'
        customers in line and 'busy' out of 'active' enabled servers
        were busy; 'at' is the start of the interval, which is used to
        find the shift period the interval belongs to."""

        self._check_open("integrate")
        if interval < 0:
            errmsg = "StatsAccumulator.integrate(interval=%r) negative interval" % interval
            log.error(errmsg)
            raise InvariantViolation(errmsg)

        p = self._periods[self.schedule.period_index(at)]
        self.elapsed += interval
        self.queue_area += queue_length*interval
        p.queue_area += queue_length*interval
        self.busy_area += busy*interval
        p.busy_area += busy*interval
        if active > 0 and busy == active:
            self.all_busy_time += interval
            p.all_busy += interval
        if self.capacity is not None and queue_length >= self.capacity:
            self.full_time += interval
        if queue_length == 0:
            self.empty_time += interval

    def observe(self, queue_length):
        """Account for the line length right after an event."""
        if queue_length > self.max_queue_length:
            self.max_queue_length = queue_length

    def record_completion(self, customer):
        """Account for a customer who has just completed service."""
        self._check_open("record_completion")
        w = customer.service_start_time-customer.arrival_time
        s = customer.departure_time-customer.arrival_time
        self.completed += 1
        self.wait_sum += w
        self.sojourn_sum += s
        self.busy_sum += customer.service_time

        p = self._periods[self.schedule.period_index(customer.departure_time)]
        p.completed += 1
        p.wait += w
        p.sojourn += s

    def finalize(self, end, arrivals, rejected, balked, in_system):
        """Reduce the collected statistics into a SimulationResults record.

        Waiting and sojourn times are averaged over the completed
        customers; utilization is the total service time of the
        completed customers over the server-time made available by the
        schedule during the run; the other measures are averaged over
        the elapsed simulation time, from zero up to 'end'.

        Raises:
            DegenerateResultError: if no customer has completed service
                or no simulation time has elapsed

        """

        self._check_open("finalize")
        if not end > 0:
            errmsg = "StatsAccumulator.finalize(end=%r) no simulation time elapsed" % end
            log.error(errmsg)
            raise DegenerateResultError(errmsg)
        if self.completed == 0:
            errmsg = "StatsAccumulator.finalize() no customer completed service " \
                     "in %g time units" % end
            log.error(errmsg)
            raise DegenerateResultError(errmsg)

        t = end
        hours = self.schedule.server_hours(t)
        util = self.busy_sum/hours

        periods = []
        for (start, stop, count), p in zip(self.schedule.periods(t), self._periods):
            d = stop-start
            periods.append(PeriodResults(
                start=start, stop=stop, servers=count, completed=p.completed,
                avg_waiting_time=p.wait/p.completed if p.completed > 0 else None,
                avg_sojourn_time=p.sojourn/p.completed if p.completed > 0 else None,
                utilization=p.busy_area/(d*count) if d > 0 else 0.0,
                avg_queue_length=p.queue_area/d if d > 0 else 0.0,
                prob_all_busy=p.all_busy/d if d > 0 else 0.0))

        self._final = SimulationResults(
            avg_waiting_time=self.wait_sum/self.completed,
            avg_sojourn_time=self.sojourn_sum/self.completed,
            utilization=util,
            idle_fraction=1.0-util,
            avg_queue_length=self.queue_area/t,
            max_queue_length=self.max_queue_length,
            prob_all_busy=self.all_busy_time/t,
            prob_full=self.full_time/t if self.capacity is not None else None,
            prob_empty=self.empty_time/t,
            prob_rejection=rejected/arrivals if arrivals > 0 else 0.0,
            arrivals=arrivals,
            completed=self.completed,
            rejected=rejected,
            balked=balked,
            in_system=in_system,
            elapsed=t,
            server_hours=hours,
            periods=tuple(periods))
        return self._final

    def results(self):
        """Return the finalized record, or None if not yet finalized."""
        return self._final

# the fields folded by average_results() and spread_results()
_averaged = ("avg_waiting_time", "avg_sojourn_time", "utilization", "idle_fraction",
             "avg_queue_length", "prob_all_busy", "prob_full", "prob_empty",
             "prob_rejection", "arrivals", "completed", "rejected", "balked",
             "in_system", "elapsed", "server_hours")

def _fold(records):
    records = list(records)
    if len(records) == 0:
        errmsg = "average_results() no records to average"
        log.error(errmsg)
        raise DegenerateResultError(errmsg)
    folded = {}
    for k in _averaged:
        vals = [getattr(r, k) for r in records]
        if any(v is None for v in vals):
            folded[k] = None
            continue
        folded[k] = np.asarray(vals, dtype=float)
    return records, folded

def average_results(records):
    """Return the arithmetic mean of a sequence of SimulationResults from
    independent runs, as a SimulationResults record.

    Every field is averaged, including the counters, except for the
    maximum queue length, which is the maximum over all runs. A field
    that is None in any of the records (e.g., prob_full for runs
    without capacity) is None in the result. Per-period results are
    not averaged and are left empty.

    """

    records, folded = _fold(records)
    fields = dict((k, float(np.mean(xs)) if xs is not None else None)
                  for k, xs in folded.items())
    fields["max_queue_length"] = max(r.max_queue_length for r in records)
    fields["periods"] = ()
    return SimulationResults(**fields)

def spread_results(records):
    """Return a dictionary mapping each averaged field to its standard
    deviation across the given records (None where undefined)."""
    _, folded = _fold(records)
    return dict((k, float(np.std(xs)) if xs is not None else None)
                for k, xs in folded.items())
