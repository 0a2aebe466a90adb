# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 4, 2026
# Last Update: Time-stamp: <2026-10-13 21:40:18 liux>
###############################################################

"""Server schedules: the number of enabled servers as a function of
simulated time."""

import bisect
from numbers import Integral, Real

from .errors import ConfigurationError
from .event import infinite_time

__all__ = ["ConstantSchedule", "StepSchedule", "make_schedule"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class StepSchedule(object):
    """A server schedule that changes over shift periods.

    The schedule is a finite list of (threshold, count) breakpoints,
    ordered by threshold, the first one at time zero: from each
    threshold until the next one (or forever for the last one),
    'count' servers are enabled. For example, [(0, 2), (2, 4), (5, 3)]
    means two servers for [0,2), four servers for [2,5), and three
    servers from time 5 onward.

    The schedule is a pure function of time: it holds no state other
    than the breakpoints themselves.

    """

    def __init__(self, breakpoints):
        try:
            bps = [(t, c) for t, c in breakpoints]
        except (TypeError, ValueError):
            errmsg = "StepSchedule(breakpoints=%r) not a list of (time, count) pairs" % (breakpoints,)
            log.error(errmsg)
            raise ConfigurationError(errmsg)
        if len(bps) == 0:
            errmsg = "StepSchedule() empty schedule"
            log.error(errmsg)
            raise ConfigurationError(errmsg)
        for t, c in bps:
            if isinstance(t, bool) or not isinstance(t, Real) or t < 0 or t == infinite_time:
                errmsg = "StepSchedule() bad threshold %r" % (t,)
                log.error(errmsg)
                raise ConfigurationError(errmsg)
            if isinstance(c, bool) or not isinstance(c, Integral) or c <= 0:
                errmsg = "StepSchedule() bad server count %r at time %g" % (c, t)
                log.error(errmsg)
                raise ConfigurationError(errmsg)
        if bps[0][0] != 0:
            errmsg = "StepSchedule() first threshold must be zero (got %g)" % bps[0][0]
            log.error(errmsg)
            raise ConfigurationError(errmsg)
        for (t0, _), (t1, _) in zip(bps, bps[1:]):
            if t1 <= t0:
                errmsg = "StepSchedule() thresholds not increasing (%g after %g)" % (t1, t0)
                log.error(errmsg)
                raise ConfigurationError(errmsg)

        self.breakpoints = tuple((t, int(c)) for t, c in bps)
        self._times = [t for t, _ in self.breakpoints]
        self.max_count = max(c for _, c in self.breakpoints)

    def __str__(self):
        return "schedule(%s)" % ", ".join("%g:%d" % bp for bp in self.breakpoints)

    def _index(self, time):
        # index of the breakpoint in effect at the given time
        return max(bisect.bisect_right(self._times, time)-1, 0)

    def period_index(self, time):
        """Return the index of the shift period the given time falls in."""
        return self._index(time)

    def active_count(self, time):
        """Return the number of servers enabled at the given time."""
        return self.breakpoints[self._index(time)][1]

    def next_change(self, time):
        """Return the first threshold strictly after the given time, or
        infinity if the schedule never changes again."""
        i = bisect.bisect_right(self._times, time)
        if i < len(self._times):
            return self._times[i]
        else:
            return infinite_time

    def periods(self, end):
        """Return the list of (start, stop, count) periods covering the time
        from zero up to 'end'; periods starting at or after 'end' are
        left out, and the last period is closed at 'end'."""
        ret = []
        for i, (t, c) in enumerate(self.breakpoints):
            if t >= end and i > 0:
                break
            if i+1 < len(self.breakpoints):
                stop = min(self.breakpoints[i+1][0], end)
            else:
                stop = end
            ret.append((t, stop, c))
        return ret

    def server_hours(self, end):
        """Return the total server-time made available from zero up to
        'end', which is the integral of active_count() over [0, end]."""
        return sum((stop-start)*c for start, stop, c in self.periods(end))

class ConstantSchedule(StepSchedule):
    """A fixed number of servers, all enabled all the time."""

    def __init__(self, count):
        if isinstance(count, bool) or not isinstance(count, Integral) or count <= 0:
            errmsg = "ConstantSchedule(count=%r) non-positive integer" % (count,)
            log.error(errmsg)
            raise ConfigurationError(errmsg)
        super().__init__([(0, count)])

    def __str__(self):
        return "schedule(%d)" % self.max_count

def make_schedule(servers):
    """Return a schedule from either a server count or a list of (time,
    count) breakpoints; an existing schedule is returned as is."""
    if isinstance(servers, StepSchedule):
        return servers
    if isinstance(servers, Integral) and not isinstance(servers, bool):
        return ConstantSchedule(servers)
    return StepSchedule(servers)
