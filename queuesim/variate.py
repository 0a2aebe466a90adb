# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 3, 2026
# Last Update: Time-stamp: <2026-10-14 08:47:52 liux>
###############################################################

"""Random variate source for interarrival and service times."""

# numpy and scipy must be installed as additional python packages
import numpy as np
import scipy.stats as stats

from .errors import ConfigurationError

__all__ = ["ExponentialSource"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class ExponentialSource(object):
    """A source of exponentially distributed durations.

    The source keeps a batch of standard exponential variates drawn
    from scipy's exponential distribution on top of its own numpy
    random state; each call to exponential() consumes one variate from
    the batch and scales it by the given rate. Two sources created
    with the same seed produce exactly the same sequence of durations
    (as long as they are asked for the same rates in the same order),
    which is what makes a simulation run reproducible.

    The simulator accepts any object that provides an exponential()
    method with the same signature; this class is only the default.

    """

    def __init__(self, seed=None, batch=100):
        """Create a variate source.

        Args:
            seed (int): the seed for the underlying numpy random
                state; if ignored, the random state is seeded from
                the operating system and the sequence is not
                reproducible

            batch (int): the number of variates to be drawn from the
                distribution at a time; the default is 100

        """

        if not isinstance(batch, int) or batch <= 0:
            errmsg = "ExponentialSource(batch=%r) non-positive integer" % batch
            log.error(errmsg)
            raise ConfigurationError(errmsg)
        self.seed = seed
        self.batch = batch
        self._rv = stats.expon()
        self._rs = np.random.RandomState(seed)
        self._pool = []

    def _refill(self):
        # reversed so that we can pop from the end in draw order
        xs = self._rv.rvs(size=self.batch, random_state=self._rs)
        self._pool = [float(x) for x in xs[::-1]]

    def standard(self):
        """Return a standard exponential variate (with mean one), which is
        guaranteed to be strictly positive and finite."""
        while True:
            if not self._pool:
                self._refill()
            x = self._pool.pop()
            # a zero would only come from a uniform of exactly zero
            if 0 < x < np.inf:
                return x

    def exponential(self, rate):
        """Return an exponentially distributed duration with the given rate
        (the mean of the duration is 1/rate)."""

        if not rate > 0:
            errmsg = "ExponentialSource.exponential(rate=%r) non-positive rate" % rate
            log.error(errmsg)
            raise ConfigurationError(errmsg)
        return self.standard()/rate

    def spawn(self, n):
        """Return a list of n independent sources, each seeded from this
        source's random state; they are meant for repeated runs of the
        same model, one source per run."""
        seeds = self._rs.randint(0, 2**31-1, size=n)
        return [ExponentialSource(int(s), self.batch) for s in seeds]
