import pytest

class ScriptedSource(object):
    """A variate source returning scripted durations: one list per rate.
    Once a list runs out, the source returns a duration far beyond any
    horizon used in the tests."""

    FOREVER = 1e6

    def __init__(self, script):
        self.script = dict((rate, list(xs)) for rate, xs in script.items())
        self.calls = []

    def exponential(self, rate):
        self.calls.append(rate)
        xs = self.script[rate]
        if xs:
            return xs.pop(0)
        return ScriptedSource.FOREVER

@pytest.fixture
def scripted():
    return ScriptedSource
