import pytest

import queuesim

def test_positive_and_finite():
    src = queuesim.ExponentialSource(seed=1, batch=7)
    xs = [src.exponential(3.0) for _ in range(1000)]
    assert all(0 < x < float('inf') for x in xs)

def test_mean_matches_rate():
    src = queuesim.ExponentialSource(seed=2)
    n = 20000
    m = sum(src.exponential(4.0) for _ in range(n))/n
    assert m == pytest.approx(0.25, rel=0.05)

def test_same_seed_same_sequence():
    a = queuesim.ExponentialSource(seed=42)
    b = queuesim.ExponentialSource(seed=42)
    assert [a.exponential(2.0) for _ in range(250)] == \
           [b.exponential(2.0) for _ in range(250)]

def test_different_seeds_differ():
    a = queuesim.ExponentialSource(seed=1)
    b = queuesim.ExponentialSource(seed=2)
    assert [a.exponential(1.0) for _ in range(10)] != \
           [b.exponential(1.0) for _ in range(10)]

def test_spawn():
    srcs = queuesim.ExponentialSource(seed=5).spawn(3)
    assert len(srcs) == 3
    firsts = [s.exponential(1.0) for s in srcs]
    assert len(set(firsts)) == 3
    again = [s.exponential(1.0) for s in queuesim.ExponentialSource(seed=5).spawn(3)]
    assert firsts == again

@pytest.mark.parametrize("rate", [0, -1.5])
def test_bad_rate(rate):
    with pytest.raises(queuesim.ConfigurationError):
        queuesim.ExponentialSource(seed=1).exponential(rate)

def test_bad_batch():
    with pytest.raises(queuesim.ConfigurationError):
        queuesim.ExponentialSource(batch=0)
