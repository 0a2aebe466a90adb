import pytest

import queuesim
from queuesim import Customer, WaitingLine, InvariantViolation

def customers(*times):
    return [Customer(i+1, t) for i, t in enumerate(times)]

def test_fifo():
    line = WaitingLine()
    cs = customers(0.1, 0.2, 0.3)
    for c in cs:
        assert line.try_admit(c)
    assert len(line) == 3
    assert all(c.owner == Customer.OWNER_LINE for c in cs)
    assert [line.pop() for _ in range(3)] == cs
    with pytest.raises(InvariantViolation):
        line.pop()

def test_capacity():
    line = WaitingLine(capacity=2)
    a, b, c = customers(1, 2, 3)
    assert line.try_admit(a)
    assert not line.full()
    assert line.try_admit(b)
    assert line.full()
    assert not line.try_admit(c)
    assert c.owner == Customer.OWNER_GONE
    assert line.rejected == 1
    assert list(line) == [a, b]

def test_no_duplicates():
    line = WaitingLine()
    a, = customers(1)
    line.try_admit(a)
    with pytest.raises(InvariantViolation):
        line.try_admit(a)

def test_balking_at_head():
    line = WaitingLine(max_wait=1.0)
    a, b, c = customers(0.0, 0.5, 2.0)
    for x in (a, b, c):
        line.try_admit(x)
    # at time 2.2, a and b have waited too long; c has not
    assert line.next_servable(2.2) is c
    assert a.abandoned and b.abandoned and not c.abandoned
    assert line.balked == 2
    assert len(line) == 1
    # the servable customer is not removed until popped
    assert line.next_servable(2.2) is c
    assert line.pop() is c

def test_balking_exact_threshold_is_kept():
    line = WaitingLine(max_wait=1.0)
    a, = customers(1.0)
    line.try_admit(a)
    assert line.next_servable(2.0) is a
    assert line.balked == 0

def test_balking_empties_line():
    line = WaitingLine(max_wait=0.5)
    for x in customers(0, 0.1):
        line.try_admit(x)
    assert line.next_servable(5.0) is None
    assert len(line) == 0
    assert line.balked == 2

def test_no_balking_without_threshold():
    line = WaitingLine()
    a, = customers(0)
    line.try_admit(a)
    assert line.next_servable(1e9) is a

def test_push_front():
    line = WaitingLine(capacity=1)
    a, b, c = customers(1, 2, 3)
    line.try_admit(c)
    for x in (a, b):
        x.owner = Customer.OWNER_SERVER
    # evicted customers get in even if the line is full
    line.push_front([a, b])
    assert list(line) == [a, b, c]
    assert line.rejected == 0
