import pytest

import queuesim
from queuesim import ConfigurationError, infinite_time

def test_constant():
    s = queuesim.make_schedule(3)
    assert isinstance(s, queuesim.ConstantSchedule)
    assert s.max_count == 3
    assert s.active_count(0) == 3
    assert s.active_count(1e9) == 3
    assert s.next_change(0) == infinite_time
    assert s.server_hours(2.5) == 7.5
    assert s.periods(4) == [(0, 4, 3)]

def test_steps():
    s = queuesim.make_schedule([(0, 2), (2, 4), (5, 3)])
    assert s.max_count == 4
    assert [s.active_count(t) for t in (0, 1.99, 2, 4.5, 5, 7.9, 100)] == \
           [2, 2, 4, 4, 3, 3, 3]
    assert s.next_change(0) == 2
    assert s.next_change(2) == 5
    assert s.next_change(3.3) == 5
    assert s.next_change(5) == infinite_time
    assert s.period_index(4.99) == 1

def test_active_count_is_pure():
    s = queuesim.make_schedule([(0, 1), (0.5, 2)])
    assert [s.active_count(0.7) for _ in range(3)] == [2, 2, 2]

def test_shift_server_hours():
    s = queuesim.make_schedule([(0, 2), (2, 4), (5, 3)])
    assert s.periods(8.0) == [(0, 2, 2), (2, 5, 4), (5, 8.0, 3)]
    assert s.server_hours(8.0) == 25
    # periods after the end are left out, the last one is cut short
    assert s.periods(3.0) == [(0, 2, 2), (2, 3.0, 4)]
    assert s.server_hours(3.0) == 8

def test_existing_schedule_passes_through():
    s = queuesim.StepSchedule([(0, 1)])
    assert queuesim.make_schedule(s) is s

@pytest.mark.parametrize("servers", [
    0, -2, True, 1.5,
    [],
    [(1, 2)],               # must start at zero
    [(0, 2), (2, 0)],       # non-positive count
    [(0, 2), (3, 1), (3, 2)],  # thresholds not increasing
    [(0, 2), (5, 1), (4, 3)],
    [(0, 2.5)],
    [(0, 1), (-1, 1)],
    "abc",
])
def test_bad_schedules(servers):
    with pytest.raises(ConfigurationError):
        queuesim.make_schedule(servers)
