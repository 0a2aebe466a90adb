import logging
import pytest

import queuesim
from queuesim import SimulationConfig, ConfigurationError

def test_defaults():
    cfg = SimulationConfig(10, 15, horizon=8)
    assert cfg.schedule.max_count == 1
    assert cfg.capacity is None and cfg.max_wait is None
    assert cfg.eviction is queuesim.discard_service
    assert "lambda=10" in str(cfg)

def test_schedule():
    cfg = SimulationConfig(40, 15, servers=[(0, 2), (2, 4), (5, 3)], arrivals=100)
    assert cfg.schedule.max_count == 4
    assert "arrivals=100" in str(cfg)

@pytest.mark.parametrize("kwargs", [
    dict(arrival_rate=0, service_rate=1, horizon=1),
    dict(arrival_rate=-1, service_rate=1, horizon=1),
    dict(arrival_rate=1, service_rate=0, horizon=1),
    dict(arrival_rate=1, service_rate=float('inf'), horizon=1),
    dict(arrival_rate=1, service_rate=1, capacity=0, horizon=1),
    dict(arrival_rate=1, service_rate=1, capacity=2.5, horizon=1),
    dict(arrival_rate=1, service_rate=1, max_wait=0, horizon=1),
    dict(arrival_rate=1, service_rate=1, max_wait=-0.1, horizon=1),
    dict(arrival_rate=1, service_rate=1),
    dict(arrival_rate=1, service_rate=1, horizon=1, arrivals=10),
    dict(arrival_rate=1, service_rate=1, horizon=0),
    dict(arrival_rate=1, service_rate=1, arrivals=0),
    dict(arrival_rate=1, service_rate=1, arrivals=1.5),
    dict(arrival_rate=1, service_rate=1, horizon=1, servers=0),
    dict(arrival_rate=1, service_rate=1, horizon=1, servers=[(0, 2), (1, 0)]),
    dict(arrival_rate=1, service_rate=1, horizon=1, servers=[(1, 2)]),
    dict(arrival_rate=1, service_rate=1, horizon=1, eviction="discard"),
])
def test_bad_config(kwargs):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**kwargs)

def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        SimulationConfig(1, -1, horizon=1)

def test_parse_args():
    args, rest = queuesim.parse_args(["-s", "123", "--other", "x"])
    assert args.seed == 123
    assert not args.verbose and not args.debug
    assert rest == ["--other", "x"]

def test_parse_args_defaults():
    args, rest = queuesim.parse_args([])
    assert args.seed is None
    assert rest == []

def test_parse_args_bad_seed():
    with pytest.raises(ConfigurationError):
        queuesim.parse_args(["--seed", "-1"])
