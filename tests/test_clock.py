import pytest

from sim.clock import TIMER_NAMES, SimClock, Timer
from sim.settings import SimConfig


def test_timer_fires_once_per_period():
    t = Timer(1.0)
    fires = [t.tick(1.0 / 60.0) for _ in range(120)]
    assert sum(fires) == 2
    assert fires[59] == 1
    assert fires[119] == 1


def test_timer_reports_multiple_completions():
    t = Timer(0.1)
    assert t.tick(0.35) == 3
    assert t.elapsed == pytest.approx(0.05)


def test_timer_rejects_non_positive_period():
    with pytest.raises(ValueError):
        Timer(0.0)


def test_clock_builds_every_timer():
    clock = SimClock.from_config(SimConfig())
    assert tuple(clock.timers) == TIMER_NAMES


def test_time_scale_divides_every_period():
    base = SimConfig()
    fast = SimClock.from_config(base.with_overrides(time_scale=4.0))
    for name, timer in SimClock.from_config(base).timers.items():
        assert fast.timers[name].period == pytest.approx(timer.period / 4.0)


def test_physics_runs_every_step_at_unit_scale():
    cfg = SimConfig()
    clock = SimClock.from_config(cfg)
    for _ in range(30):
        fired = clock.advance(cfg.time_step)
        assert fired["physics"] == 1
    assert clock.steps == 30
    assert clock.time == pytest.approx(0.5)


def test_double_scale_runs_physics_twice_per_step():
    cfg = SimConfig(time_scale=2.0)
    clock = SimClock.from_config(cfg)
    assert clock.advance(cfg.time_step)["physics"] == 2


def test_slow_cadences_fire_less_often():
    cfg = SimConfig()
    clock = SimClock.from_config(cfg)
    totals = {name: 0 for name in TIMER_NAMES}
    for _ in range(600):  # ten seconds
        for name, n in clock.advance(cfg.time_step).items():
            totals[name] += n
    assert totals["physics"] == 600
    assert totals["sensory"] == 100
    assert totals["age"] == 40
    assert totals["growth"] == 20
    assert totals["metabolism"] == 10
    assert totals["log"] == 1
