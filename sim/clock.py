"""
arena_life module: sim/clock.py

Repeating timers driving the simulation stages.

All periods are expressed in simulated seconds and divided by the
global time scale, so doubling the scale makes every cadence fire twice
as often per fixed step.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from sim.settings import SimConfig

# stage order inside one step; see Simulation.step
TIMER_NAMES = ("physics", "metabolism", "growth", "age", "sensory", "food_spawn", "log")


@dataclass
class Timer:
    period: float
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError(f"timer period must be positive, got {self.period}")

    def tick(self, dt: float) -> int:
        """Advance by ``dt``; returns how many periods completed."""
        self.elapsed += dt
        # tolerate float drift so 60 steps of 1/60 make exactly one second
        fired = int((self.elapsed + 1e-9) // self.period)
        if fired:
            self.elapsed = max(0.0, self.elapsed - fired * self.period)
        return fired


@dataclass
class SimClock:
    timers: Dict[str, Timer] = field(default_factory=dict)
    time: float = 0.0
    steps: int = 0

    @staticmethod
    def from_config(cfg: "SimConfig") -> "SimClock":
        scale = cfg.time_scale
        periods = {
            "physics": cfg.physics_period,
            "metabolism": cfg.metabolism_period,
            "growth": cfg.growth_period,
            "age": cfg.age_period,
            "sensory": cfg.sensory_period,
            "food_spawn": cfg.food_spawn_period,
            "log": cfg.log_period,
        }
        return SimClock(timers={name: Timer(periods[name] / scale) for name in TIMER_NAMES})

    def advance(self, dt: float) -> Dict[str, int]:
        self.time += dt
        self.steps += 1
        return {name: timer.tick(dt) for name, timer in self.timers.items()}
