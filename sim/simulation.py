"""
arena_life module: sim/simulation.py

Simulation context and the fixed-step tick pipeline.

One call to Simulation.step() advances every timer by the fixed step and
then runs the stages whose timers fired, always in this order:

  1. physics     integrate movement (escapees die here), then resolve collisions
  2. metabolism  flat energy upkeep
  3. growth      energy-bound deaths, births
  4. age         lifetime deaths, aging
  5. sensory     sense -> genome -> motor outputs, drop a pheromone
  6. food_spawn  new pellets
  7. log         genome dump + population summary

A stage that fired n times this step runs n times. Reordering changes
which deaths and collisions a later stage can see, so the order is fixed.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
import logging
import random
from typing import Dict, List, Optional, Tuple

from organism.genome import decode
from organism.lifecycle import age_tick, growth_tick, metabolism_tick
from organism.organism import Organism
from organism.sensors import sense
from evolution.reproduction import spawn_founder
from sim.clock import SimClock
from sim.diagnostics import GenomeLog
from sim.settings import SimConfig
from world.collisions import CollisionEvent, FoodCollision, WallCollision, resolve_collisions
from world.food import spawn_food
from world.kinds import EntityKind
from world.pheromone import deposit
from world.physics import apply_motor_outputs, integrate
from world.world import World

logger = logging.getLogger(__name__)

WALL_COLOR = (0.8, 0.8, 0.8)
FOOD_COLOR = (0.1, 0.4, 0.1)


@dataclass(frozen=True)
class Drawable:
    """Read-only view of one entity for the renderer."""
    id: int
    kind: EntityKind
    x: float
    y: float
    w: float
    h: float
    color: Tuple[float, float, float]
    opacity: float = 1.0


@dataclass
class Stats:
    births: int = 0
    deaths: Counter = field(default_factory=Counter)
    meals: int = 0
    wall_hits: int = 0
    max_generation: int = 0

    @property
    def total_deaths(self) -> int:
        return sum(self.deaths.values())


class Simulation:
    def __init__(self, cfg: Optional[SimConfig] = None, seed: Optional[int] = None, populate: bool = True):
        self.cfg = (cfg or SimConfig()).validate()
        self.seed = seed
        self.rng = random.Random(seed)
        self.world = World.create(self.cfg.arena_half_w, self.cfg.arena_half_h, self.cfg.wall_thickness)
        self.clock = SimClock.from_config(self.cfg)
        self.stats = Stats()
        self.genome_log = GenomeLog(self.cfg.genome_log_file)
        self._events: List[CollisionEvent] = []
        if populate:
            self.populate()

    def populate(self) -> None:
        cfg = self.cfg
        n_seeded = round(cfg.start_pop * cfg.seed_genome_fraction)
        for i in range(cfg.start_pop):
            spawn_founder(self.world, cfg, self.rng, seeded=i < n_seeded)
        spawn_food(self.world, cfg.with_overrides(food_per_spawn=cfg.start_food), self.rng)
        logger.info(
            "Populated arena %.0fx%.0f with %d organisms (%d seeded) and %d food, seed=%s",
            self.world.arena.width,
            self.world.arena.height,
            cfg.start_pop,
            n_seeded,
            self.world.count(EntityKind.FOOD),
            self.seed,
        )

    # ---- pipeline ----

    def step(self) -> Dict[str, int]:
        fired = self.clock.advance(self.cfg.time_step)

        for _ in range(fired["physics"]):
            self.physics_stage()
        for _ in range(fired["metabolism"]):
            metabolism_tick(self.world, self.cfg)
        for _ in range(fired["growth"]):
            self.growth_stage()
        for _ in range(fired["age"]):
            self.age_stage()
        for _ in range(fired["sensory"]):
            self.sensory_stage()
        for _ in range(fired["food_spawn"]):
            spawn_food(self.world, self.cfg, self.rng)
        for _ in range(fired["log"]):
            self.log_stage()

        return fired

    def run(self, steps: int) -> None:
        for _ in range(steps):
            self.step()

    def physics_stage(self) -> None:
        escaped = integrate(self.world, self.cfg)
        self.stats.deaths["escaped"] += len(escaped)

        events = resolve_collisions(self.world, self.cfg, self.rng)
        for ev in events:
            if isinstance(ev, FoodCollision):
                self.stats.meals += 1
            elif isinstance(ev, WallCollision):
                self.stats.wall_hits += 1
        self._events.extend(events)

    def growth_stage(self) -> None:
        report = growth_tick(self.world, self.cfg, self.rng)
        self.stats.deaths["starved"] += len(report.starved)
        self.stats.deaths["overfed"] += len(report.overfed)
        self.stats.births += len(report.births)
        for child in report.births:
            self.stats.max_generation = max(self.stats.max_generation, child.generation)

    def age_stage(self) -> None:
        for _, kind in age_tick(self.world):
            if kind == EntityKind.ORGANISM:
                self.stats.deaths["old_age"] += 1

    def think(self, org: Organism, foods) -> List[float]:
        inputs = sense(org, foods, self.world.arena, self.cfg)
        outputs = decode(org.genome, inputs)
        apply_motor_outputs(org, outputs, self.cfg.speed_max)
        return outputs

    def sensory_stage(self) -> None:
        foods = self.world.foods()
        for org in self.world.organisms():
            self.think(org, foods)
            deposit(self.world, org, self.cfg)

    def log_stage(self) -> None:
        organisms = self.world.organisms()
        self.genome_log.write(organisms)
        logger.info(
            "t=%.1fs population=%d food=%d births=%d deaths=%d max_gen=%d",
            self.clock.time,
            len(organisms),
            self.world.count(EntityKind.FOOD),
            self.stats.births,
            self.stats.total_deaths,
            self.stats.max_generation,
        )

    # ---- collaborators ----

    def drain_events(self) -> List[CollisionEvent]:
        events, self._events = self._events, []
        return events

    def snapshot(self) -> List[Drawable]:
        """Drawables in registry order: walls, then everything else by id."""
        out: List[Drawable] = []
        for e in self.world.entities.values():
            if e.kind == EntityKind.WALL:
                out.append(Drawable(e.id, e.kind, e.x, e.y, e.w, e.h, WALL_COLOR))
            elif e.kind == EntityKind.FOOD:
                out.append(Drawable(e.id, e.kind, e.x, e.y, e.size, e.size, FOOD_COLOR))
            elif e.kind == EntityKind.PHEROMONE:
                out.append(Drawable(e.id, e.kind, e.x, e.y, e.size, e.size, e.color, e.opacity))
            else:
                out.append(Drawable(e.id, e.kind, e.x, e.y, e.size, e.size, e.color))
        return out

    def summary(self) -> Dict[str, float]:
        organisms = self.world.organisms()
        avg_energy = sum(o.energy for o in organisms) / len(organisms) if organisms else 0.0
        return {
            "population": len(organisms),
            "food": self.world.count(EntityKind.FOOD),
            "births": self.stats.births,
            "deaths": self.stats.total_deaths,
            "avg_energy": avg_energy,
            "max_generation": self.stats.max_generation,
            "sim_time": self.clock.time,
        }

    def close(self) -> None:
        self.genome_log.close()
