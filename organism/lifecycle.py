"""
arena_life module: organism/lifecycle.py

Energy/age bookkeeping and the Alive -> Dead transitions.

Each function here is one timer's worth of work:
- eat:             a food collision (energy credit + pregnancy roll)
- metabolism_tick: flat energy upkeep for everyone
- growth_tick:     energy-bound deaths, then births for pregnant organisms
- age_tick:        lifetime deaths, then aging (organisms, food, pheromones)

Movement costs are charged per physics tick in world/physics.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import List, Tuple, TYPE_CHECKING

from evolution.reproduction import spawn_offspring
from organism.organism import Organism
from world.kinds import EntityKind

if TYPE_CHECKING:
    from sim.settings import SimConfig
    from world.food import Food
    from world.world import World

logger = logging.getLogger(__name__)

AGING_KINDS = (EntityKind.ORGANISM, EntityKind.FOOD, EntityKind.PHEROMONE)


@dataclass
class GrowthReport:
    starved: List[int] = field(default_factory=list)
    overfed: List[int] = field(default_factory=list)
    births: List[Organism] = field(default_factory=list)


def can_conceive(org: Organism, cfg: "SimConfig") -> bool:
    return org.energy > cfg.pregnancy_energy and org.age > cfg.fertility_age


def eat(org: Organism, food: "Food", cfg: "SimConfig", rng: random.Random) -> bool:
    """
    Credit the pellet's energy. Returns True if this meal made the organism pregnant.
    The pellet itself is removed by the caller.
    """
    org.energy += food.energy
    if org.pregnant or not can_conceive(org, cfg):
        return False
    if rng.random() < cfg.p_pregnant:
        org.pregnant = True
        return True
    return False


def metabolism_tick(world: "World", cfg: "SimConfig") -> None:
    for org in world.organisms():
        org.energy -= cfg.metabolism_cost


def growth_tick(world: "World", cfg: "SimConfig", rng: random.Random) -> GrowthReport:
    report = GrowthReport()
    for org in world.organisms():
        if org.energy < cfg.energy_min:
            world.remove(org.id)
            report.starved.append(org.id)
            logger.debug("organism %d starved (energy %.3f)", org.id, org.energy)
            continue
        if org.energy > cfg.energy_max:
            world.remove(org.id)
            report.overfed.append(org.id)
            logger.debug("organism %d burst (energy %.3f)", org.id, org.energy)
            continue

        if org.pregnant:
            org.energy = cfg.birth_energy_reset
            org.pregnant = False
            room = cfg.max_pop - world.count(EntityKind.ORGANISM)
            count = max(0, min(cfg.offspring_count, room))
            children = spawn_offspring(world, org, cfg, rng, count)
            report.births.extend(children)
            if children:
                logger.debug("organism %d gave birth to %d (generation %d)", org.id, len(children), org.generation + 1)

        org.update_size(cfg.base_size, cfg.energy_min, cfg.energy_max)
    return report


def age_tick(world: "World") -> List[Tuple[int, EntityKind]]:
    """
    Remove everything that outlived its lifetime, age everything else by one.
    Returns (id, kind) of the removed entities.
    """
    expired: List[Tuple[int, EntityKind]] = []
    for entity in [e for e in world.entities.values() if e.kind in AGING_KINDS]:
        if entity.age > entity.lifetime:
            world.remove(entity.id)
            expired.append((entity.id, entity.kind))
        else:
            entity.age += 1
    return expired
