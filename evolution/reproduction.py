"""
arena_life module: evolution/reproduction.py

Clone-and-mutate reproduction plus the constructors for founder organisms.
"""

from __future__ import annotations
import math
import random
from typing import List, TYPE_CHECKING

from evolution.mutate import mutate_genome
from organism.genome import random_genome, seed_genome
from organism.organism import Organism
from world.food import random_position

if TYPE_CHECKING:
    from sim.settings import SimConfig
    from world.world import World


def random_heading(rng: random.Random) -> tuple[float, float]:
    a = rng.uniform(-math.pi, math.pi)
    return math.cos(a), math.sin(a)


def spawn_founder(world: "World", cfg: "SimConfig", rng: random.Random, seeded: bool = True) -> Organism:
    x, y = random_position(world, cfg.spawn_margin, rng)
    hx, hy = random_heading(rng)
    genome = seed_genome() if seeded else random_genome(rng)
    org = Organism(
        id=world.new_id(),
        x=x,
        y=y,
        genome=genome,
        hx=hx,
        hy=hy,
        speed=cfg.start_speed,
        energy=cfg.start_energy,
        lifetime=cfg.default_lifetime,
    )
    org.update_size(cfg.base_size, cfg.energy_min, cfg.energy_max)
    world.add(org)
    return org


def spawn_offspring(world: "World", parent: Organism, cfg: "SimConfig", rng: random.Random, count: int) -> List[Organism]:
    """
    ``count`` children at the parent's position, each with its own mutated
    copy of the parent genome and a fresh random heading.
    """
    children: List[Organism] = []
    for _ in range(count):
        genome = mutate_genome(parent.genome, rng, p_mutation=cfg.p_mutation, step=cfg.mutation_step)
        hx, hy = random_heading(rng)
        child = Organism(
            id=world.new_id(),
            x=parent.x,
            y=parent.y,
            genome=genome,
            hx=hx,
            hy=hy,
            speed=cfg.start_speed,
            energy=cfg.offspring_energy,
            lifetime=cfg.default_lifetime,
            generation=parent.generation + 1,
            parent_id=parent.id,
        )
        child.update_size(cfg.base_size, cfg.energy_min, cfg.energy_max)
        world.add(child)
        children.append(child)
    return children
