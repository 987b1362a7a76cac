import random

import pytest

from organism.genome import seed_genome
from organism.organism import Organism
from sim.settings import SimConfig
from world.world import World


@pytest.fixture
def cfg() -> SimConfig:
    """Empty arena, no log file; tests add what they need."""
    return SimConfig(start_pop=0, start_food=0, genome_log_file=None)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def world(cfg) -> World:
    return World.create(cfg.arena_half_w, cfg.arena_half_h, cfg.wall_thickness)


@pytest.fixture
def make_org(world, cfg):
    def _make(x=0.0, y=0.0, **kwargs):
        kwargs.setdefault("genome", seed_genome())
        kwargs.setdefault("lifetime", cfg.default_lifetime)
        org = Organism(id=world.new_id(), x=x, y=y, **kwargs)
        org.update_size(cfg.base_size, cfg.energy_min, cfg.energy_max)
        world.add(org)
        return org

    return _make


class FixedRandom(random.Random):
    """random() always returns ``value``; everything else behaves normally."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def always_rng() -> random.Random:
    return FixedRandom(0.0)


@pytest.fixture
def never_rng() -> random.Random:
    return FixedRandom(0.999999)
