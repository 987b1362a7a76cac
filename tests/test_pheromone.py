import pytest

from organism.genome import GENOME_LENGTH
from world.kinds import EntityKind
from world.pheromone import Pheromone, deposit


def test_opacity_fades_linearly():
    p = Pheromone(id=0, x=0.0, y=0.0, color=(1.0, 0.0, 0.0), lifetime=20)
    assert p.opacity == 1.0
    p.age = 5
    assert p.opacity == pytest.approx(0.75)
    p.age = 20
    assert p.opacity == 0.0
    assert not p.expired
    p.age = 21
    assert p.opacity == 0.0
    assert p.expired


def test_deposit_uses_position_and_genome_color(world, make_org, cfg):
    genome = [0.0] * GENOME_LENGTH
    genome[0], genome[1], genome[2] = 1.0, -1.0, 0.0
    org = make_org(x=3.0, y=4.0, genome=genome)

    marker = deposit(world, org, cfg)

    assert world.entities[marker.id] is marker
    assert marker.kind == EntityKind.PHEROMONE
    assert marker.pos == (3.0, 4.0)
    assert marker.color == pytest.approx((1.0, 0.0, 0.5))
    assert marker.lifetime == cfg.pheromone_lifetime
