import math
import random

import pytest

from organism.lifecycle import age_tick, eat, growth_tick, metabolism_tick
from world.food import Food
from world.kinds import EntityKind
from world.pheromone import Pheromone


def _pellet(world, energy=0.2):
    return Food(id=world.new_id(), x=0.0, y=0.0, energy=energy)


def test_metabolism_charges_everyone(world, make_org, cfg):
    a = make_org(energy=1.0)
    b = make_org(energy=2.0)
    metabolism_tick(world, cfg)
    assert a.energy == pytest.approx(1.0 - cfg.metabolism_cost)
    assert b.energy == pytest.approx(2.0 - cfg.metabolism_cost)


def test_growth_tick_removes_out_of_bounds_energy(world, make_org, cfg, rng):
    starving = make_org(energy=cfg.energy_min / 2)
    bursting = make_org(energy=cfg.energy_max + 0.1)
    fine = make_org(energy=1.0)

    report = growth_tick(world, cfg, rng)

    assert report.starved == [starving.id]
    assert report.overfed == [bursting.id]
    assert [o.id for o in world.organisms()] == [fine.id]


def test_size_law_after_growth_tick(world, make_org, cfg, rng):
    orgs = [make_org(energy=e) for e in (0.05, 0.5, 1.0, 2.9, 3.0)]
    for org in orgs:
        org.size = -1.0

    growth_tick(world, cfg, rng)

    for org in world.organisms():
        e = min(cfg.energy_max, max(cfg.energy_min, org.energy))
        assert org.size == pytest.approx(cfg.base_size * math.sqrt(e))


def test_reproduction_scenario(world, make_org, cfg, always_rng):
    cfg = cfg.with_overrides(offspring_count=3, p_mutation=0.3)
    parent = make_org(x=12.0, y=-7.0, energy=2.5, age=cfg.fertility_age + 1)
    genome = list(parent.genome)

    assert eat(parent, _pellet(world, 0.2), cfg, always_rng)
    assert parent.energy == pytest.approx(2.7)
    assert parent.pregnant

    report = growth_tick(world, cfg, random.Random(4))

    assert parent.energy == cfg.birth_energy_reset == 1.0
    assert not parent.pregnant
    assert len(report.births) == 3
    assert world.count(EntityKind.ORGANISM) == 4
    for child in report.births:
        assert (child.x, child.y) == (12.0, -7.0)
        assert child.energy == cfg.offspring_energy
        assert child.lifetime == cfg.default_lifetime
        assert child.parent_id == parent.id
        assert child.generation == parent.generation + 1
        assert math.hypot(child.hx, child.hy) == pytest.approx(1.0)
        assert len(child.genome) == len(genome)
        for g_child, g_parent in zip(child.genome, genome):
            assert g_child == g_parent or abs(g_child - g_parent) <= cfg.mutation_step


def test_children_without_mutation_are_clones(world, make_org, cfg, rng):
    cfg = cfg.with_overrides(p_mutation=0.0)
    parent = make_org(energy=1.5, pregnant=True)
    report = growth_tick(world, cfg, rng)
    assert [c.genome for c in report.births] == [parent.genome] * cfg.offspring_count


def test_no_pregnancy_when_too_young(world, make_org, cfg, always_rng):
    org = make_org(energy=2.5, age=cfg.fertility_age)
    assert not eat(org, _pellet(world), cfg, always_rng)
    assert not org.pregnant


def test_no_pregnancy_when_too_poor(world, make_org, cfg, always_rng):
    org = make_org(energy=1.0, age=cfg.fertility_age + 5)
    assert not eat(org, _pellet(world), cfg, always_rng)
    assert not org.pregnant


def test_no_pregnancy_when_draw_fails(world, make_org, cfg, never_rng):
    org = make_org(energy=2.5, age=cfg.fertility_age + 5)
    assert not eat(org, _pellet(world), cfg, never_rng)
    assert not org.pregnant


def test_population_cap_limits_births(world, make_org, cfg, rng):
    cfg = cfg.with_overrides(max_pop=2, offspring_count=3)
    parent = make_org(energy=1.5, pregnant=True)

    report = growth_tick(world, cfg, rng)

    assert len(report.births) == 1
    assert not parent.pregnant
    assert parent.energy == cfg.birth_energy_reset


def test_age_tick_kills_old_and_ages_the_rest(world, make_org):
    old = make_org(age=10, lifetime=9)
    at_limit = make_org(age=10, lifetime=10)
    young = make_org(age=0, lifetime=10)

    removed = age_tick(world)

    assert removed == [(old.id, EntityKind.ORGANISM)]
    assert at_limit.age == 11
    assert young.age == 1

    removed = age_tick(world)
    assert removed == [(at_limit.id, EntityKind.ORGANISM)]


def test_age_tick_expires_food_and_pheromones(world):
    pellet = world.add(Food(id=world.new_id(), x=0.0, y=0.0, energy=0.2, age=3, lifetime=2))
    marker = world.add(Pheromone(id=world.new_id(), x=0.0, y=0.0, color=(1.0, 1.0, 1.0), age=0, lifetime=2))

    removed = age_tick(world)

    assert removed == [(pellet.id, EntityKind.FOOD)]
    assert marker.age == 1
    assert world.count(EntityKind.WALL) == 4

    later = []
    for _ in range(marker.lifetime + 1):
        later.extend(age_tick(world))
    assert marker.age > marker.lifetime
    assert not world.alive(marker.id)
    assert later == [(marker.id, EntityKind.PHEROMONE)]
    assert world.count(EntityKind.WALL) == 4
