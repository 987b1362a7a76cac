import pytest

from world.collisions import Collision, FoodCollision, WallCollision, collide, reflect, resolve_collisions
from world.food import Food
from world.kinds import WallSide


def test_no_overlap():
    assert collide((0, 0), (10, 10), (20, 0), (10, 10)) is None
    # touching edges do not count
    assert collide((0, 0), (10, 10), (10, 0), (10, 10)) is None


def test_left_edge():
    assert collide((-5, 0), (10, 10), (3, 0), (10, 10)) == Collision.LEFT


def test_right_edge():
    assert collide((5, 0), (10, 10), (-3, 0), (10, 10)) == Collision.RIGHT


def test_top_and_bottom_edges():
    assert collide((0, 8), (10, 10), (0, 0), (10, 10)) == Collision.TOP
    assert collide((0, -8), (10, 10), (0, 0), (10, 10)) == Collision.BOTTOM


def test_shallower_axis_wins():
    # 1 unit deep on x, 4 deep on y
    assert collide((-9, -6), (10, 10), (0, 0), (10, 10)) == Collision.LEFT
    # 4 deep on x, 1 deep on y
    assert collide((-6, -9), (10, 10), (0, 0), (10, 10)) == Collision.BOTTOM


def test_equal_depth_prefers_x_axis():
    assert collide((-8, -8), (10, 10), (0, 0), (10, 10)) == Collision.LEFT
    assert collide((8, 8), (10, 10), (0, 0), (10, 10)) == Collision.RIGHT


def test_contained_box_is_inside():
    assert collide((0, 0), (2, 2), (0, 0), (10, 10)) == Collision.INSIDE


def test_left_reflection_law(make_org):
    org = make_org(hx=0.6, hy=0.8)
    assert reflect(org, Collision.LEFT)
    assert (org.hx, org.hy) == pytest.approx((-0.6, 0.8))

    # already moving away from the wall: untouched
    assert not reflect(org, Collision.LEFT)
    assert (org.hx, org.hy) == pytest.approx((-0.6, 0.8))


def test_other_edges_reflect_only_into_the_wall(make_org):
    org = make_org(hx=-0.6, hy=-0.8)
    assert reflect(org, Collision.RIGHT)
    assert org.hx == pytest.approx(0.6)
    assert reflect(org, Collision.TOP)
    assert org.hy == pytest.approx(0.8)
    assert reflect(org, Collision.BOTTOM)
    assert org.hy == pytest.approx(-0.8)
    assert not reflect(org, Collision.INSIDE)


def test_wall_hit_reflects_heading_and_emits_event(world, make_org, cfg, rng):
    org = make_org(x=world.arena.right - 4.0, y=0.0, hx=1.0, hy=0.0, energy=1.0)
    right_wall = next(w for w in world.walls() if w.side == WallSide.RIGHT)

    events = resolve_collisions(world, cfg, rng)

    assert events == [WallCollision(org.id, right_wall.id, Collision.LEFT, org.x, org.y)]
    assert (org.hx, org.hy) == pytest.approx((-1.0, 0.0))


def test_food_hit_consumes_pellet(world, make_org, cfg, never_rng):
    org = make_org(x=0.0, y=0.0, energy=1.0)
    pellet = world.add(Food(id=world.new_id(), x=2.0, y=0.0, energy=0.2, size=5.0))

    events = resolve_collisions(world, cfg, never_rng)

    assert events == [FoodCollision(org.id, pellet.id, 0.2, 2.0, 0.0)]
    assert not world.alive(pellet.id)
    assert org.energy == pytest.approx(1.2)


def test_pellet_feeds_only_the_first_organism(world, make_org, cfg, never_rng):
    first = make_org(x=0.0, y=0.0, energy=1.0)
    second = make_org(x=1.0, y=0.0, energy=1.0)
    world.add(Food(id=world.new_id(), x=0.5, y=0.0, energy=0.2, size=5.0))

    events = resolve_collisions(world, cfg, never_rng)

    assert [e.organism_id for e in events] == [first.id]
    assert first.energy == pytest.approx(1.2)
    assert second.energy == pytest.approx(1.0)


def test_size_tracks_energy_before_queries(world, make_org, cfg, never_rng):
    org = make_org(x=0.0, y=0.0, energy=1.0)
    org.energy = 2.25
    resolve_collisions(world, cfg, never_rng)
    assert org.size == pytest.approx(cfg.base_size * 1.5)


def test_walls_resolve_before_food(world, make_org, cfg, never_rng):
    # pellet registered first, still resolved after the wall
    pellet = world.add(Food(id=world.new_id(), x=world.arena.right - 6.0, y=0.0, energy=0.2, size=5.0))
    org = make_org(x=world.arena.right - 4.0, y=0.0, hx=1.0, hy=0.0, energy=1.0)

    events = resolve_collisions(world, cfg, never_rng)

    assert [type(e) for e in events] == [WallCollision, FoodCollision]
    assert events[1].food_id == pellet.id
    assert events[0].organism_id == events[1].organism_id == org.id
