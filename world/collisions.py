"""
arena_life module: world/collisions.py

Axis-aligned bounding-box collisions between organisms and colliders.

Every organism is tested against every wall and every food pellet
(brute force, O(organisms x colliders) per tick; fine for a few hundred
organisms). Walls reflect the heading, food is eaten. Each hit produces
an event for whoever listens (sound, stats).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math
import random
from typing import List, Optional, Tuple, Union, TYPE_CHECKING

from organism.lifecycle import eat
from organism.organism import Organism
from world.food import Food
from world.kinds import EntityKind
from world.physics import normalize

if TYPE_CHECKING:
    from sim.settings import SimConfig
    from world.world import World

Vec2 = Tuple[float, float]


class Collision(Enum):
    """Which side of the collider the organism ran into."""
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    INSIDE = 4


@dataclass(frozen=True)
class FoodCollision:
    organism_id: int
    food_id: int
    energy: float
    x: float
    y: float


@dataclass(frozen=True)
class WallCollision:
    organism_id: int
    wall_id: int
    edge: Collision
    x: float
    y: float


CollisionEvent = Union[FoodCollision, WallCollision]


def collide(a_pos: Vec2, a_size: Vec2, b_pos: Vec2, b_size: Vec2) -> Optional[Collision]:
    """
    Classify the overlap of box ``a`` with box ``b`` from a's point of view.

    Returns None when the boxes do not overlap. On each axis a box that
    pokes in from the low side is LEFT/BOTTOM, from the high side
    RIGHT/TOP, anything else (contained or straddling) counts as INSIDE
    for that axis. The axis with the shallower penetration wins; on a
    tie the x axis wins.
    """
    a_min_x = a_pos[0] - a_size[0] * 0.5
    a_max_x = a_pos[0] + a_size[0] * 0.5
    a_min_y = a_pos[1] - a_size[1] * 0.5
    a_max_y = a_pos[1] + a_size[1] * 0.5
    b_min_x = b_pos[0] - b_size[0] * 0.5
    b_max_x = b_pos[0] + b_size[0] * 0.5
    b_min_y = b_pos[1] - b_size[1] * 0.5
    b_max_y = b_pos[1] + b_size[1] * 0.5

    if not (a_min_x < b_max_x and a_max_x > b_min_x and a_min_y < b_max_y and a_max_y > b_min_y):
        return None

    if a_min_x < b_min_x < a_max_x < b_max_x:
        x_collision, x_depth = Collision.LEFT, b_min_x - a_max_x
    elif b_min_x < a_min_x < b_max_x < a_max_x:
        x_collision, x_depth = Collision.RIGHT, a_min_x - b_max_x
    else:
        x_collision, x_depth = Collision.INSIDE, -math.inf

    if a_min_y < b_min_y < a_max_y < b_max_y:
        y_collision, y_depth = Collision.BOTTOM, b_min_y - a_max_y
    elif b_min_y < a_min_y < b_max_y < a_max_y:
        y_collision, y_depth = Collision.TOP, a_min_y - b_max_y
    else:
        y_collision, y_depth = Collision.INSIDE, -math.inf

    if abs(y_depth) < abs(x_depth):
        return y_collision
    return x_collision


def reflect(org: Organism, edge: Collision) -> bool:
    """
    Flip the heading component that points into the struck edge.
    Returns True if the heading changed.
    """
    if edge == Collision.LEFT and org.hx > 0:
        org.hx = -org.hx
    elif edge == Collision.RIGHT and org.hx < 0:
        org.hx = -org.hx
    elif edge == Collision.BOTTOM and org.hy > 0:
        org.hy = -org.hy
    elif edge == Collision.TOP and org.hy < 0:
        org.hy = -org.hy
    else:
        return False
    org.hx, org.hy = normalize(org.hx, org.hy)
    return True


def _box(org: Organism) -> Vec2:
    return (org.size, org.size)


def resolve_collisions(world: "World", cfg: "SimConfig", rng: random.Random) -> List[CollisionEvent]:
    """
    Organisms in id order against world.colliders() (walls first, then food,
    each in id order). Eaten food disappears immediately, so a pellet feeds
    at most one organism.
    """
    events: List[CollisionEvent] = []
    colliders = world.colliders()

    for org in world.organisms():
        org.update_size(cfg.base_size, cfg.energy_min, cfg.energy_max)

        for other in colliders:
            if other.kind == EntityKind.WALL:
                edge = collide(org.pos, _box(org), other.pos, other.extent)
                if edge is not None:
                    reflect(org, edge)
                    events.append(WallCollision(organism_id=org.id, wall_id=other.id, edge=edge, x=org.x, y=org.y))
                continue

            pellet: Food = other
            if not world.alive(pellet.id):
                continue  # eaten earlier this tick
            edge = collide(org.pos, _box(org), pellet.pos, (pellet.size, pellet.size))
            if edge is None:
                continue
            world.remove(pellet.id)
            eat(org, pellet, cfg, rng)
            events.append(
                FoodCollision(organism_id=org.id, food_id=pellet.id, energy=pellet.energy, x=pellet.x, y=pellet.y)
            )

    return events
