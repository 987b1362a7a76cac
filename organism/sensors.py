"""
arena_life module: organism/sensors.py

Builds the 8-element sensory vector fed to the genome controller:

  speed, x, y, energy, age, food ahead, food left, food right

The first five are normalised to [0, 1]. The food sensors sum a
proximity weight (vision / 2) / (vision + distance) over every pellet in
the matching bearing cone. Near an arena edge, heading outward, the
ahead sensor is overridden with a negative sentinel.
"""

from __future__ import annotations
import math
from typing import Iterable, List, Tuple, TYPE_CHECKING

from organism.genome import (
    IN_AGE,
    IN_ENERGY,
    IN_FOOD_AHEAD,
    IN_FOOD_LEFT,
    IN_FOOD_RIGHT,
    IN_SPEED,
    IN_X,
    IN_Y,
    N_INPUTS,
)
from organism.organism import Organism
from world.arena import Arena
from world.food import Food

if TYPE_CHECKING:
    from sim.settings import SimConfig

HALF_PI = math.pi * 0.5


def bearing(org: Organism, tx: float, ty: float) -> float:
    """Signed angle from the heading to the target; positive means to the left."""
    dx = tx - org.x
    dy = ty - org.y
    cross = org.hx * dy - org.hy * dx
    dot = org.hx * dx + org.hy * dy
    return math.atan2(cross, dot)


def cone_activations(
    org: Organism,
    foods: Iterable[Food],
    vision: float,
    cone_half_angle: float,
) -> Tuple[float, float, float]:
    ahead = left = right = 0.0
    for f in foods:
        dist = math.hypot(f.x - org.x, f.y - org.y)
        if dist > vision:
            continue
        weight = (vision * 0.5) / (vision + dist)
        rel = bearing(org, f.x, f.y)
        if abs(rel) <= cone_half_angle:
            ahead += weight
        elif cone_half_angle < rel <= HALF_PI:
            left += weight
        elif -HALF_PI <= rel < -cone_half_angle:
            right += weight
    return ahead, left, right


def heading_out_near_border(org: Organism, arena: Arena, fraction: float) -> bool:
    mx = arena.width * fraction
    my = arena.height * fraction
    if org.x < arena.left + mx and org.hx < 0:
        return True
    if org.x > arena.right - mx and org.hx > 0:
        return True
    if org.y < arena.bottom + my and org.hy < 0:
        return True
    if org.y > arena.top - my and org.hy > 0:
        return True
    return False


def sense(org: Organism, foods: Iterable[Food], arena: Arena, cfg: "SimConfig") -> List[float]:
    inputs = [0.0] * N_INPUTS
    inputs[IN_SPEED] = org.speed / cfg.speed_max if cfg.speed_max > 0 else 0.0
    inputs[IN_X], inputs[IN_Y] = arena.normalized(org.x, org.y)
    inputs[IN_ENERGY] = (org.energy - cfg.energy_min) / (cfg.energy_max - cfg.energy_min)
    inputs[IN_AGE] = org.age / org.lifetime if org.lifetime > 0 else 1.0

    ahead, left, right = cone_activations(org, foods, cfg.vision, cfg.cone_half_angle)
    if heading_out_near_border(org, arena, cfg.border_fraction):
        ahead = cfg.border_sentinel
    inputs[IN_FOOD_AHEAD] = ahead
    inputs[IN_FOOD_LEFT] = left
    inputs[IN_FOOD_RIGHT] = right
    return inputs
