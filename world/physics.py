"""
arena_life module: world/physics.py

Top-down 2D kinematics:
- organisms move along a unit heading at a bounded scalar speed
- motor outputs turn the heading and nudge the speed
- every physics tick charges a metabolic decay plus a quadratic cost of motion
- anything that leaves the arena is removed on the spot
"""

from __future__ import annotations
import logging
import math
from typing import List, Sequence, Tuple, TYPE_CHECKING

from organism.genome import OUT_SPEED, OUT_TURN
from organism.organism import Organism

if TYPE_CHECKING:
    from sim.settings import SimConfig
    from world.world import World

logger = logging.getLogger(__name__)

DEFAULT_HEADING = (1.0, 0.0)
MIN_HEADING_LENGTH = 1e-9


def normalize(x: float, y: float) -> Tuple[float, float]:
    """Unit vector along (x, y); DEFAULT_HEADING when the input is (nearly) zero."""
    length = math.hypot(x, y)
    if length < MIN_HEADING_LENGTH or not math.isfinite(length):
        return DEFAULT_HEADING
    return (x / length, y / length)


def rotate(x: float, y: float, angle: float) -> Tuple[float, float]:
    """Counter-clockwise rotation; both components come from the input vector."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (x * c - y * s, x * s + y * c)


def turn(org: Organism, angle: float) -> None:
    org.hx, org.hy = normalize(*rotate(org.hx, org.hy, angle))


def apply_motor_outputs(org: Organism, outputs: Sequence[float], speed_max: float) -> None:
    """
    outputs[0]: heading change in radians
    outputs[1]: speed change, result clamped to [0, speed_max]
    outputs[2]: ignored
    """
    turn(org, outputs[OUT_TURN])
    org.speed = max(0.0, min(speed_max, org.speed + outputs[OUT_SPEED]))


def charge_movement(org: Organism, decay: float, move_cost: float) -> None:
    org.energy *= decay
    org.energy -= (org.speed * org.speed) * move_cost


def integrate(world: "World", cfg: "SimConfig") -> List[int]:
    """
    One physics tick for every organism. Returns the ids of organisms
    that left the arena and were removed.
    """
    arena = world.arena
    escaped: List[int] = []
    for org in world.organisms():
        charge_movement(org, cfg.energy_decay, cfg.move_cost)
        org.x += org.hx * org.speed
        org.y += org.hy * org.speed
        if not arena.contains(org.x, org.y):
            world.remove(org.id)
            escaped.append(org.id)
            logger.debug("organism %d left the arena at (%.1f, %.1f)", org.id, org.x, org.y)
    return escaped
