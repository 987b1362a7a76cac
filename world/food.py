"""
arena_life module: world/food.py

Food system:
- Pellets appear one at a time at uniformly random positions inside the arena
- Each pellet carries a fixed energy value and ages out after its lifetime
- Aging is done by the shared age tick in organism/lifecycle.py
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import List, Tuple, TYPE_CHECKING

from world.kinds import EntityKind

if TYPE_CHECKING:
    from sim.settings import SimConfig
    from world.world import World


@dataclass
class Food:
    id: int
    x: float
    y: float
    energy: float
    size: float = 5.0
    age: int = 0
    lifetime: int = 240  # age ticks
    kind: EntityKind = field(default=EntityKind.FOOD, init=False)

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def expired(self) -> bool:
        return self.age > self.lifetime


def random_position(world: "World", margin: float, rng: random.Random) -> Tuple[float, float]:
    arena = world.arena
    # keep the margin sane for tiny arenas
    mx = min(margin, arena.width * 0.25)
    my = min(margin, arena.height * 0.25)
    x = rng.uniform(arena.left + mx, arena.right - mx)
    y = rng.uniform(arena.bottom + my, arena.top - my)
    return x, y


def spawn_food(world: "World", cfg: "SimConfig", rng: random.Random) -> List[Food]:
    """
    Drop ``cfg.food_per_spawn`` pellets into the world, respecting ``cfg.max_food``.
    Returns the pellets that were created.
    """
    room = cfg.max_food - world.count(EntityKind.FOOD)
    created: List[Food] = []
    for _ in range(max(0, min(cfg.food_per_spawn, room))):
        x, y = random_position(world, cfg.spawn_margin, rng)
        pellet = Food(
            id=world.new_id(),
            x=x,
            y=y,
            energy=cfg.food_energy,
            size=cfg.food_size,
            lifetime=cfg.food_lifetime,
        )
        world.add(pellet)
        created.append(pellet)
    return created
