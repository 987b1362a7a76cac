"""
arena_life module: world/pheromone.py

Pheromone trail markers.

Organisms drop one marker per sensory tick. Markers fade linearly with
age and are removed by the shared age tick once they outlive their
lifetime. Nothing senses them; they exist for the renderer and as a
hook for scent-following behaviour later.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, TYPE_CHECKING

from world.kinds import EntityKind

if TYPE_CHECKING:
    from organism.organism import Organism
    from sim.settings import SimConfig
    from world.world import World


Color = Tuple[float, float, float]


@dataclass
class Pheromone:
    id: int
    x: float
    y: float
    color: Color
    size: float = 2.0
    age: int = 0
    lifetime: int = 20  # age ticks
    kind: EntityKind = field(default=EntityKind.PHEROMONE, init=False)

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def opacity(self) -> float:
        return max(0.0, min(1.0, 1.0 - self.age / self.lifetime))

    @property
    def expired(self) -> bool:
        return self.age > self.lifetime


def deposit(world: "World", org: "Organism", cfg: "SimConfig") -> Pheromone:
    marker = Pheromone(
        id=world.new_id(),
        x=org.x,
        y=org.y,
        color=org.color,
        size=cfg.pheromone_size,
        lifetime=cfg.pheromone_lifetime,
    )
    world.add(marker)
    return marker
