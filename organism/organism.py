"""
arena_life module: organism/organism.py

Organism record: kinematics, energy/age bookkeeping and genome.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import List, Optional, Tuple

from organism.genome import check_genome, genome_color
from world.kinds import EntityKind


@dataclass
class Organism:
    id: int
    x: float
    y: float
    genome: List[float]
    hx: float = 1.0
    hy: float = 0.0
    speed: float = 0.0
    energy: float = 1.0
    age: int = 0
    lifetime: int = 480
    pregnant: bool = False
    size: float = 0.0

    # lineage
    generation: int = 0
    parent_id: Optional[int] = None

    kind: EntityKind = field(default=EntityKind.ORGANISM, init=False)

    def __post_init__(self) -> None:
        check_genome(self.genome)

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def color(self) -> Tuple[float, float, float]:
        return genome_color(self.genome)

    def update_size(self, base_size: float, energy_min: float, energy_max: float) -> float:
        """Collision/visual size grows with the square root of (clamped) energy."""
        e = max(energy_min, min(energy_max, self.energy))
        self.size = base_size * math.sqrt(e)
        return self.size
