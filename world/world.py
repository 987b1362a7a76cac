"""
arena_life module: world/world.py

World state container: arena geometry plus the entity registry.

The registry is a flat id -> record mapping. Every record carries a
``kind`` tag and is found by filtering on it. Ids are handed out in
increasing order and never reused, so iterating in id order is
iterating in creation order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union, TYPE_CHECKING

from world.arena import Arena, Wall
from world.food import Food
from world.kinds import EntityKind, WallSide
from world.pheromone import Pheromone

if TYPE_CHECKING:
    from organism.organism import Organism

    Entity = Union[Organism, Food, Pheromone, Wall]


@dataclass
class World:
    arena: Arena
    entities: Dict[int, "Entity"] = field(default_factory=dict)
    next_entity_id: int = 0

    @staticmethod
    def create(half_w: float, half_h: float, wall_thickness: float = 4.0) -> "World":
        world = World(arena=Arena.create(half_w, half_h, wall_thickness))
        for side in (WallSide.LEFT, WallSide.RIGHT, WallSide.BOTTOM, WallSide.TOP):
            world.add(world.arena.make_wall(world.new_id(), side))
        return world

    # ---- registry ----

    def new_id(self) -> int:
        eid = self.next_entity_id
        self.next_entity_id += 1
        return eid

    def add(self, entity: "Entity") -> "Entity":
        if entity.id in self.entities:
            raise KeyError(f"entity id {entity.id} already registered")
        if entity.id >= self.next_entity_id:
            self.next_entity_id = entity.id + 1
        self.entities[entity.id] = entity
        return entity

    def remove(self, entity_id: int) -> Optional["Entity"]:
        return self.entities.pop(entity_id, None)

    def alive(self, entity_id: int) -> bool:
        return entity_id in self.entities

    def of_kind(self, kind: EntityKind) -> Iterator["Entity"]:
        # dicts keep insertion order, ids are inserted in increasing order
        return (e for e in self.entities.values() if e.kind == kind)

    def count(self, kind: EntityKind) -> int:
        return sum(1 for _ in self.of_kind(kind))

    # ---- convenience queries ----

    def organisms(self) -> List["Organism"]:
        return list(self.of_kind(EntityKind.ORGANISM))

    def foods(self) -> List[Food]:
        return list(self.of_kind(EntityKind.FOOD))

    def pheromones(self) -> List[Pheromone]:
        return list(self.of_kind(EntityKind.PHEROMONE))

    def walls(self) -> List[Wall]:
        return list(self.of_kind(EntityKind.WALL))

    def colliders(self) -> List[Union[Wall, Food]]:
        """Walls first, then food, each in id order."""
        return self.walls() + self.foods()
