"""
arena_life module: world/kinds.py

Tags carried by every record in the entity registry.
"""

from __future__ import annotations
from enum import Enum


class EntityKind(Enum):
    ORGANISM = 0
    FOOD = 1
    PHEROMONE = 2
    WALL = 3


class WallSide(Enum):
    """Which side of the arena a wall sits on."""
    LEFT = 0
    RIGHT = 1
    BOTTOM = 2
    TOP = 3
