"""
arena_life module: world/arena.py

Static arena geometry:
- world bounds centred on the origin, y pointing up
- four wall colliders sitting on the bounds, slightly longer than the
  side they guard so the corners are closed
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from world.kinds import EntityKind, WallSide


@dataclass(frozen=True)
class Wall:
    id: int
    side: WallSide
    x: float
    y: float
    w: float
    h: float
    kind: EntityKind = field(default=EntityKind.WALL, init=False)

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def extent(self) -> Tuple[float, float]:
        return (self.w, self.h)


@dataclass(frozen=True)
class Arena:
    left: float
    right: float
    bottom: float
    top: float
    wall_thickness: float = 4.0

    @staticmethod
    def create(half_w: float, half_h: float, wall_thickness: float = 4.0) -> "Arena":
        # Make sure we haven't messed up our constants
        if half_w <= 0 or half_h <= 0:
            raise ValueError("arena half extents must be positive")
        return Arena(left=-half_w, right=half_w, bottom=-half_h, top=half_h, wall_thickness=wall_thickness)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top

    def wall_geometry(self, side: WallSide) -> Tuple[float, float, float, float]:
        """(x, y, w, h) of the wall on ``side``."""
        t = self.wall_thickness
        cx = (self.left + self.right) * 0.5
        cy = (self.bottom + self.top) * 0.5
        if side == WallSide.LEFT:
            return (self.left, cy, t, self.height + t)
        if side == WallSide.RIGHT:
            return (self.right, cy, t, self.height + t)
        if side == WallSide.BOTTOM:
            return (cx, self.bottom, self.width + t, t)
        return (cx, self.top, self.width + t, t)

    def make_wall(self, wall_id: int, side: WallSide) -> Wall:
        x, y, w, h = self.wall_geometry(side)
        return Wall(id=wall_id, side=side, x=x, y=y, w=w, h=h)

    def normalized(self, x: float, y: float) -> Tuple[float, float]:
        """Position as fractions of the arena extent (0 at left/bottom, 1 at right/top)."""
        return ((x - self.left) / self.width, (y - self.bottom) / self.height)
