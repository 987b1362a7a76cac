"""
arena_life module: render/renderer.py

Pygame rendering of a simulation snapshot (top-down, y up).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple
import pygame

from render import colors
from sim.simulation import Drawable
from world.arena import Arena
from world.kinds import EntityKind


@dataclass(frozen=True)
class View:
    """World -> screen transform fitting the arena into the window."""
    arena: Arena
    screen_w: int
    screen_h: int
    pad: float = 12.0

    @property
    def scale(self) -> float:
        return min(
            (self.screen_w - 2 * self.pad) / self.arena.width,
            (self.screen_h - 2 * self.pad) / self.arena.height,
        )

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        s = self.scale
        sx = self.pad + (x - self.arena.left) * s
        sy = self.pad + (self.arena.top - y) * s
        return int(sx), int(sy)


def _rect(view: View, d: Drawable) -> pygame.Rect:
    s = view.scale
    w = max(1, int(d.w * s))
    h = max(1, int(d.h * s))
    cx, cy = view.to_screen(d.x, d.y)
    return pygame.Rect(cx - w // 2, cy - h // 2, w, h)


def draw_snapshot(screen: pygame.Surface, view: View, drawables: Iterable[Drawable]) -> None:
    # pheromones under food under organisms
    layers = {EntityKind.WALL: [], EntityKind.PHEROMONE: [], EntityKind.FOOD: [], EntityKind.ORGANISM: []}
    for d in drawables:
        layers[d.kind].append(d)

    for d in layers[EntityKind.WALL]:
        pygame.draw.rect(screen, colors.to_rgb255(d.color), _rect(view, d))

    for d in layers[EntityKind.PHEROMONE]:
        pygame.draw.circle(screen, colors.fade(d.color, d.opacity * 0.6), view.to_screen(d.x, d.y), max(1, int(d.w * view.scale * 0.5)))

    for d in layers[EntityKind.FOOD]:
        pygame.draw.rect(screen, colors.to_rgb255(d.color), _rect(view, d))

    for d in layers[EntityKind.ORGANISM]:
        pygame.draw.circle(screen, colors.to_rgb255(d.color), view.to_screen(d.x, d.y), max(2, int(d.w * view.scale * 0.5)))


def draw_heading(screen: pygame.Surface, view: View, x: float, y: float, hx: float, hy: float, r: float) -> None:
    start = view.to_screen(x, y)
    end = view.to_screen(x + hx * r, y + hy * r)
    pygame.draw.line(screen, colors.HEADING, start, end, 1)


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 24)

    lines = [
        f"Population: {stats.get('population', 0)}  Food: {stats.get('food', 0)}",
        f"Births: {stats.get('births', 0)}  Deaths: {stats.get('deaths', 0)}",
        f"Avg energy: {stats.get('avg_energy', 0.0):.2f}  Max gen: {stats.get('max_generation', 0)}",
        f"Sim time: {stats.get('sim_time', 0.0):.1f}s",
    ]

    y = 16
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (20, y))
        y += 20
