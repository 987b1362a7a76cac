"""
Continuous live simulation: organisms forage, reproduce, and evolve in real time.

    python main.py                       # pygame window
    python main.py --headless --ticks 6000 --seed 7
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional
import pygame

import config
from render import colors
from render.renderer import View, draw_heading, draw_hud, draw_snapshot
from sim.settings import SimConfig
from sim.simulation import Simulation

logger = logging.getLogger("arena_life")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the arena_life foraging simulation.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the simulation RNG")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--ticks", type=int, default=6000, help="fixed steps to run in headless mode")
    parser.add_argument("--time-scale", type=float, default=None, help="global cadence multiplier")
    parser.add_argument("--population", type=int, default=None, help="initial organism count")
    parser.add_argument("--log-file", default="genomes.log", help="genome log path ('' disables)")
    parser.add_argument("--random-genomes", action="store_true", help="start from random instead of seeded genomes")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)
    if args.log_file == "":
        args.log_file = None
    return args


def run_headless(sim: Simulation, ticks: int) -> dict:
    for _ in range(ticks):
        sim.step()
        sim.drain_events()
        if not sim.world.organisms():
            logger.info("Population died out after %d steps", sim.clock.steps)
            break
    return sim.summary()


def run_window(sim: Simulation) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("arena_life (Live Evolution)")
    clock = pygame.time.Clock()
    view = View(sim.world.arena, config.SCREEN_W, config.SCREEN_H)

    debug = False
    running = True

    while running:
        clock.tick(int(round(1.0 / sim.cfg.time_step)))

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_TAB:
                debug = not debug

        sim.step()
        # no audio layer; collision events are dropped once per frame
        sim.drain_events()

        screen.fill(colors.BG)
        draw_snapshot(screen, view, sim.snapshot())
        if debug:
            for org in sim.world.organisms():
                draw_heading(screen, view, org.x, org.y, org.hx, org.hy, org.size + 6)
        draw_hud(screen, sim.summary())

        pygame.display.flip()

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    cfg = SimConfig.from_args(args)
    sim = Simulation(cfg, seed=args.seed)
    try:
        if args.headless:
            summary = run_headless(sim, args.ticks)
            logger.info("Finished: %s", summary)
        else:
            run_window(sim)
    finally:
        sim.close()


if __name__ == "__main__":
    main()
