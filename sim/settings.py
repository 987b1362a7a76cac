"""
arena_life module: sim/settings.py

Runtime configuration. Defaults come from the constants in config.py;
override with dataclasses.replace or SimConfig.from_args.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

import config


class ConfigError(ValueError):
    """Raised for settings that cannot describe a valid simulation."""


@dataclass(frozen=True)
class SimConfig:
    # arena
    arena_half_w: float = config.ARENA_HALF_W
    arena_half_h: float = config.ARENA_HALF_H
    wall_thickness: float = config.WALL_THICKNESS
    spawn_margin: float = config.SPAWN_MARGIN

    # population
    start_pop: int = config.START_POP
    max_pop: int = config.MAX_POP
    seed_genome_fraction: float = config.SEED_GENOME_FRACTION

    # energy + life
    energy_min: float = config.ENERGY_MIN
    energy_max: float = config.ENERGY_MAX
    start_energy: float = config.START_ENERGY
    energy_decay: float = config.ENERGY_DECAY
    move_cost: float = config.MOVE_COST
    metabolism_cost: float = config.METABOLISM_COST
    default_lifetime: int = config.DEFAULT_LIFETIME
    base_size: float = config.BASE_SIZE

    # reproduction
    pregnancy_energy: float = config.PREGNANCY_ENERGY
    fertility_age: int = config.FERTILITY_AGE
    p_pregnant: float = config.P_PREGNANT
    birth_energy_reset: float = config.BIRTH_ENERGY_RESET
    offspring_count: int = config.OFFSPRING_COUNT
    offspring_energy: float = config.OFFSPRING_ENERGY

    # movement
    speed_max: float = config.SPEED_MAX
    start_speed: float = config.START_SPEED

    # senses
    vision: float = config.VISION
    cone_half_angle: float = config.CONE_HALF_ANGLE
    border_fraction: float = config.BORDER_FRACTION
    border_sentinel: float = config.BORDER_SENTINEL

    # food
    food_energy: float = config.FOOD_ENERGY
    food_size: float = config.FOOD_SIZE
    food_lifetime: int = config.FOOD_LIFETIME
    food_per_spawn: int = config.FOOD_PER_SPAWN
    max_food: int = config.MAX_FOOD
    start_food: int = config.START_FOOD

    # pheromones
    pheromone_lifetime: int = config.PHEROMONE_LIFETIME
    pheromone_size: float = config.PHEROMONE_SIZE

    # mutation
    p_mutation: float = config.P_MUTATION
    mutation_step: float = config.MUTATION_STEP

    # pacing
    time_step: float = config.TIME_STEP
    time_scale: float = config.TIME_SCALE
    physics_period: float = config.PHYSICS_PERIOD
    sensory_period: float = config.SENSORY_PERIOD
    metabolism_period: float = config.METABOLISM_PERIOD
    growth_period: float = config.GROWTH_PERIOD
    age_period: float = config.AGE_PERIOD
    food_spawn_period: float = config.FOOD_SPAWN_PERIOD
    log_period: float = config.LOG_PERIOD

    # diagnostics
    genome_log_file: Optional[str] = config.GENOME_LOG_FILE

    @property
    def arena_w(self) -> float:
        return self.arena_half_w * 2.0

    @property
    def arena_h(self) -> float:
        return self.arena_half_h * 2.0

    def validate(self) -> "SimConfig":
        """
        Reject settings that make the simulation meaningless.
        Returns self so it can be chained after construction.
        """
        if self.arena_half_w <= 0 or self.arena_half_h <= 0:
            raise ConfigError("arena must have a positive size")
        if self.energy_min >= self.energy_max:
            raise ConfigError(
                f"energy_min ({self.energy_min}) must be below energy_max ({self.energy_max})"
            )
        if self.time_scale <= 0 or self.time_step <= 0:
            raise ConfigError("time_step and time_scale must be positive")
        for name in (
            "physics_period",
            "sensory_period",
            "metabolism_period",
            "growth_period",
            "age_period",
            "food_spawn_period",
            "log_period",
        ):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        for name in ("p_pregnant", "p_mutation", "seed_genome_fraction"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be in [0, 1], got {value}")
        if self.speed_max < 0:
            raise ConfigError("speed_max must not be negative")
        if self.vision <= 0 or self.food_size <= 0:
            raise ConfigError("vision and food_size must be positive")
        if self.offspring_count < 0 or self.start_pop < 0:
            raise ConfigError("population counts must not be negative")
        if self.default_lifetime <= 0 or self.pheromone_lifetime <= 0 or self.food_lifetime <= 0:
            raise ConfigError("lifetimes must be positive")
        return self

    def with_overrides(self, **overrides: Any) -> "SimConfig":
        """replace() that ignores None values (unset CLI flags)."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"unknown settings: {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @staticmethod
    def from_args(args) -> "SimConfig":
        return SimConfig().with_overrides(
            start_pop=getattr(args, "population", None),
            time_scale=getattr(args, "time_scale", None),
            genome_log_file=getattr(args, "log_file", None),
            seed_genome_fraction=0.0 if getattr(args, "random_genomes", False) else None,
        ).validate()
