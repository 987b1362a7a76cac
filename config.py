"""
Simulation tuning knobs (defaults for sim.config.SimConfig).
"""

import math

# Arena (world units, origin at the centre, y up)
ARENA_HALF_W = 250.0
ARENA_HALF_H = 250.0
WALL_THICKNESS = 4.0
SPAWN_MARGIN = 20.0

# Window
SCREEN_W, SCREEN_H = 720, 720

# Population controls
START_POP = 20
MAX_POP = 150
SEED_GENOME_FRACTION = 1.0

# Energy + life
ENERGY_MIN = 0.05
ENERGY_MAX = 3.0
START_ENERGY = 1.0
ENERGY_DECAY = 0.9998        # per physics tick
MOVE_COST = 0.0004           # * speed^2 per physics tick
METABOLISM_COST = 0.01       # per metabolism tick
DEFAULT_LIFETIME = 480       # age ticks
BASE_SIZE = 8.0

# Reproduction
PREGNANCY_ENERGY = 2.0
FERTILITY_AGE = 40           # age ticks
P_PREGNANT = 0.5
BIRTH_ENERGY_RESET = 1.0
OFFSPRING_COUNT = 2
OFFSPRING_ENERGY = 0.4

# Movement
SPEED_MAX = 2.0              # world units per physics tick
START_SPEED = 0.5

# Senses
VISION = 100.0
CONE_HALF_ANGLE = math.pi / 8
BORDER_FRACTION = 0.1
BORDER_SENTINEL = -1.0

# Food field
FOOD_ENERGY = 0.2
FOOD_SIZE = 5.0
FOOD_LIFETIME = 240          # age ticks
FOOD_PER_SPAWN = 1
MAX_FOOD = 200
START_FOOD = 40

# Pheromones
PHEROMONE_LIFETIME = 20      # age ticks
PHEROMONE_SIZE = 2.0

# Mutation
P_MUTATION = 0.1
MUTATION_STEP = 0.25

# Runtime pacing (seconds of simulated time, divided by TIME_SCALE)
TIME_STEP = 1.0 / 60.0
TIME_SCALE = 1.0
PHYSICS_PERIOD = 1.0 / 60.0
SENSORY_PERIOD = 0.1
METABOLISM_PERIOD = 1.0
GROWTH_PERIOD = 0.5
AGE_PERIOD = 0.25
FOOD_SPAWN_PERIOD = 0.25
LOG_PERIOD = 10.0

# Diagnostics
GENOME_LOG_FILE = None  # path; main.py enables it by default
