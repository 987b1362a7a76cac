"""
arena_life module: organism/genome.py

Genome for a linear sensorimotor controller.

Layout (27 genes, every gene in [-1, 1]):
- genes 0..2   bias of output 0, 1, 2
- genes 3..10  weights of output 0 (turn)
- genes 11..18 weights of output 1 (speed change)
- genes 19..26 weights of output 2 (unused by behaviour, kept for symmetry)

Each output is clamp(bias + dot(weights, inputs), -1, 1). No hidden
layer, no activation besides the clamp.

The three bias genes double as the organism's colour, so related
organisms look alike on screen.
"""

from __future__ import annotations
import random
from typing import List, Sequence, Tuple

N_INPUTS = 8
N_OUTPUTS = 3
GENOME_LENGTH = N_OUTPUTS + N_OUTPUTS * N_INPUTS  # 27

# sensory vector slots
IN_SPEED = 0
IN_X = 1
IN_Y = 2
IN_ENERGY = 3
IN_AGE = 4
IN_FOOD_AHEAD = 5
IN_FOOD_LEFT = 6
IN_FOOD_RIGHT = 7

# output slots
OUT_TURN = 0
OUT_SPEED = 1  # output 2 is carried but drives nothing

Genome = List[float]


class GenomeLengthError(ValueError):
    """A genome that is not exactly GENOME_LENGTH genes long."""


def clamp(v: float, lo: float = -1.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, v))


def check_genome(genome: Sequence[float]) -> None:
    if len(genome) != GENOME_LENGTH:
        raise GenomeLengthError(f"genome must have {GENOME_LENGTH} genes, got {len(genome)}")


def bias_index(output: int) -> int:
    return output


def weight_index(output: int, sensor: int) -> int:
    return N_OUTPUTS + output * N_INPUTS + sensor


def decode(genome: Sequence[float], inputs: Sequence[float]) -> List[float]:
    """
    Map an 8-element sensory vector to 3 motor outputs in [-1, 1].
    """
    check_genome(genome)
    if len(inputs) != N_INPUTS:
        raise ValueError(f"expected {N_INPUTS} sensory inputs, got {len(inputs)}")

    outputs: List[float] = []
    for o in range(N_OUTPUTS):
        start = weight_index(o, 0)
        weights = genome[start:start + N_INPUTS]
        total = genome[bias_index(o)] + sum(w * x for w, x in zip(weights, inputs))
        outputs.append(clamp(total))
    return outputs


def random_genome(rng: random.Random) -> Genome:
    """Uniform genes in [-1, 1]; bias genes halved in magnitude."""
    genome = [rng.uniform(-1.0, 1.0) for _ in range(GENOME_LENGTH)]
    for o in range(N_OUTPUTS):
        genome[bias_index(o)] *= 0.5
    return genome


def seed_genome() -> Genome:
    """
    Hand-written forager used to bootstrap the first population:
    turn toward food on the left/right, speed up when food is ahead,
    slow down when it is off to the side.
    """
    genome = [0.0] * GENOME_LENGTH

    genome[bias_index(OUT_SPEED)] = 0.05
    genome[weight_index(OUT_SPEED, IN_SPEED)] = -0.1
    genome[weight_index(OUT_SPEED, IN_FOOD_AHEAD)] = 1.0
    genome[weight_index(OUT_SPEED, IN_FOOD_LEFT)] = -0.5
    genome[weight_index(OUT_SPEED, IN_FOOD_RIGHT)] = -0.5

    # positive turn is counter-clockwise, i.e. toward the left cone
    genome[weight_index(OUT_TURN, IN_FOOD_LEFT)] = 0.8
    genome[weight_index(OUT_TURN, IN_FOOD_RIGHT)] = -0.8
    return genome


def genome_color(genome: Sequence[float]) -> Tuple[float, float, float]:
    """Bias genes mapped linearly from [-1, 1] to RGB in [0, 1]."""
    check_genome(genome)
    r, g, b = (clamp((genome[bias_index(o)] + 1.0) * 0.5, 0.0, 1.0) for o in range(N_OUTPUTS))
    return (r, g, b)
