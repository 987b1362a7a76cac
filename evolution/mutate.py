"""
arena_life module: evolution/mutate.py

Point mutation for controller genomes. Reproduction is single-parent,
so there is no crossover operator.
"""

from __future__ import annotations
import random
from typing import List, Sequence

from organism.genome import check_genome, clamp


def mutate_genome(
    genome: Sequence[float],
    rng: random.Random,
    p_mutation: float = 0.1,
    step: float = 0.25,
) -> List[float]:
    """
    Return a mutated copy of ``genome``.

    Each gene independently, with probability ``p_mutation``, is nudged by
    uniform(-step, step) and clamped back into [-1, 1]. The input is left
    untouched.
    """
    check_genome(genome)
    mutated: List[float] = []
    for gene in genome:
        if rng.random() < p_mutation:
            gene = clamp(gene + rng.uniform(-step, step))
        mutated.append(gene)
    return mutated
