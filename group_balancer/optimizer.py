"""Randomized local search over partitions of a roster."""

import logging
import math
from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from .exceptions import InvalidConfiguration
from .models import DEFAULT_WEIGHTS, Partition, Student, Weights
from .scoring import score_partition

logger = logging.getLogger(__name__)

START_TEMPERATURE = 3.0
END_TEMPERATURE = 0.2


class OptimizationResult(NamedTuple):
    groups: Partition
    score: float


def shuffle(students: Sequence[Student], rng: np.random.Generator) -> List[Student]:
    """Return a uniformly permuted copy of the roster."""
    return [students[i] for i in rng.permutation(len(students))]


def chunk_groups(students: Sequence[Student], group_size: int) -> Partition:
    """Slice the roster into groups of group_size; the last group may be smaller."""
    if group_size < 2:
        raise InvalidConfiguration("group_size must be >= 2")
    return [list(students[i:i + group_size]) for i in range(0, len(students), group_size)]


def temperature(step: int, iterations: int) -> float:
    return START_TEMPERATURE + (END_TEMPERATURE - START_TEMPERATURE) * (step / max(1, iterations - 1))


class AnnealingSearch:
    """Working state of one search: the partition being mutated and the best copy so far."""

    def __init__(self, groups: Partition, group_size: int, forbidden_pairs, iterations: int,
                 weights: Weights, rng: np.random.Generator):
        self.group_size = group_size
        self.forbidden_pairs = forbidden_pairs
        self.iterations = iterations
        self.weights = weights
        self.rng = rng

        self.current = groups
        self.current_score = self._score(groups)
        self.best = [list(g) for g in groups]
        self.best_score = self.current_score

    def _score(self, groups):
        return score_partition(groups, self.forbidden_pairs, self.group_size, self.weights)

    def step(self, step: int):
        """Try one swap between two random groups."""
        rng = self.rng
        group_count = len(self.current)
        temp = temperature(step, self.iterations)

        gi = int(rng.integers(group_count))
        gj = int(rng.integers(group_count))
        if group_count > 1:
            while gj == gi:
                gj = int(rng.integers(group_count))

        g1, g2 = self.current[gi], self.current[gj]
        if not g1 or not g2:
            return

        i = int(rng.integers(len(g1)))
        j = int(rng.integers(len(g2)))
        a, b = g1[i], g2[j]
        g1[i], g2[j] = b, a

        new_score = self._score(self.current)
        delta = new_score - self.current_score

        if delta <= 0 or rng.random() < math.exp(-delta / temp):
            self.current_score = new_score
            if new_score < self.best_score:
                self.best_score = new_score
                self.best = [list(g) for g in self.current]
        else:
            g2[j], g1[i] = b, a

    def run(self) -> OptimizationResult:
        for step in range(self.iterations):
            if self.best_score == 0:
                break
            self.step(step)
        return OptimizationResult(self.best, self.best_score)


def optimize(
    students: Sequence[Student],
    group_size: int,
    forbidden_pairs,
    iterations: int,
    weights: Optional[Weights] = None,
    rng: Optional[np.random.Generator] = None,
) -> OptimizationResult:
    """Optimize group assignment by random swapping.

    Starts from a random shuffle, then repeatedly swaps two students between
    two random groups. A swap is kept if it does not make the total score
    worse, or otherwise with probability exp(-delta / temperature) while the
    temperature cools linearly over the iteration budget. The best partition
    seen is returned as a fresh copy.
    """
    if group_size < 2:
        raise InvalidConfiguration("group_size must be >= 2")
    if iterations < 0:
        raise InvalidConfiguration("iterations must be >= 0")
    if not students:
        return OptimizationResult([], 0)

    weights = weights or DEFAULT_WEIGHTS
    rng = rng if rng is not None else np.random.default_rng()

    search = AnnealingSearch(chunk_groups(shuffle(students, rng), group_size), group_size,
                             forbidden_pairs, iterations, weights, rng)
    logger.debug("Initial partition of %d students into %d groups scores %s",
                 len(students), len(search.current), search.current_score)

    result = search.run()
    logger.debug("Search finished after %d iterations with best score %s", iterations, result.score)
    return result


def optimize_with_restarts(
    students: Sequence[Student],
    group_size: int,
    forbidden_pairs,
    iterations: int,
    weights: Optional[Weights] = None,
    rng: Optional[np.random.Generator] = None,
    restarts: int = 1,
) -> OptimizationResult:
    """Run independent searches and keep the lowest-scoring one."""
    if restarts < 1:
        raise InvalidConfiguration("restarts must be >= 1")
    rng = rng if rng is not None else np.random.default_rng()

    best = None
    for run in range(restarts):
        result = optimize(students, group_size, forbidden_pairs, iterations, weights, rng)
        logger.debug("Restart %d scored %s", run + 1, result.score)
        if best is None or result.score < best.score:
            best = result
        if best.score == 0:
            break
    return best
