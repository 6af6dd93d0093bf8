"""Penalty scoring for groups and partitions."""

import itertools
from collections import Counter
from typing import Iterable, NamedTuple, Sequence, Set, Tuple

from .models import GENDERS, LEVELS, Student, Weights

PairKey = Tuple[str, str]


def pair_key(a: Student, b: Student) -> PairKey:
    """Order-independent key for two students."""
    return (a.id, b.id) if a.id < b.id else (b.id, a.id)


def build_forbidden_pairs(history: Iterable[Sequence[Sequence[Student]]]) -> Set[PairKey]:
    """Convert prior partitions into the set of pairs that already shared a group"""
    pairs = set()
    for groups in history:
        for group in groups:
            for a, b in itertools.combinations(group, 2):
                if a.id != b.id:
                    pairs.add(pair_key(a, b))
    return pairs


class ScoreBreakdown(NamedTuple):
    forbidden: float
    size: float
    gender: float
    level: float
    exchange: float

    @property
    def total(self) -> float:
        return self.forbidden + self.size + self.gender + self.level + self.exchange


def score_breakdown(group: Sequence[Student], forbidden_pairs, target_size: int,
                    weights: Weights) -> ScoreBreakdown:
    """Score one group term by term.

    Unknown attribute values are neutral: they are left out of the counts and
    a balance term only applies once at least two members have a known value.
    """
    forbidden = 0
    for a, b in itertools.combinations(group, 2):
        if pair_key(a, b) in forbidden_pairs:
            forbidden += weights.forbid_pair

    size = weights.size_imbalance * abs(len(group) - target_size)

    genders = Counter(s.gender for s in group)
    levels = Counter(s.level for s in group)
    exchange = Counter(s.exchange for s in group)

    gender = 0
    gender_counts = [genders[g] for g in GENDERS]
    if sum(gender_counts) >= 2:
        # empty categories count towards the spread too
        gender = weights.gender_imbalance * (max(gender_counts) - min(gender_counts))

    level = 0
    bachelors, masters = (levels[lv] for lv in LEVELS)
    if bachelors + masters >= 2:
        level = weights.level_imbalance * abs(bachelors - masters)

    exchange_penalty = 0
    if exchange[True] + exchange[False] >= 2:
        exchange_penalty = weights.exchange_imbalance * abs(exchange[True] - exchange[False])

    return ScoreBreakdown(forbidden, size, gender, level, exchange_penalty)


def score_group(group, forbidden_pairs, target_size, weights):
    return score_breakdown(group, forbidden_pairs, target_size, weights).total


def score_partition(groups, forbidden_pairs, target_size, weights):
    return sum(score_group(g, forbidden_pairs, target_size, weights) for g in groups)
