"""History of accepted groupings, used to avoid repeating pairs."""

import itertools
import logging
import re
from collections import Counter, defaultdict
from typing import Dict, List, Optional, Sequence

import numpy as np

from .models import Partition, Student, student_id
from .scoring import build_forbidden_pairs, pair_key

logger = logging.getLogger(__name__)

GROUP_LINE = re.compile(r"^\s*Group\s+\d+\s*:(.*)$", re.IGNORECASE)


class GroupHistory:
    """Partitions accepted as previous rounds.

    Lives only as long as the process; prior rounds from earlier runs are fed
    back in with parse_groups_text.
    """

    def __init__(self):
        self.rounds: List[Partition] = []
        self.pair_counts: Dict[tuple, int] = defaultdict(int)

    def __len__(self):
        return len(self.rounds)

    def accept(self, groups: Sequence[Sequence[Student]]):
        """Store a partition so its pairs are avoided next time."""
        if not groups:
            return
        stored = [list(g) for g in groups]
        self.rounds.append(stored)
        for group in stored:
            for a, b in itertools.combinations(group, 2):
                if a.id != b.id:
                    self.pair_counts[pair_key(a, b)] += 1

    def clear(self):
        self.rounds = []
        self.pair_counts = defaultdict(int)

    def forbidden_pairs(self):
        return build_forbidden_pairs(self.rounds)

    def get_pair_statistics(self) -> Optional[dict]:
        """Get statistics about pair frequencies"""
        if not self.pair_counts:
            return None

        frequencies = list(self.pair_counts.values())
        return {
            "total_pairs": len(self.pair_counts),
            "min_frequency": min(frequencies),
            "max_frequency": max(frequencies),
            "mean_frequency": round(float(np.mean(frequencies)), 2),
            "std_frequency": round(float(np.std(frequencies)), 2),
            "distribution": dict(Counter(frequencies)),
        }


def parse_groups_text(text: str, roster: Sequence[Student] = ()) -> Partition:
    """Read a 'Group <n>: a, b, c' listing back into a partition.

    Names are matched to roster students by id. Names missing from the roster
    still count for pair avoidance but carry no attributes.
    """
    by_id = {s.id: s for s in roster}
    groups = []
    for line in text.splitlines():
        match = GROUP_LINE.match(line)
        if not match:
            continue
        group = []
        for name in match.group(1).split(","):
            name = name.strip()
            if not name:
                continue
            student = by_id.get(student_id(name))
            if student is None:
                logger.warning("Previous group member '%s' is not in the roster", name)
                student = Student.from_name(name)
            group.append(student)
        groups.append(group)
    return groups
