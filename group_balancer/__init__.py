"""Balanced random groups with pair-repeat avoidance."""

from .exceptions import InvalidConfiguration
from .history import GroupHistory, parse_groups_text
from .models import DEFAULT_WEIGHTS, Student, Weights, student_id
from .optimizer import OptimizationResult, chunk_groups, optimize, optimize_with_restarts, shuffle
from .render import groups_to_text
from .roster import load_roster, parse_students
from .scoring import build_forbidden_pairs, score_breakdown, score_group, score_partition

__all__ = [
    "DEFAULT_WEIGHTS",
    "GroupHistory",
    "InvalidConfiguration",
    "OptimizationResult",
    "Student",
    "Weights",
    "build_forbidden_pairs",
    "chunk_groups",
    "groups_to_text",
    "load_roster",
    "optimize",
    "optimize_with_restarts",
    "parse_groups_text",
    "parse_students",
    "score_breakdown",
    "score_group",
    "score_partition",
    "shuffle",
    "student_id",
]
