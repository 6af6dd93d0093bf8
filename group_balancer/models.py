"""Student records, attribute vocabularies and scoring weights."""

import re
from dataclasses import dataclass, fields
from typing import List, Optional

from .exceptions import InvalidConfiguration

UNKNOWN = "na"

# x = nonbinary/other
GENDERS = ("f", "m", "x")
LEVELS = ("bachelor", "master")


def student_id(name: str) -> str:
    """Stable id for a display name: trimmed, lower-cased, single-spaced."""
    return re.sub(r"\s+", " ", name.strip().lower())


@dataclass(frozen=True)
class Student:
    id: str
    name: str
    gender: str = UNKNOWN
    level: str = UNKNOWN
    exchange: Optional[bool] = None

    @classmethod
    def from_name(cls, name, gender=UNKNOWN, level=UNKNOWN, exchange=None):
        return cls(student_id(name), name, gender, level, exchange)

    @property
    def exchange_code(self) -> str:
        if self.exchange is None:
            return UNKNOWN
        return "true" if self.exchange else "false"


Group = List[Student]
Partition = List[Group]


@dataclass(frozen=True)
class Weights:
    forbid_pair: float = 250  # keep well above the others so repeats are avoided first
    gender_imbalance: float = 6
    level_imbalance: float = 4
    exchange_imbalance: float = 4
    size_imbalance: float = 1

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise InvalidConfiguration(f"Weight '{f.name}' must be non-negative")


DEFAULT_WEIGHTS = Weights()
