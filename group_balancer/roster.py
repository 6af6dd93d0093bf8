"""Roster parsing.

Format (one student per line)::

    name,gender,level,exchange

Examples::

    Ada Lovelace,f,master,false
    Sam Lee,m,bachelor,true
    Pat Kim,x,master,false
    Alex Doe,na,na,na
"""

from typing import List

from .models import GENDERS, LEVELS, UNKNOWN, Student, student_id

ROSTER_LEGEND = """# name,gender,level,exchange
# gender: f | m | x | na
# level: bachelor | master | na
# exchange: true | false | na
"""

SAMPLE_ROSTER = "\n".join([
    "# name,gender,level,exchange",
    "Ada Lovelace,f,master,false",
    "Sam Lee,m,bachelor,true",
    "Pat Kim,x,master,false",
    "Alex Doe,na,na,na",
    "Mehmet Yilmaz,m,master,true",
    "Elena Rossi,f,bachelor,false",
    "Noah Chen,m,bachelor,false",
    "Mina Park,f,master,true",
    "Taylor Singh,x,bachelor,false",
])


def _field(parts, index):
    return parts[index].lower() if len(parts) > index else UNKNOWN


def parse_students(text: str) -> List[Student]:
    """Parse roster text into students, keeping the first of any duplicate names."""
    students = []
    seen = set()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        parts = [p.strip() for p in line.split(",")]
        name = parts[0]
        if not name:
            continue

        gender = _field(parts, 1)
        level = _field(parts, 2)
        exchange_raw = _field(parts, 3)

        uid = student_id(name)
        if uid in seen:
            continue
        seen.add(uid)

        students.append(Student(
            id=uid,
            name=name,
            gender=gender if gender in GENDERS else UNKNOWN,
            level=level if level in LEVELS else UNKNOWN,
            exchange={"true": True, "false": False}.get(exchange_raw),
        ))
    return students


def load_roster(filename) -> List[Student]:
    """Load students from a roster file"""
    with open(filename, "r", encoding="utf-8") as f:
        return parse_students(f.read())
