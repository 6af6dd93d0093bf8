import pytest

from group_balancer.models import Student


@pytest.fixture
def four_students():
    return [
        Student.from_name("A", "f", "master", False),
        Student.from_name("B", "m", "bachelor", True),
        Student.from_name("C", "x", "master", False),
        Student.from_name("D"),
    ]


@pytest.fixture
def roster():
    genders = ["f", "m", "x", "na"]
    levels = ["bachelor", "master", "na"]
    exchange = [True, False, None]
    return [
        Student.from_name(f"Student {i}", genders[i % 4], levels[i % 3], exchange[i % 3])
        for i in range(11)
    ]
