# tests/test_roster.py
from group_balancer.models import UNKNOWN, student_id
from group_balancer.roster import ROSTER_LEGEND, SAMPLE_ROSTER, load_roster, parse_students


def test_student_id_normalizes_name():
    assert student_id("  Ada   LOVELACE ") == "ada lovelace"

def test_parse_sample_roster():
    students = parse_students(SAMPLE_ROSTER)
    assert len(students) == 9
    ada = students[0]
    assert (ada.id, ada.name, ada.gender, ada.level, ada.exchange) == (
        "ada lovelace", "Ada Lovelace", "f", "master", False
    )
    alex = students[3]
    assert (alex.gender, alex.level, alex.exchange) == (UNKNOWN, UNKNOWN, None)

def test_comments_and_blank_lines_skipped():
    text = ROSTER_LEGEND + "\n\n   \nSam Lee,m,bachelor,true\n  # Pat Kim,x,master,false\n"
    students = parse_students(text)
    assert [s.name for s in students] == ["Sam Lee"]
    assert students[0].exchange is True

def test_unrecognized_codes_become_unknown():
    [s] = parse_students("Kim,woman,phd,yes")
    assert (s.gender, s.level, s.exchange) == (UNKNOWN, UNKNOWN, None)
    assert s.exchange_code == UNKNOWN

def test_codes_are_case_insensitive():
    [s] = parse_students("Kim , F , Master , TRUE")
    assert (s.name, s.gender, s.level, s.exchange) == ("Kim", "f", "master", True)

def test_missing_fields_default_to_unknown():
    [s] = parse_students("Solo")
    assert (s.gender, s.level, s.exchange) == (UNKNOWN, UNKNOWN, None)

def test_empty_name_skipped():
    assert parse_students(",f,master,false") == []

def test_duplicates_keep_first():
    students = parse_students("Ada Lovelace,f,master,false\nada  lovelace,m,bachelor,true")
    assert len(students) == 1
    assert students[0].gender == "f"

def test_load_roster(tmp_path):
    path = tmp_path / "roster.txt"
    path.write_text(SAMPLE_ROSTER, encoding="utf-8")
    assert load_roster(path) == parse_students(SAMPLE_ROSTER)
