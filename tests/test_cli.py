# tests/test_cli.py
import pytest
from click.testing import CliRunner

from group_balancer.cli import main
from group_balancer.roster import ROSTER_LEGEND, SAMPLE_ROSTER


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.txt"
    path.write_text(SAMPLE_ROSTER, encoding="utf-8")
    return str(path)


def test_quiet_listing(roster_file):
    result = CliRunner().invoke(main, [roster_file, "-g", "3", "-i", "300", "--seed", "1", "-q"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert [line.split(":")[0] for line in lines] == ["Group 1", "Group 2", "Group 3"]

def test_rich_output(roster_file):
    result = CliRunner().invoke(main, [roster_file, "-i", "200", "--seed", "2", "--show-stats"])
    assert result.exit_code == 0
    assert "Round 1" in result.output
    assert "Score:" in result.output
    assert "Pair Statistics" in result.output

def test_rounds_and_output_file(roster_file, tmp_path):
    out = tmp_path / "groups.txt"
    result = CliRunner().invoke(
        main, [roster_file, "-r", "2", "-i", "500", "--seed", "3", "-q", "-o", str(out)]
    )
    assert result.exit_code == 0
    listings = out.read_text(encoding="utf-8").strip().split("\n\n")
    assert len(listings) == 2
    assert all(block.startswith("Group 1:") for block in listings)

def test_previous_listing(roster_file, tmp_path):
    previous = tmp_path / "previous.txt"
    previous.write_text("Group 1: Ada Lovelace, Sam Lee, Pat Kim\n", encoding="utf-8")
    result = CliRunner().invoke(
        main, [roster_file, "-p", str(previous), "-i", "2000", "--seed", "4", "-q"]
    )
    assert result.exit_code == 0
    for line in result.output.strip().splitlines():
        names = line.split(":", 1)[1]
        assert sum(n in names for n in ("Ada Lovelace", "Sam Lee", "Pat Kim")) <= 1

def test_legend():
    result = CliRunner().invoke(main, ["--legend"])
    assert result.exit_code == 0
    assert result.output == ROSTER_LEGEND

def test_group_size_too_small(roster_file):
    result = CliRunner().invoke(main, [roster_file, "-g", "1", "-q"])
    assert result.exit_code == 1
    assert "group_size must be >= 2" in result.output

def test_empty_roster(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nobody here\n", encoding="utf-8")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert "No students found" in result.output

def test_missing_roster():
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 2
    assert "Missing argument 'ROSTER'" in result.output

def test_group_size_from_environment(roster_file):
    result = CliRunner().invoke(
        main, [roster_file, "-i", "100", "--seed", "5", "-q"],
        env={"GROUP_BALANCER_GROUP_SIZE": "2"},
    )
    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 5
