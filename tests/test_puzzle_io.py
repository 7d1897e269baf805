import pytest

from slidingtile.domains.grid import GridState
from slidingtile.errors import InputError
from slidingtile.puzzle_io.loader import load_grid, parse_grid
from slidingtile.puzzle_io.report import format_grid, format_report, write_report
from slidingtile.search.a_star import a_star

from conftest import grid

SCENARIO_1_REPORT = (
    "Move 0 (START): \n"
    "1 2 3 \n"
    "4 5 6 \n"
    "7   8 \n"
    "\n"
    "Move 1 (RIGHT): \n"
    "Moved space from (2, 1) to (2, 2).\n"
    "1 2 3 \n"
    "4 5 6 \n"
    "7 8   \n"
    "\n"
)


def test_parse_rows():
    s = parse_grid("3\n1 2 3\n4 5 6\n7 0 8\n")
    assert s == grid((1, 2, 3), (4, 5, 6), (7, 0, 8))
    assert s.blank == (2, 1)


def test_parse_any_whitespace():
    assert parse_grid("2 1 2\t3\n\n0") == GridState.goal(2)


@pytest.mark.parametrize("text, fragment", [
    ("", "empty"),
    ("3\n1 2 x\n", "non-integer"),
    ("1\n0\n", "at least 2"),
    ("3\n1 2 3\n4 5 6\n7 0\n", "expected 9 cells"),
    ("2\n1 2\n3 4\n", "outside 0..3"),
    ("2\n1 1\n3 0\n", "more than once"),
    ("2\n-1 2\n3 0\n", "outside"),
])
def test_rejects_malformed(text, fragment):
    with pytest.raises(InputError) as ei:
        parse_grid(text)
    assert fragment in str(ei.value)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_grid("2\n0 0\n0 0\n")


def test_load_grid(tmp_path):
    p = tmp_path / "input.txt"
    p.write_text("2\n1 2\n3 0\n")
    assert load_grid(p).is_goal()
    with pytest.raises(InputError):
        load_grid(tmp_path / "missing.txt")


def test_format_grid_pads_blank():
    assert format_grid(grid((1, 2), (0, 3))) == "1 2 \n  3 \n"


def test_report_matches_text_format(tmp_path):
    res = a_star(grid((1, 2, 3), (4, 5, 6), (7, 0, 8)))
    assert format_report(res.steps) == SCENARIO_1_REPORT
    out = write_report(res.steps, tmp_path / "out" / "output.txt")
    assert out.read_text() == SCENARIO_1_REPORT


def test_report_for_solved_input_has_only_start():
    res = a_star(GridState.goal(2))
    assert format_report(res.steps) == "Move 0 (START): \n1 2 \n3   \n\n"
