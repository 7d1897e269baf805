from slidingtile import solve
from slidingtile.puzzle_io.report import UNSOLVABLE_MESSAGE


def write(tmp_path, text):
    p = tmp_path / "input.txt"
    p.write_text(text)
    return p


def test_solves_and_writes_report(tmp_path, capsys):
    inp = write(tmp_path, "3\n1 2 3\n4 5 6\n7 0 8\n")
    out = tmp_path / "output.txt"
    code = solve.main([str(inp), "-o", str(out), "--check", "--stats"])
    assert code == solve.EXIT_SOLVED
    assert "Move 1 (RIGHT)" in out.read_text()
    printed = capsys.readouterr().out
    assert "Solved in 1 moves" in printed
    assert "expanded" in printed


def test_unsolvable_clears_stale_report(tmp_path, capsys):
    inp = write(tmp_path, "3\n1 2 3\n4 5 6\n8 7 0\n")
    out = tmp_path / "output.txt"
    out.write_text("old solution")
    code = solve.main([str(inp), "-o", str(out)])
    assert code == solve.EXIT_UNSOLVABLE
    assert out.read_text() == ""
    assert UNSOLVABLE_MESSAGE in capsys.readouterr().out


def test_invalid_input(tmp_path, capsys):
    inp = write(tmp_path, "3\n1 2 3\n4 5 6\n7 7 0\n")
    code = solve.main([str(inp), "-o", str(tmp_path / "output.txt")])
    assert code == solve.EXIT_BAD_INPUT
    assert "invalid" in capsys.readouterr().err


def test_tie_break_flag(tmp_path):
    inp = write(tmp_path, "3\n0 1 3\n4 2 5\n7 8 6\n")
    out = tmp_path / "output.txt"
    assert solve.main([str(inp), "-o", str(out), "--tie_break", "lifo", "--check"]) == 0
    assert "Move 4 (DOWN)" in out.read_text()
