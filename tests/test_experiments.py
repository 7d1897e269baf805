import csv
import math

import pandas as pd
import pytest

from slidingtile.domains.puzzlen import NPuzzle
from slidingtile.experiments import runner, summarize
from slidingtile.experiments.visualize_path import save_frames
from slidingtile.search.a_star import a_star


def test_generate_instances_is_seeded():
    dom = NPuzzle(3)
    a = runner.generate_instances(dom, [4, 8], 3)
    b = runner.generate_instances(dom, [4, 8], 3)
    assert [i.state for i in a] == [i.state for i in b]
    assert [i.depth for i in a] == [4, 4, 4, 8, 8, 8]
    assert all(i.state != dom.GOAL for i in a)


def test_run_writes_csv(tmp_path):
    out = tmp_path / "results" / "p8.csv"
    rows = runner.run(3, [4, 8], 2, out, include_unsolvable=True)
    assert rows == 8
    with out.open(newline="") as f:
        data = list(csv.DictReader(f))
    assert list(data[0].keys()) == runner.HEADER
    solved = [r for r in data if r["solvable"] == "1"]
    unsolved = [r for r in data if r["solvable"] == "0"]
    assert all(r["termination"] == "ok" and int(r["g"]) <= int(r["depth"]) for r in solved)
    assert all(r["termination"] == "unsolvable" and r["expanded"] == "0" for r in unsolved)


def test_runner_main(tmp_path, capsys):
    out = tmp_path / "last.csv"
    runner.main(["--n", "2", "--depths", "3", "--per_depth", "2", "--out", str(out)])
    assert out.exists()
    assert "Wrote" in capsys.readouterr().out


def test_effective_branching_factor():
    # 1 + b + b^2 = 7  ->  b = 2
    assert summarize.effective_branching_factor(6, 2) == pytest.approx(2.0)
    assert summarize.effective_branching_factor(1, 1) == pytest.approx(1.0)
    assert math.isnan(summarize.effective_branching_factor(10, 0))


def test_summarize_groups_solved_rows(tmp_path):
    out = tmp_path / "p8_h.csv"
    runner.run(3, [6, 10], 3, out, include_unsolvable=True)
    df = summarize.load_many([str(tmp_path / "*.csv")])
    assert len(df) == 12
    table = summarize.summarize(df)
    assert list(table["depth"]) == [6, 10]
    assert list(table["count"]) == [3, 3]
    assert list(table["unsolvable"]) == [3, 3]
    assert (table["b_star"] > 0).all()
    assert {"expanded_mean", "generated_std", "time_sec_mean", "g_mean"} <= set(table.columns)


def test_summarize_empty():
    assert summarize.summarize(summarize.load_many(["/nonexistent/*.csv"])).empty


def test_summarize_main_saves(tmp_path, capsys):
    runner.run(2, [3], 2, tmp_path / "r.csv")
    dest = tmp_path / "summary.csv"
    summarize.main([str(tmp_path / "r.csv"), "--out", str(dest)])
    assert pd.read_csv(dest)["n"].tolist() == [2]
    assert "Saved" in capsys.readouterr().out


def test_save_frames(tmp_path):
    res = a_star(NPuzzle(3).scramble(3, 0))
    frames = save_frames(res.steps, tmp_path / "frames")
    assert len(frames) == len(res.steps)
    assert all(p.exists() and p.suffix == ".png" for p in frames)
