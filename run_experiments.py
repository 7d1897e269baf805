#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

PY = sys.executable

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    for tb in ("h", "g", "fifo"):
        run(f"8-puzzle tie_break={tb}",
            f"{PY} -m slidingtile.experiments.runner --n 3 --depths 6 10 14 18 22 --per_depth 20 "
            f"--tie_break {tb} --include_unsolvable --out results/p8_{tb}.csv")
    run("15-puzzle", f"{PY} -m slidingtile.experiments.runner --n 4 --depths 10 20 30 --per_depth 10 "
                     f"--out results/p15_h.csv")
    run("Summary", f"{PY} -m slidingtile.experiments.summarize 'results/p*.csv' --out results/summary.csv")

if __name__ == "__main__":
    main()
