#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from slidingtile.domains.grid import GridState
from slidingtile.domains.puzzlen import NPuzzle
from slidingtile.puzzle_io.loader import load_grid
from slidingtile.search.a_star import a_star
from slidingtile.search.path import Step


def draw_board(state: GridState, out_path: Path, title: str = ""):
    n = state.size
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1, color="black")
        ax.plot([i,i],[0,n], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(state.cells):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def save_frames(steps: List[Step], outdir: Path) -> List[Path]:
    paths = []
    for st in steps:
        p = outdir / f"step_{st.number:03d}.png"
        draw_board(st.grid, p, title=f"{st.number}: {st.label}")
        paths.append(p)
    return paths


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--input", type=Path, default=None, help="Board file; otherwise a seeded scramble is used")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", type=Path, default=Path("report/figs/example_path"))
    args = p.parse_args(argv)

    start = load_grid(args.input) if args.input else NPuzzle(args.n).scramble(args.depth, args.seed)
    res = a_star(start)
    if not res.solved:
        print("No path: puzzle is unsolvable.")
        return

    frames = save_frames(res.steps, args.outdir)
    print(f"Saved {len(frames)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
