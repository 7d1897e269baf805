from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from slidingtile.domains.grid import GridState
from slidingtile.domains.puzzlen import NPuzzle, make_unsolvable_variant
from slidingtile.search.a_star import SearchResult, a_star
from slidingtile.search.frontier import TIE_BREAKS

logger = logging.getLogger(__name__)

HEADER = [
    "algorithm", "n", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "tie_break",
    "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: GridState


def generate_instances(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Seeded scrambles; walks that land back on the goal are skipped."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = dom.scramble(d, seed)
            seed += 1
            attempts += 1
            if d == 0 or s != dom.GOAL:
                out.append(Instance(seed=seed - 1, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}.")
    return out


def result_row(res: SearchResult, n: int, inst: Instance, solvable_flag: int) -> Dict[str, object]:
    row = res.to_row()
    row.update({"n": n, "depth": inst.depth, "seed": inst.seed, "solvable": solvable_flag})
    return row


def run(n: int, depths: List[int], per_depth: int, out: Path,
        tie_break: str = "h", include_unsolvable: bool = False, start_seed: int = 0) -> int:
    """Solve a batch of scrambles and write one CSV row per search; returns rows written."""
    dom = NPuzzle(n)
    insts = generate_instances(dom, depths, per_depth, start_seed)
    out.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for inst in insts:
            r = a_star(inst.state, tie_break=tie_break)
            w.writerow(result_row(r, n, inst, 1)); rows += 1
            logger.debug("depth=%d seed=%d g=%s expanded=%d", inst.depth, inst.seed, r.g, r.expanded)

            # Parity-flipped twin: must be rejected without search
            if include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                r = a_star(u, tie_break=tie_break)
                w.writerow(result_row(r, n, inst, 0)); rows += 1
    return rows


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="A* N-puzzle experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22, 26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rows = run(args.n, args.depths, args.per_depth, args.out,
               tie_break=args.tie_break, include_unsolvable=args.include_unsolvable, start_seed=args.seed)
    print(f"Wrote {args.out} ({rows} rows)")

if __name__ == "__main__":
    main()
