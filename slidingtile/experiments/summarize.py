#!/usr/bin/env python3
"""
Summarize runner CSVs: per (n, tie_break, depth) means/stds of
expanded / generated / time_sec, the mean solution length, and the
effective branching factor b* for the mean expansion count.
"""
from __future__ import annotations
import argparse, glob, os
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

METRICS = ["expanded", "generated", "time_sec"]
KEYS = ["n", "tie_break", "depth"]


def effective_branching_factor(nodes: float, depth: int) -> float:
    """b* such that 1 + b + b^2 + ... + b^d = nodes + 1."""
    if depth <= 0 or nodes <= 0:
        return float("nan")
    # b^d + ... + b + (1 - (nodes + 1)) = 0
    coeffs = np.ones(depth + 1)
    coeffs[-1] -= nodes + 1
    roots = np.roots(coeffs)
    real = roots[np.isclose(roots.imag, 0.0)].real
    real = real[real > 0]
    return float(real.max()) if real.size else float("nan")


def load_many(patterns: List[str]) -> pd.DataFrame:
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(pat)):
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=KEYS + METRICS)
    df = pd.concat(dfs, ignore_index=True, sort=False)

    for c in ("n", "depth", "seed", "expanded", "generated", "duplicates", "g", "time_sec"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate solved rows only; unsolvable twins are counted separately."""
    term = df.get("termination", pd.Series("ok", index=df.index)).fillna("ok")
    ok = df[term == "ok"]
    if ok.empty:
        return pd.DataFrame()

    agg = ok.groupby(KEYS)[METRICS].agg(["mean", "std"])
    agg.columns = [f"{m}_{s}" for m, s in agg.columns]
    agg["g_mean"] = ok.groupby(KEYS)["g"].mean()
    agg["count"] = ok.groupby(KEYS).size()
    agg = agg.reset_index()
    agg["b_star"] = [
        effective_branching_factor(e, int(round(g)))
        for e, g in zip(agg["expanded_mean"], agg["g_mean"])
    ]
    unsolv = (term == "unsolvable").groupby([df[k] for k in KEYS]).sum()
    if unsolv.any():
        agg = agg.merge(unsolv.rename("unsolvable").reset_index(), on=KEYS, how="left")
    return agg


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize A* experiment CSVs")
    ap.add_argument("inputs", nargs="+", help="CSV files or glob patterns")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    df = load_many(args.inputs)
    table = summarize(df)
    if table.empty:
        print("No solved rows found.")
        return
    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(table.to_string(index=False, float_format=lambda x: f"{x:.4g}"))
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved {args.out}")

if __name__ == "__main__":
    main()
