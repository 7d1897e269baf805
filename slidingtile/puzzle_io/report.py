from __future__ import annotations
from pathlib import Path
from typing import List, Sequence, Union

from slidingtile.domains.grid import GridState
from slidingtile.search.path import Step

UNSOLVABLE_MESSAGE = "This puzzle can not be solved!"


def format_grid(grid: GridState) -> str:
    """One line per row; the blank prints as a space, every cell ends with a space."""
    lines = []
    for row in grid.rows():
        lines.append("".join(f"{v if v else ' '} " for v in row))
    return "\n".join(lines) + "\n"


def format_step(step: Step) -> str:
    out: List[str] = [f"Move {step.number} ({step.label}): \n"]
    if step.blank_before is not None:
        (r0, c0), (r1, c1) = step.blank_before, step.blank_after
        out.append(f"Moved space from ({r0}, {c0}) to ({r1}, {c1}).\n")
    out.append(format_grid(step.grid))
    out.append("\n")
    return "".join(out)


def format_report(steps: Sequence[Step]) -> str:
    return "".join(format_step(s) for s in steps)


def write_report(steps: Sequence[Step], path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_report(steps))
    return path
