from __future__ import annotations

import csv
import math
from pathlib import Path
from typing import Dict, Iterable, List

from bigoh.complexity import growth_label
from bigoh.models import Evaluation

COLUMNS = [
    "algorithm_id",
    "complexity",
    "n1",
    "n2",
    "t1",
    "predicted",
    "t2",
    "percent_error",
    "status",
]


def write_summary_csv(evaluations: Iterable[Evaluation], out_path: Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(COLUMNS)
        for ev in evaluations:
            writer.writerow(
                [
                    ev.algorithm_id,
                    growth_label(ev.algorithm_id),
                    ev.n1,
                    ev.n2,
                    ev.t1,
                    ev.predicted,
                    ev.t2,
                    "" if math.isnan(ev.percent_error) else ev.percent_error,
                    ev.status.value,
                ]
            )
    return out_path


def summarize(evaluations: Iterable[Evaluation]) -> Dict[int, Dict[str, float]]:
    """Mean absolute and signed percent error per algorithm.

    Only determined (``Status.OK``) results contribute; ``count`` tells how many.
    """
    errors: Dict[int, List[float]] = {}
    for ev in evaluations:
        if ev.ok:
            errors.setdefault(ev.algorithm_id, []).append(ev.percent_error)
    summary: Dict[int, Dict[str, float]] = {}
    for alg, vals in sorted(errors.items()):
        summary[alg] = {
            "count": len(vals),
            "mean_error": sum(vals) / len(vals),
            "mean_abs_error": sum(abs(v) for v in vals) / len(vals),
        }
    return summary
