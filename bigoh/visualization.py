import logging
import os
from pathlib import Path
from typing import List

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from bigoh.complexity import growth_label  # noqa: E402
from bigoh.models import Measurement  # noqa: E402

logger = logging.getLogger("bigoh.visualization")


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def next_unique_path(path: str | Path) -> str:
    """If the file exists, append _1, _2 ... until a free name is found."""
    p = Path(path)
    if not p.exists():
        return str(p)
    counter = 1
    while True:
        candidate = p.parent / f"{p.stem}_{counter}{p.suffix}"
        if not candidate.exists():
            return str(candidate)
        counter += 1


def theoretical_curve(measurements: List[Measurement]) -> List[float]:
    """Theoretical durations anchored at the first measurement.

    Each point is ``seconds[0] * growth(n) / growth(n0)``, the same scaling the
    estimator applies.
    """
    if not measurements:
        return []
    anchor = measurements[0]
    if anchor.growth <= 0:
        return []
    return [anchor.seconds * (m.growth / anchor.growth) for m in measurements]


def plot_sweep(measurements: List[Measurement], save_path: str) -> str | None:
    """Plot measured best-of-N durations against the scaled theoretical curve.

    Uses log-log axes so polynomial classes appear as straight lines. Returns
    the written path or ``None`` when there is nothing to draw.
    """
    points = [m for m in measurements if m.seconds > 0]
    if not points:
        logger.warning("No positive durations to plot")
        return None
    sizes = [m.n for m in points]
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    ax.plot(
        sizes,
        [m.seconds for m in points],
        label="measured (best of N)",
        linewidth=2,
        marker="o",
        markersize=4,
        markerfacecolor="white",
        markeredgewidth=1.0,
    )
    theory = theoretical_curve(points)
    if theory:
        label = growth_label(points[0].algorithm_id) or "theory"
        ax.plot(sizes, theory, label=label, linestyle="--", linewidth=1.5)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Input size n", fontsize=12)
    ax.set_ylabel("Time [s]", fontsize=12)
    ax.set_title(f"Algorithm {points[0].algorithm_id}: measured vs theoretical", fontsize=14)
    ax.grid(True, which="both", alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(frameon=False)

    filepath = next_unique_path(save_path)
    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    logger.info("Sweep plot saved as: %s", filepath)
    return filepath
