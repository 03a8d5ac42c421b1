"""Core package for empirical Big-O experiments.

Exports the complexity model, timing harness and estimator.
"""

from bigoh.complexity import INVALID, growth  # noqa: F401
from bigoh.estimator import estimate, evaluate, percent_error, run_experiment  # noqa: F401
from bigoh.models import Evaluation, Measurement, Status  # noqa: F401
from bigoh.timing import TimingHarness  # noqa: F401

__all__ = [
    "INVALID",
    "Evaluation",
    "Measurement",
    "Status",
    "TimingHarness",
    "estimate",
    "evaluate",
    "growth",
    "percent_error",
    "run_experiment",
]
