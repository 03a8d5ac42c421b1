"""Value types shared by the harness, estimator and experiment runner.

This module defines:
    Status      -- outcome discriminator of a single experiment.
    Evaluation  -- immutable record of one estimate-vs-actual experiment.
    Measurement -- one robust timing sample used by size sweeps.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum


class Status(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    UNDETERMINED = "undetermined"


@dataclass(frozen=True)
class Evaluation:
    """Result of timing at ``n1``, predicting ``n2`` and measuring ``n2``.

    Attributes:
        algorithm_id: Registry id (1..6).
        n1: Reference input size.
        n2: Target input size.
        t1: Best-of-N seconds at ``n1`` (``None`` when nothing was timed).
        predicted: Scaled estimate for ``n2`` in seconds.
        t2: Best-of-N seconds at ``n2``.
        percent_error: ``(predicted - t2) / t2``; NaN unless ``status`` is OK.
        status: Outcome discriminator.
    """

    algorithm_id: int
    n1: int
    n2: int
    t1: float | None
    predicted: float | None
    t2: float | None
    percent_error: float
    status: Status

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    def to_dict(self) -> dict:
        d = asdict(self)
        d["status"] = self.status.value
        # JSON has no NaN literal in strict readers
        if math.isnan(self.percent_error):
            d["percent_error"] = None
        return d


@dataclass(frozen=True)
class Measurement:
    algorithm_id: int
    n: int
    seconds: float
    growth: float
