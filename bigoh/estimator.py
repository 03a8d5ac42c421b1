"""Predict running time from a theoretical growth ratio and validate it.

``estimate`` scales a measured duration by ``growth(n2) / growth(n1)``;
``run_experiment`` compares that prediction with an independent measurement
at ``n2``. Invalid input is reported as data (sentinel or ``Status``), never
as an exception.
"""

from __future__ import annotations

import logging
import math

from bigoh.complexity import INVALID, growth, is_valid_algorithm
from bigoh.models import Evaluation, Status
from bigoh.timing import TimingHarness

logger = logging.getLogger("bigoh.estimator")


def estimate(algorithm_id: int, n1: float, t1: float, n2: float) -> float:
    """Predict the duration at ``n2`` from duration ``t1`` measured at ``n1``.

    Returns:
        ``t1 * growth(n2) / growth(n1)``, or ``INVALID`` when either growth
        value is invalid. NaN when ``growth(n1)`` overflows, since the ratio
        is then undefined.
    """
    growth1 = growth(algorithm_id, n1)
    growth2 = growth(algorithm_id, n2)
    if growth1 <= 0 or growth2 <= 0:
        return INVALID
    if math.isinf(growth1):
        logger.warning("Growth at n1=%s overflows; ratio undefined", n1)
        return math.nan
    if growth1 == growth2:
        logger.info("%s and %s are equal", growth1, growth2)
    return t1 * (growth2 / growth1)


def percent_error(actual: float, estimate: float) -> float:
    """Relative error ``(estimate - actual) / actual``.

    A zero ``actual`` gives NaN: the error cannot be determined.
    """
    if actual == 0:
        logger.warning("Actual duration is zero; percent error undetermined")
        return math.nan
    return (estimate - actual) / actual


def run_experiment(harness: TimingHarness, algorithm_id: int, n1: int, n2: int) -> Evaluation:
    """Time at ``n1``, predict ``n2``, time ``n2`` and compare.

    Nothing is timed for an unknown algorithm or a non-positive size.
    """
    if not is_valid_algorithm(algorithm_id) or n1 <= 0 or n2 <= 0:
        logger.warning("Invalid experiment input: alg=%s n1=%s n2=%s", algorithm_id, n1, n2)
        return Evaluation(
            algorithm_id=algorithm_id,
            n1=n1,
            n2=n2,
            t1=None,
            predicted=None,
            t2=None,
            percent_error=math.nan,
            status=Status.INVALID_INPUT,
        )

    t1 = harness.time_best(algorithm_id, n1)
    predicted = estimate(algorithm_id, n1, t1, n2)
    # second, independent measurement used as ground truth
    t2 = harness.time_best(algorithm_id, n2)
    if t1 == 0:
        # zero reference time predicts zero for any size
        logger.warning("Reference duration at n1=%d is zero; percent error undetermined", n1)
        error = math.nan
    else:
        error = percent_error(t2, predicted)
    status = Status.UNDETERMINED if math.isnan(error) else Status.OK
    logger.info(
        "alg=%d n1=%d t1=%.6fs n2=%d predicted=%.6fs actual=%.6fs error=%.4f",
        algorithm_id,
        n1,
        t1,
        n2,
        predicted,
        t2,
        error,
    )
    return Evaluation(
        algorithm_id=algorithm_id,
        n1=n1,
        n2=n2,
        t1=t1,
        predicted=predicted,
        t2=t2,
        percent_error=error,
        status=status,
    )


def evaluate(harness: TimingHarness, algorithm_id: int, n1: int, n2: int) -> float:
    """Percent error of the growth-based prediction at ``n2`` (NaN if unknown)."""
    return run_experiment(harness, algorithm_id, n1, n2).percent_error
