"""Wall-clock timing harness for registry algorithms.

The harness owns the random generator handed to the algorithms, so separate
experiments never share state unless the caller passes the same generator.
``clock`` and ``collect`` are injectable to make timing deterministic in tests.
"""

from __future__ import annotations

import gc
import logging
import random
import time
from typing import Callable, Mapping

from bigoh.complexity import INVALID
from bigoh.mystery import REGISTRY, AlgorithmFn

NUM_TRIALS = 5

logger = logging.getLogger("bigoh.timing")


class TimingHarness:
    def __init__(
        self,
        rng: random.Random | None = None,
        registry: Mapping[int, AlgorithmFn] | None = None,
        clock: Callable[[], float] = time.perf_counter,
        collect: Callable[[], object] = gc.collect,
        trials: int = NUM_TRIALS,
        warmup: int = 0,
    ):
        if trials < 1:
            raise ValueError(f"trials must be >= 1, got {trials}")
        if warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {warmup}")
        self.rng = rng if rng is not None else random.Random()
        self.registry = registry if registry is not None else REGISTRY
        self.clock = clock
        self.collect = collect
        self.trials = trials
        self.warmup = warmup

    def run_algorithm(self, algorithm_id: int, n: int) -> int:
        """Run the selected algorithm once; ``INVALID`` for an unknown id."""
        fn = self.registry.get(algorithm_id)
        if fn is None:
            return INVALID
        return fn(n, self.rng)

    def time_once(self, algorithm_id: int, n: int) -> float:
        """Seconds taken by a single run.

        A full collection is requested before the clock starts. It is only a
        hint to the interpreter, so single-run timings stay noisy.
        """
        self.collect()
        start = self.clock()
        self.run_algorithm(algorithm_id, n)
        finish = self.clock()
        return finish - start

    def time_best(self, algorithm_id: int, n: int, trials: int | None = None) -> float:
        """Fastest of ``trials`` sequential runs after the warm-up runs.

        Noise only ever adds delay, so the minimum is the closest sample to
        the true cost.
        """
        if trials is None:
            trials = self.trials
        if trials < 1:
            raise ValueError(f"trials must be >= 1, got {trials}")
        for _ in range(self.warmup):
            self.time_once(algorithm_id, n)
        fastest = float("inf")
        for i in range(trials):
            lap = self.time_once(algorithm_id, n)
            logger.debug("alg=%s n=%d trial=%d/%d %.6fs", algorithm_id, n, i + 1, trials, lap)
            if lap < fastest:
                fastest = lap
        return fastest
