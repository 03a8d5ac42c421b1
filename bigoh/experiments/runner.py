from __future__ import annotations

import json
import logging
import random
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from bigoh.complexity import ALGORITHM_IDS, growth
from bigoh.estimator import run_experiment
from bigoh.models import Evaluation, Measurement
from bigoh.timing import NUM_TRIALS, TimingHarness

logger = logging.getLogger("bigoh.runner")


@dataclass(frozen=True)
class RunConfig:
    """Single estimate-vs-actual experiment."""

    algorithm_id: int
    n1: int
    n2: int
    seed: int  # seed for the experiment's own generator


class ExperimentRunner:
    def __init__(
        self,
        base_results_dir: str = "results/experiments",
        trials: int = NUM_TRIALS,
        warmup: int = 0,
    ):
        """Each batch gets its own timestamped directory; older ones are kept."""
        self.base_dir = Path(base_results_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.timestamp_dir = self.base_dir / datetime.now().strftime("%Y%m%d_%H%M%S")
        self.timestamp_dir.mkdir(parents=True, exist_ok=True)
        self.trials = trials
        self.warmup = warmup

    def run(self, configs: Sequence[RunConfig]) -> List[Evaluation]:
        results: List[Evaluation] = []
        for idx, cfg in enumerate(configs, start=1):
            logger.info("(%d/%d) Running: %s", idx, len(configs), cfg)
            result = self._run_single(cfg)
            results.append(result)
            self._persist_result(cfg, result)
        return results

    def _run_single(self, cfg: RunConfig) -> Evaluation:
        harness = TimingHarness(
            rng=random.Random(cfg.seed),
            trials=self.trials,
            warmup=self.warmup,
        )
        return run_experiment(harness, cfg.algorithm_id, cfg.n1, cfg.n2)

    def _persist_result(self, cfg: RunConfig, result: Evaluation) -> Path:
        filename = f"alg={cfg.algorithm_id}_n1={cfg.n1}_n2={cfg.n2}_seed={cfg.seed}.json"
        path = self.timestamp_dir / filename
        payload = {"config": asdict(cfg), "trials": self.trials, **result.to_dict()}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.debug("Saved %s", path)
        return path


def generate_plan(
    size_pairs: Iterable[Tuple[int, int]],
    repeats: int = 1,
    algorithm_ids: Iterable[int] | None = None,
    base_seed: int = 0,
) -> List[RunConfig]:
    """Every algorithm x size pair x repeat; seeds are ``base_seed + repeat``."""
    if algorithm_ids is None:
        algorithm_ids = ALGORITHM_IDS
    pairs = list(size_pairs)
    configs: List[RunConfig] = []
    for alg in algorithm_ids:
        for n1, n2 in pairs:
            for seed in range(base_seed, base_seed + repeats):
                configs.append(RunConfig(algorithm_id=alg, n1=n1, n2=n2, seed=seed))
    return configs


def sweep(harness: TimingHarness, algorithm_id: int, sizes: Iterable[int]) -> List[Measurement]:
    """Robust timing of one algorithm over increasing sizes."""
    measurements: List[Measurement] = []
    for n in sizes:
        seconds = harness.time_best(algorithm_id, n)
        measurements.append(
            Measurement(algorithm_id=algorithm_id, n=n, seconds=seconds, growth=growth(algorithm_id, n))
        )
        logger.info("Sweep alg=%d n=%d best=%.6fs", algorithm_id, n, seconds)
    return measurements
