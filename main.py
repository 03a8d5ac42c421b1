#!/usr/bin/env python3


import argparse
import logging
import random

from bigoh.complexity import growth_label
from bigoh.config import ExperimentConfig, load_config
from bigoh.experiments.aggregate import summarize, write_summary_csv
from bigoh.experiments.runner import ExperimentRunner, generate_plan, sweep
from bigoh.timing import TimingHarness
from bigoh.visualization import plot_sweep

logger = logging.getLogger("bigoh")


def run_sweep(config: ExperimentConfig, out_dir: str) -> None:
    sweep_cfg = config.sweep
    rng = random.Random(config.seed) if config.seed is not None else random.Random()
    harness = TimingHarness(rng=rng, trials=config.trials, warmup=config.warmup)
    measurements = sweep(harness, sweep_cfg.algorithm, sweep_cfg.sizes)
    plot_sweep(measurements, save_path=f"{out_dir}/sweep_alg{sweep_cfg.algorithm}.png")


def main(config: ExperimentConfig) -> None:
    if not config.size_pairs and config.sweep is None:
        raise ValueError("config must define size_pairs and/or sweep")

    runner = ExperimentRunner(
        base_results_dir=config.results_dir,
        trials=config.trials,
        warmup=config.warmup,
    )
    if config.size_pairs:
        plan = generate_plan(
            config.size_pairs,
            repeats=config.repeats,
            algorithm_ids=config.algorithms,
            base_seed=config.seed if config.seed is not None else 0,
        )
        logger.info("Experiment batch: %d runs", len(plan))
        evaluations = runner.run(plan)
        summary_path = write_summary_csv(evaluations, runner.timestamp_dir / "summary.csv")
        logger.info("Saved summary to %s", summary_path)
        for alg, stats in summarize(evaluations).items():
            logger.info(
                "Algorithm %d %-8s runs=%d mean error=%+.4f mean |error|=%.4f",
                alg,
                growth_label(alg),
                stats["count"],
                stats["mean_error"],
                stats["mean_abs_error"],
            )
    if config.sweep is not None:
        run_sweep(config, str(runner.timestamp_dir))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Empirical Big-O estimation (config only)")
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the YAML/JSON configuration file",
    )
    args = parser.parse_args()

    cfg = load_config(args.config)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main(cfg)
