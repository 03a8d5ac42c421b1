"""Experiment configuration loaded from YAML or JSON."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import yaml

from bigoh.complexity import ALGORITHM_IDS
from bigoh.timing import NUM_TRIALS


@dataclass(frozen=True)
class SweepConfig:
    algorithm: int
    sizes: List[int]


@dataclass(frozen=True)
class ExperimentConfig:
    seed: int | None = None
    trials: int = NUM_TRIALS
    warmup: int = 0
    log_level: str = "INFO"
    results_dir: str = "results/experiments"
    repeats: int = 1
    algorithms: Tuple[int, ...] = ALGORITHM_IDS
    size_pairs: List[Tuple[int, int]] = field(default_factory=list)
    sweep: SweepConfig | None = None


def _parse_size_pairs(raw: Any) -> List[Tuple[int, int]]:
    pairs: List[Tuple[int, int]] = []
    for item in raw or []:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"size_pairs entries must be [n1, n2], got {item!r}")
        pairs.append((int(item[0]), int(item[1])))
    return pairs


def _parse_sweep(raw: Any) -> SweepConfig | None:
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise ValueError("sweep must be a mapping with 'algorithm' and 'sizes'")
    sizes = [int(s) for s in raw.get("sizes") or []]
    if not sizes:
        raise ValueError("sweep.sizes must be a non-empty list")
    return SweepConfig(algorithm=int(raw["algorithm"]), sizes=sizes)


def config_from_dict(cfg: Dict[str, Any]) -> ExperimentConfig:
    algorithms = cfg.get("algorithms") or ALGORITHM_IDS
    try:
        return ExperimentConfig(
            seed=cfg.get("seed"),
            trials=int(cfg.get("trials", NUM_TRIALS)),
            warmup=int(cfg.get("warmup", 0)),
            log_level=str(cfg.get("log_level", "INFO")),
            results_dir=cfg.get("results_dir", "results/experiments"),
            repeats=int(cfg.get("repeats", 1)),
            algorithms=tuple(int(a) for a in algorithms),
            size_pairs=_parse_size_pairs(cfg.get("size_pairs")),
            sweep=_parse_sweep(cfg.get("sweep")),
        )
    except (TypeError, KeyError) as e:
        raise ValueError(f"Malformed config: {e}") from e


def load_config(config_file: str = "config.yaml") -> ExperimentConfig:
    """Load configuration from a YAML (``.yml``/``.yaml``) or JSON file."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {config_file}")
    return config_from_dict(cfg)
