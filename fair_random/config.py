"""
Load config from config.yaml with optional env overrides.
Single source of truth for seed size, reduction policy, validator bucketing and
uniformity thresholds. Values are read per call and passed into the core by value;
nothing here is mutated at runtime.
"""
from __future__ import annotations

import os
from pathlib import Path

import yaml

# Defaults if no YAML or env
_DEFAULTS = {
    "seed": {"size": 32},
    "draws": {"reduction_policy": "modulo"},
    "validator": {
        "coarse_threshold": 1000,
        "coarse_factor": 10,
        "chunk_size": 65536,
        "max_intervals": 10_000_000,
    },
    "uniformity": {
        "seeds": 100_000,
        "range": 100,
        "intervals": 10,
        "max_spread": 0.05,
        "master": "fair-random-uniformity",
    },
    "sampler": {"progress_every": 100},
}


def _config_yaml_path() -> Path:
    """config.yaml lives at repo root (parent of package dir) unless FAIR_RANDOM_CONFIG is set."""
    override = os.environ.get("FAIR_RANDOM_CONFIG")
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    policy = os.environ.get("FAIR_RANDOM_REDUCTION_POLICY")
    if policy:
        overrides.setdefault("draws", {})["reduction_policy"] = policy
    max_spread = os.environ.get("FAIR_RANDOM_MAX_SPREAD")
    if max_spread:
        overrides.setdefault("uniformity", {})["max_spread"] = float(max_spread)
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def seed_size() -> int:
    return int(get_config()["seed"]["size"])


def reduction_policy() -> str:
    return str(get_config()["draws"]["reduction_policy"]).lower()


def coarse_threshold() -> int:
    return int(get_config()["validator"]["coarse_threshold"])


def coarse_factor() -> int:
    return int(get_config()["validator"]["coarse_factor"])


def chunk_size() -> int:
    return int(get_config()["validator"]["chunk_size"])


def uniformity_defaults() -> dict:
    return dict(get_config()["uniformity"])


def progress_every() -> int:
    return int(get_config()["sampler"]["progress_every"])


def max_intervals() -> int:
    return int(get_config()["validator"]["max_intervals"])
