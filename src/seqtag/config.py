"""Configuration loading utilities for seqtag."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_DECODERS = {"viterbi", "greedy"}


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    decoder: str
    epsilon: float


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("SEQTAG_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | float] = {
        "log_level": "INFO",
        "decoder": "viterbi",
        "epsilon": 1e-8,
    }
    file_values = _load_profile(profile_path)
    defaults.update(file_values)

    log_level = os.getenv("SEQTAG_LOG_LEVEL", str(defaults["log_level"]))
    decoder = os.getenv("SEQTAG_DECODER", str(defaults["decoder"]))
    epsilon = _parse_float("SEQTAG_EPSILON", os.getenv("SEQTAG_EPSILON"), defaults["epsilon"])

    if decoder not in _DECODERS:
        raise ValueError(f"decoder must be one of {sorted(_DECODERS)}, got {decoder!r}")
    if epsilon < 0:
        raise ValueError(f"epsilon must be non-negative, got {epsilon}")

    return AppConfig(env=env, log_level=log_level.upper(), decoder=decoder, epsilon=epsilon)


def configure_logging(config: AppConfig) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | float]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    allowed = {"log_level", "decoder", "epsilon"}
    resolved: dict[str, str | float] = {}
    for key, raw in payload.items():
        if key not in allowed:
            continue
        if key == "epsilon":
            resolved[key] = _coerce_float(key, raw)
        else:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_float(name: str, raw: str | None, default: str | float) -> float:
    if raw is None:
        return _coerce_float(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _coerce_float(name: str, value: object) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got type bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be a number, got {value!r}") from exc
    raise ValueError(f"{name} must be a number, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
