"""Allocator tuning knobs with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

_OVERALL_WEIGHT_ENV = "TEAMGEN_OVERALL_WEIGHT"
_OFFENSE_WEIGHT_ENV = "TEAMGEN_OFFENSE_WEIGHT"
_DEFENSE_WEIGHT_ENV = "TEAMGEN_DEFENSE_WEIGHT"
_BALL_HANDLING_WEIGHT_ENV = "TEAMGEN_BALL_HANDLING_WEIGHT"
_SWAP_PASS_ENV = "TEAMGEN_SWAP_PASS"
_SWAP_THRESHOLD_ENV = "TEAMGEN_SWAP_THRESHOLD"
_MAX_SWAPS_ENV = "TEAMGEN_MAX_SWAPS"

_SWAP_THRESHOLD_DEFAULT = 1.0

_TRUE_TOKENS = {"1", "true", "t", "yes", "y", "on"}
_FALSE_TOKENS = {"0", "false", "f", "no", "n", "off"}


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int | None, *, min_value: int | None = None) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %s", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    text = raw.strip().lower()
    if text in _TRUE_TOKENS:
        return True
    if text in _FALSE_TOKENS:
        return False
    logger.warning("Invalid flag for %s: %s; using default %s", name, raw, default)
    return default


@dataclass(frozen=True)
class BalanceWeights:
    """Multipliers applied to team skill sums when comparing strength."""

    overall: float = 1.0
    offense: float = 0.8
    defense: float = 0.8
    ball_handling: float = 0.6


@dataclass(frozen=True)
class AllocatorSettings:
    weights: BalanceWeights = field(default_factory=BalanceWeights)
    swap_pass: bool = False
    swap_threshold: float = _SWAP_THRESHOLD_DEFAULT
    # None means one swap per active player
    max_swaps: int | None = None


def load_settings() -> AllocatorSettings:
    """Build settings from the ``TEAMGEN_*`` environment variables."""

    defaults = BalanceWeights()
    weights = BalanceWeights(
        overall=_env_float(_OVERALL_WEIGHT_ENV, defaults.overall, clamp_min=0.0),
        offense=_env_float(_OFFENSE_WEIGHT_ENV, defaults.offense, clamp_min=0.0),
        defense=_env_float(_DEFENSE_WEIGHT_ENV, defaults.defense, clamp_min=0.0),
        ball_handling=_env_float(_BALL_HANDLING_WEIGHT_ENV, defaults.ball_handling, clamp_min=0.0),
    )
    return AllocatorSettings(
        weights=weights,
        swap_pass=_env_bool(_SWAP_PASS_ENV, False),
        swap_threshold=_env_float(_SWAP_THRESHOLD_ENV, _SWAP_THRESHOLD_DEFAULT, clamp_min=0.0),
        max_swaps=_env_int(_MAX_SWAPS_ENV, None, min_value=0),
    )
