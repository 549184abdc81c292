"""Configuration helpers for team sizing and balance tuning."""

from .settings import AllocatorSettings, BalanceWeights, load_settings
from .sizing import (
    MAX_TEAM_SIZE,
    MIN_PLAYERS,
    RECOMMENDED_MIN_PLAYERS,
    SizeBand,
    SizePlan,
    get_size_band,
    iter_size_bands,
    plan_team_sizes,
)

__all__ = [
    "AllocatorSettings",
    "BalanceWeights",
    "MAX_TEAM_SIZE",
    "MIN_PLAYERS",
    "RECOMMENDED_MIN_PLAYERS",
    "SizeBand",
    "SizePlan",
    "get_size_band",
    "iter_size_bands",
    "load_settings",
    "plan_team_sizes",
]
