"""Balanced team generation for recurring pickup games."""

from teamgen.allocator import (
    InsufficientPlayersError,
    TeamAssignment,
    allocate_teams,
    check_generation_ready,
    generate_teams,
)
from teamgen.config import SizePlan, plan_team_sizes
from teamgen.models import PlayerRecord

__all__ = [
    "InsufficientPlayersError",
    "PlayerRecord",
    "SizePlan",
    "TeamAssignment",
    "allocate_teams",
    "check_generation_ready",
    "generate_teams",
    "plan_team_sizes",
]
