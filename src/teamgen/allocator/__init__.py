"""Team allocator: size planning, greedy assignment and repair."""

from .service import (
    InsufficientPlayersError,
    TeamAssignment,
    allocate_teams,
    check_generation_ready,
    distinct_players,
    generate_teams,
)
from .squad import SkillTotals, Squad, skill_totals, swap, transfer
from .swaps import improve_by_swaps

__all__ = [
    "InsufficientPlayersError",
    "SkillTotals",
    "Squad",
    "TeamAssignment",
    "allocate_teams",
    "check_generation_ready",
    "distinct_players",
    "generate_teams",
    "improve_by_swaps",
    "skill_totals",
    "swap",
    "transfer",
]
