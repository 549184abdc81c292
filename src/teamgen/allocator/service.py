"""Greedy-plus-repair allocator that splits attending players into two teams."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from teamgen.config import (
    MIN_PLAYERS,
    RECOMMENDED_MIN_PLAYERS,
    AllocatorSettings,
    BalanceWeights,
    SizePlan,
    load_settings,
    plan_team_sizes,
)
from teamgen.models import PlayerRecord
from teamgen.schemas import TeamIdLists

from .squad import Squad, transfer
from .swaps import improve_by_swaps


logger = logging.getLogger(__name__)

# Strength comparisons within this margin count as a tie and favour team A.
_TIE_EPSILON = 1e-9


class InsufficientPlayersError(Exception):
    def __init__(self, player_count: int, required: int = MIN_PLAYERS):
        message = f"At least {required} players are needed to generate teams, got {player_count}"
        super().__init__(message)
        self.player_count = player_count
        self.required = required
        self.message = message


@dataclass(frozen=True)
class TeamAssignment:
    team_a: Tuple[PlayerRecord, ...]
    team_b: Tuple[PlayerRecord, ...]
    bench: Tuple[PlayerRecord, ...]
    plan: SizePlan
    repair_moves: int = 0
    swaps: int = 0

    def players(self) -> Tuple[PlayerRecord, ...]:
        return self.team_a + self.team_b + self.bench

    def to_id_lists(self) -> TeamIdLists:
        return TeamIdLists(
            team_a=[player.player_id for player in self.team_a],
            team_b=[player.player_id for player in self.team_b],
            bench=[player.player_id for player in self.bench],
        )


def check_generation_ready(player_count: int, minimum: int = RECOMMENDED_MIN_PLAYERS) -> None:
    """Caller-side gate applied before a full team generation is attempted."""

    if player_count < minimum:
        raise InsufficientPlayersError(player_count, required=minimum)


def distinct_players(players: Iterable[PlayerRecord]) -> List[PlayerRecord]:
    """Drop repeated player ids, keeping the first entry for each."""

    seen: set[int] = set()
    distinct: List[PlayerRecord] = []
    for player in players:
        if player.player_id in seen:
            logger.warning("Ignoring duplicate entry for player %s", player.player_id)
            continue
        seen.add(player.player_id)
        distinct.append(player)
    return distinct


def _rank_by_overall(players: Sequence[PlayerRecord]) -> List[PlayerRecord]:
    # sorted() keeps equal keys in input order even with reverse=True
    return sorted(players, key=lambda p: p.overall_skill, reverse=True)


def _greedy_assign(
    active: Sequence[PlayerRecord],
    plan: SizePlan,
    weights: BalanceWeights,
) -> Tuple[Squad, Squad]:
    team_a = Squad("team_a")
    team_b = Squad("team_b")
    team_a.add(active[0])
    team_b.add(active[1])

    for player in active[2:]:
        if len(team_a) >= plan.size_a:
            team_b.add(player)
            continue
        if len(team_b) >= plan.size_b:
            team_a.add(player)
            continue

        if abs(len(team_a) - len(team_b)) >= 2:
            target = team_a if len(team_a) < len(team_b) else team_b
        elif team_a.normalized_strength(weights) <= team_b.normalized_strength(weights) + _TIE_EPSILON:
            target = team_a
        else:
            target = team_b
        target.add(player)

    return team_a, team_b


def _repair_sizes(team_a: Squad, team_b: Squad, plan: SizePlan) -> int:
    moves = 0

    def move(player: PlayerRecord, source: Squad, target: Squad) -> None:
        nonlocal moves
        transfer(player.player_id, source, target)
        moves += 1
        logger.debug("Moved player %s (%.1f) from %s to %s",
                     player.player_id, player.overall_skill, source.label, target.label)

    while len(team_a) < plan.size_a and len(team_b) > plan.size_b:
        move(team_b.weakest(), team_b, team_a)
    while len(team_b) < plan.size_b and len(team_a) > plan.size_a:
        move(team_a.weakest(), team_a, team_b)

    while len(team_a) > plan.size_a:
        move(team_a.strongest(), team_a, team_b)
    while len(team_b) > plan.size_b:
        move(team_b.strongest(), team_b, team_a)

    if len(team_a) != plan.size_a or len(team_b) != plan.size_b:
        raise RuntimeError(
            f"Repair left teams at {len(team_a)}/{len(team_b)}, expected {plan.size_a}/{plan.size_b}"
        )
    return moves


def generate_teams(
    players: Iterable[PlayerRecord],
    *,
    settings: AllocatorSettings | None = None,
) -> TeamAssignment:
    """Split attending players into two balanced teams plus a bench.

    Raises InsufficientPlayersError when fewer than two distinct players are
    supplied. The input is never mutated.
    """

    roster = distinct_players(players)
    if len(roster) < MIN_PLAYERS:
        raise InsufficientPlayersError(len(roster))

    settings = settings or load_settings()
    plan = plan_team_sizes(len(roster))
    logger.info("Team generation for %d players: team A %d, team B %d, bench %d",
                len(roster), plan.size_a, plan.size_b, plan.bench)

    ranked = _rank_by_overall(roster)
    active = ranked[:plan.active]
    bench = tuple(ranked[plan.active:])

    team_a, team_b = _greedy_assign(active, plan, settings.weights)
    moves = _repair_sizes(team_a, team_b, plan)

    swaps = 0
    if settings.swap_pass:
        max_swaps = settings.max_swaps if settings.max_swaps is not None else plan.active
        swaps = improve_by_swaps(
            team_a,
            team_b,
            threshold=settings.swap_threshold,
            max_swaps=max_swaps,
        )

    logger.info(
        "Team balancing results: team A %d players (skill %.1f), team B %d players (skill %.1f), "
        "%d repair moves, %d swaps",
        len(team_a), team_a.totals().overall, len(team_b), team_b.totals().overall, moves, swaps,
    )

    return TeamAssignment(
        team_a=team_a.members(),
        team_b=team_b.members(),
        bench=bench,
        plan=plan,
        repair_moves=moves,
        swaps=swaps,
    )


def allocate_teams(
    players: Iterable[PlayerRecord],
    *,
    settings: AllocatorSettings | None = None,
) -> TeamAssignment | InsufficientPlayersError:
    """Like :func:`generate_teams`, but hands back the error instead of raising."""

    try:
        return generate_teams(players, settings=settings)
    except InsufficientPlayersError as exc:
        logger.info("Team generation refused: %s", exc.message)
        return exc
