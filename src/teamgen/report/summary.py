"""Read-only team summaries derived from an assignment."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean
from typing import Sequence, Tuple

from teamgen.allocator import SkillTotals, TeamAssignment, skill_totals
from teamgen.config import BalanceWeights
from teamgen.models import PlayerRecord
from teamgen.schemas import AssignmentResponse, PlayerRowResponse, TeamResponse


def team_average_rating(players: Sequence[PlayerRecord]) -> float:
    """Mean overall skill rounded to one decimal; 0 for an empty team."""

    if not players:
        return 0.0
    return round(fmean(player.overall_skill for player in players), 1)


@dataclass(frozen=True)
class TeamSummary:
    label: str
    players: Tuple[PlayerRecord, ...]
    average_rating: float
    totals: SkillTotals

    @property
    def size(self) -> int:
        return len(self.players)


@dataclass(frozen=True)
class AssignmentSummary:
    team_a: TeamSummary
    team_b: TeamSummary
    bench: Tuple[PlayerRecord, ...]
    composite_gap: float


def _normalized_strength(summary: TeamSummary, weights: BalanceWeights) -> float:
    return summary.totals.composite(weights) / max(1, summary.size)


def summarize_team(label: str, players: Sequence[PlayerRecord]) -> TeamSummary:
    members = tuple(players)
    return TeamSummary(
        label=label,
        players=members,
        average_rating=team_average_rating(members),
        totals=skill_totals(members),
    )


def summarize_assignment(
    assignment: TeamAssignment,
    *,
    weights: BalanceWeights | None = None,
) -> AssignmentSummary:
    weights = weights or BalanceWeights()
    team_a = summarize_team("team_a", assignment.team_a)
    team_b = summarize_team("team_b", assignment.team_b)
    # per-player strength, matching what the greedy step balances
    gap = abs(_normalized_strength(team_a, weights) - _normalized_strength(team_b, weights))
    return AssignmentSummary(
        team_a=team_a,
        team_b=team_b,
        bench=assignment.bench,
        composite_gap=round(gap, 2),
    )


def _player_row(player: PlayerRecord) -> PlayerRowResponse:
    return PlayerRowResponse(
        player_id=player.player_id,
        name=player.name,
        offense_skill=player.offense_skill,
        defense_skill=player.defense_skill,
        ball_handling_skill=player.ball_handling_skill,
        overall_skill=player.overall_skill,
    )


def _team_response(summary: TeamSummary) -> TeamResponse:
    return TeamResponse(
        label=summary.label,
        players=[_player_row(player) for player in summary.players],
        average_rating=summary.average_rating,
    )


def assignment_response(
    assignment: TeamAssignment,
    *,
    weights: BalanceWeights | None = None,
) -> AssignmentResponse:
    summary = summarize_assignment(assignment, weights=weights)
    return AssignmentResponse(
        size_a=assignment.plan.size_a,
        size_b=assignment.plan.size_b,
        bench_size=assignment.plan.bench,
        team_a=_team_response(summary.team_a),
        team_b=_team_response(summary.team_b),
        bench=[_player_row(player) for player in summary.bench],
        composite_gap=summary.composite_gap,
        ids=assignment.to_id_lists(),
    )
