"""CSV export for generated teams."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable, Tuple

from teamgen.allocator import TeamAssignment
from teamgen.models import PlayerRecord


EXPORT_HEADERS: Tuple[str, ...] = (
    "team",
    "player_id",
    "name",
    "offense_skill",
    "defense_skill",
    "ball_handling_skill",
    "overall_skill",
)


def _rows(label: str, players: Iterable[PlayerRecord]) -> Iterable[list]:
    for player in players:
        yield [
            label,
            player.player_id,
            player.name,
            player.offense_skill,
            player.defense_skill,
            player.ball_handling_skill,
            player.overall_skill,
        ]


def export_assignment_to_csv(
    assignment: TeamAssignment,
    *,
    labels: Tuple[str, str, str] = ("team_a", "team_b", "bench"),
) -> str:
    """Render an assignment as CSV, one row per player, teams in order."""

    label_a, label_b, label_bench = labels
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADERS)
    writer.writerows(_rows(label_a, assignment.team_a))
    writer.writerows(_rows(label_b, assignment.team_b))
    writer.writerows(_rows(label_bench, assignment.bench))
    return buffer.getvalue()
