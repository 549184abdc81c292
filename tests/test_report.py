import csv
from io import StringIO

import pytest

from teamgen.allocator import generate_teams
from teamgen.config import AllocatorSettings
from teamgen.models import PlayerRecord
from teamgen.report import (
    EXPORT_HEADERS,
    assignment_response,
    export_assignment_to_csv,
    summarize_assignment,
    summarize_team,
    team_average_rating,
)


def _player(player_id: int, skill: float) -> PlayerRecord:
    return PlayerRecord.from_skills(player_id, skill, skill, skill, overall=skill, name=f"P{player_id}")


def _assignment():
    skills = [9, 8, 7, 6, 6, 5, 5, 4, 4, 3, 3, 2, 1]
    roster = [_player(index, skill) for index, skill in enumerate(skills, start=1)]
    return generate_teams(roster, settings=AllocatorSettings())


def test_team_average_rating_rounds_to_one_decimal():
    players = [_player(1, 5), _player(2, 6), _player(3, 6)]
    assert team_average_rating(players) == pytest.approx(5.7)


def test_team_average_rating_empty_team_is_zero():
    assert team_average_rating([]) == 0.0


def test_summarize_team_totals():
    summary = summarize_team("team_a", [_player(1, 4), _player(2, 6)])
    assert summary.size == 2
    assert summary.average_rating == pytest.approx(5.0)
    assert summary.totals.overall == pytest.approx(10.0)


def test_summarize_assignment_reports_composite_gap():
    summary = summarize_assignment(_assignment())
    # overall sums 30 vs 32 over six players each; every skill column matches overall
    assert summary.composite_gap == pytest.approx(1.07)
    assert summary.team_a.average_rating == pytest.approx(5.0)
    assert summary.team_b.average_rating == pytest.approx(5.3)
    assert [p.player_id for p in summary.bench] == [13]


def test_composite_gap_is_per_player_for_uneven_teams():
    roster = [_player(index, 5.0) for index in range(1, 8)]
    summary = summarize_assignment(generate_teams(roster, settings=AllocatorSettings()))
    assert (summary.team_a.size, summary.team_b.size) == (4, 3)
    assert summary.composite_gap == pytest.approx(0.0)


def test_assignment_response_carries_ids_and_sizes():
    assignment = _assignment()
    response = assignment_response(assignment)
    assert (response.size_a, response.size_b, response.bench_size) == (6, 6, 1)
    assert response.ids == assignment.to_id_lists()
    assert [row.player_id for row in response.team_a.players] == response.ids.team_a
    assert response.bench[0].name == "P13"


def test_export_assignment_to_csv_lists_every_player():
    assignment = _assignment()
    rows = list(csv.reader(StringIO(export_assignment_to_csv(assignment))))

    assert tuple(rows[0]) == EXPORT_HEADERS
    body = rows[1:]
    assert len(body) == 13
    assert [row[0] for row in body].count("team_a") == 6
    assert [row[0] for row in body].count("bench") == 1
    assert body[-1][1] == "13"


def test_export_assignment_custom_labels():
    text = export_assignment_to_csv(_assignment(), labels=("white", "black", "bench"))
    assert "\r\nwhite," in text
    assert "\r\nblack," in text
