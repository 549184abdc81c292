import pytest

from teamgen.config import (
    MAX_TEAM_SIZE,
    SizePlan,
    get_size_band,
    iter_size_bands,
    plan_team_sizes,
)


@pytest.mark.parametrize(
    "total, expected",
    [
        (2, (1, 1, 0)),
        (3, (2, 1, 0)),
        (8, (4, 4, 0)),
        (9, (5, 4, 0)),
        (10, (5, 5, 0)),
        (11, (6, 5, 0)),
        (12, (6, 6, 0)),
        (13, (6, 6, 1)),
        (14, (7, 7, 0)),
        (15, (7, 8, 0)),
        (16, (8, 8, 0)),
        (17, (8, 9, 0)),
        (18, (9, 9, 0)),
        (19, (9, 9, 1)),
        (20, (9, 9, 2)),
        (30, (9, 9, 12)),
    ],
)
def test_plan_matches_policy_table(total, expected):
    plan = plan_team_sizes(total)
    assert (plan.size_a, plan.size_b, plan.bench) == expected


def test_plan_invariants_hold_for_all_counts():
    for total in range(2, 61):
        plan = plan_team_sizes(total)
        assert plan.total == total
        assert abs(plan.size_a - plan.size_b) <= 1
        assert max(plan.size_a, plan.size_b) <= MAX_TEAM_SIZE
        if total != 13 and total <= 2 * MAX_TEAM_SIZE:
            assert plan.bench == 0


def test_plan_is_pure():
    assert plan_team_sizes(13) == plan_team_sizes(13)
    assert plan_team_sizes(13) == SizePlan(size_a=6, size_b=6, bench=1)


def test_plan_rejects_fewer_than_two_players():
    with pytest.raises(ValueError):
        plan_team_sizes(1)
    with pytest.raises(ValueError):
        plan_team_sizes(0)


def test_size_bands_cover_every_count_once():
    bands = list(iter_size_bands())
    for total in range(2, 40):
        assert sum(1 for band in bands if band.contains(total)) == 1
    assert get_size_band(13).label == "6v6 with one on the bench"
    assert bands[-1].high is None
