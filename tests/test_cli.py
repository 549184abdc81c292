import json
from pathlib import Path

import pytest

from teamgen.cli import main


HEADER = "id,name,offense_skill,defense_skill,ball_handling_skill,overall_skill,status\n"


def _roster(path: Path, count: int) -> Path:
    lines = [HEADER]
    for index in range(1, count + 1):
        skill = 1 + (index * 7) % 9
        lines.append(f"{index},Player {index},{skill},{skill},{skill},{skill},going\n")
    path.write_text("".join(lines), encoding="utf-8")
    return path


def test_cli_writes_id_lists(tmp_path: Path, capsys):
    roster = _roster(tmp_path / "roster.csv", 13)
    output = tmp_path / "teams.json"
    export = tmp_path / "teams.csv"

    main([str(roster), "--output", str(output), "--csv", str(export)])

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert len(payload["team_a"]) == 6
    assert len(payload["team_b"]) == 6
    assert len(payload["bench"]) == 1
    assert sorted(payload["team_a"] + payload["team_b"] + payload["bench"]) == list(range(1, 14))
    assert export.read_text(encoding="utf-8").startswith("team,player_id")

    out = capsys.readouterr().out
    assert "6 v 6, bench 1" in out
    assert "Bench:" in out


def test_cli_refuses_small_roster(tmp_path: Path):
    roster = _roster(tmp_path / "roster.csv", 5)
    with pytest.raises(SystemExit) as excinfo:
        main([str(roster)])
    assert "At least 8 players" in str(excinfo.value)


def test_cli_min_players_override(tmp_path: Path, capsys):
    roster = _roster(tmp_path / "roster.csv", 5)
    main([str(roster), "--min-players", "2", "--swap-pass"])
    assert "3 v 2, bench 0" in capsys.readouterr().out


def test_cli_profile_round_trip(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    lines = ["Player,Attack,Defence,Handling\n"] + [f"{i},5,6,7\n" for i in range(1, 9)]
    roster.write_text("".join(lines), encoding="utf-8")
    profile = tmp_path / "profile.json"

    main([
        str(roster),
        "--column", "player_id=Player",
        "--column", "offense=Attack",
        "--column", "defense=Defence",
        "--column", "ball_handling=Handling",
        "--save-profile", str(profile),
    ])
    saved = json.loads(profile.read_text(encoding="utf-8"))
    assert saved["roster_mapping"]["offense"] == "Attack"

    output = tmp_path / "teams.json"
    main([str(roster), "--load-profile", str(profile), "--output", str(output)])
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert len(payload["team_a"]) == 4


def test_cli_rejects_bad_mapping_entry(tmp_path: Path):
    roster = _roster(tmp_path / "roster.csv", 8)
    with pytest.raises(SystemExit):
        main([str(roster), "--column", "offense"])


def test_cli_reports_unreadable_roster(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    roster.write_text(HEADER + "1,Ana,fast,5,5,5,going\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main([str(roster)])
    assert "Could not read roster" in str(excinfo.value)


def test_cli_counts_distinct_players_for_minimum(tmp_path: Path):
    roster = _roster(tmp_path / "roster.csv", 7)
    with roster.open("a", encoding="utf-8") as f:
        f.write("7,Player 7,5,5,5,5,going\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(roster)])
    assert "got 7" in str(excinfo.value)


def test_cli_applies_column_mapping_to_json(tmp_path: Path, capsys):
    roster = tmp_path / "roster.json"
    players = [
        {"pid": index, "offense_skill": 5, "defense_skill": 6, "ball_handling_skill": 7}
        for index in range(1, 9)
    ]
    roster.write_text(json.dumps(players), encoding="utf-8")
    output = tmp_path / "teams.json"

    main([str(roster), "--column", "player_id=pid", "--output", str(output)])

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert sorted(payload["team_a"] + payload["team_b"]) == list(range(1, 9))
    assert "Composite strength gap: 0.00" in capsys.readouterr().out
