"""Helpers to load roster CSV/JSON files and emit player records."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from teamgen.models import PlayerRecord, overall_from_components


logger = logging.getLogger(__name__)

ATTENDING_STATUS = "going"

DEFAULT_ROSTER_MAPPING = {
    "player_id": "id",
    "name": "name",
    "offense": "offense_skill",
    "defense": "defense_skill",
    "ball_handling": "ball_handling_skill",
    "overall": "overall_skill",
    "status": "status",
}


class RosterRow(BaseModel):
    row_number: int
    raw_id: str
    raw_name: str = ""
    raw_offense: str
    raw_defense: str
    raw_ball_handling: str
    raw_overall: Optional[str] = None
    raw_status: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str], *, row_number: int = 0) -> "RosterRow":
        def extract(key: str, *, default: Optional[str] = None) -> Optional[str]:
            column = mapping.get(key, DEFAULT_ROSTER_MAPPING.get(key))
            if column is None:
                return default
            value = row.get(column)
            if value is None:
                return default
            text = str(value).strip()
            return text if text else default

        return cls(
            row_number=row_number,
            raw_id=extract("player_id", default=""),
            raw_name=extract("name", default=""),
            raw_offense=extract("offense", default=""),
            raw_defense=extract("defense", default=""),
            raw_ball_handling=extract("ball_handling", default=""),
            raw_overall=extract("overall"),
            raw_status=extract("status"),
        )

    @property
    def is_attending(self) -> bool:
        if self.raw_status is None:
            return True
        return self.raw_status.lower() == ATTENDING_STATUS


def _parse_id(row: RosterRow) -> int:
    try:
        return int(row.raw_id)
    except ValueError:
        raise ValueError(f"row {row.row_number}: player id '{row.raw_id}' is not an integer") from None


def _parse_skill(row: RosterRow, label: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"row {row.row_number}: {label} skill '{raw}' is not numeric") from None


def rows_to_players(rows: Sequence[RosterRow], *, attending_only: bool = True) -> List[PlayerRecord]:
    players: List[PlayerRecord] = []
    skipped = 0
    for row in rows:
        if attending_only and not row.is_attending:
            skipped += 1
            continue
        overall = _parse_skill(row, "overall", row.raw_overall) if row.raw_overall else None
        players.append(
            PlayerRecord.from_skills(
                _parse_id(row),
                _parse_skill(row, "offense", row.raw_offense),
                _parse_skill(row, "defense", row.raw_defense),
                _parse_skill(row, "ball handling", row.raw_ball_handling),
                overall=overall,
                name=row.raw_name,
            )
        )
    if skipped:
        logger.info("Skipped %d roster rows that are not marked '%s'", skipped, ATTENDING_STATUS)
    return players


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterRow]:
    mapping = mapping or DEFAULT_ROSTER_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        # header is line 1
        rows = [RosterRow.from_mapping(row, mapping, row_number=index) for index, row in enumerate(reader, start=2)]
    return rows


def load_players_from_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
    attending_only: bool = True,
) -> List[PlayerRecord]:
    return rows_to_players(load_roster_csv(path, mapping=mapping), attending_only=attending_only)


def _json_entries(payload: object) -> Iterable[Mapping[str, object]]:
    if isinstance(payload, Mapping):
        payload = payload.get("players")
    if not isinstance(payload, list):
        raise ValueError("roster JSON must be a list of players or an object with a 'players' list")
    for entry in payload:
        if not isinstance(entry, Mapping):
            raise ValueError(f"roster JSON entries must be objects, got {type(entry).__name__}")
        yield entry


def _lookup(data: Mapping[str, object], key: str, alias: str) -> object:
    value = data.get(key)
    return data.get(alias) if value is None else value


_JSON_FIELDS = {
    "player_id": "player_id",
    "name": "name",
    "offense": "offense_skill",
    "defense": "defense_skill",
    "ball_handling": "ball_handling_skill",
    "overall": "overall_skill",
    "status": "status",
}


def _apply_mapping(entry: Mapping[str, object], mapping: Mapping[str, str]) -> dict:
    data = dict(entry)
    for key, column in mapping.items():
        if key not in _JSON_FIELDS:
            raise ValueError(f"Unknown roster mapping key '{key}'")
        if column in data:
            data[_JSON_FIELDS[key]] = data.pop(column)
    return data


def _required_skill(data: Mapping[str, object], key: str, alias: str) -> float:
    value = _lookup(data, key, alias)
    if value is None:
        raise ValueError(f"player {_lookup(data, 'player_id', 'id')} is missing {key}")
    return float(value)


def load_players_from_json(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
    attending_only: bool = True,
) -> List[PlayerRecord]:
    """Load players serialized with either snake_case or camelCase keys.

    Entries without an overall skill get the mean of their sub-skills. A
    ``status`` key other than ``going`` drops the entry when ``attending_only``.
    ``mapping`` renames custom keys using the same keys as the CSV mapping.
    """

    payload = json.loads(path.read_text(encoding="utf-8"))
    players: List[PlayerRecord] = []
    for entry in _json_entries(payload):
        data = _apply_mapping(entry, mapping or {})
        status = data.pop("status", None)
        if attending_only and status is not None and str(status).lower() != ATTENDING_STATUS:
            continue
        if _lookup(data, "overall_skill", "overallSkill") is None:
            data.pop("overallSkill", None)
            data["overall_skill"] = overall_from_components(
                _required_skill(data, "offense_skill", "offenseSkill"),
                _required_skill(data, "defense_skill", "defenseSkill"),
                _required_skill(data, "ball_handling_skill", "ballHandlingSkill"),
            )
        players.append(PlayerRecord.model_validate(data))
    return players
