"""Input adapters that turn roster files into player records."""

from .roster import (
    ATTENDING_STATUS,
    DEFAULT_ROSTER_MAPPING,
    RosterRow,
    load_players_from_csv,
    load_players_from_json,
    load_roster_csv,
    rows_to_players,
)

__all__ = [
    "ATTENDING_STATUS",
    "DEFAULT_ROSTER_MAPPING",
    "RosterRow",
    "load_players_from_csv",
    "load_players_from_json",
    "load_roster_csv",
    "rows_to_players",
]
