"""Command-line interface for generating teams from a roster file."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from pathlib import Path
from typing import List, Sequence

from teamgen.allocator import (
    InsufficientPlayersError,
    check_generation_ready,
    distinct_players,
    generate_teams,
)
from teamgen.config import RECOMMENDED_MIN_PLAYERS, load_settings
from teamgen.config_loader import MappingProfile
from teamgen.ingest import load_players_from_csv, load_players_from_json
from teamgen.models import PlayerRecord
from teamgen.report import assignment_response, export_assignment_to_csv


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split attending players into two balanced teams")
    parser.add_argument("roster", type=Path, help="Path to roster CSV or JSON")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., offense=Attack)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument(
        "--min-players",
        type=int,
        default=RECOMMENDED_MIN_PLAYERS,
        help=f"Refuse to generate with fewer attending players (default {RECOMMENDED_MIN_PLAYERS})",
    )
    parser.add_argument(
        "--include-all",
        action="store_true",
        help="Ignore the status column and use every roster row",
    )
    parser.add_argument(
        "--swap-pass",
        action="store_true",
        help="Run the size-preserving swap pass after repair",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write team id lists JSON here")
    parser.add_argument("--csv", type=Path, default=None, help="Write a per-player CSV export here")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _load_players(path: Path, mapping: dict[str, str], *, attending_only: bool) -> List[PlayerRecord]:
    if path.suffix.lower() == ".json":
        return load_players_from_json(path, mapping=mapping or None, attending_only=attending_only)
    return load_players_from_csv(path, mapping=mapping or None, attending_only=attending_only)


def _format_team(label: str, players: Sequence[PlayerRecord], average: float) -> str:
    names = ", ".join(player.name or str(player.player_id) for player in players)
    return f"{label} ({len(players)} players, avg {average:.1f}): {names}"


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s:%(levelname)s:%(name)s: %(message)s",
    )

    try:
        roster_mapping = _parse_mapping(args.column)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.load_profile:
        profile = MappingProfile.load(args.load_profile)
        roster_mapping = profile.roster_mapping | roster_mapping
    if args.save_profile:
        MappingProfile(roster_mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    try:
        players = distinct_players(
            _load_players(args.roster, roster_mapping, attending_only=not args.include_all)
        )
    except ValueError as exc:
        raise SystemExit(f"Could not read roster: {exc}") from exc

    settings = load_settings()
    if args.swap_pass:
        settings = dataclasses.replace(settings, swap_pass=True)

    try:
        check_generation_ready(len(players), minimum=args.min_players)
        assignment = generate_teams(players, settings=settings)
    except InsufficientPlayersError as exc:
        raise SystemExit(exc.message) from exc

    response = assignment_response(assignment, weights=settings.weights)
    print(
        f"Team sizes for {len(assignment.players())} players: "
        f"{response.size_a} v {response.size_b}, bench {response.bench_size}"
    )
    print(_format_team("Team A", assignment.team_a, response.team_a.average_rating))
    print(_format_team("Team B", assignment.team_b, response.team_b.average_rating))
    if assignment.bench:
        bench_names = ", ".join(player.name or str(player.player_id) for player in assignment.bench)
        print(f"Bench: {bench_names}")
    print(f"Composite strength gap: {response.composite_gap:.2f}")

    if args.output:
        args.output.write_text(json.dumps(response.ids.model_dump(), indent=2), encoding="utf-8")
        print(f"Wrote team ids to {args.output}")
    if args.csv:
        args.csv.write_text(export_assignment_to_csv(assignment), encoding="utf-8")
        print(f"Wrote team export to {args.csv}")


if __name__ == "__main__":
    main()
