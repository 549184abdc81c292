"""Ordered, id-keyed team membership used while building an assignment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple

from teamgen.config import BalanceWeights
from teamgen.models import PlayerRecord


@dataclass(frozen=True)
class SkillTotals:
    overall: float = 0.0
    offense: float = 0.0
    defense: float = 0.0
    ball_handling: float = 0.0

    def composite(self, weights: BalanceWeights) -> float:
        return (
            self.overall * weights.overall
            + self.offense * weights.offense
            + self.defense * weights.defense
            + self.ball_handling * weights.ball_handling
        )


def skill_totals(players: Iterable[PlayerRecord]) -> SkillTotals:
    overall = offense = defense = ball_handling = 0.0
    for player in players:
        overall += player.overall_skill
        offense += player.offense_skill
        defense += player.defense_skill
        ball_handling += player.ball_handling_skill
    return SkillTotals(overall, offense, defense, ball_handling)


class Squad:
    """Team members in insertion order, keyed by player id."""

    def __init__(self, label: str):
        self.label = label
        self._members: Dict[int, PlayerRecord] = {}

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self._members.values())

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._members

    def __repr__(self) -> str:
        return f"Squad({self.label!r}, ids={list(self._members)})"

    def add(self, player: PlayerRecord) -> None:
        if player.player_id in self._members:
            raise ValueError(f"Player {player.player_id} is already on {self.label}")
        self._members[player.player_id] = player

    def remove(self, player_id: int) -> PlayerRecord:
        try:
            return self._members.pop(player_id)
        except KeyError:
            raise KeyError(f"Player {player_id} is not on {self.label}") from None

    def members(self) -> Tuple[PlayerRecord, ...]:
        return tuple(self._members.values())

    def ids(self) -> Tuple[int, ...]:
        return tuple(self._members)

    def totals(self) -> SkillTotals:
        return skill_totals(self._members.values())

    def strength(self, weights: BalanceWeights) -> float:
        return self.totals().composite(weights)

    def normalized_strength(self, weights: BalanceWeights) -> float:
        return self.strength(weights) / max(1, len(self))

    def weakest(self) -> PlayerRecord:
        """Lowest overall skill; the earliest member wins ties."""

        return min(self._members.values(), key=lambda p: p.overall_skill)

    def strongest(self) -> PlayerRecord:
        """Highest overall skill; the earliest member wins ties."""

        return max(self._members.values(), key=lambda p: p.overall_skill)


def transfer(player_id: int, source: Squad, target: Squad) -> PlayerRecord:
    """Move one player between squads, leaving both untouched on failure."""

    if player_id in target:
        raise ValueError(f"Player {player_id} is already on {target.label}")
    player = source.remove(player_id)
    target.add(player)
    return player


def swap(player_a: int, squad_a: Squad, player_b: int, squad_b: Squad) -> None:
    """Exchange one member of each squad."""

    if player_a not in squad_a or player_b not in squad_b:
        raise KeyError(f"Cannot swap {player_a} and {player_b}: not on the expected squads")
    moved_a = squad_a.remove(player_a)
    moved_b = squad_b.remove(player_b)
    squad_a.add(moved_b)
    squad_b.add(moved_a)
