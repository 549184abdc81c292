from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TeamIdLists(BaseModel):
    """Stored team membership for a game: ordered player ids only."""

    team_a: List[int] = Field(default_factory=list)
    team_b: List[int] = Field(default_factory=list)
    bench: List[int] = Field(default_factory=list)

    model_config = ConfigDict(strict=True)

    def all_ids(self) -> List[int]:
        return [*self.team_a, *self.team_b, *self.bench]


class PlayerRowResponse(BaseModel):
    player_id: int
    name: str
    offense_skill: float
    defense_skill: float
    ball_handling_skill: float
    overall_skill: float


class TeamResponse(BaseModel):
    label: str
    players: List[PlayerRowResponse]
    average_rating: float


class AssignmentResponse(BaseModel):
    size_a: int
    size_b: int
    bench_size: int
    team_a: TeamResponse
    team_b: TeamResponse
    bench: List[PlayerRowResponse]
    composite_gap: float
    ids: TeamIdLists
