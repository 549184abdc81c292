"""Canonical player model consumed by the team allocator."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


SKILL_MIN = 1.0
SKILL_MAX = 10.0


def overall_from_components(offense: float, defense: float, ball_handling: float) -> float:
    """Mean of the three sub-skills, rounded to one decimal."""

    return round((offense + defense + ball_handling) / 3, 1)


class PlayerRecord(BaseModel):
    """Attending player with the skill ratings used for balancing."""

    player_id: int = Field(..., alias="id")
    name: str = ""
    offense_skill: float = Field(..., ge=SKILL_MIN, le=SKILL_MAX, alias="offenseSkill")
    defense_skill: float = Field(..., ge=SKILL_MIN, le=SKILL_MAX, alias="defenseSkill")
    ball_handling_skill: float = Field(..., ge=SKILL_MIN, le=SKILL_MAX, alias="ballHandlingSkill")
    overall_skill: float = Field(..., ge=SKILL_MIN, le=SKILL_MAX, alias="overallSkill")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_skills(
        cls,
        player_id: int,
        offense: float,
        defense: float,
        ball_handling: float,
        *,
        overall: float | None = None,
        name: str = "",
    ) -> "PlayerRecord":
        if overall is None:
            overall = overall_from_components(offense, defense, ball_handling)
        return cls(
            player_id=player_id,
            name=name,
            offense_skill=offense,
            defense_skill=defense,
            ball_handling_skill=ball_handling,
            overall_skill=overall,
        )
