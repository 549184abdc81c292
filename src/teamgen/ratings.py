"""Post-game skill adjustment."""

from __future__ import annotations

from teamgen.models.player import SKILL_MAX, SKILL_MIN


ADJUSTMENT_PER_GOAL = 0.05
MAX_ADJUSTMENT = 0.2


def adjusted_skill(current_skill: float, is_winner: bool, score_diff: int) -> float:
    """Nudge a skill rating after a game.

    Winners gain and losers drop 0.05 per goal of margin, capped at 0.2. Draws
    leave the rating unchanged. The result stays within the 1-10 scale.
    """

    if score_diff == 0:
        return current_skill
    adjustment = min(abs(score_diff) * ADJUSTMENT_PER_GOAL, MAX_ADJUSTMENT)
    if not is_winner:
        adjustment = -adjustment
    return max(SKILL_MIN, min(SKILL_MAX, current_skill + adjustment))
