"""Size-preserving swap pass that narrows the overall-skill gap."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .squad import Squad, swap


logger = logging.getLogger(__name__)

_EPSILON = 1e-9


def _overall_gap(team_a: Squad, team_b: Squad) -> float:
    return team_a.totals().overall - team_b.totals().overall


def _best_swap(team_a: Squad, team_b: Squad, gap: float) -> Optional[Tuple[int, int, float]]:
    best: Optional[Tuple[int, int, float]] = None
    best_gap = abs(gap)
    for player_a in team_a:
        for player_b in team_b:
            delta = player_a.overall_skill - player_b.overall_skill
            candidate = abs(gap - 2 * delta)
            if candidate < best_gap - _EPSILON:
                best = (player_a.player_id, player_b.player_id, candidate)
                best_gap = candidate
    return best


def improve_by_swaps(team_a: Squad, team_b: Squad, *, threshold: float, max_swaps: int) -> int:
    """Swap pairs across teams while the overall gap exceeds ``threshold``.

    Each accepted swap strictly shrinks the gap, so the loop stops either when
    the gap is within ``threshold``, when no pair improves it, or after
    ``max_swaps`` swaps. Team sizes never change. Returns the swap count.
    """

    swaps = 0
    while swaps < max_swaps:
        gap = _overall_gap(team_a, team_b)
        if abs(gap) <= threshold:
            break
        best = _best_swap(team_a, team_b, gap)
        if best is None:
            break
        id_a, id_b, new_gap = best
        swap(id_a, team_a, id_b, team_b)
        swaps += 1
        logger.debug("Swapped %s (%s) with %s (%s); gap %.2f -> %.2f",
                     id_a, team_a.label, id_b, team_b.label, abs(gap), new_gap)
    return swaps
