"""Team size policy keyed by the number of attending players."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple


MIN_PLAYERS = 2
RECOMMENDED_MIN_PLAYERS = 8
MAX_TEAM_SIZE = 9


@dataclass(frozen=True)
class SizePlan:
    size_a: int
    size_b: int
    bench: int

    @property
    def active(self) -> int:
        return self.size_a + self.size_b

    @property
    def total(self) -> int:
        return self.size_a + self.size_b + self.bench


@dataclass(frozen=True)
class SizeBand:
    low: int
    high: Optional[int]
    label: str
    split: Callable[[int], Tuple[int, int]]

    def contains(self, total_count: int) -> bool:
        if total_count < self.low:
            return False
        return self.high is None or total_count <= self.high


def _ceil_first(n: int) -> Tuple[int, int]:
    size_a = math.ceil(n / 2)
    return size_a, n - size_a


def _floor_first(n: int) -> Tuple[int, int]:
    return n // 2, math.ceil(n / 2)


def _capped(n: int) -> Tuple[int, int]:
    return min(MAX_TEAM_SIZE, n // 2), min(MAX_TEAM_SIZE, math.ceil(n / 2))


_SIZE_BANDS: Tuple[SizeBand, ...] = (
    SizeBand(low=MIN_PLAYERS, high=10, label="everyone plays", split=_ceil_first),
    SizeBand(low=11, high=12, label="5v6 or 6v6", split=_ceil_first),
    SizeBand(low=13, high=13, label="6v6 with one on the bench", split=lambda n: (6, 6)),
    SizeBand(low=14, high=14, label="7v7", split=lambda n: (7, 7)),
    SizeBand(low=15, high=17, label="even split, no bench", split=_floor_first),
    SizeBand(low=18, high=None, label=f"up to {MAX_TEAM_SIZE} a side, rest on the bench", split=_capped),
)


def iter_size_bands() -> Iterable[SizeBand]:
    """Return an iterator over the configured size bands, smallest first."""

    return iter(_SIZE_BANDS)


def get_size_band(total_count: int) -> SizeBand:
    """Find the band covering ``total_count``, raising ValueError if none does."""

    for band in _SIZE_BANDS:
        if band.contains(total_count):
            return band
    raise ValueError(
        f"At least {MIN_PLAYERS} players are required to plan teams, got {total_count}"
    )


def plan_team_sizes(total_count: int) -> SizePlan:
    """Map an attending-player count to team A, team B and bench sizes."""

    band = get_size_band(total_count)
    size_a, size_b = band.split(total_count)
    return SizePlan(size_a=size_a, size_b=size_b, bench=total_count - size_a - size_b)
