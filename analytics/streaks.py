from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence

from models.hole import Hole
from models.round import Round

from .correlation import check_condition, condition_holds


class Tier(NamedTuple):
    name: str
    minimum_streak: int


DEFAULT_TIER = Tier("Rookie", 0)

# Ordered by descending minimum_streak.
SZIR_TIERS: List[Tier] = [
    Tier("Platinum", 72),
    Tier("Gold", 45),
    Tier("Silver", 30),
    Tier("Bronze", 15),
]

SZ_PAR_TIERS: List[Tier] = [
    Tier("Platinum", 36),
    Tier("Gold", 18),
    Tier("Silver", 10),
    Tier("Bronze", 5),
]


def classify_streak(streak: int, tier_table: Sequence[Tier]) -> Tier:
    """First tier whose minimum is reached, or DEFAULT_TIER."""
    for tier in tier_table:
        if tier.minimum_streak <= streak:
            return tier
    return DEFAULT_TIER


def _played_holes(rounds: Iterable[Round]) -> List[Hole]:
    return [hole for round_obj in rounds for hole in round_obj.played_holes()]


def current_streak(rounds: Iterable[Round], condition_field: str) -> int:
    """
    Number of consecutive played holes, counting back from the last one,
    that meet the condition. Rounds must be in chronological order.
    """
    check_condition(condition_field)
    streak = 0
    for hole in reversed(_played_holes(rounds)):
        if not condition_holds(hole, condition_field):
            break
        streak += 1
    return streak


def longest_streak(rounds: Iterable[Round], condition_field: str) -> int:
    """Longest run of consecutive played holes meeting the condition."""
    check_condition(condition_field)
    best = run = 0
    for hole in _played_holes(rounds):
        run = run + 1 if condition_holds(hole, condition_field) else 0
        best = max(best, run)
    return best
