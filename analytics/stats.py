from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from models.hole import Hole
from models.round import Round

SUPPORTED_PARS = (3, 4, 5)


def mean(values: Sequence[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty sequence."""
    if not values:
        return None
    return sum(values) / len(values)


def median(values: Iterable[float]) -> Optional[float]:
    """
    Median of the values.

    Odd count: the middle sorted value. Even count: mean of the two middle
    sorted values. Empty input: None.
    """
    ordered = sorted(values)
    count = len(ordered)
    if count == 0:
        return None
    mid = count // 2
    if count % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def all_holes(rounds: Iterable[Round]) -> List[Hole]:
    """Every hole of every round, rounds in caller order."""
    return [hole for round_obj in rounds for hole in round_obj.holes]


def scored_holes(holes: Iterable[Hole], par: Optional[int] = None) -> List[Hole]:
    """
    Played holes with a recorded score.

    When `par` is given only holes of that par are kept; `None` keeps every par.
    """
    return [
        hole
        for hole in holes
        if hole.is_scored() and (par is None or hole.par == par)
    ]


def average_score(holes: Iterable[Hole]) -> Optional[float]:
    return mean([hole.hole_score for hole in holes if hole.hole_score is not None])
