from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List

from models.hole import Hole
from models.round import Round

from .schemas import DistributionSummary
from .stats import SUPPORTED_PARS, all_holes, scored_holes


class ScoreCategory(str, Enum):
    BIRDIE_OR_BETTER = "Birdie+"
    PAR = "Par"
    BOGEY = "Bogey"
    DOUBLE_BOGEY = "DoubleBogey"
    TRIPLE_PLUS_BOGEY = "TriplePlusBogey"


SCORE_CATEGORY_ORDER = list(ScoreCategory)


def classify_score(hole_score: int, par: int) -> ScoreCategory:
    """Bucket a hole score by its difference to par."""
    diff = hole_score - par
    if diff <= -1:
        return ScoreCategory.BIRDIE_OR_BETTER
    if diff == 0:
        return ScoreCategory.PAR
    if diff == 1:
        return ScoreCategory.BOGEY
    if diff == 2:
        return ScoreCategory.DOUBLE_BOGEY
    return ScoreCategory.TRIPLE_PLUS_BOGEY


class DistributionCounts(dict):
    """Hole counts keyed by ScoreCategory; every category is present."""

    def __init__(self) -> None:
        super().__init__({category: 0 for category in SCORE_CATEGORY_ORDER})

    @property
    def total(self) -> int:
        return sum(self.values())

    def percentages(self) -> Dict[ScoreCategory, float]:
        """Share of each category (0-100); all zeros when there are no holes."""
        total = self.total
        return {
            category: (count / total * 100.0) if total else 0.0
            for category, count in self.items()
        }


def tally_distribution(holes: Iterable[Hole], par: int) -> DistributionCounts:
    """Count played, scored holes of `par` per score category."""
    counts = DistributionCounts()
    for hole in scored_holes(holes, par):
        counts[classify_score(hole.hole_score, par)] += 1
    return counts


def distribution_by_par(rounds: Iterable[Round]) -> List[DistributionSummary]:
    """
    Score distribution for pars 3, 4 and 5 across all rounds.

    Par types with no holes are excluded so stacked/percentage charts never
    divide by zero.
    """
    holes = all_holes(rounds)
    results: List[DistributionSummary] = []
    for par in SUPPORTED_PARS:
        counts = tally_distribution(holes, par)
        if counts.total == 0:
            continue
        results.append(
            DistributionSummary(
                par=par,
                counts={category.value: count for category, count in counts.items()},
                percentages={
                    category.value: pct for category, pct in counts.percentages().items()
                },
                total=counts.total,
            )
        )
    return results
