"""
Conditional scoring averages.

A condition is the name of a boolean-ish hole attribute (SZIR, SZ Par,
holeout from outside 4ft, penalty shots). Holes are split on the truthiness
of that attribute, so new conditions need no new code.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from models.hole import Hole
from models.round import Round

from .exceptions import UnknownConditionError
from .schemas import ConditionalAverages, CorrelationBar
from .stats import SUPPORTED_PARS, all_holes, average_score, scored_holes

SZIR = "scoring_zone_in_regulation"
SZ_PAR = "holeout_within_3_shots_scoring_zone"
LUCKY_HOLEOUT = "holeout_from_outside_4ft"
PENALTY = "penalty_shots"


def check_condition(condition_field: str) -> None:
    if condition_field not in Hole.model_fields:
        raise UnknownConditionError(condition_field)


def condition_holds(hole: Hole, condition_field: str) -> bool:
    return bool(getattr(hole, condition_field))


def conditional_averages(
    holes: Iterable[Hole],
    par: Optional[int],
    condition_field: str,
) -> ConditionalAverages:
    """
    Average score with and without a condition on holes of `par`.

    `par=None` covers every par type. Each side is None when it has no holes.
    """
    check_condition(condition_field)
    candidates = scored_holes(holes, par)
    with_condition = [h for h in candidates if condition_holds(h, condition_field)]
    without_condition = [h for h in candidates if not condition_holds(h, condition_field)]
    return ConditionalAverages(
        with_condition=average_score(with_condition),
        without_condition=average_score(without_condition),
    )


def propensity(holes: Iterable[Hole], par: Optional[int], condition_field: str) -> float:
    """Percentage of played, scored holes of `par` meeting the condition (0 when none)."""
    check_condition(condition_field)
    candidates = scored_holes(holes, par)
    if not candidates:
        return 0.0
    hits = sum(1 for h in candidates if condition_holds(h, condition_field))
    return hits / len(candidates) * 100.0


def correlation_summary(rounds: Iterable[Round]) -> List[CorrelationBar]:
    """
    Score-correlation bars:
    - SZIR (Par 3/4/5): average score when SZIR was reached, per par type
    - Missed SZIR: average score when it was not, all pars
    - Achieved / Missed SZ Par: average score split on SZ Par, all pars
    """
    holes = all_holes(rounds)
    bars: List[CorrelationBar] = []
    for par in SUPPORTED_PARS:
        split = conditional_averages(holes, par, SZIR)
        bars.append(CorrelationBar(name=f"SZIR (Par {par})", avg_score=split.with_condition))

    szir = conditional_averages(holes, None, SZIR)
    bars.append(CorrelationBar(name="Missed SZIR", avg_score=szir.without_condition))

    sz_par = conditional_averages(holes, None, SZ_PAR)
    bars.append(CorrelationBar(name="Achieved SZ Par", avg_score=sz_par.with_condition))
    bars.append(CorrelationBar(name="Missed SZ Par", avg_score=sz_par.without_condition))
    return bars
