from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from models.round import Round

from .schemas import PerformanceRow, ScoreProportionRow
from .stats import SUPPORTED_PARS, all_holes, mean


def par_type_stats(round_obj: Round, par: int) -> Optional[Tuple[float, float]]:
    """
    Average score and average putts on one par type within a round.

    Only played holes with both a score and a putt count are used.
    Returns None when no hole qualifies.
    """
    holes = [
        h
        for h in round_obj.played_holes()
        if h.par == par and h.hole_score is not None and h.putts is not None
    ]
    if not holes:
        return None
    return (
        mean([h.hole_score for h in holes]),
        mean([h.putts for h in holes]),
    )


def aggregate_performance_series(rounds: Iterable[Round]) -> List[PerformanceRow]:
    """
    One row per round with par 3/4/5 average score and putts.

    Rows follow the order the rounds are supplied in; reverse a
    newest-first list before calling to plot oldest to newest.
    """
    results: List[PerformanceRow] = []
    for round_obj in rounds:
        row = {"round_id": round_obj.id, "date": round_obj.date}
        for par in SUPPORTED_PARS:
            stats = par_type_stats(round_obj, par)
            if stats is not None:
                row[f"par{par}_avg_score"], row[f"par{par}_avg_putts"] = stats
        results.append(PerformanceRow(**row))
    return results


def score_proportion(rounds: Iterable[Round]) -> List[ScoreProportionRow]:
    """
    Putts as a proportion of score for each par type.

    strokes_to_green = average score - average putts, both over played holes
    with a score and putts. Par types without such holes are omitted.
    """
    holes = all_holes(rounds)
    results: List[ScoreProportionRow] = []
    for par in SUPPORTED_PARS:
        qualifying = [
            h
            for h in holes
            if h.played and h.par == par and h.hole_score is not None and h.putts is not None
        ]
        if not qualifying:
            continue

        avg_putts = mean([h.putts for h in qualifying])
        avg_score = mean([h.hole_score for h in qualifying])
        results.append(
            ScoreProportionRow(par=par, putts=avg_putts, strokes_to_green=avg_score - avg_putts)
        )
    return results
