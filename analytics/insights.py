from __future__ import annotations

from typing import Iterable

from models.round import Round

from .correlation import SZ_PAR, SZIR, condition_holds
from .schemas import RecentInsights, RoundInsights
from .stats import all_holes, average_score, mean, scored_holes


def round_insights(round_obj: Round) -> RoundInsights:
    """
    Summary metrics for a single round.

    A hole counts towards total_holes_played when it was played and scored,
    and either has putts recorded or was holed out from outside 4ft.
    """
    holes = round_obj.played_holes()
    scoring_holes = [
        h
        for h in holes
        if h.hole_score is not None and (h.putts is not None or h.holeout_from_outside_4ft)
    ]

    return RoundInsights(
        total_score=round_obj.total_score(),
        total_penalties=round_obj.total_penalties(),
        total_putts=round_obj.total_putts(),
        total_holes_played=len(scoring_holes),
        total_szir=sum(1 for h in holes if condition_holds(h, SZIR)),
        total_putts_within4ft=sum(h.putts_within4ft or 0 for h in holes),
        holes_with_multiple_putts_within4ft=sum(
            1 for h in holes if (h.putts_within4ft or 0) > 1
        ),
        total_holeout_from_outside4ft=sum(1 for h in holes if h.holeout_from_outside_4ft),
        total_holeout_within_3_shots=sum(1 for h in holes if condition_holds(h, SZ_PAR)),
    )


def recent_insights(rounds: Iterable[Round]) -> RecentInsights:
    """
    Headline averages and scoring-zone rates over a selection of rounds.

    sz_par_conversion is SZ Par holes per SZIR hole. Percentages are 0 when
    their denominator is 0.
    """
    holes = scored_holes(all_holes(rounds))
    total = len(holes)

    szir_count = sum(1 for h in holes if condition_holds(h, SZIR))
    sz_par_count = sum(1 for h in holes if condition_holds(h, SZ_PAR))

    return RecentInsights(
        total_holes_played=total,
        avg_par3_score=average_score(h for h in holes if h.par == 3),
        avg_par4_score=average_score(h for h in holes if h.par == 4),
        avg_par5_score=average_score(h for h in holes if h.par == 5),
        avg_putts_per_hole=mean([h.putts for h in holes if h.putts is not None]),
        szir_count=szir_count,
        szir_percentage=(szir_count / total * 100.0) if total else 0.0,
        sz_par_count=sz_par_count,
        sz_par_percentage=(sz_par_count / total * 100.0) if total else 0.0,
        sz_par_conversion=(sz_par_count / szir_count * 100.0) if szir_count else 0.0,
    )
