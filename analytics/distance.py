"""
Scoring by hole length.

Holes of a par type are split into Short / Medium / Long buckets around the
median tee-to-green distance of that par type, using a caller-supplied
deviation. Buckets are rebuilt on every call from the holes passed in.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from models.hole import Hole
from models.round import Round

from .config import DEFAULT_TREND_TOLERANCE
from .schemas import ParStats
from .stats import SUPPORTED_PARS, all_holes, average_score, median
from .units import DistanceUnit, to_base_unit

logger = logging.getLogger(__name__)


def _has_distance(hole: Hole) -> bool:
    return hole.distance is not None and hole.distance > 0


def compute_par_stats(holes: Iterable[Hole], par: int, deviation: float) -> Optional[ParStats]:
    """
    Median distance, average score and bucketed averages for one par type.

    `deviation` must already be in yards. The median covers every played hole
    of this par with a distance; averages skip holes without a score. Returns
    None when no played hole of this par has a distance.

    Buckets:
    - short: distance < median - deviation
    - medium: median - deviation <= distance <= median + deviation
    - long: distance > median + deviation
    """
    holes_of_par = [h for h in holes if h.played and h.par == par and _has_distance(h)]
    if not holes_of_par:
        return None

    median_distance = median(hole.distance for hole in holes_of_par)
    lower_bound = median_distance - deviation
    upper_bound = median_distance + deviation

    # Each hole lands in exactly one bucket, even when deviation is negative.
    short_holes: List[Hole] = []
    medium_holes: List[Hole] = []
    long_holes: List[Hole] = []
    for hole in holes_of_par:
        if hole.distance < lower_bound:
            short_holes.append(hole)
        elif hole.distance <= upper_bound:
            medium_holes.append(hole)
        else:
            long_holes.append(hole)

    return ParStats(
        par=par,
        median_distance=median_distance,
        avg_score=average_score(holes_of_par),
        lower_bound=lower_bound,
        upper_bound=upper_bound,
        short=average_score(short_holes),
        medium=average_score(medium_holes),
        long=average_score(long_holes),
        short_count=len(short_holes),
        medium_count=len(medium_holes),
        long_count=len(long_holes),
    )


def relative_distance_analysis(
    rounds: Iterable[Round],
    deviation: float,
    distance_unit: Union[str, DistanceUnit] = DistanceUnit.YARDS,
) -> List[ParStats]:
    """
    ParStats for pars 3, 4 and 5 across all rounds.

    `deviation` is in the display unit and is converted to yards first.
    Par types without data are left out.
    """
    holes = all_holes(rounds)
    base_deviation = to_base_unit(deviation, distance_unit)
    logger.debug(
        "Bucketing %d holes with deviation %s %s (%.3f yd)",
        len(holes), deviation, distance_unit, base_deviation,
    )

    results: List[ParStats] = []
    for par in SUPPORTED_PARS:
        stats = compute_par_stats(holes, par, base_deviation)
        if stats is not None:
            results.append(stats)
    return results


def score_trend(
    score: Optional[float],
    avg_score: Optional[float],
    tolerance: float = DEFAULT_TREND_TOLERANCE,
) -> Optional[str]:
    """
    Compare a bucket average against the par-type average.

    Returns "better" when more than `tolerance` strokes below, "worse" when
    more than `tolerance` above, "neutral" otherwise, None when either is missing.
    """
    if score is None or avg_score is None:
        return None
    diff = score - avg_score
    if diff < -tolerance:
        return "better"
    if diff > tolerance:
        return "worse"
    return "neutral"
