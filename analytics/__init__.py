from .correlation import conditional_averages, correlation_summary, propensity
from .distance import compute_par_stats, relative_distance_analysis, score_trend
from .distribution import classify_score, distribution_by_par, tally_distribution
from .insights import recent_insights, round_insights
from .performance import aggregate_performance_series, score_proportion
from .streaks import SZ_PAR_TIERS, SZIR_TIERS, classify_streak, current_streak, longest_streak
from .units import DistanceUnit, convert

__all__ = [
    "convert",
    "DistanceUnit",
    "compute_par_stats",
    "relative_distance_analysis",
    "score_trend",
    "aggregate_performance_series",
    "score_proportion",
    "classify_score",
    "tally_distribution",
    "distribution_by_par",
    "conditional_averages",
    "propensity",
    "correlation_summary",
    "classify_streak",
    "current_streak",
    "longest_streak",
    "SZIR_TIERS",
    "SZ_PAR_TIERS",
    "round_insights",
    "recent_insights",
]
