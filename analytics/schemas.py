"""Result models handed to the rendering layer."""

from datetime import datetime
from pydantic import BaseModel
from typing import Dict, Optional


class ParStats(BaseModel):
    """Scoring by hole length for one par type. Distances are in yards."""
    par: int
    median_distance: float
    avg_score: Optional[float] = None
    lower_bound: float
    upper_bound: float
    short: Optional[float] = None
    medium: Optional[float] = None
    long: Optional[float] = None
    short_count: int = 0
    medium_count: int = 0
    long_count: int = 0


class PerformanceRow(BaseModel):
    """Per-par averages for one round, in caller order."""
    round_id: Optional[str] = None
    date: Optional[datetime] = None
    par3_avg_score: Optional[float] = None
    par3_avg_putts: Optional[float] = None
    par4_avg_score: Optional[float] = None
    par4_avg_putts: Optional[float] = None
    par5_avg_score: Optional[float] = None
    par5_avg_putts: Optional[float] = None


class ScoreProportionRow(BaseModel):
    """Average putts vs. strokes to reach the green for a par type."""
    par: int
    putts: float
    strokes_to_green: float


class ConditionalAverages(BaseModel):
    with_condition: Optional[float] = None
    without_condition: Optional[float] = None


class CorrelationBar(BaseModel):
    name: str
    avg_score: Optional[float] = None


class RoundInsights(BaseModel):
    """Headline numbers for a single round."""
    total_score: Optional[int] = None
    total_penalties: int = 0
    total_putts: Optional[int] = None
    total_holes_played: int = 0
    total_szir: int = 0
    total_putts_within4ft: int = 0
    holes_with_multiple_putts_within4ft: int = 0
    total_holeout_from_outside4ft: int = 0
    total_holeout_within_3_shots: int = 0


class RecentInsights(BaseModel):
    """Headline numbers across a selection of rounds."""
    total_holes_played: int = 0
    avg_par3_score: Optional[float] = None
    avg_par4_score: Optional[float] = None
    avg_par5_score: Optional[float] = None
    avg_putts_per_hole: Optional[float] = None
    szir_count: int = 0
    szir_percentage: float = 0.0
    sz_par_count: int = 0
    sz_par_percentage: float = 0.0
    sz_par_conversion: float = 0.0  # SZ Par as a share of SZIR holes


class DistributionSummary(BaseModel):
    par: int
    counts: Dict[str, int]
    percentages: Dict[str, float]
    total: int
