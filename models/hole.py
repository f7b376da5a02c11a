from pydantic import Field, model_validator
from typing import Optional

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """One hole's recorded outcome within a round."""

    hole_number: Optional[int] = Field(None, ge=1, le=18)
    par: Optional[int] = Field(None, ge=3, le=6)
    hole_score: Optional[int] = Field(None, ge=1)
    putts: Optional[int] = Field(None, ge=0)
    distance: Optional[float] = Field(None, ge=0)  # yards, 0 = unknown
    played: bool = True

    # Achievement / condition flags
    scoring_zone_in_regulation: Optional[bool] = None
    holeout_within_3_shots_scoring_zone: Optional[bool] = None
    holeout_from_outside_4ft: Optional[bool] = None
    penalty_shots: Optional[int] = Field(None, ge=0)
    putts_within4ft: Optional[int] = Field(None, ge=0)

    @model_validator(mode='after')
    def validate_putt_consistency(self):
        if self.putts is not None and self.hole_score is not None:
            if self.putts > self.hole_score:
                raise ValueError(f"Putts ({self.putts}) cannot exceed score ({self.hole_score})")

        if self.putts_within4ft is not None and self.putts is not None:
            if self.putts_within4ft > self.putts:
                raise ValueError(
                    f"Putts within 4ft ({self.putts_within4ft}) cannot exceed putts ({self.putts})"
                )

        return self

    def is_scored(self) -> bool:
        """Played and has a recorded score."""
        return self.played and self.hole_score is not None

    def to_par(self) -> Optional[int]:
        """Score relative to par (+2, -1, etc.)."""
        if self.hole_score is None or self.par is None:
            return None
        return self.hole_score - self.par
