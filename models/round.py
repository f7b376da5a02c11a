from datetime import datetime
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole


class Round(BaseGolfModel):
    """One played round: its date and its holes in playing order."""
    id: Optional[str] = None
    date: Optional[datetime] = None
    holes: List[Hole] = Field(default_factory=list)

    def played_holes(self) -> List[Hole]:
        """Holes not marked as 'did not play'."""
        return [h for h in self.holes if h.played]

    def total_score(self) -> Optional[int]:
        """Total strokes over played holes."""
        strokes = [h.hole_score for h in self.played_holes() if h.hole_score is not None]
        return sum(strokes) if strokes else None

    def total_putts(self) -> Optional[int]:
        """Total putts over played holes."""
        putts = [h.putts for h in self.played_holes() if h.putts is not None]
        return sum(putts) if putts else None

    def total_penalties(self) -> int:
        return sum(h.penalty_shots or 0 for h in self.played_holes())
