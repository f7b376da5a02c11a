from .base import BaseGolfModel
from .hole import Hole
from .round import Round

__all__ = ["BaseGolfModel", "Hole", "Round"]
