# stats package
from .base import ELITE_RATING, LOW_RATING, StatsBackend
from .placeholder import PlaceholderStats

__all__ = ["ELITE_RATING", "LOW_RATING", "StatsBackend", "PlaceholderStats"]
