"""
Candlestick playback mode.
"""

from .result import Rank, SimulationResult, rank_for_yield
from .session import SimulationSession

__all__ = ["SimulationSession", "SimulationResult", "Rank", "rank_for_yield"]
