"""
Series generation and tabular export.
"""

from .export import load_series_csv, series_to_frame, write_series_csv
from .generator import generate_game_data, generate_series, pick_stock

__all__ = [
    "generate_series",
    "generate_game_data",
    "pick_stock",
    "series_to_frame",
    "write_series_csv",
    "load_series_csv",
]
