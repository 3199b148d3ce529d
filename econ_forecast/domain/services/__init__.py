"""
Domain Services Package

Pure functions over domain entities: input validation, lagged feature
building, temporal splitting, estimation and timeline shaping.
"""

from .input_validator import validate
from .lagged_features import build_lagged_rows
from .temporal_splitter import TemporalSplit, split
from .timeline_transformer import append_forecast, transform_historical

__all__ = [
    "validate",
    "build_lagged_rows",
    "TemporalSplit",
    "split",
    "transform_historical",
    "append_forecast",
]
