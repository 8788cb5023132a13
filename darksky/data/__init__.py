"""
Data module for forecast models, request options and processing.
"""

from darksky.data.models import (
    Alert,
    Datablock,
    Datapoint,
    Flags,
    Forecast,
    Icon,
    PrecipitationType,
    Severity,
)
from darksky.data.options import Block, Language, Options, Unit
from darksky.data.processor import datablock_to_dataframe, forecast_to_dataframe

__all__ = [
    # Models
    "Alert",
    "Datablock",
    "Datapoint",
    "Flags",
    "Forecast",
    "Icon",
    "PrecipitationType",
    "Severity",
    # Options
    "Block",
    "Language",
    "Options",
    "Unit",
    # Processing
    "datablock_to_dataframe",
    "forecast_to_dataframe",
]
