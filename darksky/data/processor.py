"""
Data processing module for forecast responses.

This module provides functions for turning forecast datablocks into
analysis-ready pandas DataFrames.

Usage:
    from darksky.data.processor import forecast_to_dataframe

    df = forecast_to_dataframe(forecast, Block.HOURLY)
"""

import logging
from typing import Optional, Union

import pandas as pd

from darksky.data.models import Datablock, Datapoint, Forecast
from darksky.data.options import Block

logger = logging.getLogger(__name__)


DATAPOINT_COLUMNS = ["timestamp"] + list(Datapoint.model_fields.keys())


def datablock_to_dataframe(
    block: Optional[Datablock],
    drop_empty_columns: bool = True,
) -> pd.DataFrame:
    """
    Convert a Datablock to a pandas DataFrame.

    Creates one row per datapoint with a ``timestamp`` column (UTC) derived
    from ``time``, sorted by timestamp.

    Args:
        block: Datablock from a forecast (None is treated as empty)
        drop_empty_columns: Drop fields that no datapoint carries

    Returns:
        DataFrame with one column per Datapoint field
    """
    if block is None or block.is_empty:
        logger.debug("Empty datablock - returning empty DataFrame")
        return pd.DataFrame(columns=DATAPOINT_COLUMNS)

    rows = [point.model_dump(mode="json") for point in block.datapoints]
    df = pd.DataFrame(rows)

    df.insert(0, "timestamp", pd.to_datetime(df["time"], unit="s", utc=True))
    df = df.sort_values("timestamp").reset_index(drop=True)

    if drop_empty_columns:
        df = df.dropna(axis="columns", how="all")

    if block.summary:
        df.attrs["summary"] = block.summary

    logger.debug(f"Created DataFrame with {len(df)} rows")

    return df


def forecast_to_dataframe(
    forecast: Forecast,
    block: Union[Block, str] = Block.HOURLY,
    drop_empty_columns: bool = True,
) -> pd.DataFrame:
    """
    Convert one datablock of a Forecast to a pandas DataFrame.

    The ``currently`` block is rendered as a single-row frame. Forecast
    metadata is attached to ``df.attrs``.

    Args:
        forecast: Forecast returned by a client
        block: Which block to convert
        drop_empty_columns: Drop fields that no datapoint carries

    Returns:
        DataFrame of the block's datapoints

    Raises:
        ValueError: If ``block`` is ``flags``
    """
    block = Block(block)
    if block is Block.FLAGS:
        raise ValueError("The flags block holds no datapoints")

    selected = forecast.get_block(block)
    if isinstance(selected, Datapoint):
        selected = Datablock(data=[selected])

    df = datablock_to_dataframe(selected, drop_empty_columns=drop_empty_columns)

    df.attrs["latitude"] = forecast.latitude
    df.attrs["longitude"] = forecast.longitude
    df.attrs["timezone"] = forecast.timezone
    df.attrs["units"] = forecast.units
    df.attrs["block"] = block.value

    return df
