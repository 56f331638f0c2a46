from __future__ import annotations

# Helpers that run the streaming `Minimum` over whole pandas columns.
# Outputs are aligned to the input index, one result per input row.

import logging

import pandas as pd

from windowed_minimum.errors import InvalidParameterError
from windowed_minimum.indicators.library.minimum import DEFAULT_PERIOD, Minimum

logger = logging.getLogger(__name__)


def rolling_minimum(values: pd.Series, period: int = DEFAULT_PERIOD) -> pd.Series:
    """Computes the minimum of the last $period values for every row of $values.

    The first rows use all values seen so far (like `min_periods=1` in pandas).

    Args:
        values: Numeric series in chronological order.
        period: Number of most recent values the minimum is taken over.

    Returns:
        Float series with the same index as $values, named after the indicator (e.g. `MIN(14)`).

    Raises:
        InvalidParameterError: If $values is not a pandas Series or $period is invalid.
    """
    # Check: $values must be a pandas Series
    if not isinstance(values, pd.Series):
        raise InvalidParameterError(f"Cannot call `rolling_minimum` because $values must be a pandas Series, got {type(values).__name__}")

    indicator = Minimum(period, max_history=1)
    result = [indicator.update(v) for v in values.to_numpy(dtype=float)]
    logger.debug(f"Computed '{indicator.name}' over {len(result)} rows")

    return pd.Series(result, index=values.index, name=indicator.name, dtype=float)


def rolling_minimum_of_lows(df: pd.DataFrame, period: int = DEFAULT_PERIOD) -> pd.Series:
    """Computes the rolling minimum over the 'low' column of an OHLC DataFrame.

    Args:
        df: One row per bar, sorted chronologically; must contain a 'low' column.
        period: Number of most recent bars the minimum is taken over.

    Returns:
        Float series with the same index as $df.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise InvalidParameterError(f"Cannot call `rolling_minimum_of_lows` because $df must be a pandas DataFrame, got {type(df).__name__}")

    # Check: required column present
    if "low" not in df.columns:
        raise InvalidParameterError("Cannot call `rolling_minimum_of_lows` because $df has no 'low' column")

    return rolling_minimum(df["low"], period)
