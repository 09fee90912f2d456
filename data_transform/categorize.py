"""
Quartile binning of emissions per capita into ordinal severity labels.
"""
from typing import Tuple

import numpy as np
import pandas as pd

from config import CATEGORY_LABELS

QUANTILES = [0.0, 0.25, 0.5, 0.75, 1.0]


def quartile_breaks(values) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        raise ValueError("Cannot compute quartile breaks of an empty sequence")
    breaks = np.quantile(values, QUANTILES)
    # linear interpolation yields nan at an infinite end; the ends are the data extremes
    breaks[0], breaks[-1] = values.min(), values.max()
    return breaks


def categorize_emissions(values, labels=CATEGORY_LABELS) -> Tuple[np.ndarray, pd.Categorical]:
    """
    Bin values into len(labels) quartile buckets.

    Buckets are right-closed and the lowest edge is included, so a value equal
    to a breakpoint lands in the lower bucket. pandas.cut raises ValueError
    when the breaks are not strictly increasing (e.g. many identical values).

    Returns:
        Tuple of (breaks, ordered categorical of labels)
    """
    breaks = quartile_breaks(values)
    categories = pd.cut(np.asarray(values, dtype=float), bins=breaks, labels=labels,
                        include_lowest=True, right=True)
    return breaks, categories


def assign_emission_categories(df: pd.DataFrame, column: str = "co2_per_capita") -> pd.DataFrame:
    df = df.copy()
    _, categories = categorize_emissions(df[column].to_numpy())
    df["emissions_category"] = categories
    return df
