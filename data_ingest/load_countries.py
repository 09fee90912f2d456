"""
Load the country statistics CSV into a Country Record frame:
name, population, co2_emissions_total, gdp, fertility_rate.
"""

import logging

import pandas as pd

from config import COUNTRY_CSV, SOURCE_COLUMNS

logger = logging.getLogger(__name__)


def load_country_data(path=COUNTRY_CSV) -> pd.DataFrame:
    # comma-grouped numbers ("38,041,754") parse as numbers; GDP keeps its "$" and stays text
    df = pd.read_csv(path, thousands=",")
    df.columns = df.columns.str.strip()

    missing = [c for c in SOURCE_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(
            f"Missing required columns: {missing}. "
            f"Available: {df.columns.tolist()}"
        )

    df = df[list(SOURCE_COLUMNS)].rename(columns=SOURCE_COLUMNS)
    logger.info(f"Loaded {len(df):,} country rows from {path}")
    return df
