# clean.py
"""
Clean the Country Record frame:
- canonicalise country names with an exact-match alias table
- impute missing population with the pre-imputation mean
- parse currency-formatted GDP into numbers
- drop rows still missing GDP, fertility rate or population
"""
import logging

import pandas as pd

logger = logging.getLogger(__name__)

# Source-dataset spellings -> canonical names (exact match only)
SOURCE_NAME_ALIASES = {
    "Republic of China": "China",
    "People's Republic of China": "China",
    "Russian Federation": "Russia",
    "Republic of Ireland": "Ireland",
}

REQUIRED = ["gdp", "fertility_rate", "population"]


def normalize_country_names(names: pd.Series, aliases: dict = SOURCE_NAME_ALIASES) -> pd.Series:
    return names.map(lambda n: aliases.get(n, n))


def impute_population(df: pd.DataFrame) -> pd.DataFrame:
    """Fill null population with the mean of the non-null populations of all rows."""
    df = df.copy()
    population = pd.to_numeric(df["population"], errors="coerce")
    n_missing = int(population.isna().sum())
    if n_missing:
        mean_population = population.mean()
        logger.info(f"Imputing {n_missing} missing population values with mean {mean_population:,.2f}")
        population = population.fillna(mean_population)
    df["population"] = population
    return df


def parse_gdp(gdp: pd.Series) -> pd.Series:
    """'$19,101,353,833 ' -> 19101353833.0; anything unparseable -> NaN."""
    text = gdp.astype(str).str.replace(r"[$,\s]", "", regex=True)
    return pd.to_numeric(text, errors="coerce")


def clean_country_data(df: pd.DataFrame, aliases: dict = SOURCE_NAME_ALIASES) -> pd.DataFrame:
    df = df.copy()
    df["name"] = normalize_country_names(df["name"], aliases)

    # imputation runs over every row, before anything is dropped
    df = impute_population(df)

    df["gdp"] = parse_gdp(df["gdp"])
    df["fertility_rate"] = pd.to_numeric(df["fertility_rate"], errors="coerce")
    df["co2_emissions_total"] = pd.to_numeric(df["co2_emissions_total"], errors="coerce")

    before = len(df)
    df = df.dropna(subset=REQUIRED).reset_index(drop=True)
    dropped = before - len(df)
    if dropped:
        logger.info(f"Dropped {dropped} rows missing {', '.join(REQUIRED)}")
    logger.info(f"{len(df):,} country rows after cleaning")
    return df
