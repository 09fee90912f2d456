import pandas as pd


def add_per_capita_metrics(df: pd.DataFrame) -> pd.DataFrame:
    """Add co2_per_capita and gdp_per_capita. Zero population is not guarded."""
    df = df.copy()
    df["co2_per_capita"] = df["co2_emissions_total"] / df["population"]
    df["gdp_per_capita"] = df["gdp"] / df["population"]
    return df
