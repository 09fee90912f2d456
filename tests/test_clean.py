"""
Cleaner tests: alias lookup, population imputation, GDP parsing and row filtering.
"""

import numpy as np
import pandas as pd
import pytest

from data_transform.clean import (
    clean_country_data,
    impute_population,
    normalize_country_names,
    parse_gdp,
)
from data_transform.metrics import add_per_capita_metrics


def test_normalize_country_names_exact_match_only():
    names = pd.Series(["Republic of China", "Russian Federation", "Russian federation", "Norway"])

    out = normalize_country_names(names)

    assert out.tolist() == ["China", "Russia", "Russian federation", "Norway"]


def test_normalize_country_names_custom_table():
    out = normalize_country_names(pd.Series(["A", "B"]), aliases={"A": "Z"})
    assert out.tolist() == ["Z", "B"]


def test_parse_gdp_strips_currency_and_separators():
    gdp = pd.Series(["$2,000", "$19,101,353,833 ", "12.5", "n/a", None, ""])

    out = parse_gdp(gdp)

    assert out.iloc[0] == 2000
    assert out.iloc[1] == 19101353833
    assert out.iloc[2] == 12.5
    assert out.iloc[3:].isna().all()


def test_impute_population_uses_mean_of_observed_values(raw_countries):
    out = impute_population(raw_countries)

    assert out.loc[0, "population"] == pytest.approx(500.0)
    assert out["population"].notna().all()
    # input frame is untouched
    assert pd.isna(raw_countries.loc[0, "population"])


def test_imputation_mean_includes_rows_dropped_later():
    df = pd.DataFrame({
        "name": ["A", "B", "C", "D"],
        "population": [400.0, 600.0, np.nan, 800.0],
        "co2_emissions_total": [1.0, 1.0, 1.0, 1.0],
        "gdp": ["$1", "$1", "$1", "n/a"],
        "fertility_rate": [1.0, 1.0, 1.0, 1.0],
    })

    out = clean_country_data(df)

    assert out["name"].tolist() == ["A", "B", "C"]
    assert out.loc[out["name"] == "C", "population"].item() == pytest.approx(600.0)


def test_clean_drops_rows_missing_gdp_or_fertility():
    df = pd.DataFrame({
        "name": ["A", "B", "C"],
        "population": [1.0, 2.0, 3.0],
        "co2_emissions_total": [1.0, 2.0, 3.0],
        "gdp": ["$10", "garbage", "$30"],
        "fertility_rate": [2.0, 2.0, None],
    })

    out = clean_country_data(df)

    assert out["name"].tolist() == ["A"]
    for col in ["population", "gdp", "fertility_rate"]:
        assert np.isfinite(out[col]).all(), f"{col} should be finite after cleaning"


def test_clean_and_derive_worked_example(raw_countries):
    out = add_per_capita_metrics(clean_country_data(raw_countries))
    china = out[out["name"] == "China"].iloc[0]

    assert china["population"] == pytest.approx(500.0)
    assert china["gdp"] == pytest.approx(2000.0)
    assert china["co2_per_capita"] == pytest.approx(2.0)
    assert china["gdp_per_capita"] == pytest.approx(4.0)
    assert "Russia" in out["name"].tolist()
