"""
Loader tests: column selection, renaming and comma-grouped numbers.
"""

import pandas as pd
import pytest

from data_ingest.load_countries import load_country_data


def test_load_renames_and_keeps_record_columns(country_csv):
    df = load_country_data(country_csv)

    assert list(df.columns) == ["name", "population", "co2_emissions_total", "gdp", "fertility_rate"]
    assert len(df) == 10
    assert "Density" not in df.columns


def test_load_parses_comma_grouped_numbers(country_csv):
    df = load_country_data(country_csv).set_index("name")

    assert df.loc["Norway", "co2_emissions_total"] == 1200
    assert pd.isna(df.loc["Republic of China", "population"])
    # GDP keeps its currency formatting until the cleaner parses it
    assert df.loc["Norway", "gdp"].startswith("$")


def test_load_missing_columns_raises(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("Country,Population\nNorway,5\n")

    with pytest.raises(ValueError, match="Missing required columns"):
        load_country_data(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_country_data(tmp_path / "nope.csv")
