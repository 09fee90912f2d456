import matplotlib

matplotlib.use("Agg")

import geopandas as gpd
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
from shapely.geometry import box


COUNTRY_CSV_TEXT = """Country,Density,Population,Co2-Emissions,GDP,Fertility Rate
Republic of China,153,,1000,"$2,000",1.5
Norway,15,400,"1,200","$40,000 ",1.6
United States,36,600,900,"$30,000",1.7
Russian Federation,9,500,700,"$5,000",1.5
Nigeria,226,500,60,"$1,000",5.3
Monaco,26337,400,0,"$4,000",
Niger,19,500,5,"$700",6.9
Qatar,248,500,"1,600","$35,000",1.9
Chad,13,500,3,"$500",
Tuvalu,393,400,10,"$60,000",3.2
"""


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def country_csv(tmp_path):
    path = tmp_path / "countries.csv"
    path.write_text(COUNTRY_CSV_TEXT)
    return path


@pytest.fixture
def raw_countries():
    """Country Record frame as produced by the loader."""
    return pd.DataFrame({
        "name": ["Republic of China", "Norway", "United States", "Russian Federation"],
        "population": [np.nan, 400.0, 600.0, 500.0],
        "co2_emissions_total": [1000.0, 1200.0, 900.0, 700.0],
        "gdp": ["$2,000", "$40,000 ", "$30,000", "$5,000"],
        "fertility_rate": [1.5, 1.6, 1.7, 1.5],
    })


@pytest.fixture
def world():
    """Polygon table with one square per region, spelled the way the map source spells them."""
    regions = [
        "China", "Norway", "United States of America", "Russia",
        "Nigeria", "Niger", "Qatar", "Chad", "Antarctica",
    ]
    geoms = [box(i * 10, 0, i * 10 + 5, 5) for i in range(len(regions))]
    return gpd.GeoDataFrame({"region": regions}, geometry=geoms, crs="EPSG:4326")
