# config.py
"""
Central configuration for the country emissions analysis.
Edit this file to change paths, column names, plot settings, etc.
"""
import os

# Project root directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Data paths
DATA_DIR = os.path.join(BASE_DIR, "data")
COUNTRY_CSV = os.path.join(DATA_DIR, "world-data-2023.csv")
WORLD_DIR = os.path.join(DATA_DIR, "world")
WORLD_GEOJSON_PATH = os.path.join(WORLD_DIR, "countries.geojson")
WORLD_GEOJSON_URL = "https://raw.githubusercontent.com/datasets/geo-countries/master/data/countries.geojson"

# --- Output/Reporting Settings ---
FIGURES_DIR = os.path.join(BASE_DIR, "outputs", "figures")
LOG_FILE = os.path.join(BASE_DIR, "pipeline.log")

# --- Source CSV columns -> Country Record columns ---
SOURCE_COLUMNS = {
    "Country": "name",
    "Population": "population",
    "Co2-Emissions": "co2_emissions_total",
    "GDP": "gdp",
    "Fertility Rate": "fertility_rate",
}

# --- World polygons ---
COUNTRY_COL = None  # auto-detect ("ADMIN", "name", ...) when None
REGION_COL = "region"
WORLD_CRS = "EPSG:4326"

# --- Categorizer ---
CATEGORY_LABELS = ["Low", "Medium", "High", "Very High"]
CATEGORY_COLORS = {
    "Low": "#fee5d9",
    "Medium": "#fcae91",
    "High": "#fb6a4a",
    "Very High": "#cb181d",
}
MISSING_COLOR = "grey"

# --- Plot settings ---
TOP_N = 10
LABEL_DECIMALS = 4
Y_PADDING = 1.2  # bar chart y-axis upper limit as a multiple of the max value
MAP_FIGSIZE = (12, 6)
BAR_FIGSIZE = (10, 6)
SCATTER_FIGSIZE = (10, 7)
FIGURE_DPI = 150
