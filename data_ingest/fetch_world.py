"""
World polygon source:
- download the public country-boundaries GeoJSON to data/world (once)
- load and sanitize it into a (region, geometry) GeoDataFrame
"""

import logging
import os

import geopandas as gpd

from config import WORLD_GEOJSON_URL, WORLD_GEOJSON_PATH, COUNTRY_COL, REGION_COL, WORLD_CRS
from utils.io_utils import download_file
from utils.geo_utils import sanitize_world

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"}


def download_world_geojson(url=WORLD_GEOJSON_URL, dest=WORLD_GEOJSON_PATH):
    return download_file(url, dest, headers=HEADERS)


def load_world_polygons(path=WORLD_GEOJSON_PATH, country_col=COUNTRY_COL) -> gpd.GeoDataFrame:
    """Read world polygons from ``path``, downloading the default source if absent."""
    if not os.path.exists(path):
        if path != WORLD_GEOJSON_PATH:
            raise FileNotFoundError(f"World polygon file not found: {path}")
        download_world_geojson()
    raw = gpd.read_file(path)
    world = sanitize_world(raw, country_col=country_col, region_col=REGION_COL, out_crs=WORLD_CRS)
    logger.info(f"Loaded {len(world)} world regions from {path}")
    return world
