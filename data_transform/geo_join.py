# geo_join.py
"""
Join the derived country table onto the world polygons.

The polygon source spells some countries differently from the statistics CSV,
so names go through a second alias table before the join. This table is
separate from the one in clean.py: it targets the polygon dataset's naming.
"""
import logging
from typing import List, Tuple

import geopandas as gpd
import pandas as pd

from config import REGION_COL

logger = logging.getLogger(__name__)

# Canonical country names -> polygon dataset names
MAP_NAME_ALIASES = {
    "United States": "United States of America",
    "Tanzania": "United Republic of Tanzania",
    "Serbia": "Republic of Serbia",
}

MAP_NAME_COL = "map_name"


def to_map_names(names: pd.Series, aliases: dict = MAP_NAME_ALIASES) -> pd.Series:
    return names.map(lambda n: aliases.get(n, n))


def _log_names(header: str, names: List[str]) -> None:
    if not names:
        return
    logger.warning(f"{len(names)} {header}:")
    for name in names:
        logger.warning(f"   - {name}")


def join_with_world(
    df: pd.DataFrame,
    world: gpd.GeoDataFrame,
    aliases: dict = MAP_NAME_ALIASES,
    region_col: str = REGION_COL,
) -> Tuple[gpd.GeoDataFrame, gpd.GeoDataFrame, List[str], List[str]]:
    """
    Left-join country metrics onto every polygon row.

    Args:
        df: Derived Record frame (needs name and co2_per_capita)
        world: Polygon table with a region column and geometries
        aliases: Canonical name -> polygon name overrides

    Returns:
        Tuple of (joined, filtered, missing_regions, unmatched_countries):
        joined keeps every polygon row; filtered drops rows without an
        emissions value; missing_regions are polygon regions with no emissions
        value; unmatched_countries are country names with no polygon.
    """
    if region_col not in world.columns:
        raise ValueError(f"Region column '{region_col}' not found in world polygons")

    df = df.copy()
    df[MAP_NAME_COL] = to_map_names(df["name"], aliases)

    joined = world.merge(df, how="left", left_on=region_col, right_on=MAP_NAME_COL)

    missing_regions = sorted(joined.loc[joined["co2_per_capita"].isna(), region_col].dropna().unique().tolist())
    _log_names("map regions have no emissions data", missing_regions)

    known_regions = set(world[region_col])
    unmatched_countries = sorted(df.loc[~df[MAP_NAME_COL].isin(known_regions), "name"].unique().tolist())
    _log_names("countries have no map polygon and are left off the map", unmatched_countries)

    filtered = joined.dropna(subset=["co2_per_capita"]).reset_index(drop=True)
    logger.info(f"Joined {len(filtered)} of {len(joined)} map regions to country data")
    return joined, filtered, missing_regions, unmatched_countries
