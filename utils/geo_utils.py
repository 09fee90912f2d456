import logging
from typing import Optional

import geopandas as gpd
from shapely import make_valid

logger = logging.getLogger(__name__)

NAME_COLUMN_CANDIDATES = ["ADMIN", "NAME", "name", "COUNTRY", "country", "region"]


def detect_country_column(gdf: gpd.GeoDataFrame, country_col: Optional[str] = None) -> str:
    """Return the country-name column of a polygon table.

    Raises:
        ValueError: If the requested column is absent or none can be auto-detected
    """
    if country_col is not None:
        if country_col not in gdf.columns:
            raise ValueError(f"Country column '{country_col}' not found. Available columns: " +
                             ", ".join(gdf.columns.tolist()))
        return country_col

    for col in NAME_COLUMN_CANDIDATES:
        if col in gdf.columns:
            return col
    raise ValueError("No usable country name column found. Available columns: " +
                     ", ".join(gdf.columns.tolist()))


def sanitize_world(
    gdf: gpd.GeoDataFrame,
    *,
    country_col: Optional[str] = None,
    region_col: str = "region",
    out_crs: str = "EPSG:4326",
    try_make_valid: bool = True
) -> gpd.GeoDataFrame:
    """
    Prepare world polygons for joining and plotting.

    Args:
        gdf: Input GeoDataFrame with country geometries
        country_col: Name of country column. If None, auto-detect from common names
        region_col: Name given to the country column in the output
        out_crs: Output CRS (default: EPSG:4326)
        try_make_valid: Whether to repair invalid polygons with shapely.make_valid

    Returns:
        GeoDataFrame with exactly two columns: region_col and geometry

    Raises:
        ValueError: If the input is not a GeoDataFrame, has no usable geometries,
            or no usable country column is found
    """
    if not isinstance(gdf, gpd.GeoDataFrame):
        raise ValueError("Input must be a GeoDataFrame")

    # Drop null/empty geometries
    gdf = gdf[gdf.geometry.notnull()]
    gdf = gdf[~gdf.geometry.is_empty]

    if gdf.empty:
        raise ValueError("No valid geometries found after removing null/empty geometries")

    country_col = detect_country_column(gdf, country_col)
    logger.info(f"Using country column: {country_col}")
    logger.info(f"Initial geometry count: {len(gdf)}")

    if gdf.crs is None:
        gdf = gdf.set_crs(out_crs)
    gdf = gdf.to_crs(out_crs)

    if try_make_valid:
        invalid = ~gdf.geometry.is_valid
        if invalid.any():
            logger.info(f"Repairing {int(invalid.sum())} invalid geometries with shapely.make_valid")
            gdf = gdf.copy()
            gdf.loc[invalid, "geometry"] = gdf.loc[invalid, "geometry"].apply(make_valid)

    out = gdf[[country_col, "geometry"]].rename(columns={country_col: region_col})
    out = out[out[region_col].notnull()].copy()
    out[region_col] = out[region_col].astype(str)
    out = out.reset_index(drop=True)

    logger.info(f"Final geometry count: {len(out)}")
    return out
