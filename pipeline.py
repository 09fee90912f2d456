#!/usr/bin/env python3
"""
Main pipeline orchestrator for the country emissions analysis.
Runs load, clean, metrics, map join, categorisation, plotting and regression in sequence.
"""

import argparse
import logging
import sys
from datetime import datetime

from config import COUNTRY_CSV, WORLD_GEOJSON_PATH, FIGURES_DIR, LOG_FILE

logger = logging.getLogger(__name__)


def setup_logging(level="INFO", log_file=LOG_FILE):
    """Log to both 'log_file' and the console."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )


def prepare_country_table(data_path=COUNTRY_CSV):
    """Load, clean and derive per-capita metrics."""
    logger.info("Preparing country table...")

    try:
        from data_ingest.load_countries import load_country_data
        from data_transform.clean import clean_country_data
        from data_transform.metrics import add_per_capita_metrics

        raw = load_country_data(data_path)
        cleaned = clean_country_data(raw)
        return add_per_capita_metrics(cleaned)

    except Exception as e:
        logger.error(f"Preparing country table failed: {e}")
        raise


def load_world(world_path=WORLD_GEOJSON_PATH):
    """Load world polygons, downloading the default source if needed."""
    logger.info("Loading world polygons...")

    try:
        from data_ingest.fetch_world import load_world_polygons

        return load_world_polygons(world_path)

    except Exception as e:
        logger.error(f"Loading world polygons failed: {e}")
        raise


def build_map_table(derived, world):
    """Join onto world polygons and bin emissions into categories."""
    logger.info("Building map table...")

    try:
        from data_transform.geo_join import join_with_world
        from data_transform.categorize import assign_emission_categories

        _, filtered, missing_regions, unmatched_countries = join_with_world(derived, world)
        map_table = assign_emission_categories(filtered)
        return map_table, missing_regions, unmatched_countries

    except Exception as e:
        logger.error(f"Building map table failed: {e}")
        raise


def run_regression(derived):
    """Fit fertility_rate ~ gdp_per_capita and print the summary."""
    logger.info("Fitting regression...")

    try:
        from analysis.regression import fit_fertility_model, regression_stats

        results = fit_fertility_model(derived)
        print(results.summary())
        stats = regression_stats(results)
        logger.info(
            f"OLS fertility_rate ~ gdp_per_capita | slope: {stats['slope']:.6g} "
            f"| R²: {stats['r_squared']:.4f} | n: {stats['n_obs']}"
        )
        return results

    except Exception as e:
        logger.error(f"Regression failed: {e}")
        raise


def render_figures(derived, map_table):
    logger.info("Rendering figures...")

    try:
        from analysis.plots import plot_emissions_choropleth, plot_top_emitters, plot_gdp_vs_fertility

        return {
            "emissions_choropleth": plot_emissions_choropleth(map_table),
            "top_emitters": plot_top_emitters(derived),
            "gdp_vs_fertility": plot_gdp_vs_fertility(derived),
        }

    except Exception as e:
        logger.error(f"Rendering failed: {e}")
        raise


def run_analysis(data_path=COUNTRY_CSV, world_path=WORLD_GEOJSON_PATH, world=None):
    """Run every step and return the intermediate tables, model and figures."""
    derived = prepare_country_table(data_path)

    if world is None:
        world = load_world(world_path)

    map_table, missing_regions, unmatched_countries = build_map_table(derived, world)
    figures = render_figures(derived, map_table)
    model = run_regression(derived)

    return {
        "derived": derived,
        "map_table": map_table,
        "missing_regions": missing_regions,
        "unmatched_countries": unmatched_countries,
        "model": model,
        "figures": figures,
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Country CO2 emissions exploratory analysis")
    parser.add_argument("--data", default=COUNTRY_CSV, help="Country statistics CSV")
    parser.add_argument("--world", default=WORLD_GEOJSON_PATH, help="World polygons file (GeoJSON/shapefile)")
    parser.add_argument("--save-dir", default=None,
                        help=f"Write figures as PNG here instead of showing them (e.g. {FIGURES_DIR})")
    parser.add_argument("--no-show", action="store_true",
                        help=f"Do not open figure windows; saves to {FIGURES_DIR} unless --save-dir is given")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-file", default=LOG_FILE, help="Log file path")
    return parser.parse_args(argv)


def main(argv=None):
    """Main pipeline execution."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    start_time = datetime.now()
    logger.info(f"Starting country emissions analysis at {start_time}")

    try:
        from analysis.plots import show_or_save

        result = run_analysis(args.data, args.world)
        save_dir = args.save_dir or (FIGURES_DIR if args.no_show else None)
        show_or_save(result["figures"], save_dir)

        duration = datetime.now() - start_time
        logger.info(f"Analysis completed successfully in {duration}")

    except Exception as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
