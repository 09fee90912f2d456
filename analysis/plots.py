"""
Static figures for the emissions analysis:
- choropleth of emissions-per-capita categories
- top emitters per capita bar chart
- GDP per capita vs fertility rate scatter with an OLS fit line
"""
import logging
import os
from typing import Dict, Optional

import geopandas as gpd
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.figure import Figure
from matplotlib.patches import Patch

from config import (
    CATEGORY_LABELS, CATEGORY_COLORS, MISSING_COLOR,
    TOP_N, LABEL_DECIMALS, Y_PADDING,
    MAP_FIGSIZE, BAR_FIGSIZE, SCATTER_FIGSIZE, FIGURE_DPI,
)

logger = logging.getLogger(__name__)


def category_colors(categories: pd.Series) -> pd.Series:
    return categories.astype(object).map(CATEGORY_COLORS).fillna(MISSING_COLOR)


def plot_emissions_choropleth(filtered: gpd.GeoDataFrame) -> Figure:
    """One filled polygon per region, coloured by emissions_category."""
    fig, ax = plt.subplots(figsize=MAP_FIGSIZE)
    filtered.plot(ax=ax, color=category_colors(filtered["emissions_category"]).tolist(),
                  edgecolor="white", linewidth=0.3)

    handles = [Patch(facecolor=CATEGORY_COLORS[label], label=label) for label in CATEGORY_LABELS]
    if filtered["emissions_category"].isna().any():
        handles.append(Patch(facecolor=MISSING_COLOR, label="No data"))
    ax.legend(handles=handles, title="CO2 per capita", loc="lower left")

    ax.set_title("CO2 Emissions per Capita by Country")
    ax.set_axis_off()
    fig.tight_layout()
    return fig


def top_emitters(df: pd.DataFrame, n: int = TOP_N) -> pd.DataFrame:
    return df.nlargest(n, "co2_per_capita")[["name", "co2_per_capita"]].reset_index(drop=True)


def plot_top_emitters(df: pd.DataFrame, n: int = TOP_N) -> Figure:
    top = top_emitters(df, n)
    fig, ax = plt.subplots(figsize=BAR_FIGSIZE)
    bars = ax.bar(top["name"], top["co2_per_capita"], color=CATEGORY_COLORS["Very High"])
    ax.bar_label(bars, labels=[f"{v:.{LABEL_DECIMALS}f}" for v in top["co2_per_capita"]], padding=3)

    ax.set_ylim(0, top["co2_per_capita"].max() * Y_PADDING)
    ax.set_title(f"Top {len(top)} CO2 Emitters per Capita")
    ax.set_xlabel("Country")
    ax.set_ylabel("CO2 emissions per capita")
    ax.tick_params(axis="x", labelrotation=45)
    fig.tight_layout()
    return fig


def _label_points(ax, df: pd.DataFrame, x: str, y: str, label: str) -> int:
    """Draw point labels in row order, dropping any that overlap one already drawn."""
    placed = []
    for _, row in df.iterrows():
        text = ax.text(row[x], row[y], row[label], fontsize=7, ha="left", va="bottom")
        bbox = text.get_window_extent()
        if any(bbox.overlaps(other) for other in placed):
            text.remove()
            continue
        placed.append(bbox)
    return len(placed)


def plot_gdp_vs_fertility(df: pd.DataFrame) -> Figure:
    fig, ax = plt.subplots(figsize=SCATTER_FIGSIZE)
    sns.regplot(
        data=df,
        x="gdp_per_capita",
        y="fertility_rate",
        ax=ax,
        scatter_kws={"alpha": 0.7, "s": 20},
        line_kws={"color": "red"},
    )
    # limits go first so label extents are measured in final display coordinates
    ax.set_xlim(0, df["gdp_per_capita"].max())
    ax.set_ylim(0, df["fertility_rate"].max())

    n_labels = _label_points(ax, df, "gdp_per_capita", "fertility_rate", "name")
    logger.debug(f"Drew {n_labels} of {len(df)} country labels")

    ax.set_title("GDP per Capita vs Fertility Rate")
    ax.set_xlabel("GDP per capita")
    ax.set_ylabel("Fertility rate")
    fig.tight_layout()
    return fig


def show_or_save(figures: Dict[str, Figure], save_dir: Optional[str] = None) -> None:
    """Display figures interactively, or write each to <save_dir>/<name>.png."""
    if save_dir is None:
        plt.show()
        return
    os.makedirs(save_dir, exist_ok=True)
    for name, fig in figures.items():
        path = os.path.join(save_dir, f"{name}.png")
        fig.savefig(path, dpi=FIGURE_DPI)
        plt.close(fig)
        logger.info(f"Saved figure to {path}")
