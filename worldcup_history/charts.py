"""
charts.py

Chart payloads (category/value pairs plus style), built from the aggregate tables.

A ChartSpec is a plain dict:
- title, x_label, y_label
- categories: labels in drawing order (largest value first)
- values: numbers aligned with categories
- style: bar_color, background, text_color, orientation ("h" or "v")
"""

import pandas as pd

from .config import CHART_STYLE, COUNTRY_GOALS_CHART_TOP, COUNTRY_GOALS_TITLE, TOP_SCORERS_TITLE
from .data_loading import require_columns


def make_chart_spec(
    categories,
    values,
    title: str,
    x_label: str,
    y_label: str,
    orientation: str = "h",
) -> dict:
    """Bundle categories/values with the shared green-on-gold style."""
    categories = [str(c) for c in categories]
    values = [int(v) for v in values]
    if len(categories) != len(values):
        raise ValueError(f"categories ({len(categories)}) and values ({len(values)}) differ in length")

    return {
        "title": title,
        "x_label": x_label,
        "y_label": y_label,
        "categories": categories,
        "values": values,
        "style": {**CHART_STYLE, "orientation": orientation},
    }


def top_scorers_chart(player_goals: pd.DataFrame, title: str = TOP_SCORERS_TITLE) -> dict:
    """Horizontal bars: one per player, longest (most goals) first."""
    require_columns(player_goals, ["player_name", "goals"], "player_goals")
    df = player_goals.sort_values("goals", ascending=False, kind="mergesort")
    return make_chart_spec(df["player_name"], df["goals"], title, x_label="Total Goals Scored", y_label="")


def country_goals_chart(
    country_goals: pd.DataFrame,
    top: int = COUNTRY_GOALS_CHART_TOP,
    title: str = COUNTRY_GOALS_TITLE,
) -> dict:
    """Vertical columns: the `top` countries by total goals."""
    require_columns(country_goals, ["country", "total_goals"], "country_goals")
    df = country_goals.sort_values("total_goals", ascending=False, kind="mergesort").head(top)
    return make_chart_spec(
        df["country"], df["total_goals"], title, x_label="", y_label="Total Goals Scored", orientation="v",
    )
