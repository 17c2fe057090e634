"""
markers.py

Map payloads: plain lists of {"lat", "lon", "popup_html"} dicts.

Design goal:
- Keep this renderer-agnostic. viz.build_marker_map draws them with plotly,
  but any map library that takes a point + HTML popup can use the same list.
"""

import logging
from html import escape

import pandas as pd

from .data_loading import require_columns
from .flags import country_flag
from .utils import format_count

logger = logging.getLogger(__name__)


def _marker(lat, lon, popup_html: str) -> dict:
    return {"lat": float(lat), "lon": float(lon), "popup_html": popup_html}


def stadium_popup_html(row, flag: str) -> str:
    """Popup: stadium name, winner (with flag), year and attendance."""
    return (
        f"<strong>Stadium Name: {escape(str(row['stadium']))}</strong><br>"
        f"Winning Team: {flag} {escape(str(row['winner']))}<br>"
        f"Year: {format_count(row['year'])}<br>"
        f"Stadium Attendance: {format_count(row['attendance'])} People"
    )


def country_popup_html(row) -> str:
    """Popup: country name and its total / home / away goals."""
    return (
        f"<strong>{escape(str(row['country']))}</strong><br>"
        f"Total Goals Scored: {format_count(row['total_goals'])}<br>"
        f"Goals Scored As Home Team: {format_count(row['home_goals'])}<br>"
        f"Goals Scored As Away Team: {format_count(row['away_goals'])}"
    )


def stadium_markers(stadium_info: pd.DataFrame, code_lookup: dict) -> list[dict]:
    """
    One marker per Final stadium.

    Raises UnknownCountryError if a winner has no ISO code (the flag is part of the popup).
    """
    require_columns(stadium_info, ["year", "winner", "stadium", "attendance", "latitude", "longitude"], "stadium_info")

    markers = []
    for _, row in stadium_info.iterrows():
        flag = country_flag(row["winner"], code_lookup)
        markers.append(_marker(row["latitude"], row["longitude"], stadium_popup_html(row, flag)))

    return markers


def country_goal_markers(country_goals_geo: pd.DataFrame) -> list[dict]:
    """One marker per country that has coordinates; the rest are skipped."""
    require_columns(
        country_goals_geo,
        ["country", "home_goals", "away_goals", "total_goals", "latitude", "longitude"],
        "country_goals",
    )

    has_coords = country_goals_geo["latitude"].notna() & country_goals_geo["longitude"].notna()
    skipped = int((~has_coords).sum())
    if skipped:
        logger.debug("Skipping %d countries without coordinates", skipped)

    return [
        _marker(row["latitude"], row["longitude"], country_popup_html(row))
        for _, row in country_goals_geo[has_coords].iterrows()
    ]
