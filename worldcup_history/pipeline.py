"""
pipeline.py

Runs every aggregation once and returns all outputs in one dict.

Inputs:
- data_access: name -> DataFrame for "matches", "players", "summaries"
  (defaults to the CSV files in config.DATA_PATHS).
- Reference tables from worldcup_history/reference/ (coordinates, ISO codes).

Outputs (keys of the returned dict):
- stadiums, country_goals, player_goals      (DataFrames)
- stadium_markers, country_markers           (map payloads)
- top_scorers_chart, country_goals_chart     (chart payloads)
"""

import logging

from .charts import country_goals_chart, top_scorers_chart
from .code_mapping import build_code_lookup, load_country_code_map
from .config import TOP_SCORERS_DEFAULT
from .country_goals import attach_country_coordinates, get_country_goals
from .data_loading import (
    DataAccess,
    load_country_coordinates,
    load_stadium_coordinates,
    make_csv_data_access,
)
from .markers import country_goal_markers, stadium_markers
from .player_goals import top_goal_scorers, validate_top_n
from .stadiums import get_stadiums_info

logger = logging.getLogger(__name__)


def build_outputs(data_access: DataAccess | None = None, top_n: int = TOP_SCORERS_DEFAULT) -> dict:
    """Load the three tables, aggregate, and build the map/chart payloads."""
    # Bad input should fail before any CSV is read.
    validate_top_n(top_n)

    access = data_access or make_csv_data_access()
    matches = access("matches")
    players = access("players")
    summaries = access("summaries")

    stadiums = get_stadiums_info(summaries, matches, load_stadium_coordinates())
    country_goals = attach_country_coordinates(get_country_goals(matches), load_country_coordinates())
    player_goals = top_goal_scorers(players, top_n)

    lookup = build_code_lookup(load_country_code_map())

    logger.info(
        "Built %d stadium rows, %d countries, %d top scorers",
        len(stadiums), len(country_goals), len(player_goals),
    )

    return {
        "stadiums": stadiums,
        "country_goals": country_goals,
        "player_goals": player_goals,
        "stadium_markers": stadium_markers(stadiums, lookup),
        "country_markers": country_goal_markers(country_goals),
        "top_scorers_chart": top_scorers_chart(player_goals),
        "country_goals_chart": country_goals_chart(country_goals),
    }
