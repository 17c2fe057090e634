# This file turns the match list (two teams per row) into one row per country with its goal totals.

"""
What country_goals.py does:
- Splits every match into a “home contribution” and an “away contribution”.
- Sums each side per country, then merges the two tables (a country that only ever played
  away still gets a row, with 0 home goals).
- Folds alternate spellings of the same team together (IR Iran -> Iran).
- Applies the hand-checked data patches from config.COUNTRY_GOAL_PATCHES.
- attach_country_coordinates adds latitude/longitude by country name for the goals map.
"""

import logging

import pandas as pd

from .config import COUNTRY_GOAL_PATCHES, COUNTRY_NAME_ALIASES
from .data_loading import require_columns
from .name_cleaning import MATCH_TEAM_COLS, apply_country_mapping, strip_team_name_artifact

logger = logging.getLogger(__name__)

GOAL_COLS = ["home_goals", "away_goals"]
COUNTRY_GOALS_COLS = ["country", "home_goals", "away_goals", "total_goals"]


def _side_totals(matches: pd.DataFrame, team_col: str, goals_col: str) -> pd.DataFrame:
    """Sum one side's goals per team -> columns: country, <goals_col>."""
    return (
        matches.groupby(team_col, sort=True)[goals_col]
        .sum()
        .reset_index()
        .rename(columns={team_col: "country"})
    )


def merge_home_away(home: pd.DataFrame, away: pd.DataFrame) -> pd.DataFrame:
    """
    Full outer merge of home and away totals on country.

    A country missing from one side gets 0 for that side, so total_goals is never null.
    """
    df = home.merge(away, on="country", how="outer")
    df[GOAL_COLS] = df[GOAL_COLS].fillna(0)
    return df


def fold_country_aliases(country_goals: pd.DataFrame, aliases: dict = COUNTRY_NAME_ALIASES) -> pd.DataFrame:
    """
    Rename alias spellings and re-sum, so every country appears once.

    Impact:
    - "IR Iran" and "Iran" stop being two different markers on the map.
    """
    df = apply_country_mapping(country_goals, aliases, cols=["country"])
    return df.groupby("country", sort=True, as_index=False)[GOAL_COLS].sum()


def apply_goal_patches(country_goals: pd.DataFrame, patches: dict = COUNTRY_GOAL_PATCHES) -> pd.DataFrame:
    """
    Overwrite the goal columns of specific countries with hand-checked values.

    These are data patches for known problems in the raw CSV, not general logic:
    - a patch that changes the computed numbers is logged as a warning (re-verify after a data refresh);
    - a patch for a country that is not in the table is logged and skipped.
    """
    df = country_goals.copy()

    for country, values in patches.items():
        hit = df["country"] == country
        if not hit.any():
            logger.warning("Goal patch for %r skipped: country not present", country)
            continue

        for col, value in values.items():
            current = df.loc[hit, col].iloc[0]
            if current != value:
                logger.warning(
                    "Goal patch for %r: %s %s -> %s (re-verify against the source CSV)",
                    country, col, current, value,
                )
            df.loc[hit, col] = value

    return df


def get_country_goals(matches: pd.DataFrame) -> pd.DataFrame:
    """
    Return the goals scored per country, as home team, as away team and in total.

    Steps:
    1) Drop matches with a missing team name or goal count.
    2) Strip the 'rn">' artifact from team names.
    3) Sum home goals per home team, away goals per away team.
    4) Outer-merge both sides (missing side -> 0), fold alias spellings.
    5) Apply data patches, compute total_goals.

    Output columns:
    - country, home_goals, away_goals, total_goals (integers, one row per country)
    """
    require_columns(matches, MATCH_TEAM_COLS + GOAL_COLS, "matches")

    df = matches[MATCH_TEAM_COLS + GOAL_COLS].copy()
    for col in GOAL_COLS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    n_before = len(df)
    df = df.dropna(subset=MATCH_TEAM_COLS + GOAL_COLS)
    if len(df) != n_before:
        logger.debug("Dropped %d matches with missing teams or goals", n_before - len(df))

    df = strip_team_name_artifact(df)

    home = _side_totals(df, "home_team", "home_goals")
    away = _side_totals(df, "away_team", "away_goals")

    country_goals = merge_home_away(home, away)
    country_goals = fold_country_aliases(country_goals)
    country_goals = apply_goal_patches(country_goals)

    country_goals[GOAL_COLS] = country_goals[GOAL_COLS].astype("int64")
    country_goals["total_goals"] = country_goals["home_goals"] + country_goals["away_goals"]
    country_goals["country"] = country_goals["country"].astype(str)

    out = country_goals.sort_values("country", kind="mergesort").reset_index(drop=True)
    return out[COUNTRY_GOALS_COLS]


def attach_country_coordinates(country_goals: pd.DataFrame, coordinates: pd.DataFrame) -> pd.DataFrame:
    """
    Left-join latitude/longitude by country name.

    Countries without coordinates (Soviet Union, Zaire, ...) keep NaN and are left off the map.
    """
    require_columns(coordinates, ["country", "latitude", "longitude"], "country_coordinates")

    coords = coordinates[["country", "latitude", "longitude"]].drop_duplicates(subset=["country"])
    out = country_goals.merge(coords, on="country", how="left")

    missing = out.loc[out["latitude"].isna() | out["longitude"].isna(), "country"].tolist()
    if missing:
        logger.info("No coordinates for %d countries: %s", len(missing), missing)

    return out
