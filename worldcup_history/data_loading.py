# This file loads the raw World Cup CSVs, standardizes columns, and outputs “cleaned” DataFrames.

"""
What data_loading.py does:

- Loads the three Kaggle CSVs (matches, players, tournament summaries) into pandas tables.
- Renames the raw headers ("Home Team Name", "Player Name", ...) to the snake_case names the
  aggregators use, so no other module needs to know the raw spelling.
- Drops the fully blank rows and exact duplicate rows the raw matches file ships with.
- Loads the static reference tables (stadium and country coordinates).
- make_csv_data_access builds the injectable “give me table X” function the pipeline runs on.
"""

import logging
from typing import Callable

import pandas as pd

from .config import DATA_PATHS, REFERENCE_PATHS, data_paths
from .errors import MissingDataError

logger = logging.getLogger(__name__)

DataAccess = Callable[[str], pd.DataFrame]

MATCH_COLUMN_MAP = {
    "Year": "year",
    "Datetime": "datetime",
    "Stage": "stage",
    "Stadium": "stadium",
    "City": "city",
    "Home Team Name": "home_team",
    "Home Team Goals": "home_goals",
    "Away Team Goals": "away_goals",
    "Away Team Name": "away_team",
    "Attendance": "attendance",
    "MatchID": "match_id",
}

PLAYER_COLUMN_MAP = {
    "MatchID": "match_id",
    "Team Initials": "team_initials",
    "Player Name": "player_name",
    "Event": "event",
}

SUMMARY_COLUMN_MAP = {
    "Year": "year",
    "Country": "host_country",
    "Winner": "winner",
    "Runners-Up": "runners_up",
    "Third": "third",
    "Fourth": "fourth",
    "GoalsScored": "goals_scored",
    "QualifiedTeams": "qualified_teams",
    "MatchesPlayed": "matches_played",
    "Attendance": "attendance",
}

MATCH_COLS = ["stage", "stadium", "attendance", "home_team", "away_team", "home_goals", "away_goals"]
PLAYER_COLS = ["player_name", "event"]
SUMMARY_COLS = ["year", "winner"]


def require_columns(df: pd.DataFrame, required_cols: list[str], table: str) -> None:
    """
    Fail fast when a table is missing columns an aggregator needs.

    Impact:
    - A renamed header in a new CSV release shows up as a clear error,
      not as a KeyError three functions later.
    """
    missing = [c for c in required_cols if c not in df.columns]
    if missing:
        raise MissingDataError(f"{table} is missing columns: {missing}. Found: {df.columns.tolist()}")


def _read_raw_csv(path: str) -> pd.DataFrame:
    # Undecodable bytes become U+FFFD, which is what the name correction tables expect.
    return pd.read_csv(path, encoding="utf-8", encoding_errors="replace")


def standardize_table(raw_df: pd.DataFrame, column_map: dict) -> pd.DataFrame:
    """
    Rename raw headers, drop blank rows and exact duplicates.

    Already-standard columns pass through untouched, so this is safe to run twice.
    """
    df = raw_df.copy()
    df.columns = [str(c).strip() for c in df.columns]
    df = df.rename(columns=column_map)

    n_before = len(df)
    df = df.dropna(how="all").drop_duplicates().reset_index(drop=True)
    if len(df) != n_before:
        logger.debug("Dropped %d blank/duplicate rows", n_before - len(df))

    return df


def load_matches(path: str | None = None) -> pd.DataFrame:
    """
    Load WorldCupMatches.csv.

    - Team names keep their raw spelling (country_goals cleans them).
    - Goals, attendance and year are coerced to numbers (NaN when unreadable).
    """
    df = standardize_table(_read_raw_csv(path or DATA_PATHS["matches"]), MATCH_COLUMN_MAP)
    require_columns(df, MATCH_COLS, "matches")

    for col in ["year", "home_goals", "away_goals", "attendance"]:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    df["stage"] = df["stage"].astype("string").str.strip()
    df["stadium"] = df["stadium"].astype("string").str.strip()

    logger.info("Loaded matches: %s", df.shape)
    return df


def load_players(path: str | None = None) -> pd.DataFrame:
    """Load WorldCupPlayers.csv (one row per player per match)."""
    df = standardize_table(_read_raw_csv(path or DATA_PATHS["players"]), PLAYER_COLUMN_MAP)
    require_columns(df, PLAYER_COLS, "players")

    df["player_name"] = df["player_name"].astype("string").str.strip()

    logger.info("Loaded players: %s", df.shape)
    return df


def load_summaries(path: str | None = None) -> pd.DataFrame:
    """Load WorldCups.csv (one row per tournament edition)."""
    df = standardize_table(_read_raw_csv(path or DATA_PATHS["summaries"]), SUMMARY_COLUMN_MAP)
    require_columns(df, SUMMARY_COLS, "summaries")

    df["year"] = pd.to_numeric(df["year"], errors="coerce").astype("Int64")
    df["winner"] = df["winner"].astype("string").str.strip()

    logger.info("Loaded summaries: %s", df.shape)
    return df


LOADERS = {
    "matches": load_matches,
    "players": load_players,
    "summaries": load_summaries,
}


def make_csv_data_access(paths: dict | None = None) -> DataAccess:
    """
    Build a function name -> DataFrame backed by CSV files.

    paths defaults to config.DATA_PATHS; pass data_paths(some_dir) to read elsewhere.
    """
    paths = dict(paths or DATA_PATHS)

    def access(name: str) -> pd.DataFrame:
        if name not in LOADERS:
            raise KeyError(f"Unknown table: {name}. Expected one of {sorted(LOADERS)}")
        return LOADERS[name](paths[name])

    return access


def load_world_cup_tables(data_dir: str | None = None) -> dict:
    """
    Load all three tables at once.

    Returns:
    - {"matches": ..., "players": ..., "summaries": ...}
    """
    access = make_csv_data_access(data_paths(data_dir) if data_dir else None)
    return {name: access(name) for name in LOADERS}


def load_stadium_coordinates(path: str | None = None) -> pd.DataFrame:
    """
    Load the fixed coordinates of every Final stadium, in tournament order.

    There is no key in this table: row i belongs to the i-th Final.
    """
    df = pd.read_csv(path or REFERENCE_PATHS["stadium_coordinates"], encoding="utf-8")
    require_columns(df, ["latitude", "longitude"], "stadium_coordinates")
    return df.reset_index(drop=True)


def load_country_coordinates(path: str | None = None) -> pd.DataFrame:
    """Load country -> (latitude, longitude); historical teams have blank coordinates."""
    df = pd.read_csv(path or REFERENCE_PATHS["country_coordinates"], encoding="utf-8")
    require_columns(df, ["country", "latitude", "longitude"], "country_coordinates")
    df["country"] = df["country"].astype(str).str.strip()
    return df
