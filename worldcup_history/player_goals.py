# This file counts World Cup goals per player from the “Event” column of the players table.

"""
What player_goals.py does:
- The Event column stores what happened to a player in a match, e.g. "G40' G75' Y80'".
- Each G<minute>' token is a goal, so counting the tokens gives goals per match row.
- Summing per (upper-cased) player name and keeping the top N gives the top scorers chart.
"""

import logging
import numbers
import re

import pandas as pd

from .config import (
    GOAL_TOKEN_PATTERN,
    PLAYER_NAME_CORRECTIONS,
    TOP_SCORERS_DEFAULT,
    TOP_SCORERS_MAX,
    TOP_SCORERS_MIN,
)
from .data_loading import PLAYER_COLS, require_columns
from .errors import InvalidRangeError
from .name_cleaning import apply_name_corrections

logger = logging.getLogger(__name__)

PLAYER_GOALS_COLS = ["player_name", "goals"]

_GOAL_TOKEN = re.compile(GOAL_TOKEN_PATTERN)


def count_goal_tokens(event) -> int:
    """Number of goal tokens (G<two digits>') in one Event string; 0 for missing values."""
    if event is None or pd.isna(event):
        return 0
    return len(_GOAL_TOKEN.findall(str(event)))


def validate_top_n(n) -> int:
    """Top-N must be an integer between TOP_SCORERS_MIN and TOP_SCORERS_MAX (inclusive)."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidRangeError(f"Number of top scorers must be an integer, got {n!r}")
    n = int(n)
    if n < TOP_SCORERS_MIN or n > TOP_SCORERS_MAX:
        raise InvalidRangeError(
            f"Number is not within the valid range ({TOP_SCORERS_MIN} - {TOP_SCORERS_MAX}): {n}"
        )
    return n


def goals_per_player(players: pd.DataFrame) -> pd.DataFrame:
    """
    Sum goal tokens per upper-cased player name, in first-seen order.

    Rows with an empty Event are ignored (they can never contain a goal).
    """
    require_columns(players, PLAYER_COLS, "players")

    df = players[PLAYER_COLS].copy()
    event = df["event"].astype("string").str.strip()
    df = df[event.notna() & (event != "") & df["player_name"].notna()].copy()

    df["goals"] = df["event"].map(count_goal_tokens).astype("int64")
    df["player_name"] = df["player_name"].astype(str).str.strip().str.upper()

    return df.groupby("player_name", sort=False, as_index=False)["goals"].sum()


def top_goal_scorers(players: pd.DataFrame, n: int = TOP_SCORERS_DEFAULT) -> pd.DataFrame:
    """
    Return the n players with the most World Cup goals.

    - n must be in [5, 15], otherwise InvalidRangeError.
    - Sorted by goals, descending; ties keep the order players first appear in the data.
    - Known mis-encoded names are corrected afterwards (M�LLER -> MÜLLER).

    Output columns:
    - player_name, goals
    """
    n = validate_top_n(n)

    totals = goals_per_player(players)
    top = totals.sort_values("goals", ascending=False, kind="mergesort").head(n)
    top = apply_name_corrections(top, "player_name", PLAYER_NAME_CORRECTIONS)

    if len(top) < n:
        logger.warning("Asked for %d top scorers but only %d players have events", n, len(top))

    return top[PLAYER_GOALS_COLS].reset_index(drop=True)
