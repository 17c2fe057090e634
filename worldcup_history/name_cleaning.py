"""
What each function “means”:

- strip_team_name_artifact: removes the 'rn">' scraping leftover from team names.
- apply_country_mapping: uses a translator book ({old name: new name}) to replace names in
  selected columns, leaving unknown names untouched.
- normalize_winner_names: the translator book for tournament winners, so the ISO lookup
  finds "United Kingdom" instead of "England".
- apply_name_corrections: the general “fix this exact string” step used for names the
  source encoding mangled (PEL� -> PELÉ).
"""

import logging

import pandas as pd

from .config import TEAM_NAME_ARTIFACT, WINNER_RENAMES

logger = logging.getLogger(__name__)

MATCH_TEAM_COLS = ["home_team", "away_team"]


def strip_team_name_artifact(
    matches_df: pd.DataFrame,
    team_cols=MATCH_TEAM_COLS,
    artifact: str = TEAM_NAME_ARTIFACT,
) -> pd.DataFrame:
    """
    Remove a leading scraping artifact from team names, then strip whitespace.

    Impact:
    - 'rn">Trinidad and Tobago' and 'Trinidad and Tobago' become the same team,
      so their goals are summed into one row.
    """
    df = matches_df.copy()

    for col in team_cols:
        names = df[col].astype("string").str.strip()
        dirty = names.str.startswith(artifact).fillna(False)
        if dirty.any():
            logger.debug("Stripping %r from %d %s values", artifact, int(dirty.sum()), col)
            names = names.where(~dirty, names.str.slice(len(artifact)))
        df[col] = names.str.strip()

    return df


def apply_country_mapping(df: pd.DataFrame, name_map: dict, cols) -> pd.DataFrame:
    """
    Replace names using name_map in selected columns.

    Impact:
    - Keeps names that are not in the map exactly as they are.
    """
    out = df.copy()

    for col in cols:
        cleaned = out[col].astype(str).str.strip()
        out[col] = cleaned.map(name_map).fillna(cleaned)

    return out


def normalize_winner_names(summaries_df: pd.DataFrame, renames: dict = WINNER_RENAMES) -> pd.DataFrame:
    """Rename historical winner spellings (England, Germany FR) to names the ISO lookup knows."""
    return apply_country_mapping(summaries_df, renames, cols=["winner"])


def apply_name_corrections(df: pd.DataFrame, column: str, corrections: dict) -> pd.DataFrame:
    """
    Replace exact string matches in one column using {original: corrected}.

    Works for any encoding artifact: pass a new dictionary instead of writing new code.
    Rows whose value is not a key are returned unchanged.
    """
    out = df.copy()
    hits = out[column].isin(list(corrections.keys()))

    if hits.any():
        logger.debug("Correcting %d %s value(s)", int(hits.sum()), column)
        out.loc[hits, column] = out.loc[hits, column].map(corrections)

    return out
