# This file builds one row per World Cup Final: who won, where it was played, how many watched.

"""
What stadiums.py does:
- Picks the Final-stage matches out of the matches table.
- Attaches the tournament winner by year (or, when the matches carry no year, by row position,
  after checking both tables have the same number of rows).
- Attaches the fixed stadium coordinates by row position, after checking the counts match.
- Renames historical winners ("England", "Germany FR") so the flag lookup understands them.

Every mismatch raises DataAlignmentError instead of silently pairing the wrong rows.
"""

import logging

import pandas as pd

from .config import FINAL_STAGE
from .data_loading import require_columns
from .errors import DataAlignmentError, MissingDataError
from .name_cleaning import normalize_winner_names

logger = logging.getLogger(__name__)

STADIUM_INFO_COLS = ["year", "winner", "stadium", "attendance", "latitude", "longitude"]


def select_final_matches(matches: pd.DataFrame, final_stage: str = FINAL_STAGE) -> pd.DataFrame:
    """
    Keep only the championship matches, one row per match.

    The raw file repeats some matches; match_id (when present) removes those repeats.
    Rows without a match_id are always kept.
    """
    require_columns(matches, ["stage", "stadium", "attendance"], "matches")

    stage = matches["stage"].astype("string").str.strip()
    finals = matches[stage.eq(final_stage).fillna(False)].copy()

    if "match_id" in finals.columns:
        finals = finals[finals["match_id"].isna() | ~finals["match_id"].duplicated()]

    return finals.reset_index(drop=True)


def _join_by_year(summaries: pd.DataFrame, finals: pd.DataFrame) -> pd.DataFrame:
    finals = finals.copy()
    finals["year"] = pd.to_numeric(finals["year"], errors="coerce").astype("Int64")

    if finals["year"].isna().any():
        raise MissingDataError("Final-stage match without a year")

    dup_years = sorted(finals.loc[finals["year"].duplicated(keep=False), "year"].unique().tolist())
    if dup_years:
        raise DataAlignmentError(f"More than one Final-stage match in year(s): {dup_years}")

    summary = summaries[["year", "winner"]].copy()
    summary["year"] = pd.to_numeric(summary["year"], errors="coerce").astype("Int64")

    dup_summary_years = sorted(summary.loc[summary["year"].duplicated(keep=False), "year"].dropna().unique().tolist())
    if dup_summary_years:
        raise DataAlignmentError(f"More than one tournament summary for year(s): {dup_summary_years}")

    orphans = sorted(set(finals["year"].tolist()) - set(summary["year"].dropna().tolist()))
    if orphans:
        raise DataAlignmentError(f"Final-stage match(es) without a tournament summary: {orphans}")

    skipped = sorted(set(summary["year"].dropna().tolist()) - set(finals["year"].tolist()))
    if skipped:
        logger.info("No Final-stage match for tournament year(s) %s; skipping them", skipped)

    out = finals[["year", "stadium", "attendance"]].merge(summary, on="year", how="left")
    return out.sort_values("year", kind="mergesort").reset_index(drop=True)


def _join_by_position(summaries: pd.DataFrame, finals: pd.DataFrame) -> pd.DataFrame:
    if len(summaries) != len(finals):
        raise DataAlignmentError(
            f"Cannot pair summaries with Final matches by position: "
            f"{len(summaries)} summaries vs {len(finals)} Final-stage matches"
        )

    out = summaries[["year", "winner"]].reset_index(drop=True).copy()
    out["stadium"] = finals["stadium"].to_numpy()
    out["attendance"] = finals["attendance"].to_numpy()
    return out


def attach_stadium_coordinates(stadiums: pd.DataFrame, coordinates: pd.DataFrame) -> pd.DataFrame:
    """
    Zip the coordinate table onto the Finals row by row.

    The coordinate table has no key, so the only thing that can be checked is the count;
    a differing stadium label (when the table has one) is logged for a human to review.
    """
    require_columns(coordinates, ["latitude", "longitude"], "stadium_coordinates")

    if len(coordinates) != len(stadiums):
        raise DataAlignmentError(
            f"Stadium coordinate table has {len(coordinates)} rows but there are {len(stadiums)} Final-stage matches"
        )

    out = stadiums.copy()
    coords = coordinates.reset_index(drop=True)
    out["latitude"] = pd.to_numeric(coords["latitude"], errors="coerce").to_numpy()
    out["longitude"] = pd.to_numeric(coords["longitude"], errors="coerce").to_numpy()

    if "stadium" in coords.columns:
        ours = out["stadium"].astype(str).str.strip().str.casefold()
        theirs = coords["stadium"].astype(str).str.strip().str.casefold()
        for i in (ours != theirs.to_numpy()).to_numpy().nonzero()[0]:
            logger.warning(
                "Row %d: Final stadium %r does not match coordinate entry %r",
                i, out.loc[i, "stadium"], coords.loc[i, "stadium"],
            )

    return out


def get_stadiums_info(
    summaries: pd.DataFrame,
    matches: pd.DataFrame,
    coordinates: pd.DataFrame,
) -> pd.DataFrame:
    """
    Produce one StadiumInfo row per Final-stage match.

    Steps:
    1) Select Final-stage matches (deduplicated by match_id).
    2) Attach the winner: by year when both tables carry it, otherwise by position.
    3) Attach coordinates by position (counts must agree).
    4) Normalize winner names for the ISO lookup.

    Output columns:
    - year, winner, stadium, attendance, latitude, longitude
    """
    require_columns(summaries, ["year", "winner"], "summaries")

    finals = select_final_matches(matches)

    if "year" in finals.columns:
        stadiums = _join_by_year(summaries, finals)
    else:
        stadiums = _join_by_position(summaries, finals)

    if stadiums["winner"].isna().any() or stadiums["year"].isna().any():
        bad = stadiums.loc[stadiums["winner"].isna() | stadiums["year"].isna(), "stadium"].tolist()
        raise MissingDataError(f"Final-stage match(es) without year or winner: {bad}")

    stadiums = attach_stadium_coordinates(stadiums, coordinates)
    stadiums = normalize_winner_names(stadiums)
    stadiums["attendance"] = pd.to_numeric(stadiums["attendance"], errors="coerce").round(0).astype("Int64")

    return stadiums[STADIUM_INFO_COLS].reset_index(drop=True)
