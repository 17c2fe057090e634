"""Pytest configuration and fixtures for the World Cup history tests.

Fixtures build small in-memory tables shaped like the Kaggle CSVs after
data_loading has standardized them (snake_case columns).
"""

import os
import sys
from pathlib import Path

import pandas as pd
import pytest

# Headless plotting for the viz / CLI tests
os.environ.setdefault("MPLBACKEND", "Agg")

# Add tests/ to sys.path so `from helpers import ...` works
TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from worldcup_history.data_loading import (  # noqa: E402
    MATCH_COLUMN_MAP,
    PLAYER_COLUMN_MAP,
    SUMMARY_COLUMN_MAP,
    load_stadium_coordinates,
)
from helpers import FINAL_YEARS, WINNERS, make_match  # noqa: E402


@pytest.fixture
def make_matches():
    """Factory: list of make_match kwargs dicts (or tuples) -> matches DataFrame."""
    def _make(rows):
        records = [make_match(*r) if isinstance(r, tuple) else make_match(**r) for r in rows]
        return pd.DataFrame(records)
    return _make


@pytest.fixture
def summaries() -> pd.DataFrame:
    return pd.DataFrame({"year": list(WINNERS), "winner": list(WINNERS.values())})


@pytest.fixture
def stadium_coordinates() -> pd.DataFrame:
    return load_stadium_coordinates()


@pytest.fixture
def final_matches(stadium_coordinates) -> pd.DataFrame:
    """One Final per tournament (except 1950), stadium names aligned with the reference table."""
    rows = []
    for i, (year, stadium) in enumerate(zip(FINAL_YEARS, stadium_coordinates["stadium"])):
        rows.append(make_match(
            "Home Side", 2, "Away Side", 1, stage="Final", year=year, stadium=stadium,
            attendance=50000 + i, match_id=1000 + i,
        ))
    return pd.DataFrame(rows)


@pytest.fixture
def matches(final_matches) -> pd.DataFrame:
    """Finals plus a handful of group games with the usual raw-data quirks."""
    group = pd.DataFrame([
        make_match("Brazil", 4, "Italy", 1, match_id=1),
        make_match("Italy", 2, "Brazil", 0, match_id=2),
        make_match('rn">Trinidad and Tobago', 0, "Sweden", 0, match_id=3),
        make_match("IR Iran", 1, "Mexico", 3, match_id=4),
        make_match("Portugal", 2, "Iran", 0, match_id=5),
        make_match("Brazil", None, "Sweden", None, match_id=6),
    ])
    return pd.concat([group, final_matches], ignore_index=True)


@pytest.fixture
def players() -> pd.DataFrame:
    rows = [
        ("Klose", "G20' G52'"),
        ("Ronaldo", "G18' G79'"),
        ("KLOSE", "G40'"),
        ("M\ufffdller", "G12' G55' G71'"),
        ("Pel\ufffd (Edson Arantes do Nascimento)", "G10' G22' G30' G44'"),
        ("Fontaine", "G03' G09' P40'"),
        ("Kocsis", "G20' Y60'"),
        ("Bench Warmer", ""),
        ("Sub", None),
        ("Defender", "Y30' R88'"),
    ]
    # Pad with single-goal players so any top-N from 5 to 15 can be filled
    rows += [(f"Player {i:02d}", "G45'") for i in range(15)]
    return pd.DataFrame(rows, columns=["player_name", "event"])


@pytest.fixture
def world_cup_tables(matches, players, summaries) -> dict:
    return {"matches": matches, "players": players, "summaries": summaries}


@pytest.fixture
def dict_access(world_cup_tables):
    """Injected data access backed by the in-memory tables."""
    def access(name):
        return world_cup_tables[name].copy()
    return access


def to_raw(df: pd.DataFrame, column_map: dict) -> pd.DataFrame:
    """Inverse of data_loading's header renaming, for writing Kaggle-shaped CSVs."""
    inverse = {v: k for k, v in column_map.items()}
    return df.rename(columns=inverse)


@pytest.fixture
def raw_data_dir(tmp_path, world_cup_tables):
    """A directory holding the three CSVs with their original Kaggle headers."""
    to_raw(world_cup_tables["matches"], MATCH_COLUMN_MAP).to_csv(tmp_path / "WorldCupMatches.csv", index=False)
    to_raw(world_cup_tables["players"], PLAYER_COLUMN_MAP).to_csv(tmp_path / "WorldCupPlayers.csv", index=False)
    to_raw(world_cup_tables["summaries"], SUMMARY_COLUMN_MAP).to_csv(tmp_path / "WorldCups.csv", index=False)
    return tmp_path
