# Single source of truth for paths and project settings (prevents hard-coded locations).

"""
What config.py does:
- Tells every module where the raw World Cup CSVs and the reference tables live.
- Holds the small hand-maintained tables (renames, corrections, data patches) in one place,
  so a data refresh only means editing this file.
"""

import os

# Root folder = the repository folder that contains the package.
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# Data folders (raw CSVs are not shipped; point WORLDCUP_DATA_DIR at your copy)
DATA_DIR = os.path.join(ROOT_DIR, "data")
DATA_RAW = os.environ.get("WORLDCUP_DATA_DIR", os.path.join(DATA_DIR, "raw"))
REFERENCE_DIR = os.path.join(PACKAGE_DIR, "reference")

# Output folder for the CLI
REPORTS_DIR = os.path.join(ROOT_DIR, "reports")

# === Raw CSV file names (Kaggle "FIFA World Cup" dataset, 1930–2014) ===
RAW_FILES = {
    "matches": "WorldCupMatches.csv",
    "players": "WorldCupPlayers.csv",
    "summaries": "WorldCups.csv",
}


def data_paths(data_dir: str = DATA_RAW) -> dict:
    """Map each table name to its CSV path inside data_dir."""
    return {name: os.path.join(data_dir, filename) for name, filename in RAW_FILES.items()}


DATA_PATHS = data_paths()

# === Reference tables (static, shipped with the package) ===
REFERENCE_PATHS = {
    "stadium_coordinates": os.path.join(REFERENCE_DIR, "stadium_coordinates.csv"),
    "country_coordinates": os.path.join(REFERENCE_DIR, "country_coordinates.csv"),
    "country_codes": os.path.join(REFERENCE_DIR, "country_codes.csv"),
}

# === Stadiums ===
FINAL_STAGE = "Final"

# Winner names that the ISO lookup does not know under their historical spelling.
WINNER_RENAMES = {
    "England": "United Kingdom",
    "Germany FR": "Germany",
}

# === Country goals ===
# Scraping artifact found at the start of some team names, e.g. 'rn">Bosnia and Herzegovina'.
TEAM_NAME_ARTIFACT = 'rn">'

# Alternate spellings of the same team, folded together before totals are computed.
COUNTRY_NAME_ALIASES = {
    "C\ufffdte d'Ivoire": "Côte d'Ivoire",
    "IR Iran": "Iran",
}

# Hand-checked totals for rows the raw CSV gets wrong. Re-verify whenever the CSV changes.
COUNTRY_GOAL_PATCHES = {
    "Côte d'Ivoire": {"home_goals": 5, "away_goals": 8},
    "Iran": {"home_goals": 1, "away_goals": 6},
}

# === Top scorers ===
TOP_SCORERS_DEFAULT = 7
TOP_SCORERS_MIN = 5
TOP_SCORERS_MAX = 15

# A scored goal in the Event column looks like G43' (own goals "OG43'" match too).
GOAL_TOKEN_PATTERN = r"G\d{2}'"

# Player names mangled by the source encoding (U+FFFD where the accent was).
PLAYER_NAME_CORRECTIONS = {
    "PEL\ufffd (EDSON ARANTES DO NASCIMENTO)": "PELÉ",
    "M\ufffdLLER": "MÜLLER",
}

# === Flags ===
# ord("🇦") - ord("A")
REGIONAL_INDICATOR_OFFSET = 127397

# === Charts ===
CHART_STYLE = {
    "bar_color": "#256e35",
    "background": "#EAD577",
    "text_color": "#242424",
}
TOP_SCORERS_TITLE = "Top Goal Scorers in All WC Competitions (1930 - 2014)"
COUNTRY_GOALS_TITLE = "Total World Cup Goals by Country (1930 - 2014)"
COUNTRY_GOALS_CHART_TOP = 15
