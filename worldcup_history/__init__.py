# Make package importable
from .data_loading import load_matches, load_players, load_summaries, load_world_cup_tables, make_csv_data_access
from .stadiums import get_stadiums_info
from .country_goals import get_country_goals, attach_country_coordinates
from .player_goals import top_goal_scorers
from .code_mapping import load_country_code_map, build_code_lookup, resolve_country_code
from .flags import flag_emoji, country_flag
from .markers import stadium_markers, country_goal_markers
from .charts import top_scorers_chart, country_goals_chart
from .pipeline import build_outputs
from .errors import (
    WorldCupDataError, InvalidRangeError, DataAlignmentError,
    UnknownCountryError, InvalidCodeError, MissingDataError,
)

__all__ = [
    "load_matches", "load_players", "load_summaries", "load_world_cup_tables", "make_csv_data_access",
    "get_stadiums_info", "get_country_goals", "attach_country_coordinates", "top_goal_scorers",
    "load_country_code_map", "build_code_lookup", "resolve_country_code", "flag_emoji", "country_flag",
    "stadium_markers", "country_goal_markers", "top_scorers_chart", "country_goals_chart", "build_outputs",
    "WorldCupDataError", "InvalidRangeError", "DataAlignmentError",
    "UnknownCountryError", "InvalidCodeError", "MissingDataError",
]
