"""
pages/01_Final_Stadiums.py

Map of every World Cup Final stadium, with the winner's flag, the year and the attendance.

Inputs:
- WorldCupMatches.csv, WorldCups.csv (via worldcup_history.data_loading)
- worldcup_history/reference/stadium_coordinates.csv, country_codes.csv
"""

from __future__ import annotations

import streamlit as st

from worldcup_history.code_mapping import build_code_lookup, load_country_code_map
from worldcup_history.data_loading import load_matches, load_stadium_coordinates, load_summaries
from worldcup_history.errors import WorldCupDataError
from worldcup_history.markers import stadium_markers
from worldcup_history.stadiums import get_stadiums_info
from worldcup_history.viz import build_marker_map


@st.cache_data
def _stadiums():
    return get_stadiums_info(load_summaries(), load_matches(), load_stadium_coordinates())


st.set_page_config(page_title="Final Stadiums", layout="wide")
st.title("World Cup Final Stadiums")

try:
    stadiums = _stadiums()
    markers = stadium_markers(stadiums, build_code_lookup(load_country_code_map()))
except (FileNotFoundError, WorldCupDataError) as e:
    st.error(str(e))
    st.stop()

st.plotly_chart(build_marker_map(markers), use_container_width=True)

st.subheader("Finals")
st.dataframe(stadiums, use_container_width=True)
