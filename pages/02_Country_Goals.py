"""
pages/02_Country_Goals.py

Goals scored by each country across all World Cups: a marker map and a column chart.
"""

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from worldcup_history.charts import country_goals_chart
from worldcup_history.country_goals import attach_country_coordinates, get_country_goals
from worldcup_history.data_loading import load_country_coordinates, load_matches
from worldcup_history.errors import WorldCupDataError
from worldcup_history.markers import country_goal_markers
from worldcup_history.viz import build_marker_map


@st.cache_data
def _country_goals() -> pd.DataFrame:
    return attach_country_coordinates(get_country_goals(load_matches()), load_country_coordinates())


st.set_page_config(page_title="Country Goals", layout="wide")
st.title("Goals by Country")

try:
    country_goals = _country_goals()
except (FileNotFoundError, WorldCupDataError) as e:
    st.error(str(e))
    st.stop()

st.plotly_chart(build_marker_map(country_goal_markers(country_goals)), use_container_width=True)

top = st.slider("Countries to show", min_value=5, max_value=30, value=15)
spec = country_goals_chart(country_goals, top=top)
df_chart = pd.DataFrame({"country": spec["categories"], "goals": spec["values"]})

chart = (
    alt.Chart(df_chart)
    .mark_bar(color=spec["style"]["bar_color"])
    .encode(
        x=alt.X("country:N", sort=None, title="Country"),
        y=alt.Y("goals:Q", title=spec["y_label"]),
        tooltip=[alt.Tooltip("country:N", title="Country"), alt.Tooltip("goals:Q", title="Goals")],
    )
    .properties(title=spec["title"], height=450)
)
st.altair_chart(chart, use_container_width=True)

st.subheader("All countries")
st.dataframe(country_goals[["country", "home_goals", "away_goals", "total_goals"]], use_container_width=True)
