"""
pages/03_Top_Scorers.py

Top World Cup goal scorers (1930 - 2014); pick how many players to show (5 - 15).
"""

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from worldcup_history.charts import top_scorers_chart
from worldcup_history.config import TOP_SCORERS_DEFAULT, TOP_SCORERS_MAX, TOP_SCORERS_MIN
from worldcup_history.data_loading import load_players
from worldcup_history.errors import WorldCupDataError
from worldcup_history.player_goals import top_goal_scorers


@st.cache_data
def _players() -> pd.DataFrame:
    return load_players()


st.set_page_config(page_title="Top Scorers", layout="wide")
st.title("Top Goal Scorers")

n = st.slider("Number of players", min_value=TOP_SCORERS_MIN, max_value=TOP_SCORERS_MAX, value=TOP_SCORERS_DEFAULT)

try:
    scorers = top_goal_scorers(_players(), n)
except (FileNotFoundError, WorldCupDataError) as e:
    st.error(str(e))
    st.stop()

spec = top_scorers_chart(scorers)
df_chart = pd.DataFrame({"player": spec["categories"], "goals": spec["values"]})
style = spec["style"]

bars = (
    alt.Chart(df_chart)
    .mark_bar(color=style["bar_color"])
    .encode(
        x=alt.X("goals:Q", title=spec["x_label"]),
        y=alt.Y("player:N", sort=None, title=""),
        tooltip=[alt.Tooltip("player:N", title="Player"), alt.Tooltip("goals:Q", title="Goals")],
    )
)
labels = bars.mark_text(align="left", dx=4, color=style["bar_color"]).encode(text="goals:Q")

st.altair_chart(
    (bars + labels).properties(title=spec["title"], height=40 * len(df_chart)).configure(background=style["background"]),
    use_container_width=True,
)
st.dataframe(scorers, use_container_width=True)
