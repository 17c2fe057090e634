"""
app.py

Streamlit multipage entrypoint (Home page).

Design goal:
- Keep app.py minimal.
- The maps and charts live under /pages and are auto-discovered by Streamlit.

Inputs:
- Raw CSVs from config.DATA_PATHS (set WORLDCUP_DATA_DIR to point elsewhere).

Outputs:
- Streamlit UI (home page + navigation sidebar handled by Streamlit).
"""

import streamlit as st

from worldcup_history.config import DATA_PATHS


def main() -> None:
    st.set_page_config(page_title="World Cup History 1930 - 2014", layout="wide")

    st.title("World Cup History 1930 - 2014")
    st.write(
        "Use the sidebar to navigate through the pages: "
        "Final Stadiums, Country Goals, and Top Scorers."
    )
    st.caption("Data files: " + ", ".join(DATA_PATHS.values()))


if __name__ == "__main__":
    main()
