"""Goals per country: home/away split, merge, cleanup, patches and coordinates."""

import pandas as pd
import pytest

from worldcup_history.country_goals import (
    apply_goal_patches,
    attach_country_coordinates,
    get_country_goals,
    merge_home_away,
)
from worldcup_history.data_loading import load_country_coordinates
from worldcup_history.errors import MissingDataError


def _row(df, country):
    rows = df[df["country"] == country]
    assert len(rows) == 1, f"expected exactly one row for {country}"
    return rows.iloc[0]


class TestScenario:
    def test_brazil_italy(self, make_matches):
        matches = make_matches([("Brazil", 4, "Italy", 1), ("Italy", 2, "Brazil", 0)])
        out = get_country_goals(matches)

        assert out["country"].tolist() == ["Brazil", "Italy"]
        brazil, italy = _row(out, "Brazil"), _row(out, "Italy")
        assert (brazil["home_goals"], brazil["away_goals"], brazil["total_goals"]) == (4, 0, 4)
        assert (italy["home_goals"], italy["away_goals"], italy["total_goals"]) == (2, 1, 3)

    def test_columns_and_dtypes(self, make_matches):
        out = get_country_goals(make_matches([("Brazil", 4, "Italy", 1)]))
        assert out.columns.tolist() == ["country", "home_goals", "away_goals", "total_goals"]
        for col in ["home_goals", "away_goals", "total_goals"]:
            assert out[col].dtype == "int64"


class TestTotals:
    def test_total_is_home_plus_away(self, matches):
        out = get_country_goals(matches)
        assert (out["total_goals"] == out["home_goals"] + out["away_goals"]).all()

    def test_no_nulls_and_unique_countries(self, matches):
        out = get_country_goals(matches)
        assert not out.isna().any().any()
        assert out["country"].is_unique

    def test_one_sided_country_gets_zero(self, make_matches):
        out = get_country_goals(make_matches([("Brazil", 3, "Haiti", 1)]))
        assert _row(out, "Haiti")["home_goals"] == 0
        assert _row(out, "Brazil")["away_goals"] == 0

    def test_rows_with_missing_goals_are_dropped(self, make_matches):
        out = get_country_goals(make_matches([("Brazil", 1, "Sweden", 0), ("Brazil", None, "Sweden", None)]))
        assert _row(out, "Brazil")["home_goals"] == 1
        assert _row(out, "Sweden")["away_goals"] == 0

    def test_merge_fills_missing_side(self):
        home = pd.DataFrame({"country": ["A"], "home_goals": [2]})
        away = pd.DataFrame({"country": ["B"], "away_goals": [5]})
        merged = merge_home_away(home, away).set_index("country")
        assert merged.loc["A", "away_goals"] == 0
        assert merged.loc["B", "home_goals"] == 0


class TestCleanup:
    def test_team_name_artifact_is_stripped(self, make_matches):
        out = get_country_goals(make_matches([
            ('rn">Trinidad and Tobago', 1, "Sweden", 0),
            ("Paraguay", 2, "Trinidad and Tobago", 2),
        ]))
        tt = _row(out, "Trinidad and Tobago")
        assert (tt["home_goals"], tt["away_goals"]) == (1, 2)
        assert not out["country"].str.contains('rn">', regex=False).any()

    def test_iran_aliases_folded_and_patched(self, matches):
        out = get_country_goals(matches)
        assert "IR Iran" not in out["country"].tolist()
        iran = _row(out, "Iran")
        assert (iran["home_goals"], iran["away_goals"], iran["total_goals"]) == (1, 6, 7)

    def test_cote_divoire_alias_patched(self, make_matches):
        out = get_country_goals(make_matches([("C\ufffdte d'Ivoire", 2, "Argentina", 1)]))
        civ = _row(out, "Côte d'Ivoire")
        assert (civ["home_goals"], civ["away_goals"], civ["total_goals"]) == (5, 8, 13)

    def test_patch_for_absent_country_is_skipped(self):
        df = pd.DataFrame({"country": ["Brazil"], "home_goals": [1], "away_goals": [1]})
        out = apply_goal_patches(df, {"Atlantis": {"home_goals": 9, "away_goals": 9}})
        pd.testing.assert_frame_equal(out, df)

    def test_patch_logs_changed_values(self, caplog):
        df = pd.DataFrame({"country": ["Iran"], "home_goals": [3], "away_goals": [3]})
        with caplog.at_level("WARNING"):
            out = apply_goal_patches(df, {"Iran": {"home_goals": 1, "away_goals": 6}})
        assert out.loc[0, "home_goals"] == 1
        assert "re-verify" in caplog.text


class TestErrorsAndPurity:
    def test_missing_column_raises(self, make_matches):
        matches = make_matches([("Brazil", 4, "Italy", 1)]).drop(columns=["away_goals"])
        with pytest.raises(MissingDataError):
            get_country_goals(matches)

    def test_idempotent_and_input_untouched(self, matches):
        before = matches.copy()
        first = get_country_goals(matches)
        second = get_country_goals(matches)
        pd.testing.assert_frame_equal(first, second)
        pd.testing.assert_frame_equal(matches, before)


class TestCoordinates:
    def test_join_by_country_name(self, make_matches):
        goals = get_country_goals(make_matches([("Brazil", 1, "Soviet Union", 0)]))
        out = attach_country_coordinates(goals, load_country_coordinates())

        brazil = _row(out, "Brazil")
        assert brazil["latitude"] == pytest.approx(-14.235)
        assert brazil["longitude"] == pytest.approx(-51.9253)
        assert pd.isna(_row(out, "Soviet Union")["latitude"])

    def test_row_count_unchanged(self, matches):
        goals = get_country_goals(matches)
        out = attach_country_coordinates(goals, load_country_coordinates())
        assert len(out) == len(goals)
