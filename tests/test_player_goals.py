"""Top goal scorers: token counting, range checks, ordering and name corrections."""

import numpy as np
import pandas as pd
import pytest

from worldcup_history.errors import InvalidRangeError, MissingDataError
from worldcup_history.player_goals import count_goal_tokens, goals_per_player, top_goal_scorers


@pytest.mark.parametrize(
    "event, expected",
    [
        ("G40'", 1),
        ("G20' G52'", 2),
        ("G03' G09' P40'", 2),
        ("Y30' R88'", 0),
        ("IN46' G70'", 1),
        ("OG12'", 1),  # own goals carry the same G<minute>' token
        ("G5'", 0),
        ("", 0),
        (None, 0),
        (float("nan"), 0),
    ],
)
def test_count_goal_tokens(event, expected):
    assert count_goal_tokens(event) == expected


class TestRange:
    @pytest.mark.parametrize("n", range(5, 16))
    def test_returns_exactly_n_sorted(self, players, n):
        out = top_goal_scorers(players, n)
        assert len(out) == n
        goals = out["goals"].tolist()
        assert goals == sorted(goals, reverse=True)

    @pytest.mark.parametrize("n", [-1, 0, 4, 16, 100])
    def test_out_of_range(self, players, n):
        with pytest.raises(InvalidRangeError):
            top_goal_scorers(players, n)

    @pytest.mark.parametrize("n", [7.0, "7", True, None])
    def test_non_integer(self, players, n):
        with pytest.raises(InvalidRangeError):
            top_goal_scorers(players, n)

    @pytest.mark.parametrize("n", [np.int64(7), np.int32(5), np.int64(15)])
    def test_numpy_integers_accepted(self, players, n):
        out = top_goal_scorers(players, n)
        assert len(out) == int(n)

    def test_default_is_seven(self, players):
        assert len(top_goal_scorers(players)) == 7


class TestAggregation:
    def test_top_of_table(self, players):
        out = top_goal_scorers(players, 5)
        assert out["player_name"].tolist() == ["PELÉ", "KLOSE", "MÜLLER", "RONALDO", "FONTAINE"]
        assert out["goals"].tolist() == [4, 3, 3, 2, 2]

    def test_names_upper_cased_and_summed(self, players):
        totals = goals_per_player(players).set_index("player_name")
        assert totals.loc["KLOSE", "goals"] == 3
        assert "Klose" not in totals.index

    def test_empty_events_excluded(self, players):
        totals = goals_per_player(players)
        assert "BENCH WARMER" not in totals["player_name"].tolist()
        assert "SUB" not in totals["player_name"].tolist()

    def test_ties_keep_first_seen_order(self):
        df = pd.DataFrame({
            "player_name": ["Zeta", "Alpha", "Mid", "Zeta", "A", "B", "C"],
            "event": ["G10'", "G11'", "G12' G13' G14'", "", "G01'", "G02'", "G03'"],
        })
        out = top_goal_scorers(df, 5)
        assert out["player_name"].tolist() == ["MID", "ZETA", "ALPHA", "A", "B"]

    def test_fewer_players_than_n(self):
        df = pd.DataFrame({"player_name": ["Solo"], "event": ["G10'"]})
        out = top_goal_scorers(df, 5)
        assert out["player_name"].tolist() == ["SOLO"]

    def test_missing_column(self, players):
        with pytest.raises(MissingDataError):
            top_goal_scorers(players.drop(columns=["event"]), 5)

    def test_idempotent_and_input_untouched(self, players):
        before = players.copy()
        pd.testing.assert_frame_equal(top_goal_scorers(players, 10), top_goal_scorers(players, 10))
        pd.testing.assert_frame_equal(players, before)
