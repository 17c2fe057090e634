"""Shared test data: the real list of tournament winners and a match-row factory."""

# Every tournament 1930-2014; 1950 was decided by a final round-robin, so it has no Final match.
WINNERS = {
    1930: "Uruguay", 1934: "Italy", 1938: "Italy", 1950: "Uruguay", 1954: "Germany FR",
    1958: "Brazil", 1962: "Brazil", 1966: "England", 1970: "Brazil", 1974: "Germany FR",
    1978: "Argentina", 1982: "Italy", 1986: "Argentina", 1990: "Germany FR", 1994: "Brazil",
    1998: "France", 2002: "Brazil", 2006: "Italy", 2010: "Spain", 2014: "Germany",
}
FINAL_YEARS = [y for y in WINNERS if y != 1950]


def make_match(home, home_goals, away, away_goals, stage="Group 1", year=1930, stadium="Somewhere",
               attendance=10000, match_id=None):
    """Build one standardized match row; override any field via kwargs."""
    return {
        "year": year,
        "stage": stage,
        "stadium": stadium,
        "attendance": attendance,
        "home_team": home,
        "away_team": away,
        "home_goals": home_goals,
        "away_goals": away_goals,
        "match_id": match_id,
    }
