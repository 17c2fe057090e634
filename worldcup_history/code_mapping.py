# This file loads the country-name -> ISO-3166 alpha-2 table used for the flag emojis.

"""
What code_mapping.py does:
- It loads a “translation sheet” from country display names to two-letter ISO codes.
- Several names may share a code ("USA" and "United States" -> "US"), but each name appears once.
- resolve_country_code looks a name up without caring about case or surrounding spaces.
"""

import pandas as pd

from .config import REFERENCE_PATHS
from .errors import UnknownCountryError


REQUIRED_COLS = ["country_name", "iso2"]


def load_country_code_map(path: str | None = None) -> pd.DataFrame:
    """
    Load the country_name -> iso2 mapping CSV and validate it.

    Impact on project:
    - Every winner on the stadium map needs a code, otherwise no flag can be drawn.
    - A duplicated name with two different codes would make the flag depend on row order.
    """
    df = pd.read_csv(path or REFERENCE_PATHS["country_codes"], encoding="utf-8-sig").copy()

    # Validate required columns exist
    missing_cols = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing_cols:
        raise ValueError(f"country_codes is missing columns: {missing_cols}. Found: {df.columns.tolist()}")

    # Clean strings
    df["country_name"] = df["country_name"].astype(str).str.strip()
    df["iso2"] = df["iso2"].astype(str).str.strip().str.upper()

    # Validate content
    if (df["country_name"] == "").any():
        bad = df.loc[df["country_name"] == "", "iso2"].tolist()
        raise ValueError(f"Blank country_name rows exist (iso2 examples): {bad[:10]}")

    if (df["iso2"].str.len() != 2).any():
        bad = df.loc[df["iso2"].str.len() != 2, "country_name"].tolist()
        raise ValueError(f"iso2 must be two letters for: {bad[:20]}")

    folded = df["country_name"].str.casefold()
    if folded.duplicated(keep=False).any():
        dupes = sorted(df.loc[folded.duplicated(keep=False), "country_name"].unique().tolist())
        raise ValueError(f"Duplicate country_name values: {dupes[:20]}")

    return df.reset_index(drop=True)


def build_code_lookup(code_map: pd.DataFrame) -> dict:
    """Turn the mapping table into {casefolded name: iso2}."""
    return dict(zip(code_map["country_name"].str.casefold(), code_map["iso2"]))


def resolve_country_code(country_name: str, lookup: dict) -> str:
    """
    Return the ISO-3166 alpha-2 code for a display name.

    Raises UnknownCountryError when the name is not in the lookup.
    """
    if country_name is None or pd.isna(country_name):
        raise UnknownCountryError("No ISO code for a missing country name")

    key = str(country_name).strip().casefold()
    if key not in lookup:
        raise UnknownCountryError(f"No ISO code known for country: {country_name!r}")

    return lookup[key]
