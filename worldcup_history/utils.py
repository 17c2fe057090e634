# This file holds tiny helper functions used everywhere (so you don’t repeat code in 5 different modules).

"""
What utils.py does:
- setup_logging gives the CLI one place to decide how chatty the pipeline is.
- to_int_or_none / format_count turn messy CSV numbers into clean ints and labels
  for tables and marker popups.
"""

import logging

import pandas as pd


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line runs (library code never calls this)."""
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format="%(message)s")


def to_int_or_none(value) -> int | None:
    """
    Convert a CSV cell to int, or None when it is missing / not a number.

    Example:
    - 98000.0 -> 98000
    - NaN     -> None
    """
    if value is None or pd.isna(value):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def format_count(value, missing: str = "Unknown") -> str:
    """Format a count without decimals (popup text)."""
    n = to_int_or_none(value)
    return missing if n is None else str(n)
