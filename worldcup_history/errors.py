"""Exceptions raised by the loaders and aggregators.

All of them subclass ValueError, so callers that already guard the pipeline with
`except ValueError` keep working.
"""


class WorldCupDataError(ValueError):
    """Base class for every data error in this package."""


class InvalidRangeError(WorldCupDataError):
    """A numeric parameter (the top-scorer count) is outside its allowed range."""


class DataAlignmentError(WorldCupDataError):
    """Tables joined by position (or by year) do not line up."""


class UnknownCountryError(WorldCupDataError):
    """No ISO-3166 code is known for a country name."""


class InvalidCodeError(WorldCupDataError):
    """A country code is not exactly two letters."""


class MissingDataError(WorldCupDataError):
    """A required column is absent, or a required value is null."""
