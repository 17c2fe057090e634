"""Country flag emojis from ISO-3166 alpha-2 codes.

A flag is two regional-indicator symbols (U+1F1E6..U+1F1FF), one per letter of the
code: "US" -> U+1F1FA U+1F1F8 -> 🇺🇸.
"""

from .code_mapping import resolve_country_code
from .config import REGIONAL_INDICATOR_OFFSET
from .errors import InvalidCodeError


def _validate_code(country_code) -> str:
    if not isinstance(country_code, str):
        raise InvalidCodeError(f"Country code must be a string, got {type(country_code).__name__}")

    code = country_code
    if len(code) != 2 or not (code.isascii() and code.isalpha()):
        raise InvalidCodeError(f"Country code must be two ASCII letters, got {country_code!r}")

    return code.upper()


def flag_code_points(country_code: str) -> tuple[int, int]:
    """Return the two regional-indicator code points for a two-letter code."""
    code = _validate_code(country_code)
    return ord(code[0]) + REGIONAL_INDICATOR_OFFSET, ord(code[1]) + REGIONAL_INDICATOR_OFFSET


def flag_emoji(country_code: str) -> str:
    """
    Build the flag emoji for a two-letter code ("us" and "US" both give 🇺🇸).

    Raises InvalidCodeError for anything that is not exactly two ASCII letters.
    """
    return "".join(chr(cp) for cp in flag_code_points(country_code))


def country_flag(country_name: str, lookup: dict) -> str:
    """Display name -> ISO code -> flag emoji."""
    return flag_emoji(resolve_country_code(country_name, lookup))
