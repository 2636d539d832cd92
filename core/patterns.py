import re

import pandas as pd

from core.config import VOWEL_CLASS


def flights_matching(flights: pd.DataFrame, pattern: str, column: str = 'tailnum') -> pd.Series:
    """
    Returns the flight numbers of rows whose `column` matches the regex `pattern`
    anywhere in the string. Missing values never match.
    """
    # Compiled up front so a malformed pattern raises re.error whatever the string storage
    re.compile(pattern)
    mask = flights[column].str.contains(pattern, regex=True, na=False)
    return flights.loc[mask, 'flight']


def vowel_flights_union(flights: pd.DataFrame) -> pd.Series:
    """Flights whose tail number contains a vowel, one scan per vowel OR'd together."""
    tailnum = flights['tailnum']
    mask = (
        tailnum.str.contains('A', na=False)
        | tailnum.str.contains('E', na=False)
        | tailnum.str.contains('I', na=False)
        | tailnum.str.contains('O', na=False)
        | tailnum.str.contains('U', na=False)
    )
    return flights.loc[mask, 'flight']


def vowel_flights_class(flights: pd.DataFrame) -> pd.Series:
    """The same rows from a single scan with a character class."""
    return flights_matching(flights, VOWEL_CLASS)
