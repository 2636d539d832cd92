import pandas as pd

from core.config import (
    PRACTICE_MIN_DELAYED,
    PRACTICE_MIN_DISTANCE,
    PRACTICE_MIN_SHARE,
    PRACTICE_MONTH,
    TAILNUM_PATTERN,
)
from core.patterns import flights_matching

QUESTIONS = [
    "Which days in March had more than 700 flights with either a departure or arrival delay?",
    "Which destinations had more than 50% of incoming flights travelling more than 2000 miles?",
    "Find all flights whose tail number either begins with 'N' followed by 5 digits, or ends with 'B'.",
]


def busy_delay_days(flights: pd.DataFrame, month: int = PRACTICE_MONTH,
                    min_flights: int = PRACTICE_MIN_DELAYED) -> pd.DataFrame:
    """
    Days of `month` with more than `min_flights` delayed flights.

    A flight counts as delayed when its departure or arrival delay is
    positive. Flights with both delays missing are not counted.

    Returns:
        A DataFrame with columns day and delayed_flights.
    """
    month_flights = flights[flights['month'] == month]
    delayed = (month_flights['dep_delay'] > 0) | (month_flights['arr_delay'] > 0)

    answer = (
        month_flights
        .assign(delayed=delayed.astype(int))
        .groupby('day', as_index=False)
        .agg(delayed_flights=('delayed', 'sum'))
    )
    return answer[answer['delayed_flights'] > min_flights].reset_index(drop=True)


def long_haul_destinations(flights: pd.DataFrame, min_distance: float = PRACTICE_MIN_DISTANCE,
                           min_share: float = PRACTICE_MIN_SHARE) -> pd.DataFrame:
    """
    Destinations where more than `min_share` of incoming flights travel
    further than `min_distance`.

    Returns:
        A DataFrame with columns dest and prop_long.
    """
    answer = (
        flights
        .assign(is_long=(flights['distance'] > min_distance).astype(float))
        .groupby('dest', as_index=False)
        .agg(prop_long=('is_long', 'mean'))
    )
    return answer[answer['prop_long'] > min_share].reset_index(drop=True)


def tailnum_pattern_flights(flights: pd.DataFrame, pattern: str = TAILNUM_PATTERN) -> pd.Series:
    """Flight numbers whose tail number starts with N and 5 digits, or ends with B."""
    return flights_matching(flights, pattern)


def answer_all(flights: pd.DataFrame) -> dict:
    """Runs every suggested answer and returns them keyed by question number."""
    return {
        1: busy_delay_days(flights),
        2: long_haul_destinations(flights),
        3: tailnum_pattern_flights(flights),
    }
