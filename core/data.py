import os
import re

import numpy as np
import pandas as pd

from core.config import REQUIRED_COLUMNS, data_path_from_env


def clean_col_names(df: pd.DataFrame) -> pd.DataFrame:
    """
    Cleans and standardizes DataFrame column names.
    - Converts to lowercase
    - Replaces spaces and special characters with underscores
    - Strips leading/trailing underscores
    """
    rename_map = {}
    for col in df.columns:
        new_col = str(col).strip().lower()
        new_col = re.sub(r'[^a-z0-9]', '_', new_col)
        new_col = re.sub(r'_+', '_', new_col)
        rename_map[col] = new_col.strip('_')
    return df.rename(columns=rename_map)


def validate_flights(df: pd.DataFrame) -> pd.DataFrame:
    """Raises KeyError if any column the lessons read is missing."""
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise KeyError(f"Flights table is missing required columns: {missing}")
    return df


def load_flights(path: str = None) -> pd.DataFrame:
    """
    Loads the NYC 2013 flights table.

    Args:
        path: Optional path to a CSV export of the table. When omitted, the
            SPEED_TRAINING_DATA environment variable is checked, then the
            copy bundled with the nycflights13 package is used.

    Returns:
        A DataFrame with normalized column names. Lessons treat it as read-only.
    """
    path = path or data_path_from_env()

    if path:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Flights CSV not found: {path}")
        print(f"Loading flights from {path}")
        df = pd.read_csv(path, low_memory=False)
    else:
        # Imported lazily so tests and CSV runs never need the package
        from nycflights13 import flights
        print("Loading flights from the nycflights13 package")
        df = flights.copy()

    df = validate_flights(clean_col_names(df))
    df['tailnum'] = df['tailnum'].astype('string')

    print(f"Total rows: {len(df):,}")
    return df


# Great-circle distances (miles) from the New York airports, rounded
_DEST_DISTANCES = {
    'BOS': 187, 'ATL': 762, 'ORD': 733, 'MIA': 1089, 'DEN': 1620,
    'LAX': 2475, 'SFO': 2586, 'SEA': 2422, 'HNL': 4983, 'ANC': 3370,
}
_CARRIERS = ['UA', 'AA', 'B6', 'DL', 'EV', 'MQ', 'US', 'WN']
_ORIGINS = ['EWR', 'JFK', 'LGA']


def sample_flights(n: int = 5000, seed: int = 42) -> pd.DataFrame:
    """
    Builds a deterministic, synthetic flights table with the same columns as
    nycflights13.flights. Used for tests and offline runs of the tutorial.
    """
    rng = np.random.default_rng(seed)

    dests = rng.choice(list(_DEST_DISTANCES), size=n)
    tail_digits = rng.integers(100, 99999, size=n)
    tail_suffix = rng.choice(['', 'AA', 'UA', 'JB', 'MQ', 'EV', 'DL'], size=n)
    tailnums = pd.Series([f"N{d}{s}" for d, s in zip(tail_digits, tail_suffix)], dtype='string')
    tailnums[rng.random(n) < 0.02] = pd.NA

    dep_delay = rng.normal(5, 30, size=n).round()
    arr_delay = dep_delay + rng.normal(-5, 10, size=n).round()
    dep_delay[rng.random(n) < 0.03] = np.nan
    arr_delay[rng.random(n) < 0.03] = np.nan

    df = pd.DataFrame({
        'year': 2013,
        'month': rng.integers(1, 13, size=n),
        'day': rng.integers(1, 29, size=n),
        'dep_delay': dep_delay,
        'arr_delay': arr_delay,
        'carrier': rng.choice(_CARRIERS, size=n),
        'flight': rng.integers(1, 200, size=n),
        'tailnum': tailnums,
        'origin': rng.choice(_ORIGINS, size=n),
        'dest': dests,
        'distance': pd.Series(dests).map(_DEST_DISTANCES).astype(float),
    })
    return df


if __name__ == '__main__':
    flights_df = load_flights()
    print("\nFirst 5 rows of the flights table:")
    print(flights_df.head())
