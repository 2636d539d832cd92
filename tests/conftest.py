"""Shared pytest fixtures."""
from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from core.data import sample_flights


@pytest.fixture
def flights() -> pd.DataFrame:
    """Synthetic flights table, small enough for the row-by-row loops."""
    return sample_flights(n=1500, seed=7)


@pytest.fixture
def tiny_flights() -> pd.DataFrame:
    """Hand-built table whose practice answers are worked out in the tests."""
    return pd.DataFrame({
        'year': 2013,
        'month': [3, 3, 3, 3, 3, 4, 4],
        'day': [1, 1, 1, 1, 2, 1, 2],
        'dep_delay': [10.0, -5.0, -2.0, np.nan, 5.0, 20.0, 0.0],
        'arr_delay': [np.nan, 3.0, -1.0, np.nan, 5.0, 20.0, 0.0],
        'carrier': ['UA', 'B6', 'HA', 'B6', 'B6', 'AS', 'AS'],
        'flight': [1, 2, 3, 4, 5, 6, 7],
        'tailnum': pd.Series(
            ['N12345', 'N712JB', 'N1234', 'XN12345', pd.NA, 'N3AEMQ', 'N5DUAB'], dtype='string'
        ),
        'origin': ['JFK', 'JFK', 'JFK', 'LGA', 'LGA', 'EWR', 'EWR'],
        'dest': ['LAX', 'LAX', 'HNL', 'BOS', 'BOS', 'SEA', 'SEA'],
        'distance': [2475.0, 2475.0, 4983.0, 187.0, 187.0, 2422.0, 1000.0],
    })


@pytest.fixture
def flights_csv(tmp_path: Path, flights: pd.DataFrame) -> Path:
    """The synthetic table written to CSV with upper-case, padded headers."""
    csv_path = tmp_path / "flights.csv"
    renamed = flights.rename(columns={'dep_delay': 'Dep Delay', 'tailnum': ' TailNum '})
    renamed.to_csv(csv_path, index=False)
    return csv_path
