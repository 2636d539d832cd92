"""Tests for core/data.py - loading and validating the flights table."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from core.config import REQUIRED_COLUMNS
from core.data import clean_col_names, load_flights, sample_flights, validate_flights


class TestCleanColNames:

    def test_lowercase_and_underscores(self):
        df = pd.DataFrame(columns=['Dep Delay', ' TailNum ', 'arr-delay', 'Flight #'])
        cleaned = clean_col_names(df)
        assert list(cleaned.columns) == ['dep_delay', 'tailnum', 'arr_delay', 'flight']

    def test_already_clean_names_unchanged(self):
        df = pd.DataFrame(columns=['dest', 'distance'])
        assert list(clean_col_names(df).columns) == ['dest', 'distance']


class TestValidateFlights:

    def test_missing_columns_raise_key_error(self, flights: pd.DataFrame):
        with pytest.raises(KeyError, match="tailnum"):
            validate_flights(flights.drop(columns=['tailnum']))

    def test_valid_table_returned(self, flights: pd.DataFrame):
        assert validate_flights(flights) is flights


class TestLoadFlights:

    def test_load_from_csv(self, flights_csv: Path, flights: pd.DataFrame):
        df = load_flights(str(flights_csv))

        assert len(df) == len(flights)
        assert set(REQUIRED_COLUMNS) <= set(df.columns)
        assert df['tailnum'].dtype == 'string'

    def test_load_from_env_var(self, flights_csv: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('SPEED_TRAINING_DATA', str(flights_csv))
        df = load_flights()
        assert 'dep_delay' in df.columns

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_flights(str(tmp_path / "missing.csv"))

    def test_csv_without_required_columns(self, tmp_path: Path):
        csv_path = tmp_path / "partial.csv"
        csv_path.write_text("dest,distance\nBOS,187\n", encoding="utf-8")
        with pytest.raises(KeyError):
            load_flights(str(csv_path))


class TestSampleFlights:

    def test_columns_and_size(self):
        df = sample_flights(n=300)
        assert len(df) == 300
        assert list(df.columns) == REQUIRED_COLUMNS

    def test_deterministic(self):
        pd.testing.assert_frame_equal(sample_flights(n=200, seed=3), sample_flights(n=200, seed=3))

    def test_distance_follows_destination(self):
        df = sample_flights(n=500)
        assert df.groupby('dest')['distance'].nunique().eq(1).all()
        assert (df.loc[df['dest'] == 'BOS', 'distance'] == 187).all()

    def test_has_missing_tail_numbers_and_delays(self):
        df = sample_flights(n=5000)
        assert df['tailnum'].isna().any()
        assert df['dep_delay'].isna().any()
