"""Tests for core/timing.py."""
from __future__ import annotations

import time

import pandas as pd
import pytest

from core.timing import Comparison, Timer, Timing, amdahl_speedup, compare, results_equivalent, timed


def _slow_sum(values):
    total = 0
    for value in values:
        time.sleep(0.001)
        total += value
    return total


def _fast_sum(values):
    return sum(values)


class TestTimer:

    def test_measures_elapsed(self):
        with Timer() as t:
            time.sleep(0.01)
        assert t.elapsed >= 0.009
        assert t.cpu >= 0.0


class TestTimed:

    def test_returns_result_and_prints(self, capsys: pytest.CaptureFixture):
        timing = timed('fast sum', _fast_sum, [1, 2, 3])

        assert timing.result == 6
        assert timing.label == 'fast sum'
        assert 'fast sum:' in capsys.readouterr().out


class TestResultsEquivalent:

    def test_frames_ignore_index_and_dtype(self):
        a = pd.DataFrame({'flight': [1, 2], 'avg_dist': [1.0, 2.0]}, index=[5, 9])
        b = pd.DataFrame({'flight': pd.Series([1, 2], dtype='int32'), 'avg_dist': [1.0, 2.0]})
        assert results_equivalent(a, b)

    def test_frames_differ(self):
        a = pd.DataFrame({'x': [1.0, 2.0]})
        b = pd.DataFrame({'x': [1.0, 2.5]})
        assert not results_equivalent(a, b)

    def test_series_ignore_name(self):
        assert results_equivalent(pd.Series([1, 2], name='a'), pd.Series([1, 2], name='b'))
        assert not results_equivalent(pd.Series([1, 2]), pd.Series([1, 2, 3]))

    def test_scalars(self):
        assert results_equivalent(0.1 + 0.2, 0.3)
        assert not results_equivalent(1.0, 1.1)

    def test_nan_scalars_are_equal(self):
        assert results_equivalent(float('nan'), float('nan'))
        assert not results_equivalent(float('nan'), 0.0)


class TestCompare:

    def test_slow_vs_fast(self, capsys: pytest.CaptureFixture):
        comparison = compare(_slow_sum, _fast_sum, list(range(20)))

        assert isinstance(comparison, Comparison)
        assert comparison.equivalent
        assert comparison.slow.label == '_slow_sum'
        assert comparison.speedup > 1
        assert 'Speedup' in capsys.readouterr().out

    def test_custom_labels(self):
        comparison = compare(_fast_sum, _fast_sum, [1], slow_label='a', fast_label='b')
        assert (comparison.slow.label, comparison.fast.label) == ('a', 'b')

    def test_speedup_with_zero_fast_time(self):
        comparison = Comparison(Timing('s', 1.0, 1.0), Timing('f', 0.0, 0.0), True)
        assert comparison.speedup == float('inf')


class TestAmdahl:

    def test_fully_parallel_scales_with_workers(self):
        assert amdahl_speedup(1.0, 8) == pytest.approx(8.0)

    def test_serial_job_never_speeds_up(self):
        assert amdahl_speedup(0.0, 64) == pytest.approx(1.0)

    def test_ninety_percent_on_eight_workers(self):
        assert amdahl_speedup(0.9, 8) == pytest.approx(1 / (0.1 + 0.9 / 8))

    @pytest.mark.parametrize("fraction, workers", [(-0.1, 4), (1.5, 4), (0.5, 0)])
    def test_invalid_arguments(self, fraction, workers):
        with pytest.raises(ValueError):
            amdahl_speedup(fraction, workers)
