import time
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np
import pandas as pd


class Timer:
    """Context manager measuring wall-clock and CPU time, like R's system.time."""

    def __enter__(self):
        self.start = time.perf_counter()
        self.cpu_start = time.process_time()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start
        self.cpu = time.process_time() - self.cpu_start


@dataclass
class Timing:
    label: str
    elapsed: float
    cpu: float
    result: Any = field(default=None, repr=False)

    def __str__(self):
        return f"{self.label}: {self.elapsed:.4f}s elapsed ({self.cpu:.4f}s cpu)"


@dataclass
class Comparison:
    slow: Timing
    fast: Timing
    equivalent: bool

    @property
    def speedup(self) -> float:
        if self.fast.elapsed == 0:
            return float('inf')
        return self.slow.elapsed / self.fast.elapsed


def timed(label: str, func: Callable, *args, **kwargs) -> Timing:
    """Runs func once and returns its result along with how long it took."""
    with Timer() as t:
        result = func(*args, **kwargs)
    timing = Timing(label, t.elapsed, t.cpu, result)
    print(f"  {timing}")
    return timing


def results_equivalent(a, b, rtol: float = 1e-9) -> bool:
    """
    Checks whether two lesson results hold the same values.

    DataFrames and Series are compared positionally (index labels ignored,
    dtypes not checked), scalars with a relative tolerance. NaN equals NaN.
    """
    if isinstance(a, pd.DataFrame) and isinstance(b, pd.DataFrame):
        try:
            pd.testing.assert_frame_equal(
                a.reset_index(drop=True), b.reset_index(drop=True),
                check_dtype=False, check_exact=False, rtol=rtol,
            )
        except AssertionError:
            return False
        return True

    if isinstance(a, pd.Series) and isinstance(b, pd.Series):
        try:
            pd.testing.assert_series_equal(
                a.reset_index(drop=True), b.reset_index(drop=True),
                check_dtype=False, check_names=False, check_exact=False, rtol=rtol,
            )
        except AssertionError:
            return False
        return True

    return bool(np.isclose(a, b, rtol=rtol, equal_nan=True))


def compare(slow: Callable, fast: Callable, *args, slow_label: str = None,
            fast_label: str = None) -> Comparison:
    """
    Times a slow and a fast variant of the same computation on the same
    arguments and checks that they agree.
    """
    slow_timing = timed(slow_label or slow.__name__, slow, *args)
    fast_timing = timed(fast_label or fast.__name__, fast, *args)
    equivalent = results_equivalent(slow_timing.result, fast_timing.result)

    comparison = Comparison(slow_timing, fast_timing, equivalent)
    print(f"  Speedup: {comparison.speedup:.1f}x | same result: {equivalent}")
    return comparison


def amdahl_speedup(parallel_fraction: float, workers: int) -> float:
    """
    Upper bound on the speedup from running the parallel_fraction of a job
    on `workers` processors. The serial part is never sped up.
    """
    if not 0.0 <= parallel_fraction <= 1.0:
        raise ValueError("parallel_fraction must be between 0 and 1")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    return 1.0 / ((1.0 - parallel_fraction) + parallel_fraction / workers)
