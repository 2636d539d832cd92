"""
Tips and tricks to speed up pandas code.

This mini-tutorial shares some of the common tricks that have proved useful
for speeding up slow segments of data-processing code. Every lesson runs on
the NYC 2013 flights table (336,776 rows) and prints its result next to how
long it took. Estimated time: 30 mins.

Run it top to bottom with `python -m core.tutorial`. The narrative version
lives in TUTORIAL.md.
"""
import sys

import pandas as pd

from core.config import DEFAULT_LOOP_LIMIT
from core.data import load_flights
from core.loops import (
    avg_dist_by_flight_loop,
    mean_distance_loop_array,
    mean_distance_loop_frame,
    mean_distance_vectorized,
)
from core.patterns import vowel_flights_class, vowel_flights_union
from core.practice import (
    QUESTIONS,
    busy_delay_days,
    long_haul_destinations,
    tailnum_pattern_flights,
)
from core.timing import amdahl_speedup, compare, timed
from core.vectorized import avg_dist_by_flight_chained, avg_dist_by_flight_indexed


def _loop_sample(flights: pd.DataFrame, loop_limit):
    if loop_limit is not None and loop_limit < 0:
        raise ValueError(f"loop_limit must be non-negative, got {loop_limit}")
    if loop_limit is None or loop_limit >= len(flights):
        return flights
    print(f"  (scanning the first {loop_limit:,} of {len(flights):,} rows; "
          f"pass --loop-limit 0 for the full table)")
    return flights.iloc[:loop_limit]


def lesson_1_for_loops(flights: pd.DataFrame, loop_limit=DEFAULT_LOOP_LIMIT):
    # Looping over a DataFrame row by row is SLOW: every flights.iloc[i] builds
    # a brand new Series for the row before we can read one value out of it.
    # When possible, hand the job to a vectorized operation instead.
    # Example: the average distance per flight number for flights arriving at BOS.
    print("\n1) Slowness of for loops")
    sample = _loop_sample(flights, loop_limit)
    return compare(avg_dist_by_flight_loop, avg_dist_by_flight_indexed, sample,
                   slow_label='row loop', fast_label='boolean mask + groupby')


def lesson_2_vectorized_indexing(flights: pd.DataFrame):
    # Filter the table with a boolean mask computed over the whole column in
    # one go, then aggregate the matches with groupby.
    print("\n2) Vectorized indexing")
    timing = timed('boolean mask + groupby', avg_dist_by_flight_indexed, flights)
    print(timing.result.head())
    return timing


def lesson_3_method_chain(flights: pd.DataFrame):
    # The same query as one method chain reads top to bottom like the question
    # it answers. The table is small and the query simple, so the gap is narrow,
    # but with production-size data and several joins and groupbys, chains are
    # far easier to keep correct.
    print("\n3) ETL with method chains")
    return compare(avg_dist_by_flight_indexed, avg_dist_by_flight_chained, flights,
                   slow_label='mask then groupby', fast_label='query().groupby().agg()')


def lesson_4_regex(flights: pd.DataFrame):
    # Finding keywords or patterns in text columns is a common task.
    # Let's find all flights whose tail number contains any vowel: five
    # separate scans OR'd together, versus one scan with a character class.
    print("\n4) Merging regex queries")
    return compare(vowel_flights_union, vowel_flights_class, flights,
                   slow_label="five str.contains scans", fast_label="'[AEIOU]' in one scan")


def lesson_5_arrays(flights: pd.DataFrame, loop_limit=DEFAULT_LOOP_LIMIT):
    # If you really must loop, say when each step depends on the previous
    # result (like MCMC), pull the column out into a numpy array first.
    # Reading scalars through the DataFrame pays the indexing overhead on
    # every single iteration. Example (a bad use case): the mean distance.
    print("\n5) Use for loops, only on arrays")
    sample = _loop_sample(flights, loop_limit)
    comparison = compare(mean_distance_loop_frame, mean_distance_loop_array, sample,
                         slow_label='loop over DataFrame', fast_label='loop over numpy array')
    timed('Series.mean()', mean_distance_vectorized, sample)
    return comparison


def lesson_6_misc():
    print("\n6) Misc")
    print("""
  Other options exist that are a lot more complicated and less worth the time:
  - naive parallel processing (multiprocessing, joblib, dask)
     - extra setup and dependencies, sometimes admin access
     - does not help with sequential dependencies in the code
     - bear in mind Amdahl's law
  - compiling Python code (numba, Cython)
     - compile-time overhead
     - no speedup when the underlying code is already compiled
       (the vectorized pandas and numpy functions all are)
  - rewriting slow intensive loops in C/C++
     - make sure you're not re-inventing the wheel!

  Some trade-offs to bear in mind:
  - "Premature optimization is the root of all evil" - Donald Knuth
  - always profile (time, memory) before deciding what to refactor
  - weigh speed-up against memory consumption, coding effort and readability
  The tricks above usually buy large speed-ups without giving up any of these.
""")
    print("  Amdahl's law, best case with 8 workers:")
    for fraction in (0.5, 0.9, 0.99):
        print(f"    {fraction:.0%} parallel -> {amdahl_speedup(fraction, 8):.2f}x")


def practice(flights: pd.DataFrame) -> dict:
    """Prints each practice question and times its suggested answer."""
    print("\n### Practice Time")
    answers = {}
    for number, (question, answer_fn) in enumerate(
            zip(QUESTIONS, (busy_delay_days, long_haul_destinations, tailnum_pattern_flights)), start=1):
        print(f"\n{number}) {question}")
        timing = timed(answer_fn.__name__, answer_fn, flights)
        print(timing.result.head(10))
        answers[number] = timing.result
    return answers


LESSONS = {
    1: 'Slowness of for loops',
    2: 'Vectorized indexing',
    3: 'ETL with method chains',
    4: 'Merging regex queries',
    5: 'Use for loops, only on arrays',
    6: 'Misc',
}


def run_lessons(flights: pd.DataFrame, lessons=None, loop_limit=DEFAULT_LOOP_LIMIT) -> dict:
    """
    Runs the selected lessons in order.

    Returns:
        A mapping of lesson title to Comparison for every lesson that times a
        slow variant against a fast one.
    """
    selected = sorted(lessons) if lessons else sorted(LESSONS)
    unknown = [n for n in selected if n not in LESSONS]
    if unknown:
        raise ValueError(f"Unknown lesson number(s): {unknown}. Choose from {sorted(LESSONS)}.")

    comparisons = {}
    for number in selected:
        if number == 1:
            comparisons[LESSONS[1]] = lesson_1_for_loops(flights, loop_limit)
        elif number == 2:
            lesson_2_vectorized_indexing(flights)
        elif number == 3:
            comparisons[LESSONS[3]] = lesson_3_method_chain(flights)
        elif number == 4:
            comparisons[LESSONS[4]] = lesson_4_regex(flights)
        elif number == 5:
            comparisons[LESSONS[5]] = lesson_5_arrays(flights, loop_limit)
        elif number == 6:
            lesson_6_misc()
    return comparisons


if __name__ == '__main__':
    try:
        flights_df = load_flights()
    except (FileNotFoundError, KeyError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    run_lessons(flights_df)
    practice(flights_df)
