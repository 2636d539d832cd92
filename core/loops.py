import numpy as np
import pandas as pd

from core.config import DEFAULT_DEST


def avg_dist_by_flight_loop(flights: pd.DataFrame, dest: str = DEFAULT_DEST,
                            limit: int = None, verbose: bool = False) -> pd.DataFrame:
    """
    Average distance per flight number for flights arriving at `dest`, the slow way.

    Walks the table one row at a time with scalar lookups and keeps three
    parallel lists (flight numbers, distance totals, counts). Each repeated
    flight number triggers a linear search of the list so far.

    Args:
        flights: The flights table.
        dest: Destination airport code.
        limit: Only scan the first `limit` rows. The full table takes minutes.
        verbose: Print the position of every matching row.

    Returns:
        A DataFrame with columns flight and avg_dist, sorted by flight.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    n_rows = len(flights) if limit is None else min(limit, len(flights))

    uniq_flights = []
    uniq_dist = []
    uniq_count = []

    for i in range(n_rows):
        if flights.iloc[i]['dest'] == dest:
            if verbose:
                print(i)
            flight = flights.iloc[i]['flight']
            if flight not in uniq_flights:
                uniq_flights.append(flight)
                uniq_dist.append(float(flights.iloc[i]['distance']))
                uniq_count.append(1)
            else:
                for j in range(len(uniq_flights)):
                    if uniq_flights[j] == flight:
                        uniq_dist[j] += flights.iloc[i]['distance']
                        uniq_count[j] += 1

    result = pd.DataFrame({
        'flight': uniq_flights,
        'avg_dist': [total / count for total, count in zip(uniq_dist, uniq_count)],
    })
    return result.sort_values('flight').reset_index(drop=True)


def mean_distance_loop_frame(flights: pd.DataFrame) -> float:
    """
    Mean distance by scalar accumulation, reading every value through the DataFrame.
    An empty table gives NaN, like Series.mean().
    """
    n = len(flights)
    if n == 0:
        return float('nan')
    avg_dist = 0.0
    for i in range(n):
        avg_dist += flights.iloc[i]['distance'] / n
    return avg_dist


def mean_distance_loop_array(flights: pd.DataFrame) -> float:
    """Same accumulation, but over a plain numpy array pulled out once up front."""
    dist = flights['distance'].to_numpy(dtype=np.float64)
    n = dist.shape[0]
    if n == 0:
        return float('nan')
    avg_dist = 0.0
    for i in range(n):
        avg_dist += dist[i] / n
    return avg_dist


def mean_distance_vectorized(flights: pd.DataFrame) -> float:
    return float(flights['distance'].mean())
