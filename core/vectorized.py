import pandas as pd

from core.config import DEFAULT_DEST


def avg_dist_by_flight_indexed(flights: pd.DataFrame, dest: str = DEFAULT_DEST) -> pd.DataFrame:
    """
    Average distance per flight number for flights arriving at `dest`.

    Filters with a boolean mask over the whole column, then aggregates with
    groupby. Returns the same table as the loop version.
    """
    flights_dest = flights[flights['dest'] == dest]
    result = flights_dest.groupby('flight', as_index=False)['distance'].mean()
    return result.rename(columns={'distance': 'avg_dist'})


def avg_dist_by_flight_chained(flights: pd.DataFrame, dest: str = DEFAULT_DEST) -> pd.DataFrame:
    """Same query written as one method chain: filter, group, summarise."""
    return (
        flights
        .query('dest == @dest')
        .groupby('flight', as_index=False)
        .agg(avg_dist=('distance', 'mean'))
    )
