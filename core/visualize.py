import os

import pandas as pd
import plotly.graph_objects as go

from core.config import PLOTS_PATH


def timings_frame(comparisons: dict) -> pd.DataFrame:
    """
    Flattens lesson comparisons into one row per timed variant.

    Args:
        comparisons: Mapping of lesson title to core.timing.Comparison.

    Returns:
        A DataFrame with columns lesson, variant, kind, elapsed.
    """
    rows = []
    for lesson, comparison in comparisons.items():
        for kind, timing in (('slow', comparison.slow), ('fast', comparison.fast)):
            rows.append({
                'lesson': lesson,
                'variant': timing.label,
                'kind': kind,
                'elapsed': timing.elapsed,
            })
    return pd.DataFrame(rows, columns=['lesson', 'variant', 'kind', 'elapsed'])


def timings_figure(timings_df: pd.DataFrame) -> go.Figure:
    """Grouped bar chart of slow vs. fast elapsed time per lesson, on a log axis."""
    fig = go.Figure()

    for kind, color in (('slow', 'indianred'), ('fast', 'seagreen')):
        subset = timings_df[timings_df['kind'] == kind]
        fig.add_trace(go.Bar(
            x=subset['lesson'],
            y=subset['elapsed'],
            name=kind.capitalize(),
            text=subset['variant'],
            marker_color=color,
        ))

    fig.update_layout(
        barmode='group',
        title_text='<b>Slow vs. Fast Variants by Lesson</b>',
        xaxis_title='Lesson',
        yaxis_title='Elapsed Time (seconds, log scale)',
        yaxis_type='log',
        legend_title_text='Variant',
        template='plotly_white'
    )
    return fig


def plot_timings(comparisons: dict, output_path: str = None) -> str:
    """
    Creates and saves an interactive chart of the lesson timings.

    Returns:
        The path of the written HTML file.
    """
    print("Generating lesson timings plot...")
    if output_path is None:
        os.makedirs(PLOTS_PATH, exist_ok=True)
        output_path = os.path.join(PLOTS_PATH, 'lesson_timings.html')

    fig = timings_figure(timings_frame(comparisons))
    fig.write_html(output_path)
    print(f"Saved lesson timings plot to {output_path}")
    return output_path
