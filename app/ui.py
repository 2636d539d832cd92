import os
import sys

import streamlit as st

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from core.config import DEFAULT_LOOP_LIMIT
from core.data import load_flights, sample_flights
from core.loops import avg_dist_by_flight_loop, mean_distance_loop_array, mean_distance_loop_frame
from core.patterns import vowel_flights_class, vowel_flights_union
from core.practice import QUESTIONS, answer_all
from core.timing import amdahl_speedup, compare, timed
from core.tutorial import LESSONS
from core.vectorized import avg_dist_by_flight_chained, avg_dist_by_flight_indexed
from core.visualize import timings_figure, timings_frame

# --- Page Configuration ---
st.set_page_config(
    page_title="Speed Training",
    page_icon="⏱️",
    layout="wide",
    initial_sidebar_state="expanded",
)


# --- Helper Functions ---

@st.cache_data
def get_flights(use_sample):
    """Loads the flights table once per session source."""
    if use_sample:
        return sample_flights(n=20_000)
    return load_flights()


def show_comparison(title, comparison, show_result=True):
    """Displays the timings, the speedup and the equivalence check of one comparison."""
    col1, col2, col3 = st.columns(3)
    col1.metric(comparison.slow.label, f"{comparison.slow.elapsed:.4f} s")
    col2.metric(comparison.fast.label, f"{comparison.fast.elapsed:.4f} s")
    col3.metric("Speedup", f"{comparison.speedup:.1f}x")

    if comparison.equivalent:
        st.success("Both variants return the same result.")
    else:
        st.error("The variants disagree. Check the inputs.")

    st.plotly_chart(timings_figure(timings_frame({title: comparison})), use_container_width=True)
    if show_result:
        st.dataframe(comparison.fast.result)


# --- Sidebar Navigation ---
st.sidebar.title("Speed Training")
use_sample = st.sidebar.checkbox("Use a 20k-row synthetic sample", value=False)
loop_limit = st.sidebar.number_input("Rows scanned by the loops", min_value=1_000,
                                     value=DEFAULT_LOOP_LIMIT, step=5_000)
pages = [f"{n}) {title}" for n, title in LESSONS.items()] + ["Practice"]
page = st.sidebar.radio("Go to", pages)

flights = get_flights(use_sample)
loop_sample = flights.iloc[:int(loop_limit)]

# --- Main App ---

st.title(f"⏱️ {page}")

if page.startswith("1)"):
    st.markdown("Average distance per flight number for flights arriving at **BOS**, "
                "walking the table row by row versus a boolean mask and a groupby.")
    if st.button("Run"):
        comparison = compare(avg_dist_by_flight_loop, avg_dist_by_flight_indexed, loop_sample,
                             slow_label='row loop', fast_label='boolean mask + groupby')
        show_comparison(LESSONS[1], comparison)

elif page.startswith("2)"):
    st.markdown("Filter with a mask computed over the whole column, then aggregate.")
    st.code("flights_bos = flights[flights['dest'] == 'BOS']\n"
            "flights_bos.groupby('flight', as_index=False)['distance'].mean()", language='python')
    if st.button("Run"):
        timing = timed('boolean mask + groupby', avg_dist_by_flight_indexed, flights)
        st.metric(timing.label, f"{timing.elapsed:.4f} s")
        st.dataframe(timing.result)

elif page.startswith("3)"):
    st.markdown("The same query as one readable method chain.")
    st.code("(flights\n .query(\"dest == 'BOS'\")\n .groupby('flight', as_index=False)\n"
            " .agg(avg_dist=('distance', 'mean')))", language='python')
    if st.button("Run"):
        comparison = compare(avg_dist_by_flight_indexed, avg_dist_by_flight_chained, flights,
                             slow_label='mask then groupby', fast_label='query().groupby().agg()')
        show_comparison(LESSONS[3], comparison)

elif page.startswith("4)"):
    st.markdown("Flights whose tail number contains a vowel: five scans OR'd together "
                "versus one `[AEIOU]` character class.")
    if st.button("Run"):
        comparison = compare(vowel_flights_union, vowel_flights_class, flights,
                             slow_label='five str.contains scans', fast_label="'[AEIOU]' in one scan")
        show_comparison(LESSONS[4], comparison)

elif page.startswith("5)"):
    st.markdown("Mean distance by scalar accumulation, reading through the DataFrame "
                "versus a numpy array pulled out once.")
    if st.button("Run"):
        comparison = compare(mean_distance_loop_frame, mean_distance_loop_array, loop_sample,
                             slow_label='loop over DataFrame', fast_label='loop over numpy array')
        show_comparison(LESSONS[5], comparison, show_result=False)
        st.write(f"Mean distance: {comparison.fast.result:.2f} miles")

elif page.startswith("6)"):
    st.markdown("""
- Parallel processing helps only the parallel part of a job (Amdahl's law).
- Compiling gives nothing when the work already runs in compiled, vectorized code.
- Profile (time, memory) before refactoring, and weigh speed against memory,
  effort and readability.
""")
    fraction = st.slider("Parallel fraction of the job", 0.0, 1.0, 0.9, 0.01)
    workers = st.slider("Workers", 1, 64, 8)
    st.metric("Best-case speedup", f"{amdahl_speedup(fraction, workers):.2f}x")

elif page == "Practice":
    if st.button("Show suggested answers"):
        for number, answer in answer_all(flights).items():
            st.subheader(f"{number}) {QUESTIONS[number - 1]}")
            st.dataframe(answer)
    else:
        for number, question in enumerate(QUESTIONS, start=1):
            st.markdown(f"**{number})** {question}")
