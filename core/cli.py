import argparse
import os
import subprocess
import sys

from core.config import DEFAULT_LOOP_LIMIT, PROJECT_ROOT
from core.data import load_flights
from core.tutorial import LESSONS, practice, run_lessons
from core.visualize import plot_timings


def non_negative_int(value: str) -> int:
    """argparse type for row counts; 0 is allowed and means the whole table."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='speed-training',
        description='Tips and tricks to speed up pandas code, on the NYC 2013 flights table.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Lessons:\n" + "\n".join(f"  {n}) {title}" for n, title in LESSONS.items()),
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    data_parent = argparse.ArgumentParser(add_help=False)
    data_parent.add_argument(
        '--data',
        help='CSV export of the flights table (default: the nycflights13 package)'
    )

    run = subparsers.add_parser('run', parents=[data_parent], help='Run the lessons')
    run.add_argument(
        '--lesson', type=int, action='append', choices=sorted(LESSONS),
        help='Lesson number to run; repeat for several (default: all)'
    )
    run.add_argument(
        '--loop-limit', type=non_negative_int, default=DEFAULT_LOOP_LIMIT,
        help=f'Rows scanned by the row-by-row loops, 0 for all (default: {DEFAULT_LOOP_LIMIT})'
    )
    run.add_argument(
        '--plot', action='store_true',
        help='Save an HTML chart of the lesson timings under outputs/plots/'
    )

    subparsers.add_parser('practice', parents=[data_parent], help='Run the practice answers')
    subparsers.add_parser('ui', help='Launch the Streamlit lesson browser')
    return parser


def run_streamlit() -> int:
    """Runs app/ui.py with Streamlit and returns its exit code."""
    ui_path = os.path.join(PROJECT_ROOT, 'app', 'ui.py')
    if not os.path.exists(ui_path):
        print(f"Error: ui.py not found at {ui_path}")
        return 1

    print(f"Launching Streamlit app from: {ui_path}")
    try:
        subprocess.run([sys.executable, '-m', 'streamlit', 'run', ui_path], check=True, cwd=PROJECT_ROOT)
    except subprocess.CalledProcessError as e:
        print(f"An error occurred while running the Streamlit app: {e}")
        return e.returncode
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == 'ui':
        return run_streamlit()

    try:
        flights = load_flights(args.data)
    except (FileNotFoundError, KeyError) as e:
        print(f"Error: {e}")
        return 1

    if args.command == 'practice':
        practice(flights)
        return 0

    loop_limit = args.loop_limit or None
    comparisons = run_lessons(flights, lessons=args.lesson, loop_limit=loop_limit)
    if args.plot and comparisons:
        plot_timings(comparisons)
    return 0


if __name__ == '__main__':
    sys.exit(main())
