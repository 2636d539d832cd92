import os

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
OUTPUT_PATH = os.path.join(PROJECT_ROOT, 'outputs')
PLOTS_PATH = os.path.join(OUTPUT_PATH, 'plots')

# Optional CSV export of the flights table, used instead of the nycflights13 package
DATA_ENV_VAR = 'SPEED_TRAINING_DATA'

REQUIRED_COLUMNS = [
    'year', 'month', 'day', 'dep_delay', 'arr_delay', 'carrier',
    'flight', 'tailnum', 'origin', 'dest', 'distance',
]

# Lesson defaults
DEFAULT_DEST = 'BOS'
# Rows scanned by the row-by-row loops. None scans the whole table (minutes).
DEFAULT_LOOP_LIMIT = 20_000
VOWEL_CLASS = '[AEIOU]'
TAILNUM_PATTERN = r'^N[0-9]{5}|B$'
PRACTICE_MONTH = 3
PRACTICE_MIN_DELAYED = 700
PRACTICE_MIN_DISTANCE = 2000
PRACTICE_MIN_SHARE = 0.5


def data_path_from_env():
    """Returns the CSV path set in SPEED_TRAINING_DATA, or None."""
    value = os.environ.get(DATA_ENV_VAR, '').strip()
    return value or None
