from enum import Enum


class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


# Defaults for a never-reviewed item
DEFAULT_REPETITIONS = 0
DEFAULT_INTERVAL = 0
DEFAULT_EASE_FACTOR = 2.5

MIN_EASE_FACTOR = 1.3

MIN_QUALITY = 0
MAX_QUALITY = 5
# quality below this is a lapse
PASSING_QUALITY = 3
FALLBACK_QUALITY = 3

FIRST_INTERVAL = 1
SECOND_INTERVAL = 6
LAPSE_INTERVAL = 1
# upper bound on a scheduled interval (100 years); keeps next_review_at representable
MAX_INTERVAL = 36500
