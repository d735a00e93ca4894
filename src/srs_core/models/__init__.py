from .common import Difficulty
from .review import ReviewEvent, ReviewOutcome
from .state import LearningItemState, ScheduleResult

__all__ = [
    "Difficulty",
    "LearningItemState",
    "ReviewEvent",
    "ReviewOutcome",
    "ScheduleResult",
]
