"""SM-2 spaced-repetition scheduling for flashcards."""

from .errors import InvalidQualityError, MissingRequiredStateError, SchedulingError
from .models import (
    Difficulty,
    LearningItemState,
    ReviewEvent,
    ReviewOutcome,
    ScheduleResult,
)
from .srs import (
    add_days,
    difficulty_to_quality,
    is_due,
    normalize_state,
    record_review,
    record_review_event,
    reset_state,
    schedule_next,
)

__all__ = [
    "Difficulty",
    "InvalidQualityError",
    "LearningItemState",
    "MissingRequiredStateError",
    "ReviewEvent",
    "ReviewOutcome",
    "ScheduleResult",
    "SchedulingError",
    "add_days",
    "difficulty_to_quality",
    "is_due",
    "normalize_state",
    "record_review",
    "record_review_event",
    "reset_state",
    "schedule_next",
]
