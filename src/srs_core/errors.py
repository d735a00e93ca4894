"""Exceptions raised by the scheduler.

いずれも計算の前に送出されるため、呼び出し側は例外時に状態を永続化しない。
"""

from __future__ import annotations


class SchedulingError(Exception):
    """Base class for scheduler errors."""


class InvalidQualityError(SchedulingError, ValueError):
    """Quality grade is not an integer in [0, 5]."""

    def __init__(self, quality: object) -> None:
        self.quality = quality
        super().__init__(f"quality must be an integer in [0, 5], got {quality!r}")


class MissingRequiredStateError(SchedulingError, ValueError):
    """The scheduling state could not be read at all.

    Absent fields are defaulted, so this is only raised for inputs that are
    not a state, a mapping or ``None``.
    """

    def __init__(self, state: object) -> None:
        self.state = state
        super().__init__(
            f"expected LearningItemState, mapping or None, got {type(state).__name__}"
        )
