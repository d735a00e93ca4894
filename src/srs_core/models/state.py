from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .common import MIN_EASE_FACTOR


class LearningItemState(BaseModel):
    """Persistent scheduling state attached to a flashcard.

    カードに紐づく復習スケジュール状態（不変）。
    未設定（None）のフィールドはスケジューラ実行時に毎回既定値で補完される。
    保存済みの 0 は正当な値として扱い、未設定とは区別する。
    カード全体の dict をそのまま渡せるよう、未知のキーは無視し、
    元アプリの camelCase 名（easeFactor/efactor/nextReviewDate など）も受け付ける。
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    repetitions: Optional[int] = Field(default=None, ge=0)
    interval: Optional[int] = Field(default=None, ge=0)
    ease_factor: Optional[float] = Field(
        default=None,
        ge=MIN_EASE_FACTOR,
        validation_alias=AliasChoices("ease_factor", "easeFactor", "efactor"),
    )
    last_reviewed_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("last_reviewed_at", "lastReviewedAt", "lastReviewed"),
    )
    next_review_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("next_review_at", "nextReviewAt", "nextReviewDate"),
    )


class ScheduleResult(BaseModel):
    """Output of one scheduling step.

    ``last_reviewed_at`` is not part of the result; the caller stamps it.
    """

    model_config = ConfigDict(frozen=True)

    repetitions: int = Field(ge=0)
    interval: int = Field(ge=1)
    ease_factor: float = Field(ge=MIN_EASE_FACTOR)
    next_review_at: datetime

    def to_state(self, reviewed_at: datetime | None = None) -> LearningItemState:
        """Return the state to persist, optionally stamped with the review time."""
        return LearningItemState(
            repetitions=self.repetitions,
            interval=self.interval,
            ease_factor=self.ease_factor,
            last_reviewed_at=reviewed_at,
            next_review_at=self.next_review_at,
        )
