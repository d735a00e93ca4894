from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import Difficulty
from .state import LearningItemState


class ReviewEvent(BaseModel):
    """One graded review handed over by the review-recording side.

    採点済みレビュー1件（カードの現在状態・難易度評価・完了時刻）。
    rating は将来の語彙追加に備えて自由文字列で受け付ける。
    """

    model_config = ConfigDict(frozen=True)

    state: LearningItemState = Field(default_factory=LearningItemState)
    rating: str
    completed_at: datetime


class ReviewOutcome(BaseModel):
    """Result of recording a review, ready to persist onto the card.

    - state: 次回スケジュール（last_reviewed_at は完了時刻で記録済み）
    - quality: 評価から変換した 0..5 の品質値
    - rating: 認識できた難易度（未知の評価なら None）
    - lapsed: quality < 3 で連続正解がリセットされたか
    """

    model_config = ConfigDict(frozen=True)

    state: LearningItemState
    quality: int = Field(ge=0, le=5)
    rating: Optional[Difficulty] = None
    lapsed: bool
