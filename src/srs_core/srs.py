"""SM-2 review scheduling.

SuperMemo-2 の変種。カードの現在状態と今回の想起品質（0..5）から次回の
間隔・次回復習日時・連続正解数・易しさ係数を求める。すべて純粋関数で、
現在時刻は呼び出し側が ``now`` として明示的に渡す。

- 易しさ係数は失敗時も含め毎回、旧係数から更新し、1.3 を下限とする
- quality < 3 はラプス: 連続正解数を 0、間隔を 1 日に戻す
- 成功時は 1 回目 1 日、2 回目 6 日、3 回目以降は 旧間隔 × 新係数 を四捨五入
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from numbers import Integral
from typing import Any, Optional, Union

from .config import settings
from .errors import InvalidQualityError, MissingRequiredStateError, SchedulingError
from .logging import logger
from .models.common import (
    DEFAULT_EASE_FACTOR,
    DEFAULT_INTERVAL,
    DEFAULT_REPETITIONS,
    FALLBACK_QUALITY,
    FIRST_INTERVAL,
    LAPSE_INTERVAL,
    MAX_INTERVAL,
    MAX_QUALITY,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    PASSING_QUALITY,
    SECOND_INTERVAL,
    Difficulty,
)
from .models.review import ReviewEvent, ReviewOutcome
from .models.state import LearningItemState, ScheduleResult


StateLike = Union[LearningItemState, Mapping[str, Any], None]

_QUALITY_BY_DIFFICULTY: dict[Difficulty, int] = {
    Difficulty.easy: 5,
    Difficulty.medium: 3,
    Difficulty.hard: 1,
}


def normalize_state(state: StateLike) -> LearningItemState:
    """Return ``state`` with defaults substituted for every absent field.

    ``None`` は未スケジュールのカードとして既定値 (0, 0, 2.5) を返す。
    dict はカードレコードとして検証する（未知のキーは無視）。
    """
    if state is None:
        state = LearningItemState()
    elif isinstance(state, Mapping):
        state = LearningItemState.model_validate(dict(state))
    elif not isinstance(state, LearningItemState):
        raise MissingRequiredStateError(state)

    return state.model_copy(
        update={
            "repetitions": DEFAULT_REPETITIONS if state.repetitions is None else state.repetitions,
            "interval": DEFAULT_INTERVAL if state.interval is None else state.interval,
            "ease_factor": DEFAULT_EASE_FACTOR if state.ease_factor is None else state.ease_factor,
        }
    )


def _validate_quality(quality: object) -> int:
    # bool is Integral but never a grade; numpy integers are accepted
    if not isinstance(quality, Integral) or isinstance(quality, bool):
        raise InvalidQualityError(quality)
    value = int(quality)
    if MIN_QUALITY <= value <= MAX_QUALITY:
        return value
    if settings.clamp_quality:
        clamped = max(MIN_QUALITY, min(MAX_QUALITY, value))
        logger.warning("srs_quality_clamped", quality=value, clamped=clamped)
        return clamped
    raise InvalidQualityError(quality)


def _next_ease_factor(ease_factor: float, quality: int) -> float:
    miss = MAX_QUALITY - quality
    return max(MIN_EASE_FACTOR, ease_factor + (0.1 - miss * (0.08 + miss * 0.02)))


def _round_half_up(value: float) -> int:
    """Round half away from zero on the exact binary value of ``value``."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def add_days(moment: datetime, days: int) -> datetime:
    """Add calendar days, keeping the wall-clock time and tzinfo of ``moment``."""
    return moment + timedelta(days=days)


def schedule_next(state: StateLike, quality: int, now: datetime) -> ScheduleResult:
    """Compute the next scheduling state after one graded review.

    Args:
        state: current scheduling state; absent fields take their defaults.
        quality: recall quality 0..5 (0 = blackout, 5 = perfect).
        now: review completion time, base of ``next_review_at``.

    Raises:
        InvalidQualityError: quality is not an integer in [0, 5] (and
            ``settings.clamp_quality`` is off).
    """
    q = _validate_quality(quality)
    current = normalize_state(state)
    repetitions = current.repetitions
    interval = current.interval

    ease_factor = _next_ease_factor(current.ease_factor, q)

    if q < PASSING_QUALITY:
        repetitions = 0
        interval = LAPSE_INTERVAL
        logger.info(
            "srs_lapse",
            quality=q,
            previous_repetitions=current.repetitions,
            previous_interval=current.interval,
        )
    else:
        repetitions += 1
        if repetitions == 1:
            interval = FIRST_INTERVAL
        elif repetitions == 2:
            interval = SECOND_INTERVAL
        else:
            # a stored interval of 0 past the second success still yields a day
            interval = max(1, _round_half_up(interval * ease_factor))
            if interval > MAX_INTERVAL:
                logger.info("srs_interval_capped", computed=interval, capped=MAX_INTERVAL)
                interval = MAX_INTERVAL

    result = ScheduleResult(
        repetitions=repetitions,
        interval=interval,
        ease_factor=ease_factor,
        next_review_at=add_days(now, interval),
    )
    logger.debug(
        "srs_schedule_computed",
        quality=q,
        repetitions=result.repetitions,
        interval=result.interval,
        ease_factor=result.ease_factor,
        next_review_at=result.next_review_at.isoformat(),
    )
    return result


def _as_difficulty(rating: object) -> Optional[Difficulty]:
    try:
        return Difficulty(rating)
    except (ValueError, TypeError):
        return None


def difficulty_to_quality(rating: object) -> int:
    """Map a coarse rating to SM-2 quality: easy=5, medium=3, hard=1.

    Any other value falls back to 3 and never raises, so newer rating
    vocabularies keep scheduling.
    """
    difficulty = _as_difficulty(rating)
    if difficulty is None:
        if settings.warn_unrecognized_rating:
            logger.warning("srs_unrecognized_rating", rating=repr(rating), fallback=FALLBACK_QUALITY)
        return FALLBACK_QUALITY
    return _QUALITY_BY_DIFFICULTY[difficulty]


def record_review(state: StateLike, rating: object, completed_at: datetime) -> ReviewOutcome:
    """Grade a card from its coarse rating and stamp the review time.

    採点（easy/medium/hard）を quality に変換して次回スケジュールを求め、
    ``last_reviewed_at`` に完了時刻を記録した状態を返す。永続化は呼び出し側。
    """
    quality = difficulty_to_quality(rating)
    result = schedule_next(state, quality, completed_at)
    return ReviewOutcome(
        state=result.to_state(reviewed_at=completed_at),
        quality=quality,
        rating=_as_difficulty(rating),
        lapsed=quality < PASSING_QUALITY,
    )


def record_review_event(event: ReviewEvent) -> ReviewOutcome:
    return record_review(event.state, event.rating, event.completed_at)


def reset_state() -> LearningItemState:
    """Fresh scheduling state, as given to cards copied into a new deck."""
    return LearningItemState(
        repetitions=DEFAULT_REPETITIONS,
        interval=DEFAULT_INTERVAL,
        ease_factor=DEFAULT_EASE_FACTOR,
    )


def is_due(state: StateLike, now: datetime) -> bool:
    """True when the card was never scheduled or its review time has come.

    ``now`` and the stored ``next_review_at`` must both be timezone-aware or
    both naive; mixing them raises ``SchedulingError``.
    """
    current = normalize_state(state)
    if current.next_review_at is None:
        return True
    if (current.next_review_at.tzinfo is None) != (now.tzinfo is None):
        raise SchedulingError(
            "next_review_at and now must both be timezone-aware or both naive"
        )
    return current.next_review_at <= now
