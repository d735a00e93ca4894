import io
import json
from contextlib import redirect_stderr, redirect_stdout
from datetime import datetime, timezone

from srs_core import LearningItemState, schedule_next


def _json_lines(text: str) -> list[dict]:
    return [json.loads(ln) for ln in text.splitlines() if ln.strip().startswith("{")]


def test_structlog_outputs_pure_json_without_stdlib_prefix() -> None:
    buf_out = io.StringIO()
    buf_err = io.StringIO()

    with redirect_stdout(buf_out), redirect_stderr(buf_err):
        from srs_core.logging import configure_logging, logger

        configure_logging()
        logger.info("review_recorded", card_id="card-1", quality=5)

    raw = buf_err.getvalue().strip() or buf_out.getvalue().strip()
    lines = [ln for ln in raw.splitlines() if ln.strip()]
    message_text = lines[-1] if lines else ""

    assert message_text, "no log output captured"
    assert not message_text.startswith("INFO:"), message_text

    data = json.loads(message_text)
    assert data.get("event") == "review_recorded"
    assert data.get("level") in {"info", "INFO"}
    assert data.get("card_id") == "card-1"
    assert data.get("quality") == 5
    assert "timestamp" in data


def test_lapse_is_logged_with_previous_streak() -> None:
    buf_err = io.StringIO()
    now = datetime(2024, 3, 10, tzinfo=timezone.utc)

    with redirect_stderr(buf_err):
        from srs_core.logging import configure_logging

        configure_logging()
        schedule_next(LearningItemState(repetitions=4, interval=20, ease_factor=2.5), 1, now)

    events = [e for e in _json_lines(buf_err.getvalue()) if e.get("event") == "srs_lapse"]

    assert events, "srs_lapse log line not found"
    assert events[-1]["previous_repetitions"] == 4
    assert events[-1]["previous_interval"] == 20
    assert events[-1]["quality"] == 1


def test_schedule_debug_event_respects_log_level() -> None:
    now = datetime(2024, 3, 10, tzinfo=timezone.utc)

    buf_info = io.StringIO()
    with redirect_stderr(buf_info):
        from srs_core.logging import configure_logging

        configure_logging("INFO")
        schedule_next(None, 5, now)

    buf_debug = io.StringIO()
    with redirect_stderr(buf_debug):
        configure_logging("DEBUG")
        schedule_next(None, 5, now)

    assert "srs_schedule_computed" not in buf_info.getvalue()
    computed = [e for e in _json_lines(buf_debug.getvalue()) if e.get("event") == "srs_schedule_computed"]
    assert computed
    assert computed[-1]["interval"] == 1
    assert computed[-1]["next_review_at"] == "2024-03-11T00:00:00+00:00"
