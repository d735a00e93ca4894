"""Settings の既定値と環境変数からの読み込みを検証するテスト。"""

import pytest

from srs_core.config import Settings


@pytest.fixture(autouse=True)
def clear_srs_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """環境変数の影響を排除し、純粋な既定値を検証する。"""

    for name in ("SRS_CLAMP_QUALITY", "SRS_LOG_LEVEL", "SRS_WARN_UNRECOGNIZED_RATING", "SRS_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_reject_out_of_range_quality() -> None:
    config = Settings(_env_file=None)

    assert config.environment == "development"
    assert config.log_level == "INFO"
    assert config.clamp_quality is False
    assert config.warn_unrecognized_rating is True


def test_values_are_read_from_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SRS_CLAMP_QUALITY", "true")
    monkeypatch.setenv("srs_log_level", "debug")
    monkeypatch.setenv("SRS_WARN_UNRECOGNIZED_RATING", "0")

    config = Settings(_env_file=None)

    assert config.clamp_quality is True
    assert config.log_level == "DEBUG"
    assert config.warn_unrecognized_rating is False


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="SRS_LOG_LEVEL must be a logging level name"):
        Settings(log_level="chatty", _env_file=None)


def test_blank_log_level_falls_back_to_info() -> None:
    assert Settings(log_level=" ", _env_file=None).log_level == "INFO"
