import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scheduler settings loaded from environment variables.

    環境変数（接頭辞 ``SRS_``）から読み込まれるスケジューラ設定。
    - environment: 実行環境（development/staging/production など）
    - log_level: structlog/標準 logging の出力レベル
    - clamp_quality: 範囲外の quality を拒否せず 0..5 に丸めるか
    - warn_unrecognized_rating: 未知の難易度評価を警告ログに残すか
    """

    environment: str = Field(
        default="development",
        description="Runtime environment / 実行環境",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level name for the stdlib root logger / ログレベル名",
    )

    # --- Scheduling policy ---
    clamp_quality: bool = Field(
        default=False,
        description=(
            "Clamp out-of-range quality into [0, 5] instead of rejecting it / "
            "範囲外の quality を拒否せず丸める"
        ),
    )
    warn_unrecognized_rating: bool = Field(
        default=True,
        description=(
            "Log a warning when a coarse rating is not easy/medium/hard / "
            "未知の難易度評価を警告ログに出す"
        ),
    )

    # - env_prefix: SRS_CLAMP_QUALITY のように接頭辞付きで読む
    # - extra: .env に存在する未使用キーを無視
    # - case_sensitive: 環境変数キーの大小文字を区別しない
    model_config = SettingsConfigDict(
        env_prefix="SRS_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        """Upper-case the level name and reject names stdlib logging does not know."""

        name = str(value or "").strip().upper()
        if not name:
            return "INFO"
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"SRS_LOG_LEVEL must be a logging level name, got {value!r}")
        return name


settings = Settings()
