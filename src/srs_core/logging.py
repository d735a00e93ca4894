"""Logging utilities for the scheduler.

構造化ログの初期化を提供する。ライブラリ自身は import 時に
``configure_logging()`` を呼ばない。組み込み側のアプリケーションが
起動時に一度だけ呼び出す想定。
"""

import logging

import structlog
from structlog import contextvars as structlog_contextvars

from .config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for application-wide logging.

    標準 logging を設定値のレベルで初期化し、structlog で ISO タイムスタンプと
    JSON 形式の出力を有効化する。``level`` を渡すと設定値より優先される。
    """
    # stdlib 側の出力に "INFO:logger:" などのプレフィックスを付けない。
    # force=True で既存ハンドラを上書きして一貫化。
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(message)s",
        handlers=[logging.StreamHandler()],
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog_contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


logger = structlog.get_logger()
