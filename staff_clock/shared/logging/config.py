"""ロギング設定"""
import logging
import sys
from datetime import datetime
from typing import Optional

import pytz

from ..utils.datetime_utils import DEFAULT_TIMEZONE

# ロガー設定済みフラグ
_logger_configured = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

# 打刻リクエストのたびに出力が多いライブラリ
NOISY_LOGGERS = ("urllib3", "uvicorn.access")


class LocalTimeFormatter(logging.Formatter):
    """ログの時刻を店舗のタイムゾーンで出力するフォーマッター"""

    def __init__(self, tz_name: str = DEFAULT_TIMEZONE, fmt: str = LOG_FORMAT, datefmt: str = LOG_DATE_FORMAT) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.tz = pytz.timezone(tz_name)

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        created = datetime.fromtimestamp(record.created, self.tz)
        return created.strftime(datefmt or self.datefmt or LOG_DATE_FORMAT)


def setup_logging(level: str = "INFO", tz_name: str = DEFAULT_TIMEZONE, force: bool = False) -> None:
    """
    ロギングを設定

    2回目以降の呼び出しは force=True の場合のみ反映する
    （CLIの --log-level はサーバーモジュールの設定より優先）。

    Args:
        level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        tz_name: ログ時刻のタイムゾーン
        force: 設定済みでも再設定するか
    """
    global _logger_configured

    if _logger_configured and not force:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(LocalTimeFormatter(tz_name))
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logger_configured = True
    logging.info(f"Logging configured with level: {level} ({tz_name})")


def get_logger(name: str) -> logging.Logger:
    """
    指定名のロガーを取得

    Args:
        name: ロガー名（通常は__name__を指定）

    Returns:
        ロガーインスタンス
    """
    return logging.getLogger(name)
