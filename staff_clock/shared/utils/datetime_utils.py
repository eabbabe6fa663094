"""日時関連ユーティリティ"""

from datetime import datetime, timezone

import pytz

# 店舗のデフォルトタイムゾーン（メデジン, UTC-5）
DEFAULT_TIMEZONE = "America/Bogota"


def now_utc() -> datetime:
    """現在のUTC時間を取得"""
    return datetime.now(timezone.utc)


def now_local(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """店舗タイムゾーンの現在時刻を取得"""
    return datetime.now(pytz.timezone(tz_name))
