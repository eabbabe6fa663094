"""カスタム例外定義"""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ...features.location.domain.enums import LocationErrorKind


class StaffClockError(Exception):
    """スタッフ打刻システム基底例外"""

    pass


class HTTPError(StaffClockError):
    """HTTP関連のエラー"""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HTTPTimeoutError(HTTPError):
    """HTTPリクエストのタイムアウト"""

    pass


class LocationError(StaffClockError):
    """
    位置情報取得エラー

    kind には LocationErrorKind を保持する
    """

    def __init__(self, kind: "LocationErrorKind", message: Optional[str] = None) -> None:
        super().__init__(message or kind.value)
        self.kind = kind


class InvalidCoordinateError(StaffClockError, ValueError):
    """緯度・経度が範囲外"""

    pass


class ConfigurationError(StaffClockError):
    """設定エラー"""

    pass
