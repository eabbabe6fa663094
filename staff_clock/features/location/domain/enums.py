"""位置情報機能のEnum定義"""
from enum import Enum


class LocationErrorKind(str, Enum):
    """位置情報取得失敗の分類"""

    UNSUPPORTED = "unsupported"  # 位置情報機能なし
    PERMISSION_DENIED = "permission_denied"  # 利用者・端末が拒否
    POSITION_UNAVAILABLE = "position_unavailable"  # 測位不能
    TIMEOUT = "timeout"  # 時間内に測位できず
    UNKNOWN = "unknown"  # その他

    @property
    def message_key(self) -> str:
        """利用者向けメッセージのキーを取得"""
        return LOCATION_ERROR_MESSAGE_KEYS[self]


LOCATION_ERROR_MESSAGE_KEYS = {
    LocationErrorKind.UNSUPPORTED: "locUnsupported",
    LocationErrorKind.PERMISSION_DENIED: "locDenied",
    LocationErrorKind.POSITION_UNAVAILABLE: "locUnavailable",
    LocationErrorKind.TIMEOUT: "locTimeout",
    LocationErrorKind.UNKNOWN: "locUnknown",
}
