"""位置情報機能のドメインモデル"""
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ....shared.exceptions.errors import InvalidCoordinateError


@dataclass(frozen=True)
class GeoPosition:
    """端末または店舗の地理的位置"""

    latitude: float  # 緯度（-90..90）
    longitude: float  # 経度（-180..180）
    accuracy_m: Optional[float] = None  # 測位精度（メートル）
    timestamp: Optional[datetime] = None  # 測位時刻

    def __repr__(self) -> str:
        return f"GeoPosition(lat={self.latitude}, lng={self.longitude})"

    def validate(self) -> "GeoPosition":
        """
        緯度・経度が有効範囲内か検証

        Returns:
            GeoPosition: 自身

        Raises:
            InvalidCoordinateError: 範囲外または数値でない場合
        """
        lat, lng = self.latitude, self.longitude

        if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
            raise InvalidCoordinateError(f"Coordinates must be numbers: ({lat!r}, {lng!r})")
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise InvalidCoordinateError(f"Coordinates must be finite: ({lat}, {lng})")
        if not -90.0 <= lat <= 90.0:
            raise InvalidCoordinateError(f"Latitude out of range [-90, 90]: {lat}")
        if not -180.0 <= lng <= 180.0:
            raise InvalidCoordinateError(f"Longitude out of range [-180, 180]: {lng}")

        return self

    def to_dict(self) -> dict[str, Any]:
        """API応答用の辞書に変換"""
        return {
            "lat": self.latitude,
            "lng": self.longitude,
            "accuracy_m": self.accuracy_m,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }


@dataclass(frozen=True)
class AcquisitionProfile:
    """1回の測位要求のパラメータ"""

    high_accuracy: bool  # 高精度測位を要求するか
    timeout_ms: int  # タイムアウト（ミリ秒）
    max_age_ms: int  # 許容するキャッシュ済み測位の最大経過時間（ミリ秒）

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0


# 最初の要求: キャッシュ不可、最高精度
HIGH_ACCURACY_PROFILE = AcquisitionProfile(high_accuracy=True, timeout_ms=15000, max_age_ms=0)

# タイムアウト後の再試行: 低精度、60秒以内の測位を許容
RELAXED_PROFILE = AcquisitionProfile(high_accuracy=False, timeout_ms=15000, max_age_ms=60000)
