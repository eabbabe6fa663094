"""ジオフェンス機能のドメインモデル"""
import math
from dataclasses import dataclass
from typing import Any, Optional

from ....shared.exceptions.errors import ConfigurationError
from ...location.domain.models import GeoPosition

# 半径未設定時のデフォルト（100m）
DEFAULT_RADIUS_KM = 0.1


@dataclass
class GeofenceSettingsRecord:
    """
    店舗設定（永続化層から読み込む値）

    restaurant_lat / restaurant_lng が未設定の場合はジオフェンスを無効とする
    """

    restaurant_lat: Optional[float] = None  # 店舗の緯度
    restaurant_lng: Optional[float] = None  # 店舗の経度
    radius_meters: Optional[int] = None  # 許容半径（メートル）

    @property
    def is_configured(self) -> bool:
        """店舗位置が設定済みか"""
        return self.restaurant_lat is not None and self.restaurant_lng is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeofenceSettingsRecord":
        """設定レコード（辞書）から生成"""
        return cls(
            restaurant_lat=data.get("restaurant_lat"),
            restaurant_lng=data.get("restaurant_lng"),
            radius_meters=data.get("radius_meters"),
        )


@dataclass
class GeofenceConfig:
    """店舗位置を中心とする円形のジオフェンス"""

    center: GeoPosition
    radius_km: float = DEFAULT_RADIUS_KM

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius_km) or self.radius_km <= 0:
            raise ConfigurationError(f"Geofence radius must be positive: {self.radius_km}")
        self.center.validate()

    @classmethod
    def from_record(cls, record: GeofenceSettingsRecord) -> Optional["GeofenceConfig"]:
        """
        店舗設定からジオフェンスを生成

        Args:
            record: 店舗設定

        Returns:
            Optional[GeofenceConfig]: 店舗位置が未設定の場合はNone

        Raises:
            ConfigurationError: 半径が負の場合
            InvalidCoordinateError: 店舗座標が範囲外の場合
        """
        if not record.is_configured:
            return None

        # 0 または未設定はデフォルト半径
        radius_km = record.radius_meters / 1000.0 if record.radius_meters else DEFAULT_RADIUS_KM

        return cls(
            center=GeoPosition(latitude=float(record.restaurant_lat), longitude=float(record.restaurant_lng)),
            radius_km=radius_km,
        )

    def to_dict(self) -> dict[str, Any]:
        """API応答用の辞書に変換"""
        return {
            "lat": self.center.latitude,
            "lng": self.center.longitude,
            "radius_km": self.radius_km,
            "radius_meters": round(self.radius_km * 1000),
        }


@dataclass(frozen=True)
class DistanceResult:
    """距離と判定結果"""

    distance_km: float  # 店舗までの距離（キロメートル）
    within_radius: bool  # 許容半径内か
