"""ジオフェンス判定"""
import math
from typing import Optional

from ....shared.exceptions.errors import ConfigurationError
from ....shared.logging.config import get_logger
from ...location.domain.models import GeoPosition
from ..domain.models import DistanceResult, GeofenceConfig, GeofenceSettingsRecord

logger = get_logger(__name__)

# 地球の平均半径（km）
EARTH_RADIUS_KM = 6371.0


def haversine_distance(a: GeoPosition, b: GeoPosition) -> float:
    """
    2点間の大円距離（ハバーサイン公式）

    atan2 形式なので距離0付近や対蹠点付近でも定義域エラーにならない。

    Args:
        a: 地点A
        b: 地点B

    Returns:
        float: 距離（キロメートル）
    """
    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)

    sin_lat = math.sin(d_lat / 2)
    sin_lng = math.sin(d_lng / 2)
    h = sin_lat * sin_lat + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude)) * sin_lng * sin_lng

    # 丸め誤差で [0, 1] をはみ出さないようにする
    h = min(1.0, max(0.0, h))

    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def evaluate_geofence(device: GeoPosition, center: GeoPosition, radius_km: float) -> DistanceResult:
    """
    端末位置が店舗から半径内にあるか判定

    Args:
        device: 端末の位置
        center: 店舗の位置
        radius_km: 許容半径（キロメートル、正の値）

    Returns:
        DistanceResult: 距離と判定結果（distance_km <= radius_km なら半径内）

    Raises:
        InvalidCoordinateError: 座標が範囲外の場合
        ConfigurationError: 半径が正でない場合
    """
    device.validate()
    center.validate()

    if not math.isfinite(radius_km) or radius_km <= 0:
        raise ConfigurationError(f"Geofence radius must be positive: {radius_km}")

    distance_km = haversine_distance(device, center)

    return DistanceResult(distance_km=distance_km, within_radius=distance_km <= radius_km)


def check_geofence(device: GeoPosition, record: GeofenceSettingsRecord) -> Optional[DistanceResult]:
    """
    店舗設定に基づいて端末位置を判定

    店舗位置が未設定の場合は判定せず、どの位置も受け付ける。

    Args:
        device: 端末の位置
        record: 店舗設定

    Returns:
        Optional[DistanceResult]: 判定結果（ジオフェンス無効の場合はNone）
    """
    config = GeofenceConfig.from_record(record)

    if config is None:
        logger.info("Geofence not configured, accepting any position")
        return None

    result = evaluate_geofence(device, config.center, config.radius_km)

    logger.info(
        f"Geofence check: distance={result.distance_km * 1000:.1f}m, "
        f"radius={config.radius_km * 1000:.0f}m, within={result.within_radius}"
    )

    return result
