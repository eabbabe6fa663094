"""HTTPジオロケーションAPIプロバイダー"""
from typing import Any, Optional

from ....shared.exceptions.errors import HTTPError, HTTPTimeoutError, LocationError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger
from ....shared.utils.datetime_utils import now_utc
from ..domain.enums import LocationErrorKind
from ..domain.models import AcquisitionProfile, GeoPosition
from .base import LocationProvider

logger = get_logger(__name__)

# 座標として受け付けるキー（APIごとの表記揺れ）
LATITUDE_KEYS = ("latitude", "lat")
LONGITUDE_KEYS = ("longitude", "lng", "lon")
ACCURACY_KEYS = ("accuracy", "accuracy_m")


class HTTPLocationProvider(LocationProvider):
    """
    JSONを返すジオロケーションAPIから現在位置を取得するプロバイダー

    応答例:
        {"latitude": 6.2442, "longitude": -75.5812, "accuracy": 20}
        {"status": "success", "lat": 6.2442, "lon": -75.5812}

    エラーの分類:
    - タイムアウト → TIMEOUT
    - 401/403 → PERMISSION_DENIED
    - 404、座標なし、status=fail → POSITION_UNAVAILABLE
    - その他 → UNKNOWN
    """

    def __init__(self, endpoint_url: Optional[str], http_client: Optional[HTTPClient] = None) -> None:
        """
        Args:
            endpoint_url: ジオロケーションAPIのURL（Noneの場合は非対応）
            http_client: HTTPクライアント（Noneの場合はリトライなしで新規作成）
        """
        self.endpoint_url = endpoint_url
        # 1回の測位要求は1回のHTTPリクエスト（timeout_ms を超えない）
        self.http_client = http_client or HTTPClient(max_retries=0)

        logger.info(f"HTTPLocationProvider initialized: endpoint={endpoint_url or 'not configured'}")

    @property
    def is_supported(self) -> bool:
        return bool(self.endpoint_url)

    def get_current_position(self, profile: AcquisitionProfile) -> GeoPosition:
        if not self.endpoint_url:
            raise LocationError(LocationErrorKind.UNSUPPORTED)

        params = {"high_accuracy": "true" if profile.high_accuracy else "false"}

        try:
            payload = self.http_client.get_json(
                self.endpoint_url,
                params=params,
                timeout=profile.timeout_seconds,
            )
        except HTTPTimeoutError as e:
            raise LocationError(LocationErrorKind.TIMEOUT, str(e)) from e
        except HTTPError as e:
            raise LocationError(self._classify_status(e.status_code), str(e)) from e

        return self._parse_payload(payload)

    def _classify_status(self, status_code: Optional[int]) -> LocationErrorKind:
        """HTTPステータスコードを失敗の分類に変換"""
        if status_code in (401, 403):
            return LocationErrorKind.PERMISSION_DENIED
        if status_code == 404:
            return LocationErrorKind.POSITION_UNAVAILABLE
        return LocationErrorKind.UNKNOWN

    def _parse_payload(self, payload: Any) -> GeoPosition:
        """
        API応答から位置を取り出す

        Raises:
            LocationError: 座標が含まれない場合（POSITION_UNAVAILABLE）
        """
        if not isinstance(payload, dict):
            raise LocationError(
                LocationErrorKind.POSITION_UNAVAILABLE,
                f"Unexpected geolocation payload: {type(payload).__name__}",
            )

        if str(payload.get("status", "")).lower() == "fail":
            raise LocationError(
                LocationErrorKind.POSITION_UNAVAILABLE,
                f"Geolocation lookup failed: {payload.get('message', 'no detail')}",
            )

        latitude = _first_number(payload, LATITUDE_KEYS)
        longitude = _first_number(payload, LONGITUDE_KEYS)

        if latitude is None or longitude is None:
            logger.warning(f"Geolocation payload without coordinates: {sorted(payload.keys())}")
            raise LocationError(
                LocationErrorKind.POSITION_UNAVAILABLE,
                "Geolocation payload has no coordinates",
            )

        return GeoPosition(
            latitude=latitude,
            longitude=longitude,
            accuracy_m=_first_number(payload, ACCURACY_KEYS),
            timestamp=now_utc(),
        )


def _first_number(payload: dict[str, Any], keys: tuple[str, ...]) -> Optional[float]:
    """keys のうち最初に見つかった数値を返す"""
    for key in keys:
        value = payload.get(key)
        if value is None or isinstance(value, bool):
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return None
