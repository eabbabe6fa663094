"""打刻前の位置確認サービスのテスト"""

import pytest

from staff_clock.features.clock.domain.models import LocationState
from staff_clock.features.clock.services.location_check import LocationCheckService
from staff_clock.features.geofence.domain.models import GeofenceSettingsRecord
from staff_clock.features.location.domain.enums import LocationErrorKind
from staff_clock.features.location.domain.models import GeoPosition
from staff_clock.features.location.services.position_acquirer import PositionAcquirer
from staff_clock.shared.exceptions.errors import LocationError

CONFIGURED = GeofenceSettingsRecord(restaurant_lat=6.2442, restaurant_lng=-75.5812, radius_meters=100)
UNCONFIGURED = GeofenceSettingsRecord()


def _service(provider, record: GeofenceSettingsRecord = CONFIGURED, lang: str = "en") -> LocationCheckService:
    return LocationCheckService(PositionAcquirer(provider), record, lang=lang)


def test_position_at_restaurant_is_ready(scripted_provider) -> None:
    """店舗と同じ位置なら打刻可能"""
    outcome = _service(scripted_provider(GeoPosition(6.2442, -75.5812))).run()

    assert outcome.state == LocationState.READY
    assert outcome.is_ready is True
    assert outcome.result.distance_km == 0.0
    assert outcome.distance_label == "0m"
    assert outcome.message == "Location verified · 0m away"


def test_position_500m_away_is_blocked_with_distance_message(scripted_provider) -> None:
    """半径外なら距離と半径を含むメッセージで打刻不可"""
    outcome = _service(scripted_provider(GeoPosition(6.2487, -75.5812))).run()

    assert outcome.state == LocationState.LOCATION_ERROR
    assert outcome.result.within_radius is False
    assert outcome.error_kind is None
    assert outcome.message == "You are 500m away. Must be within 100m of Smokey's."


def test_far_position_message_uses_kilometers_in_spanish(scripted_provider) -> None:
    """1km以上はkm表記（スペイン語）"""
    outcome = _service(scripted_provider(GeoPosition(6.2712, -75.5812)), lang="es").run()

    assert outcome.state == LocationState.LOCATION_ERROR
    assert outcome.message == "Estás a 3.0km de distancia. Debes estar dentro de 100m de Smokey's."


def test_unconfigured_geofence_accepts_any_position(scripted_provider) -> None:
    """店舗位置が未設定ならどこからでも打刻可能"""
    outcome = _service(scripted_provider(GeoPosition(-33.8688, 151.2093)), record=UNCONFIGURED).run()

    assert outcome.state == LocationState.READY
    assert outcome.result is None
    assert outcome.distance_label is None
    assert outcome.message == "Location verified"


@pytest.mark.parametrize(
    "kind,expected",
    [
        (LocationErrorKind.PERMISSION_DENIED, "Location access denied. Please enable location services to check in."),
        (LocationErrorKind.POSITION_UNAVAILABLE, "Location information is unavailable. Please try again."),
        (LocationErrorKind.UNKNOWN, "An unknown error occurred while getting location."),
    ],
)
def test_acquisition_failure_is_location_error(scripted_provider, kind: LocationErrorKind, expected: str) -> None:
    """位置取得の失敗は分類ごとのメッセージで打刻不可"""
    outcome = _service(scripted_provider(LocationError(kind))).run()

    assert outcome.state == LocationState.LOCATION_ERROR
    assert outcome.error_kind == kind
    assert outcome.position is None
    assert outcome.message == expected


def test_unsupported_even_without_geofence(scripted_provider) -> None:
    """ジオフェンス無効でも位置情報機能がなければ打刻不可"""
    outcome = _service(scripted_provider(supported=False), record=UNCONFIGURED).run()

    assert outcome.state == LocationState.LOCATION_ERROR
    assert outcome.error_kind == LocationErrorKind.UNSUPPORTED


def test_rerun_after_moving_closer(scripted_provider) -> None:
    """再実行で近い位置が得られれば打刻可能になる"""
    provider = scripted_provider(GeoPosition(6.2487, -75.5812), GeoPosition(6.2443, -75.5812))
    service = _service(provider)

    assert service.run().state == LocationState.LOCATION_ERROR
    assert service.run().state == LocationState.READY


def test_outcome_to_dict(scripted_provider) -> None:
    """API応答用の辞書"""
    data = _service(scripted_provider(GeoPosition(6.2487, -75.5812))).run().to_dict()

    assert data["state"] == "location_error"
    assert data["within_radius"] is False
    assert data["distance"] == "500m"
    assert data["distance_km"] == pytest.approx(0.5, abs=0.01)
    assert data["position"]["lat"] == 6.2487
