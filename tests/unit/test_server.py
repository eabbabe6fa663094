"""HTTPサーバーのテスト"""

import pytest
from fastapi.testclient import TestClient

from staff_clock import server
from staff_clock.infrastructure.config.settings import Settings


@pytest.fixture
def configured(monkeypatch: pytest.MonkeyPatch) -> None:
    """メデジンの店舗、半径100m"""
    monkeypatch.setattr(
        server,
        "settings",
        Settings(_env_file=None, restaurant_lat=6.2442, restaurant_lng=-75.5812, radius_meters=100),
    )


@pytest.fixture
def unconfigured(monkeypatch: pytest.MonkeyPatch) -> None:
    """店舗位置なし"""
    monkeypatch.setattr(server, "settings", Settings(_env_file=None, restaurant_lat=None, restaurant_lng=None))


@pytest.fixture
def client() -> TestClient:
    return TestClient(server.app)


def test_health(client: TestClient) -> None:
    """ヘルスチェック"""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root(client: TestClient) -> None:
    """ルート"""
    assert client.get("/").json()["status"] == "running"


def test_geofence_configured(client: TestClient, configured: None) -> None:
    """ジオフェンス設定を返す"""
    data = client.get("/geofence").json()

    assert data == {"enabled": True, "lat": 6.2442, "lng": -75.5812, "radius_km": 0.1, "radius_meters": 100}


def test_geofence_unconfigured(client: TestClient, unconfigured: None) -> None:
    """未設定ならジオフェンス無効"""
    assert client.get("/geofence").json() == {"enabled": False}


def test_check_within_radius(client: TestClient, configured: None) -> None:
    """半径内なら ready"""
    response = client.post("/geofence/check", json={"lat": 6.2442, "lng": -75.5812, "accuracy": 8})

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "ready"
    assert data["within_radius"] is True
    assert data["distance"] == "0m"
    assert data["position"]["accuracy_m"] == 8
    assert data["checked_at"].endswith("-05:00")


def test_check_out_of_radius_in_spanish(client: TestClient, configured: None) -> None:
    """半径外なら location_error と距離メッセージ"""
    response = client.post("/geofence/check", json={"lat": 6.2487, "lng": -75.5812, "lang": "es"})

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "location_error"
    assert data["within_radius"] is False
    assert data["message"] == "Estás a 500m de distancia. Debes estar dentro de 100m de Smokey's."


def test_check_unconfigured_accepts_any_position(client: TestClient, unconfigured: None) -> None:
    """未設定ならどこでも ready"""
    data = client.post("/geofence/check", json={"lat": -33.8688, "lng": 151.2093}).json()

    assert data["state"] == "ready"
    assert data["within_radius"] is None
    assert data["distance_km"] is None


@pytest.mark.parametrize("body", [{"lat": 91, "lng": 0}, {"lat": 0, "lng": -181}, {"lat": 0}])
def test_check_rejects_invalid_coordinates(client: TestClient, configured: None, body: dict) -> None:
    """範囲外・欠落した座標は 422"""
    assert client.post("/geofence/check", json=body).status_code == 422
