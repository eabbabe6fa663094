"""テスト共通のフィクスチャ"""

from typing import Union

import pytest

from staff_clock.features.location.domain.models import AcquisitionProfile, GeoPosition
from staff_clock.features.location.providers.base import LocationProvider

# メデジンの店舗位置
RESTAURANT = GeoPosition(latitude=6.2442, longitude=-75.5812)


class ScriptedLocationProvider(LocationProvider):
    """要求ごとに決められた結果を返し、受け取ったプロファイルを記録するプロバイダー"""

    def __init__(self, *outcomes: Union[GeoPosition, Exception], supported: bool = True) -> None:
        self.outcomes = list(outcomes)
        self.supported = supported
        self.profiles: list[AcquisitionProfile] = []

    @property
    def is_supported(self) -> bool:
        return self.supported

    def get_current_position(self, profile: AcquisitionProfile) -> GeoPosition:
        self.profiles.append(profile)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def restaurant() -> GeoPosition:
    """店舗位置"""
    return RESTAURANT


@pytest.fixture
def scripted_provider():
    """ScriptedLocationProvider のファクトリ"""
    return ScriptedLocationProvider
