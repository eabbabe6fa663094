"""打刻前の位置確認サービス"""

from typing import Union

from ....shared.exceptions.errors import LocationError
from ....shared.i18n.messages import Lang, format_distance, t
from ....shared.logging.config import get_logger
from ...geofence.domain.models import GeofenceConfig, GeofenceSettingsRecord
from ...geofence.services.geofence_evaluator import evaluate_geofence
from ...location.services.position_acquirer import PositionAcquirer
from ..domain.models import LocationCheckOutcome, LocationState

logger = get_logger(__name__)


class LocationCheckService:
    """
    位置を取得し、店舗のジオフェンスで打刻可否を判定する

    - 位置取得に失敗 → LOCATION_ERROR（失敗理由のメッセージ）
    - 店舗位置が未設定 → READY（距離なし）
    - 半径外 → LOCATION_ERROR（距離と半径を含むメッセージ）
    - 半径内 → READY

    判定自体は再試行しない。再試行は呼び出し側が run() を再度呼ぶ。
    """

    def __init__(
        self,
        acquirer: PositionAcquirer,
        settings_record: GeofenceSettingsRecord,
        lang: Union[Lang, str] = Lang.EN,
    ) -> None:
        """
        Args:
            acquirer: 現在位置取得サービス
            settings_record: 店舗設定
            lang: メッセージの言語
        """
        self.acquirer = acquirer
        self.settings_record = settings_record
        self.lang = lang if isinstance(lang, Lang) else Lang.from_code(lang)

    def run(self) -> LocationCheckOutcome:
        """
        位置確認を実行

        Returns:
            LocationCheckOutcome: 確認結果

        Raises:
            InvalidCoordinateError: 座標が範囲外の場合
            ConfigurationError: 店舗設定の半径が不正な場合
        """
        try:
            position = self.acquirer.acquire()
        except LocationError as e:
            logger.info(f"Location check blocked by acquisition failure: {e.kind.value}")
            return LocationCheckOutcome(
                state=LocationState.LOCATION_ERROR,
                message=t(self.lang, e.kind.message_key),
                error_kind=e.kind,
            )

        config = GeofenceConfig.from_record(self.settings_record)

        if config is None:
            logger.info("Geofence not configured, skipping distance check")
            return LocationCheckOutcome(
                state=LocationState.READY,
                message=t(self.lang, "locVerified"),
                position=position,
            )

        result = evaluate_geofence(position, config.center, config.radius_km)
        distance_label = format_distance(result.distance_km)

        if not result.within_radius:
            logger.info(
                f"Position out of geofence: distance={distance_label}, "
                f"radius={format_distance(config.radius_km)}"
            )
            return LocationCheckOutcome(
                state=LocationState.LOCATION_ERROR,
                message=t(
                    self.lang,
                    "distError",
                    {"dist": distance_label, "radius": format_distance(config.radius_km)},
                ),
                position=position,
                result=result,
                distance_label=distance_label,
            )

        logger.info(f"Position within geofence: distance={distance_label}")
        return LocationCheckOutcome(
            state=LocationState.READY,
            message=f"{t(self.lang, 'locVerified')} · {distance_label} {t(self.lang, 'away')}",
            position=position,
            result=result,
            distance_label=distance_label,
        )
