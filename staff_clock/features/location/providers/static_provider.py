"""固定位置プロバイダー（端末から送信された座標用）"""
from dataclasses import replace
from typing import Optional

from ....shared.exceptions.errors import LocationError
from ....shared.logging.config import get_logger
from ....shared.utils.datetime_utils import now_utc
from ..domain.enums import LocationErrorKind
from ..domain.models import AcquisitionProfile, GeoPosition
from .base import LocationProvider

logger = get_logger(__name__)


class StaticLocationProvider(LocationProvider):
    """
    既知の座標を返すプロバイダー

    スマートフォンのブラウザが送信したGPS座標やCLI引数をそのまま位置として扱う。
    座標がない場合は位置情報機能なしとみなす。
    """

    def __init__(self, position: Optional[GeoPosition]) -> None:
        """
        Args:
            position: 返す位置（Noneの場合は非対応）
        """
        self.position = position

    @property
    def is_supported(self) -> bool:
        return self.position is not None

    def get_current_position(self, profile: AcquisitionProfile) -> GeoPosition:
        if self.position is None:
            raise LocationError(LocationErrorKind.UNSUPPORTED)

        logger.debug(f"Static position served: {self.position} (high_accuracy={profile.high_accuracy})")

        if self.position.timestamp is None:
            return replace(self.position, timestamp=now_utc())
        return self.position
