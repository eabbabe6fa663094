"""打刻画面の位置確認ステップのドメインモデル"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ...geofence.domain.models import DistanceResult
from ...location.domain.enums import LocationErrorKind
from ...location.domain.models import GeoPosition


class LocationState(str, Enum):
    """位置確認の結果状態"""

    READY = "ready"  # 打刻フォームへ進める
    LOCATION_ERROR = "location_error"  # 打刻不可（再試行を促す）


@dataclass
class LocationCheckOutcome:
    """位置確認の結果"""

    state: LocationState
    message: str  # 利用者向けメッセージ
    position: Optional[GeoPosition] = None
    result: Optional[DistanceResult] = None  # ジオフェンス無効の場合はNone
    error_kind: Optional[LocationErrorKind] = None  # 位置取得に失敗した場合のみ
    distance_label: Optional[str] = None  # "123m" など

    @property
    def is_ready(self) -> bool:
        return self.state == LocationState.READY

    def to_dict(self) -> dict[str, Any]:
        """API応答用の辞書に変換"""
        return {
            "state": self.state.value,
            "message": self.message,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "within_radius": self.result.within_radius if self.result else None,
            "distance_km": self.result.distance_km if self.result else None,
            "distance": self.distance_label,
            "position": self.position.to_dict() if self.position else None,
        }
