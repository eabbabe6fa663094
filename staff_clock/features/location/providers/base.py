"""位置情報プロバイダーの基底クラス"""

from abc import ABC, abstractmethod

from ..domain.models import AcquisitionProfile, GeoPosition


class LocationProvider(ABC):
    """
    端末の位置情報機能の抽象基底クラス

    1回の呼び出しは成功か失敗が確定するまで呼び出し元をブロックする。
    実行中の要求を外部から中断する手段は持たない。
    """

    @property
    def is_supported(self) -> bool:
        """位置情報機能が利用可能か"""
        return True

    @abstractmethod
    def get_current_position(self, profile: AcquisitionProfile) -> GeoPosition:
        """
        現在位置を1回取得

        Args:
            profile: 測位要求のパラメータ

        Returns:
            GeoPosition: 取得した位置

        Raises:
            LocationError: 取得に失敗した場合（kindで分類）
        """
        pass
