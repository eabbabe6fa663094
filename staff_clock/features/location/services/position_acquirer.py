"""現在位置取得サービス"""

from typing import Optional, Union

from ....shared.exceptions.errors import InvalidCoordinateError, LocationError
from ....shared.i18n.messages import Lang, t
from ....shared.logging.config import get_logger
from ..domain.enums import LocationErrorKind
from ..domain.models import HIGH_ACCURACY_PROFILE, RELAXED_PROFILE, AcquisitionProfile, GeoPosition
from ..providers.base import LocationProvider

logger = get_logger(__name__)


class PositionAcquirer:
    """
    端末の現在位置を1つ取得するサービス

    1. 位置情報機能がなければ UNSUPPORTED で失敗
    2. 高精度・キャッシュ不可のプロファイルで要求
    3. TIMEOUT で失敗した場合のみ、低精度・60秒以内の測位を許容するプロファイルで1回だけ再試行
    4. 再試行の結果（成功・失敗とも）が最終結果
    5. TIMEOUT 以外の失敗は再試行しない
    """

    def __init__(
        self,
        provider: LocationProvider,
        primary_profile: AcquisitionProfile = HIGH_ACCURACY_PROFILE,
        fallback_profile: AcquisitionProfile = RELAXED_PROFILE,
    ) -> None:
        """
        Args:
            provider: 位置情報プロバイダー
            primary_profile: 最初の要求のプロファイル
            fallback_profile: タイムアウト後の再試行のプロファイル
        """
        self.provider = provider
        self.primary_profile = primary_profile
        self.fallback_profile = fallback_profile

    def acquire(self) -> GeoPosition:
        """
        現在位置を取得

        Returns:
            GeoPosition: 検証済みの位置

        Raises:
            LocationError: 取得に失敗した場合
            InvalidCoordinateError: プロバイダーが範囲外の座標を返した場合
        """
        if not self.provider.is_supported:
            logger.warning("Location capability is not available")
            raise LocationError(LocationErrorKind.UNSUPPORTED)

        try:
            return self._request(self.primary_profile)
        except LocationError as e:
            if e.kind != LocationErrorKind.TIMEOUT:
                logger.warning(f"Location request failed without retry: {e.kind.value}")
                raise

        logger.info(
            f"High-accuracy request timed out, retrying once with relaxed profile "
            f"(timeout_ms={self.fallback_profile.timeout_ms}, max_age_ms={self.fallback_profile.max_age_ms})"
        )

        try:
            return self._request(self.fallback_profile)
        except LocationError as e:
            logger.warning(f"Relaxed location request failed: {e.kind.value}")
            raise

    def acquire_with_message(
        self, lang: Union[Lang, str] = Lang.EN
    ) -> tuple[Optional[GeoPosition], Optional[str]]:
        """
        現在位置、または失敗理由の利用者向けメッセージを返す

        Args:
            lang: メッセージの言語

        Returns:
            tuple: (位置, None) または (None, メッセージ)
        """
        try:
            return self.acquire(), None
        except LocationError as e:
            return None, t(lang, e.kind.message_key)
        except InvalidCoordinateError as e:
            logger.error(f"Location provider returned invalid coordinates: {e}")
            return None, t(lang, LocationErrorKind.UNKNOWN.message_key)

    def _request(self, profile: AcquisitionProfile) -> GeoPosition:
        """1回の測位要求。LocationError 以外の失敗は UNKNOWN に分類する"""
        logger.debug(
            f"Requesting position: high_accuracy={profile.high_accuracy}, "
            f"timeout_ms={profile.timeout_ms}, max_age_ms={profile.max_age_ms}"
        )

        try:
            position = self.provider.get_current_position(profile)
        except (LocationError, InvalidCoordinateError):
            raise
        except Exception as e:
            logger.error(f"Unexpected location provider failure: {e}", exc_info=True)
            raise LocationError(LocationErrorKind.UNKNOWN, str(e)) from e

        position.validate()
        logger.info(f"Position acquired: {position} (accuracy_m={position.accuracy_m})")

        return position
