"""CLIエントリーポイント"""
import argparse
import sys
from typing import Optional

from .features.clock.services.location_check import LocationCheckService
from .features.location.domain.models import GeoPosition
from .features.location.providers.base import LocationProvider
from .features.location.providers.http_provider import HTTPLocationProvider
from .features.location.providers.static_provider import StaticLocationProvider
from .features.location.services.position_acquirer import PositionAcquirer
from .infrastructure.config.settings import Settings
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)

# 終了コード
EXIT_READY = 0
EXIT_FAILURE = 1
EXIT_LOCATION_ERROR = 2
EXIT_INTERRUPTED = 130  # SIGINT


def build_provider(settings: Settings, lat: Optional[float], lng: Optional[float]) -> LocationProvider:
    """
    位置情報プロバイダーを作成

    座標が指定されていればその座標を、なければジオロケーションAPIを使う。
    """
    if lat is not None and lng is not None:
        return StaticLocationProvider(GeoPosition(latitude=lat, longitude=lng))

    return HTTPLocationProvider(settings.location_endpoint_url)


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 打刻可能, 2: 位置エラー, 1: 失敗）
    """
    parser = argparse.ArgumentParser(description="スタッフ打刻の位置確認ツール")

    parser.add_argument("--lat", type=float, help="端末の緯度")
    parser.add_argument("--lng", type=float, help="端末の経度")

    parser.add_argument(
        "--lang",
        type=str,
        choices=["en", "es"],
        help="メッセージの言語（デフォルト: 設定値）",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    args = parser.parse_args(argv)

    if (args.lat is None) != (args.lng is None):
        parser.error("--lat and --lng must be given together")

    try:
        settings = Settings(_env_file=args.env_file)

        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(level=settings.log_level, tz_name=settings.timezone, force=bool(args.log_level))

        logger.info(f"Environment: {settings.environment}")

        provider = build_provider(settings, args.lat, args.lng)
        service = LocationCheckService(
            acquirer=PositionAcquirer(provider),
            settings_record=settings.geofence_record(),
            lang=args.lang or settings.default_lang,
        )

        outcome = service.run()
        print(outcome.message)

        if outcome.is_ready:
            logger.info("Location check passed")
            return EXIT_READY

        logger.info(f"Location check blocked: {outcome.message}")
        return EXIT_LOCATION_ERROR

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.error(f"Location check failed: {e}", exc_info=True)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
