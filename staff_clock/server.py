"""打刻用HTTPサーバー（FastAPI）"""
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .features.clock.services.location_check import LocationCheckService
from .features.geofence.domain.models import GeofenceConfig
from .features.location.domain.models import GeoPosition
from .features.location.providers.static_provider import StaticLocationProvider
from .features.location.services.position_acquirer import PositionAcquirer
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ConfigurationError, InvalidCoordinateError
from .shared.logging.config import get_logger, setup_logging
from .shared.utils.datetime_utils import now_local

# 設定を読み込み
settings = Settings()

# ロギングを設定
setup_logging(level=settings.log_level, tz_name=settings.timezone)
logger = get_logger(__name__)

app = FastAPI(
    title="Smokey's Staff Clock",
    description="スタッフの打刻前に端末位置が店舗のジオフェンス内か確認するサービス",
    version="1.0.0",
)


class LocationCheckRequest(BaseModel):
    """端末から送信された位置"""

    lat: float = Field(..., ge=-90, le=90, description="端末の緯度")
    lng: float = Field(..., ge=-180, le=180, description="端末の経度")
    accuracy: Optional[float] = Field(default=None, ge=0, description="測位精度（メートル）")
    lang: Optional[str] = Field(default=None, description="メッセージの言語 (en, es)")


@app.on_event("startup")
async def startup_event() -> None:
    """起動時の処理"""
    logger.info("Application starting up")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Geofence enabled: {settings.geofence_record().is_configured}")


@app.get("/")
async def root() -> dict[str, Any]:
    """ルートエンドポイント"""
    return {
        "service": "Smokey's Staff Clock",
        "version": "1.0.0",
        "status": "running",
        "environment": settings.environment,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """ヘルスチェックエンドポイント"""
    return {"status": "healthy"}


@app.get("/geofence")
async def get_geofence() -> dict[str, Any]:
    """現在のジオフェンス設定"""
    try:
        config = GeofenceConfig.from_record(settings.geofence_record())
    except (ConfigurationError, InvalidCoordinateError) as e:
        logger.error(f"Invalid geofence settings: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if config is None:
        return {"enabled": False}

    return {"enabled": True, **config.to_dict()}


@app.post("/geofence/check")
def check_location(body: LocationCheckRequest) -> dict[str, Any]:
    """
    端末の位置で打刻可能か確認

    Args:
        body: 端末から送信された位置

    Returns:
        dict[str, Any]: 確認結果
    """
    position = GeoPosition(latitude=body.lat, longitude=body.lng, accuracy_m=body.accuracy)
    service = LocationCheckService(
        acquirer=PositionAcquirer(StaticLocationProvider(position)),
        settings_record=settings.geofence_record(),
        lang=body.lang or settings.default_lang,
    )

    try:
        outcome = service.run()
    except InvalidCoordinateError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {**outcome.to_dict(), "checked_at": now_local(settings.timezone).isoformat()}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """グローバル例外ハンドラー"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "detail": str(exc)},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
