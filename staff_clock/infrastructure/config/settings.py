"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...features.geofence.domain.models import GeofenceSettingsRecord


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = Field(
        default="smokeys-staff-clock",
        description="プロジェクト名",
    )
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # Geofence（店舗設定）
    restaurant_lat: Optional[float] = Field(
        default=None,
        description="店舗の緯度（未設定の場合はジオフェンス無効）",
    )
    restaurant_lng: Optional[float] = Field(
        default=None,
        description="店舗の経度（未設定の場合はジオフェンス無効）",
    )
    radius_meters: Optional[int] = Field(
        default=None,
        description="打刻を許可する半径（メートル、未設定の場合は100m）",
    )

    # Location
    location_endpoint_url: Optional[str] = Field(
        default=None,
        description="ジオロケーションAPIのURL（CLIで座標を指定しない場合に使用）",
    )

    # Localization
    default_lang: str = Field(
        default="en",
        description="メッセージのデフォルト言語 (en, es)",
    )
    timezone: str = Field(
        default="America/Bogota",
        description="店舗のタイムゾーン",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Server
    port: int = Field(
        default=8080,
        description="HTTPサーバーのポート番号",
    )

    @field_validator("restaurant_lat", "restaurant_lng", "radius_meters", mode="before")
    @classmethod
    def _empty_as_none(cls, value: object) -> object:
        """環境変数の空文字は未設定として扱う"""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def geofence_record(self) -> GeofenceSettingsRecord:
        """店舗設定レコードを取得"""
        return GeofenceSettingsRecord.from_dict(
            self.model_dump(include={"restaurant_lat", "restaurant_lng", "radius_meters"})
        )

