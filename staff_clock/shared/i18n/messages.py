"""利用者向けメッセージ（英語・スペイン語）"""
import math
from enum import Enum
from typing import Optional, Union


class Lang(str, Enum):
    """表示言語"""

    EN = "en"
    ES = "es"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Lang":
        """言語コードから取得（不明な場合は英語）"""
        try:
            return cls((code or "").strip().lower()[:2])
        except ValueError:
            return cls.EN


TRANSLATIONS: dict[Lang, dict[str, str]] = {
    Lang.EN: {
        # 位置情報エラー
        "locUnsupported": "Geolocation is not supported by your browser.",
        "locDenied": "Location access denied. Please enable location services to check in.",
        "locUnavailable": "Location information is unavailable. Please try again.",
        "locTimeout": "Location request timed out. Please try again.",
        "locUnknown": "An unknown error occurred while getting location.",
        # 距離エラー（{dist} と {radius} を置換）
        "distError": "You are {dist} away. Must be within {radius} of Smokey's.",
        # 打刻フォーム
        "locVerified": "Location verified",
        "away": "away",
    },
    Lang.ES: {
        "locUnsupported": "Tu navegador no admite geolocalización.",
        "locDenied": "Acceso a la ubicación denegado. Activa los servicios de ubicación para registrarte.",
        "locUnavailable": "La información de ubicación no está disponible. Intenta de nuevo.",
        "locTimeout": "Se agotó el tiempo para obtener la ubicación. Intenta de nuevo.",
        "locUnknown": "Ocurrió un error desconocido al obtener la ubicación.",
        "distError": "Estás a {dist} de distancia. Debes estar dentro de {radius} de Smokey's.",
        "locVerified": "Ubicación verificada",
        "away": "de distancia",
    },
}


def t(lang: Union[Lang, str], key: str, variables: Optional[dict[str, str]] = None) -> str:
    """
    メッセージを取得

    指定言語になければ英語、英語にもなければキーそのものを返す。

    Args:
        lang: 表示言語
        key: メッセージキー
        variables: {name} 形式のプレースホルダーに埋め込む値

    Returns:
        str: メッセージ
    """
    language = lang if isinstance(lang, Lang) else Lang.from_code(lang)
    text = TRANSLATIONS.get(language, {}).get(key) or TRANSLATIONS[Lang.EN].get(key) or key

    if variables:
        for name, value in variables.items():
            text = text.replace(f"{{{name}}}", value)

    return text


def format_distance(km: float) -> str:
    """
    距離を表示用文字列に変換

    1km未満はメートル単位の整数（四捨五入）、1km以上はkm単位で小数1桁。

    Args:
        km: 距離（キロメートル）

    Returns:
        str: "123m" や "2.3km"
    """
    if km < 1:
        # 0.5m は切り上げ（round() の偶数丸めは使わない）
        return f"{math.floor(km * 1000 + 0.5)}m"
    return f"{km:.1f}km"
