"""利用者向けメッセージのテスト"""

import pytest

from staff_clock.features.location.domain.enums import LocationErrorKind
from staff_clock.shared.i18n.messages import TRANSLATIONS, Lang, format_distance, t


@pytest.mark.parametrize(
    "km,expected",
    [
        (0.1234, "123m"),
        (1.0, "1.0km"),
        (0.0005, "1m"),
        (2.34999, "2.3km"),
        (0.0, "0m"),
        (0.0994, "99m"),
        (0.1, "100m"),
        (12.05, "12.1km"),
    ],
)
def test_format_distance(km: float, expected: str) -> None:
    """1km未満はメートル、1km以上はkmで小数1桁"""
    assert format_distance(km) == expected


def test_dist_error_template() -> None:
    """距離エラーは距離と半径を埋め込む"""
    message = t(Lang.EN, "distError", {"dist": "512m", "radius": "100m"})

    assert message == "You are 512m away. Must be within 100m of Smokey's."


def test_spanish_dist_error_template() -> None:
    """スペイン語の距離エラー"""
    message = t("es", "distError", {"dist": "1.2km", "radius": "100m"})

    assert message.startswith("Estás a 1.2km de distancia.")
    assert "100m" in message


def test_unknown_language_falls_back_to_english() -> None:
    """不明な言語は英語"""
    assert t("fr", "locVerified") == "Location verified"


def test_unknown_key_falls_back_to_key() -> None:
    """キーが存在しない場合はキーを返す"""
    assert t(Lang.ES, "noSuchKey") == "noSuchKey"


@pytest.mark.parametrize("code,expected", [("es", Lang.ES), ("es-CO", Lang.ES), ("EN", Lang.EN), (None, Lang.EN), ("", Lang.EN)])
def test_lang_from_code(code, expected: Lang) -> None:
    """言語コードの解釈"""
    assert Lang.from_code(code) == expected


@pytest.mark.parametrize("lang", list(Lang))
def test_every_error_kind_has_a_distinct_message(lang: Lang) -> None:
    """失敗の分類ごとに別々のメッセージがある"""
    messages = {t(lang, kind.message_key) for kind in LocationErrorKind}

    assert len(messages) == len(LocationErrorKind)
    for kind in LocationErrorKind:
        assert kind.message_key in TRANSLATIONS[lang]
