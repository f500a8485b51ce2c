import pytest
from discord import Locale
from deepl_bot.utils.languages import get_language_full_name, map_locale_to_deepl


@pytest.mark.parametrize(
    "code, expected",
    [
        ("FR", "French"),
        ("fr", "French"),
        ("en-us", "American English"),
        ("PT-BR", "Brazilian Portuguese"),
        ("XY", "Xy"),
        ("zz-ZZ", "zz-ZZ"),
    ],
)
def test_get_language_full_name(code, expected):
    assert get_language_full_name(code) == expected


@pytest.mark.parametrize(
    "locale, expected",
    [
        (Locale.american_english, "en-US"),
        (Locale.british_english, "en-GB"),
        (Locale.spain_spanish, "es"),
        (Locale.brazil_portuguese, "pt-BR"),
        (Locale.chinese, "zh"),
        ("fr", "fr"),
        ("ja", "ja"),
    ],
)
def test_map_locale_to_deepl(locale, expected):
    assert map_locale_to_deepl(locale) == expected


def test_unmapped_locale_falls_back_to_american_english():
    assert map_locale_to_deepl(Locale.thai) == "EN-US"
    assert map_locale_to_deepl("not-a-locale") == "EN-US"
