"""Static language lookup tables for DeepL and Discord locales."""

from discord import Locale
from deepl_bot.settings import DEFAULT_TARGET_LANG

LANGUAGE_NAMES = {
    "BG": "Bulgarian",
    "CS": "Czech",
    "DA": "Danish",
    "DE": "German",
    "EL": "Greek",
    "EN": "English",
    "EN-GB": "British English",
    "EN-US": "American English",
    "ES": "Spanish",
    "ET": "Estonian",
    "FI": "Finnish",
    "FR": "French",
    "HU": "Hungarian",
    "ID": "Indonesian",
    "IT": "Italian",
    "JA": "Japanese",
    "KO": "Korean",
    "LT": "Lithuanian",
    "LV": "Latvian",
    "NB": "Norwegian",
    "NL": "Dutch",
    "PL": "Polish",
    "PT": "Portuguese",
    "PT-BR": "Brazilian Portuguese",
    "PT-PT": "Portuguese",
    "RO": "Romanian",
    "RU": "Russian",
    "SK": "Slovak",
    "SL": "Slovenian",
    "SV": "Swedish",
    "TR": "Turkish",
    "UK": "Ukrainian",
    "ZH": "Chinese",
    "IN": "Indonesian",
    "HI": "Hindi",
}

# Discord locale -> DeepL target language
LOCALE_TO_DEEPL = {
    Locale.american_english: "en-US",
    Locale.british_english: "en-GB",
    Locale.spain_spanish: "es",
    Locale.french: "fr",
    Locale.german: "de",
    Locale.italian: "it",
    Locale.japanese: "ja",
    Locale.korean: "ko",
    Locale.brazil_portuguese: "pt-BR",
    Locale.russian: "ru",
    Locale.chinese: "zh",
}


def get_language_full_name(lang_code: str) -> str:
    """Return a human readable name for a DeepL language code."""
    normalized = lang_code.upper()
    if normalized in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[normalized]
    if len(normalized) == 2:
        return normalized[0] + normalized[1].lower()
    return lang_code


def map_locale_to_deepl(locale) -> str:
    """Map a Discord locale (or its string value) to a DeepL target language."""
    try:
        locale = Locale(str(locale))
    except ValueError:
        return DEFAULT_TARGET_LANG
    return LOCALE_TO_DEEPL.get(locale, DEFAULT_TARGET_LANG)
