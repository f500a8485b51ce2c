import logging
from typing import Sequence, Union
from deepl_bot.translation.errors import (
    NoTranslatableContent,
    ProviderFailure,
    ResultCountMismatch,
)
from deepl_bot.translation.models import TranslatableUnit, TranslationResult

log = logging.getLogger(__name__)


def normalize_results(
    raw: Union[TranslationResult, Sequence[TranslationResult]],
) -> list[TranslationResult]:
    """Return provider output as a list, wrapping a bare single result."""
    if isinstance(raw, TranslationResult):
        return [raw]
    return list(raw)


async def translate_all(
    units: Sequence[TranslatableUnit], target_lang: str, provider
) -> list[TranslationResult]:
    """Translate every unit with a single provider call.

    Results are index-aligned with ``units``.
    """
    if not units:
        raise NoTranslatableContent("No text found to translate.")

    texts = [unit.text for unit in units]
    try:
        raw = await provider.translate(texts, target_lang)
    except ProviderFailure:
        raise
    except Exception as e:
        raise ProviderFailure(f"Translation provider failed: {e}") from e

    results = normalize_results(raw)
    if len(results) != len(units):
        raise ResultCountMismatch(len(units), len(results))

    log.debug(f"Translated {len(results)} strings to {target_lang}")
    return results
