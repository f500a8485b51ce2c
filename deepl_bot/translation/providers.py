"""Translation provider adapters."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union
import deepl
from deepl_bot.translation.errors import ProviderConfigurationError, ProviderFailure
from deepl_bot.translation.models import TranslationResult

log = logging.getLogger(__name__)

ProviderResponse = Union[TranslationResult, list[TranslationResult]]


class TranslationProvider(ABC):
    """Translates a batch of strings into one target language."""

    @abstractmethod
    async def translate(self, texts: Sequence[str], target_lang: str) -> ProviderResponse:
        """Return one result per input string, in order.

        Implementations may return a bare result for a single input.
        """


class EchoTranslationProvider(TranslationProvider):
    """Returns the input unchanged. Useful for testing."""

    def __init__(self, detected_source_lang: str = "EN"):
        self.detected_source_lang = detected_source_lang

    async def translate(self, texts: Sequence[str], target_lang: str) -> ProviderResponse:
        return [
            TranslationResult(text=text, detected_source_lang=self.detected_source_lang)
            for text in texts
        ]


class DeepLTranslationProvider(TranslationProvider):
    """Adapter over the official ``deepl`` SDK."""

    def __init__(self, auth_key: Optional[str], server_url: Optional[str] = None, translator=None):
        if translator is None:
            if not auth_key:
                raise ProviderConfigurationError("DEEPL_API_KEY is not set")
            translator = deepl.Translator(auth_key, server_url=server_url)
        self.translator = translator

    @staticmethod
    def _to_result(text_result) -> TranslationResult:
        return TranslationResult(
            text=text_result.text, detected_source_lang=text_result.detected_source_lang
        )

    async def translate(self, texts: Sequence[str], target_lang: str) -> ProviderResponse:
        # The SDK is blocking; keep it off the event loop
        try:
            response = await asyncio.to_thread(
                self.translator.translate_text, list(texts), target_lang=target_lang
            )
        except deepl.DeepLException as e:
            log.error(f"DeepL request failed: {e}")
            raise ProviderFailure(f"DeepL request failed: {e}") from e

        # A list input always yields a list; a bare TextResult is still accepted
        if isinstance(response, deepl.TextResult):
            return self._to_result(response)
        return [self._to_result(r) for r in response]


def build_provider(name: str, auth_key: Optional[str] = None, server_url: Optional[str] = None) -> TranslationProvider:
    """Create the provider named by TRANSLATION_PROVIDER."""
    if name == "deepl":
        return DeepLTranslationProvider(auth_key, server_url=server_url)
    if name == "echo":
        return EchoTranslationProvider()
    raise ProviderConfigurationError(f"Unknown translation provider: {name}")
