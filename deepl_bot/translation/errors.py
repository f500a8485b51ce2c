"""Errors raised by the translation pipeline."""


class TranslationError(Exception):
    """Base exception for all translation errors."""


class NoTranslatableContent(TranslationError):
    """Raised when a message has no text to translate."""


class ProviderFailure(TranslationError):
    """Raised when the translation provider call fails."""


class ResultCountMismatch(ProviderFailure):
    """Raised when the provider returns a different number of results than it was sent."""

    def __init__(self, expected: int, received: int):
        super().__init__(f"Expected {expected} translation results, received {received}")
        self.expected = expected
        self.received = received


class ProviderConfigurationError(TranslationError):
    """Raised when the translation provider is misconfigured."""
