"""Exceptions raised while validating, dispatching and running summarization."""
from __future__ import annotations

from typing import Iterable, Optional


class SummarizationError(Exception):
    """Base class for all summarization failures."""


class InvalidRequestError(SummarizationError):
    """Request rejected before any provider is contacted."""


class UnsupportedProviderError(InvalidRequestError):
    def __init__(self, selector: Optional[str], valid: Iterable[str]):
        self.selector = selector
        self.valid = list(valid)
        quoted = ", ".join(f"'{name}'" for name in self.valid)
        super().__init__(f"Unknown provider: {selector}. Use {quoted}")


class ProviderError(SummarizationError):
    """Condition raised by a provider adapter itself (not by an upstream SDK)."""


class MissingCredentialsError(ProviderError):
    def __init__(self, provider_name: str, env_var: str):
        self.provider_name = provider_name
        self.env_var = env_var
        super().__init__(f"{provider_name} API key not configured ({env_var})")


class ContentTooShortError(ProviderError):
    def __init__(self, min_chars: int, message: Optional[str] = None):
        self.min_chars = min_chars
        super().__init__(
            message
            or f"Content too short to summarize (minimum {min_chars} characters)"
        )


class AllChunksTooShortError(ContentTooShortError):
    def __init__(self, min_chars: int):
        super().__init__(min_chars, "All chunks were too short to summarize")


class ProviderCallError(SummarizationError):
    """Wraps whatever an adapter raised, tagged with the provider that raised it."""

    def __init__(self, provider, original: BaseException):
        self.provider = provider
        self.original = original
        super().__init__(f"{provider.value}: {original}")
