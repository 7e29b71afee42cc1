from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from pagebrief.services.providers.kinds import ProviderKind
from pagebrief.services.summarization.errors import (
    ContentTooShortError,
    MissingCredentialsError,
)


class SummaryProvider(ABC):
    """Base class for summarization providers.

    Providers handle the API call (text in -> summary out). The SummaryService
    orchestrates chunking, recombination and the optional condense pass.
    """

    kind: ProviderKind
    # None means the provider takes the whole content in a single call
    chunk_size: Optional[int] = None
    min_content_chars: int = 0

    @property
    def name(self) -> str:
        """Provider identifier (e.g., 'huggingface', 'openai')"""
        return self.kind.value

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when the request does not name one."""

    @property
    def is_configured(self) -> bool:
        return True

    def check_content(self, text: str) -> None:
        """Raise ContentTooShortError if ``text`` is below the provider minimum."""
        if self.min_content_chars and len(text.strip()) < self.min_content_chars:
            raise ContentTooShortError(self.min_content_chars)

    @abstractmethod
    async def summarize_one(self, text: str, model: str) -> str:
        """Summarize a single piece of text.

        Args:
            text: Content or chunk to summarize
            model: Provider model identifier

        Returns:
            Summary text

        Raises:
            Exception: Whatever the provider SDK raises; callers translate it
        """

    async def condense(self, text: str, model: str) -> str:
        """Re-summarize already combined partial summaries.

        Default implementation is a plain summarize_one() call. Providers can
        override to use tighter generation parameters.
        """
        return await self.summarize_one(text, model)


class UnconfiguredProvider(SummaryProvider):
    """Stand-in for a provider whose credential is absent.

    Every call fails with MissingCredentialsError before touching the network.
    """

    def __init__(self, kind: ProviderKind, env_var: str, default_model: str):
        self.kind = kind
        self.env_var = env_var
        self._default_model = default_model

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def is_configured(self) -> bool:
        return False

    def check_content(self, text: str) -> None:
        raise MissingCredentialsError(self.kind.vendor_name, self.env_var)

    async def summarize_one(self, text: str, model: str) -> str:
        raise MissingCredentialsError(self.kind.vendor_name, self.env_var)
