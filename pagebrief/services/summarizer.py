from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Mapping, Optional

from pagebrief.core.utils import count_words
from pagebrief.services.providers import ProviderKind, SummaryProvider
from pagebrief.services.summarization import (
    AllChunksTooShortError,
    InvalidRequestError,
    ProviderCallError,
    UnsupportedProviderError,
    WordChunker,
)

if TYPE_CHECKING:
    from pagebrief.core.config import SummarizationSettings

logger = logging.getLogger(__name__)

PARTIAL_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class SummarizationResult:
    summary_text: str
    provider_used: str
    model_used: str


class SummaryService:
    """Summarize content with one of the configured providers.

    Providers that declare a ``chunk_size`` get the content split into
    word-aligned chunks, summarized one chunk at a time in order, and the
    partial summaries joined with a blank line. All other providers receive
    the whole content in a single call.
    """

    def __init__(
        self,
        providers: Mapping[ProviderKind, SummaryProvider],
        chunker: WordChunker,
        settings: "SummarizationSettings",
    ):
        self.providers = dict(providers)
        self.chunker = chunker
        self.settings = settings

    def resolve_provider(self, selector: Optional[str]) -> SummaryProvider:
        kind = ProviderKind.resolve(selector)
        provider = self.providers.get(kind) if kind is not None else None
        if provider is None:
            valid = [s for s in ProviderKind.selectors() if ProviderKind.resolve(s) in self.providers]
            raise UnsupportedProviderError(selector, valid)
        return provider

    async def summarize(
        self,
        content: Optional[str],
        provider: Optional[str],
        model: Optional[str] = None,
    ) -> SummarizationResult:
        """Summarize ``content`` with the provider named by ``provider``.

        Raises:
            InvalidRequestError: Empty content or unknown provider; nothing was sent
            ProviderCallError: The provider failed; ``original`` holds the cause
        """
        if not content or not content.strip():
            raise InvalidRequestError("Content is required")

        adapter = self.resolve_provider(provider)
        model_used = (model or "").strip() or adapter.default_model

        logger.info(
            "Starting summarization",
            extra={
                "provider": adapter.name,
                "model": model_used,
                "content_chars": len(content),
            },
        )

        try:
            if adapter.chunk_size is None:
                summary = await adapter.summarize_one(content, model_used)
            else:
                summary = await self._summarize_chunked(adapter, content, model_used)
        except Exception as exc:
            logger.error(
                "Provider failed",
                extra={"provider": adapter.name, "model": model_used},
                exc_info=True,
            )
            raise ProviderCallError(adapter.kind, exc) from exc

        logger.info(
            "Summary generated",
            extra={"provider": adapter.name, "summary_words": count_words(summary)},
        )
        return SummarizationResult(
            summary_text=summary,
            provider_used=adapter.name,
            model_used=model_used,
        )

    async def _summarize_chunked(
        self, adapter: SummaryProvider, content: str, model: str
    ) -> str:
        cleaned = content.strip()
        adapter.check_content(cleaned)

        chunks = self.chunker.chunk(cleaned, adapter.chunk_size)
        logger.info("Chunked content", extra={"provider": adapter.name, "chunk_count": len(chunks)})

        partials: List[str] = []
        for index, chunk in enumerate(chunks, start=1):
            if len(chunk.strip()) < adapter.min_content_chars:
                logger.info(
                    "Skipping chunk (too short)",
                    extra={"chunk_index": index, "chunk_chars": len(chunk)},
                )
                continue
            logger.debug(
                "Processing chunk",
                extra={"chunk_index": index, "chunk_count": len(chunks), "chunk_chars": len(chunk)},
            )
            # Sequential on purpose: keeps per-credential rate limits and output order
            partials.append(await adapter.summarize_one(chunk, model))

        if not partials:
            raise AllChunksTooShortError(adapter.min_content_chars)

        combined = PARTIAL_SEPARATOR.join(partials)
        return await self._condense(adapter, combined, model)

    async def _condense(self, adapter: SummaryProvider, combined: str, model: str) -> str:
        """Best-effort second pass over the combined partial summaries.

        A failure here is logged and discarded: the combined summary is already
        a valid answer, so the request succeeds with it unchanged.
        """
        words = count_words(combined)
        if words <= self.settings.condense_word_threshold:
            return combined

        try:
            condensed = await adapter.condense(combined, model)
        except Exception:
            logger.warning(
                "Final summarization failed, using combined summaries",
                extra={"provider": adapter.name, "combined_words": words},
                exc_info=True,
            )
            return combined

        return condensed or combined
