from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from openai import AsyncOpenAI

from .base import SummaryProvider
from .kinds import ProviderKind

if TYPE_CHECKING:
    from pagebrief.core.config import OpenAIProviderSettings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that creates concise, accurate summaries of "
    "articles, blogs, and documents. Format your summary with clear paragraphs "
    "separated by double line breaks for better readability. Focus on the main "
    "points and key takeaways."
)

USER_PROMPT = (
    "Please provide a well-formatted, comprehensive summary of the following "
    "text. Use paragraphs with line breaks between main points for better "
    "readability:\n\n{content}"
)


class OpenAIProvider(SummaryProvider):
    """OpenAI chat completions provider."""

    kind = ProviderKind.OPENAI

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 500,
        timeout: float = 30.0,
        client: Optional[Any] = None,
    ):
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = client or AsyncOpenAI(api_key=api_key, timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: "OpenAIProviderSettings", timeout: float
    ) -> "OpenAIProvider":
        return cls(
            api_key=settings.api_key or "",
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout=timeout,
        )

    @property
    def default_model(self) -> str:
        return self._model

    async def summarize_one(self, text: str, model: str) -> str:
        logger.info("Using OpenAI model", extra={"model": model, "content_chars": len(text)})
        completion = await self._client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": USER_PROMPT.format(content=text)},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return completion.choices[0].message.content or ""
