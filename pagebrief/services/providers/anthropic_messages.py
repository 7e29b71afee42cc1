from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from anthropic import AsyncAnthropic

from .base import SummaryProvider
from .kinds import ProviderKind

if TYPE_CHECKING:
    from pagebrief.core.config import AnthropicProviderSettings

logger = logging.getLogger(__name__)

USER_PROMPT = (
    "Please provide a well-formatted, comprehensive summary of the following "
    "text. Use clear paragraphs with line breaks between main points for better "
    "readability. Focus on the main points and key takeaways:\n\n{content}"
)


class AnthropicProvider(SummaryProvider):
    """Anthropic messages API provider."""

    kind = ProviderKind.ANTHROPIC

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-sonnet-20241022",
        max_tokens: int = 1024,
        timeout: float = 30.0,
        client: Optional[Any] = None,
    ):
        self._model = model
        self._max_tokens = max_tokens
        self._client = client or AsyncAnthropic(api_key=api_key, timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: "AnthropicProviderSettings", timeout: float
    ) -> "AnthropicProvider":
        return cls(
            api_key=settings.api_key or "",
            model=settings.model,
            max_tokens=settings.max_tokens,
            timeout=timeout,
        )

    @property
    def default_model(self) -> str:
        return self._model

    async def summarize_one(self, text: str, model: str) -> str:
        logger.info("Using Claude model", extra={"model": model, "content_chars": len(text)})
        message = await self._client.messages.create(
            model=model,
            max_tokens=self._max_tokens,
            messages=[
                {"role": "user", "content": USER_PROMPT.format(content=text)},
            ],
        )
        return self._first_text(message.content)

    @staticmethod
    def _first_text(blocks: Any) -> str:
        for block in blocks or []:
            text = getattr(block, "text", None)
            if isinstance(text, str):
                return text
        return ""
