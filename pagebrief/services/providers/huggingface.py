from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from huggingface_hub import AsyncInferenceClient

from .base import SummaryProvider
from .kinds import ProviderKind

if TYPE_CHECKING:
    from pagebrief.core.config import HuggingFaceProviderSettings

logger = logging.getLogger(__name__)


class HuggingFaceProvider(SummaryProvider):
    """Hugging Face Inference summarization provider.

    Summarization models accept only short inputs, so this provider declares a
    chunk size and the SummaryService feeds it one chunk at a time. Inputs
    shorter than ``min_content_chars`` are rejected without a network call.
    """

    kind = ProviderKind.HUGGINGFACE

    def __init__(
        self,
        token: str,
        model: str = "facebook/bart-large-cnn",
        chunk_size: int = 1000,
        min_content_chars: int = 50,
        chunk_parameters: Optional[Dict[str, Any]] = None,
        condense_parameters: Optional[Dict[str, Any]] = None,
        timeout: float = 30.0,
        client_factory: Optional[Callable[..., Any]] = None,
    ):
        """Initialize Hugging Face provider.

        Args:
            token: Hugging Face access token with Inference Providers permission
            model: Default summarization model
            chunk_size: Maximum characters per chunk sent to the model
            min_content_chars: Minimum trimmed characters per request
            chunk_parameters: Generation parameters for per-chunk summaries
            condense_parameters: Generation parameters for the condense pass
            timeout: Request timeout in seconds
            client_factory: Callable returning an async inference client
        """
        self._token = token
        self._model = model
        self.chunk_size = chunk_size
        self.min_content_chars = min_content_chars
        self._chunk_parameters = chunk_parameters or {
            "max_length": 130,
            "min_length": 30,
            "do_sample": False,
        }
        self._condense_parameters = condense_parameters or {
            "max_length": 200,
            "min_length": 50,
            "do_sample": False,
        }
        self._timeout = timeout
        self._client_factory = client_factory or AsyncInferenceClient

    @classmethod
    def from_settings(
        cls,
        settings: "HuggingFaceProviderSettings",
        *,
        chunk_size: int,
        min_content_chars: int,
        timeout: float,
    ) -> "HuggingFaceProvider":
        return cls(
            token=settings.api_key or "",
            model=settings.model,
            chunk_size=chunk_size,
            min_content_chars=min_content_chars,
            chunk_parameters={
                "max_length": settings.chunk_max_length,
                "min_length": settings.chunk_min_length,
                "do_sample": False,
            },
            condense_parameters={
                "max_length": settings.condense_max_length,
                "min_length": settings.condense_min_length,
                "do_sample": False,
            },
            timeout=timeout,
        )

    @property
    def default_model(self) -> str:
        return self._model

    async def summarize_one(self, text: str, model: str) -> str:
        self.check_content(text)
        return await self._summarize(text, model, self._chunk_parameters)

    async def condense(self, text: str, model: str) -> str:
        return await self._summarize(text, model, self._condense_parameters)

    async def _summarize(self, text: str, model: str, parameters: Dict[str, Any]) -> str:
        logger.debug(
            "Calling Hugging Face summarization",
            extra={"model": model, "content_chars": len(text), **parameters},
        )
        async with self._client_factory(token=self._token, timeout=self._timeout) as client:
            result = await client.summarization(
                text,
                model=model,
                generate_parameters=dict(parameters),
            )
        return self._coerce_summary_text(result)

    def _coerce_summary_text(self, raw: Any) -> str:
        """Extract text from the response shapes the Inference API returns."""
        if raw is None:
            return ""
        if isinstance(raw, str):
            return raw
        text = getattr(raw, "summary_text", None)
        if isinstance(text, str):
            return text
        if isinstance(raw, dict):
            value = raw.get("summary_text")
            if isinstance(value, str):
                return value
        if isinstance(raw, list) and raw:
            return self._coerce_summary_text(raw[0])
        return str(raw)
