"""Provider factory for creating summary providers from configuration."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict

from .anthropic_messages import AnthropicProvider
from .base import SummaryProvider, UnconfiguredProvider
from .huggingface import HuggingFaceProvider
from .kinds import ProviderKind
from .openai_chat import OpenAIProvider

if TYPE_CHECKING:
    from pagebrief.core.config import SummarizationSettings

logger = logging.getLogger(__name__)

CREDENTIAL_ENV_VARS: Dict[ProviderKind, str] = {
    ProviderKind.OPENAI: "OPENAI_API_KEY",
    ProviderKind.ANTHROPIC: "ANTHROPIC_API_KEY",
    ProviderKind.HUGGINGFACE: "HUGGINGFACE_API_KEY",
}


class ProviderFactory:
    """Factory for creating summary providers from configuration.

    Providers are independently optional: a provider without credentials is
    still created, as an UnconfiguredProvider that fails every request with
    MissingCredentialsError.
    """

    def __init__(self, settings: "SummarizationSettings"):
        """Initialize factory with summarization settings.

        Args:
            settings: Summarization configuration containing provider-specific settings
        """
        self.settings = settings

    def create_openai(self) -> SummaryProvider:
        cfg = self.settings.openai
        if not cfg.api_key:
            return self._unconfigured(ProviderKind.OPENAI, cfg.model)
        return OpenAIProvider.from_settings(cfg, timeout=self.settings.request_timeout)

    def create_anthropic(self) -> SummaryProvider:
        cfg = self.settings.anthropic
        if not cfg.api_key:
            return self._unconfigured(ProviderKind.ANTHROPIC, cfg.model)
        return AnthropicProvider.from_settings(cfg, timeout=self.settings.request_timeout)

    def create_huggingface(self) -> SummaryProvider:
        cfg = self.settings.huggingface
        if not cfg.api_key:
            return self._unconfigured(ProviderKind.HUGGINGFACE, cfg.model)
        return HuggingFaceProvider.from_settings(
            cfg,
            chunk_size=self.settings.chunk_size,
            min_content_chars=self.settings.min_chunk_chars,
            timeout=self.settings.request_timeout,
        )

    def create_provider(self, kind: ProviderKind) -> SummaryProvider:
        """Create provider by kind.

        Args:
            kind: Provider to build

        Returns:
            Configured provider, or an UnconfiguredProvider when credentials are absent
        """
        if kind is ProviderKind.OPENAI:
            return self.create_openai()
        if kind is ProviderKind.ANTHROPIC:
            return self.create_anthropic()
        if kind is ProviderKind.HUGGINGFACE:
            return self.create_huggingface()
        raise ValueError(f"Unknown provider: {kind}")

    def create_all(self) -> Dict[ProviderKind, SummaryProvider]:
        """Create one provider per ProviderKind."""
        providers = {kind: self.create_provider(kind) for kind in ProviderKind}
        logger.info(
            "Created summary providers",
            extra={
                "configured": [k.value for k, p in providers.items() if p.is_configured],
                "unconfigured": [k.value for k, p in providers.items() if not p.is_configured],
            },
        )
        return providers

    def _unconfigured(self, kind: ProviderKind, model: str) -> SummaryProvider:
        env_var = CREDENTIAL_ENV_VARS[kind]
        logger.warning(
            "Provider credentials missing; requests will fail until configured",
            extra={"provider": kind.value, "env_var": env_var},
        )
        return UnconfiguredProvider(kind, env_var=env_var, default_model=model)
