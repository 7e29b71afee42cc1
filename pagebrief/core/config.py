from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Sections read their own flat variables (OPENAI_API_KEY, ...) when built by
# default_factory; populate_by_name lets AppSettings hand them nested
# SUMMARIZATION__OPENAI__API_KEY style values keyed by field name.
_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_prefix="",
    case_sensitive=False,
    extra="ignore",
    populate_by_name=True,
)


class _ProviderSettings(BaseSettings):
    model_config = _SECTION_CONFIG

    @field_validator("api_key", mode="before", check_fields=False)
    @classmethod
    def _normalize_api_key(cls, value):
        if value is None:
            return None
        key = str(value).strip()
        if not key or key == "-":
            return None
        return key


class OpenAIProviderSettings(_ProviderSettings):
    """OpenAI chat completions provider configuration."""

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "OPENAI_API_KEY",
            "SUMMARIZATION__OPENAI__API_KEY",
        ),
    )
    model: str = Field(
        default="gpt-4o-mini",
        validation_alias=AliasChoices(
            "OPENAI_MODEL",
            "SUMMARIZATION__OPENAI__MODEL",
        ),
    )
    temperature: float = Field(
        default=0.3,
        validation_alias=AliasChoices(
            "OPENAI_TEMPERATURE",
            "SUMMARIZATION__OPENAI__TEMPERATURE",
        ),
    )
    max_tokens: int = Field(
        default=500,
        validation_alias=AliasChoices(
            "OPENAI_MAX_TOKENS",
            "SUMMARIZATION__OPENAI__MAX_TOKENS",
        ),
    )


class AnthropicProviderSettings(_ProviderSettings):
    """Anthropic messages provider configuration."""

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "ANTHROPIC_API_KEY",
            "SUMMARIZATION__ANTHROPIC__API_KEY",
        ),
    )
    model: str = Field(
        default="claude-3-5-sonnet-20241022",
        validation_alias=AliasChoices(
            "ANTHROPIC_MODEL",
            "SUMMARIZATION__ANTHROPIC__MODEL",
        ),
    )
    max_tokens: int = Field(
        default=1024,
        validation_alias=AliasChoices(
            "ANTHROPIC_MAX_TOKENS",
            "SUMMARIZATION__ANTHROPIC__MAX_TOKENS",
        ),
    )


class HuggingFaceProviderSettings(_ProviderSettings):
    """Hugging Face Inference summarization provider configuration."""

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "HUGGINGFACE_API_KEY",
            "HF_TOKEN",
            "SUMMARIZATION__HUGGINGFACE__API_KEY",
        ),
    )
    model: str = Field(
        default="facebook/bart-large-cnn",
        validation_alias=AliasChoices(
            "HUGGINGFACE_MODEL",
            "SUMMARIZATION__HUGGINGFACE__MODEL",
        ),
    )
    chunk_max_length: int = Field(
        default=130,
        validation_alias=AliasChoices(
            "HUGGINGFACE_CHUNK_MAX_LENGTH",
            "SUMMARIZATION__HUGGINGFACE__CHUNK_MAX_LENGTH",
        ),
    )
    chunk_min_length: int = Field(
        default=30,
        validation_alias=AliasChoices(
            "HUGGINGFACE_CHUNK_MIN_LENGTH",
            "SUMMARIZATION__HUGGINGFACE__CHUNK_MIN_LENGTH",
        ),
    )
    condense_max_length: int = Field(
        default=200,
        validation_alias=AliasChoices(
            "HUGGINGFACE_CONDENSE_MAX_LENGTH",
            "SUMMARIZATION__HUGGINGFACE__CONDENSE_MAX_LENGTH",
        ),
    )
    condense_min_length: int = Field(
        default=50,
        validation_alias=AliasChoices(
            "HUGGINGFACE_CONDENSE_MIN_LENGTH",
            "SUMMARIZATION__HUGGINGFACE__CONDENSE_MIN_LENGTH",
        ),
    )


class SummarizationSettings(BaseSettings):
    model_config = _SECTION_CONFIG

    default_provider: str = Field(
        default="huggingface",
        validation_alias=AliasChoices(
            "SUMMARY_DEFAULT_PROVIDER",
            "SUMMARIZATION__DEFAULT_PROVIDER",
        ),
    )
    chunk_size: int = Field(
        default=1000,
        validation_alias=AliasChoices("SUMMARY_CHUNK_SIZE", "SUMMARIZATION__CHUNK_SIZE"),
    )
    min_chunk_chars: int = Field(
        default=50,
        validation_alias=AliasChoices(
            "SUMMARY_MIN_CHUNK_CHARS",
            "SUMMARIZATION__MIN_CHUNK_CHARS",
        ),
    )
    condense_word_threshold: int = Field(
        default=200,
        validation_alias=AliasChoices(
            "SUMMARY_CONDENSE_WORD_THRESHOLD",
            "SUMMARIZATION__CONDENSE_WORD_THRESHOLD",
        ),
    )
    request_timeout: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "SUMMARY_REQUEST_TIMEOUT",
            "SUMMARIZATION__REQUEST_TIMEOUT",
        ),
    )

    # Provider-specific settings
    openai: OpenAIProviderSettings = Field(default_factory=OpenAIProviderSettings)
    anthropic: AnthropicProviderSettings = Field(
        default_factory=AnthropicProviderSettings
    )
    huggingface: HuggingFaceProviderSettings = Field(
        default_factory=HuggingFaceProviderSettings
    )

    @field_validator("default_provider", mode="before")
    @classmethod
    def _normalize_default_provider(cls, value):
        if value is None:
            return "huggingface"
        provider = str(value).strip().lower()
        return provider or "huggingface"


class ExtractionSettings(BaseSettings):
    model_config = _SECTION_CONFIG

    fetch_timeout: float = Field(
        default=10.0,
        validation_alias=AliasChoices("EXTRACT_FETCH_TIMEOUT", "EXTRACTION__FETCH_TIMEOUT"),
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/124.0.0.0 Safari/537.36"
        ),
        validation_alias=AliasChoices("EXTRACT_USER_AGENT", "EXTRACTION__USER_AGENT"),
    )
    min_content_chars: int = Field(
        default=100,
        validation_alias=AliasChoices(
            "EXTRACT_MIN_CONTENT_CHARS",
            "EXTRACTION__MIN_CONTENT_CHARS",
        ),
    )


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables.

    Uses pydantic-settings to support .env and environment overrides.
    """

    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    summarization: SummarizationSettings = Field(default_factory=SummarizationSettings)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
