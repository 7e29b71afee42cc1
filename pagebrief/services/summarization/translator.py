"""Map provider failures to user-facing error messages and HTTP status codes.

Rules are checked in order per provider: adapter exception types first, then
HTTP status and error codes exposed by the SDKs, then substrings of the error
message. The substring rules mirror the wording upstream services use today
and will silently stop matching if that wording changes; they are kept here,
in one place, so they can be tested and updated together.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pagebrief.services.providers.kinds import ProviderKind
from pagebrief.services.summarization.errors import (
    AllChunksTooShortError,
    ContentTooShortError,
    MissingCredentialsError,
)

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    MISSING_CREDENTIALS = "missing_credentials"
    UNAUTHORIZED = "unauthorized"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXCEEDED = "quota_exceeded"
    MODEL_LOADING = "model_loading"
    CONTENT_TOO_SHORT = "content_too_short"
    ALL_CHUNKS_TOO_SHORT = "all_chunks_too_short"
    MALFORMED_CONTENT = "malformed_content"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TranslatedError:
    kind: ErrorKind
    status_code: int
    message: str


@dataclass(frozen=True)
class _Rule:
    matches: Callable[[BaseException], bool]
    kind: ErrorKind
    status_code: int
    message: str


def error_status(exc: BaseException) -> Optional[int]:
    """HTTP status carried by an SDK exception, if any."""
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    response = getattr(exc, "response", None)
    value = getattr(response, "status_code", None)
    if isinstance(value, int):
        return value
    return None


def error_code(exc: BaseException) -> Optional[str]:
    code = getattr(exc, "code", None)
    if isinstance(code, str):
        return code
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        nested = body.get("error") if isinstance(body.get("error"), dict) else body
        code = nested.get("code")
        if isinstance(code, str):
            return code
    return None


def _is(*types: type) -> Callable[[BaseException], bool]:
    return lambda exc: isinstance(exc, types)


def _status(*codes: int) -> Callable[[BaseException], bool]:
    return lambda exc: error_status(exc) in codes


def _code(code: str) -> Callable[[BaseException], bool]:
    return lambda exc: error_code(exc) == code


def _says(fragment: str) -> Callable[[BaseException], bool]:
    return lambda exc: fragment in str(exc)


_OPENAI_RULES: tuple[_Rule, ...] = (
    _Rule(
        _is(MissingCredentialsError),
        ErrorKind.MISSING_CREDENTIALS,
        500,
        "OpenAI API key not configured. Add OPENAI_API_KEY to .env or switch to Hugging Face (free).",
    ),
    _Rule(
        _code("insufficient_quota"),
        ErrorKind.QUOTA_EXCEEDED,
        429,
        "OpenAI API quota exceeded. Add credits at https://platform.openai.com/account/billing or use Hugging Face (free).",
    ),
    _Rule(
        _status(401),
        ErrorKind.UNAUTHORIZED,
        401,
        "Invalid OpenAI API key. Check your key at https://platform.openai.com/api-keys or use Hugging Face (free).",
    ),
    _Rule(
        _status(429),
        ErrorKind.RATE_LIMITED,
        429,
        "OpenAI rate limit exceeded. Wait a moment or use Hugging Face (free).",
    ),
    _Rule(
        _says("API key"),
        ErrorKind.MISSING_CREDENTIALS,
        500,
        "OpenAI API key not configured. Add OPENAI_API_KEY to .env or switch to Hugging Face (free).",
    ),
)

_ANTHROPIC_RULES: tuple[_Rule, ...] = (
    _Rule(
        _is(MissingCredentialsError),
        ErrorKind.MISSING_CREDENTIALS,
        500,
        "Anthropic API key not configured. Add ANTHROPIC_API_KEY to .env or switch to Hugging Face.",
    ),
    _Rule(
        _status(401),
        ErrorKind.UNAUTHORIZED,
        401,
        "Invalid Anthropic API key. Check your key or use Hugging Face.",
    ),
    _Rule(
        _status(429),
        ErrorKind.RATE_LIMITED,
        429,
        "Claude API rate limit exceeded. Wait a moment or use Hugging Face.",
    ),
    _Rule(
        _says("API key"),
        ErrorKind.MISSING_CREDENTIALS,
        500,
        "Anthropic API key not configured. Add ANTHROPIC_API_KEY to .env or switch to Hugging Face.",
    ),
)

_HUGGINGFACE_RULES: tuple[_Rule, ...] = (
    _Rule(
        _is(MissingCredentialsError),
        ErrorKind.MISSING_CREDENTIALS,
        500,
        "Hugging Face API key not configured. Add HUGGINGFACE_API_KEY to .env",
    ),
    _Rule(
        _is(AllChunksTooShortError),
        ErrorKind.ALL_CHUNKS_TOO_SHORT,
        400,
        "Content is too fragmented to summarize. Every section was under 50 characters of text.",
    ),
    _Rule(
        _is(ContentTooShortError),
        ErrorKind.CONTENT_TOO_SHORT,
        400,
        "Content is too short to summarize. Need at least 50 characters of text.",
    ),
    _Rule(
        lambda exc: _says("permissions")(exc) or _status(403)(exc),
        ErrorKind.INSUFFICIENT_PERMISSIONS,
        403,
        'Hugging Face token needs "Inference Providers" permission. Recreate token at https://huggingface.co/settings/tokens',
    ),
    _Rule(
        lambda exc: _says("loading")(exc) or _status(503)(exc),
        ErrorKind.MODEL_LOADING,
        503,
        "Model is loading (first time takes 30-60s). Please wait and try again.",
    ),
    _Rule(
        _says("too short"),
        ErrorKind.CONTENT_TOO_SHORT,
        400,
        "Content is too short to summarize. Need at least 50 characters of text.",
    ),
    _Rule(
        _says("index out of range"),
        ErrorKind.MALFORMED_CONTENT,
        400,
        "PDF content format issue. Try a different PDF or use a URL instead.",
    ),
    _Rule(
        _status(401),
        ErrorKind.UNAUTHORIZED,
        401,
        "Invalid Hugging Face token. Check your token at https://huggingface.co/settings/tokens",
    ),
    _Rule(
        _status(429),
        ErrorKind.RATE_LIMITED,
        429,
        "Hugging Face rate limit exceeded. Wait a moment and try again.",
    ),
    _Rule(
        _says("API key"),
        ErrorKind.MISSING_CREDENTIALS,
        500,
        "Hugging Face API key not configured. Add HUGGINGFACE_API_KEY to .env",
    ),
)

_RULES: dict[ProviderKind, tuple[_Rule, ...]] = {
    ProviderKind.OPENAI: _OPENAI_RULES,
    ProviderKind.ANTHROPIC: _ANTHROPIC_RULES,
    ProviderKind.HUGGINGFACE: _HUGGINGFACE_RULES,
}

_UNKNOWN_TEMPLATES: dict[ProviderKind, str] = {
    ProviderKind.OPENAI: "ChatGPT Error: {message}. Try Hugging Face (free) instead.",
    ProviderKind.ANTHROPIC: "Claude Error: {message}. Try Hugging Face instead.",
    ProviderKind.HUGGINGFACE: "Hugging Face Error: {message}. Please try again in a moment.",
}


def translate_provider_error(provider: ProviderKind, exc: BaseException) -> TranslatedError:
    """Translate a failure raised while summarizing with ``provider``.

    Same input, same output; the only side effect is a debug log line.
    """
    for rule in _RULES[provider]:
        if rule.matches(exc):
            translated = TranslatedError(rule.kind, rule.status_code, rule.message)
            break
    else:
        message = str(exc) or exc.__class__.__name__
        translated = TranslatedError(
            ErrorKind.UNKNOWN,
            500,
            _UNKNOWN_TEMPLATES[provider].format(message=message),
        )

    logger.debug(
        "Translated provider error",
        extra={
            "provider": provider.value,
            "error_kind": translated.kind.value,
            "status_code": translated.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return translated
