from __future__ import annotations

from enum import Enum
from typing import Optional


class ProviderKind(str, Enum):
    """Closed set of summarization providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    HUGGINGFACE = "huggingface"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def vendor_name(self) -> str:
        return _VENDOR_NAMES[self]

    @property
    def aliases(self) -> tuple[str, ...]:
        return tuple(alias for alias, kind in _ALIASES.items() if kind is self)

    @classmethod
    def resolve(cls, selector: Optional[str]) -> Optional["ProviderKind"]:
        """Map a free-form selector ("ChatGPT", " hf ") to a provider, or None."""
        if selector is None:
            return None
        key = str(selector).strip().lower()
        if not key:
            return None
        try:
            return cls(key)
        except ValueError:
            return _ALIASES.get(key)

    @classmethod
    def selectors(cls) -> list[str]:
        """Every accepted selector: canonical names first, then aliases."""
        return [kind.value for kind in cls] + list(_ALIASES)


_ALIASES: dict[str, ProviderKind] = {
    "chatgpt": ProviderKind.OPENAI,
    "claude": ProviderKind.ANTHROPIC,
    "hf": ProviderKind.HUGGINGFACE,
}

_DISPLAY_NAMES: dict[ProviderKind, str] = {
    ProviderKind.OPENAI: "ChatGPT",
    ProviderKind.ANTHROPIC: "Claude",
    ProviderKind.HUGGINGFACE: "Hugging Face",
}

_VENDOR_NAMES: dict[ProviderKind, str] = {
    ProviderKind.OPENAI: "OpenAI",
    ProviderKind.ANTHROPIC: "Anthropic",
    ProviderKind.HUGGINGFACE: "Hugging Face",
}
