from .anthropic_messages import AnthropicProvider
from .base import SummaryProvider, UnconfiguredProvider
from .factory import ProviderFactory
from .huggingface import HuggingFaceProvider
from .kinds import ProviderKind
from .openai_chat import OpenAIProvider

__all__ = [
    "AnthropicProvider",
    "HuggingFaceProvider",
    "OpenAIProvider",
    "ProviderFactory",
    "ProviderKind",
    "SummaryProvider",
    "UnconfiguredProvider",
]
