"""
Fake implementations for testing.

Fakes are simplified working implementations of the provider interface,
used instead of the OpenAI, Anthropic and Hugging Face SDKs so tests stay
fast, deterministic and offline.

Key fakes:
- FakeProvider: Records calls and answers from a callable
- FailingProvider: Raises a configured error on every call
- fake_provider_set: One fake per provider kind, for wiring a SummaryService

See: tests/conftest.py for the fixtures built on these
"""

from .providers import FailingProvider, FakeProvider, fake_provider_set

__all__ = [
    "FailingProvider",
    "FakeProvider",
    "fake_provider_set",
]
