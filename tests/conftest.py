from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

_ENV_PREFIXES = (
    "OPENAI_",
    "ANTHROPIC_",
    "HUGGINGFACE_",
    "HF_TOKEN",
    "SUMMARY_",
    "SUMMARIZATION__",
    "EXTRACT_",
    "EXTRACTION__",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def temp_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator:
    # Run each test from an empty directory (no .env) with no provider keys set
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.upper().startswith(_ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)

    from pagebrief.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_providers():
    """
    Provide one FakeProvider per provider kind.

    Hugging Face is configured like the real adapter (1000-char chunks,
    50-char minimum); OpenAI and Anthropic take content in one call.

    Example:
        def test_openai(fake_providers):
            provider = fake_providers[ProviderKind.OPENAI]
            ...
            assert len(provider.calls) == 1
    """
    from fakes.providers import fake_provider_set

    return fake_provider_set()


@pytest.fixture
def summarizer(fake_providers):
    """
    Provide a SummaryService wired to fake providers.

    Example:
        async def test_summarize(summarizer):
            result = await summarizer.summarize("some text", "openai")
            assert result.provider_used == "openai"
    """
    from pagebrief.core.config import SummarizationSettings
    from pagebrief.services.summarization import WordChunker
    from pagebrief.services.summarizer import SummaryService

    settings = SummarizationSettings()
    return SummaryService(
        providers=fake_providers,
        chunker=WordChunker(max_length=settings.chunk_size),
        settings=settings,
    )


@pytest.fixture
def test_client(summarizer) -> Generator:
    # Import here so env vars apply before settings load
    from fastapi.testclient import TestClient
    from pagebrief import server

    with TestClient(server.app) as client:
        # Lifespan has run; swap in the fake-backed service
        server.app.state.summarizer = summarizer
        yield client
