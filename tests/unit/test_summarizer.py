"""Unit tests for SummaryService orchestration."""
import pytest
from fakes.providers import FailingProvider, FakeProvider, fake_provider_set

from pagebrief.core.config import SummarizationSettings
from pagebrief.services.providers import ProviderKind, UnconfiguredProvider
from pagebrief.services.summarization import (
    AllChunksTooShortError,
    ContentTooShortError,
    InvalidRequestError,
    MissingCredentialsError,
    ProviderCallError,
    UnsupportedProviderError,
    WordChunker,
)
from pagebrief.services.summarizer import SummaryService


def _service(**providers) -> SummaryService:
    settings = SummarizationSettings()
    return SummaryService(
        providers=fake_provider_set(**providers),
        chunker=WordChunker(max_length=settings.chunk_size),
        settings=settings,
    )


def _words(count: int, word: str = "word") -> str:
    return " ".join([word] * count)


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, "", "   \n\t  "])
async def test_empty_content_is_rejected(summarizer, fake_providers, content):
    with pytest.raises(InvalidRequestError, match="Content is required"):
        await summarizer.summarize(content, "openai")

    assert all(not p.calls for p in fake_providers.values())


@pytest.mark.asyncio
async def test_unknown_provider_is_rejected(summarizer, fake_providers):
    with pytest.raises(UnsupportedProviderError) as exc_info:
        await summarizer.summarize("Some article text", "gemini")

    assert "Unknown provider: gemini" in str(exc_info.value)
    assert exc_info.value.valid == ["openai", "anthropic", "huggingface", "chatgpt", "claude", "hf"]
    assert str(exc_info.value) == (
        "Unknown provider: gemini. "
        "Use 'openai', 'anthropic', 'huggingface', 'chatgpt', 'claude', 'hf'"
    )
    assert all(not p.calls for p in fake_providers.values())


@pytest.mark.asyncio
async def test_unknown_provider_lists_only_registered_selectors():
    providers = fake_provider_set()
    del providers[ProviderKind.ANTHROPIC]
    service = SummaryService(providers, WordChunker(), SummarizationSettings())

    with pytest.raises(UnsupportedProviderError) as exc_info:
        await service.summarize("Some article text", "claude")

    assert exc_info.value.valid == ["openai", "huggingface", "chatgpt", "hf"]


@pytest.mark.asyncio
async def test_unknown_provider_is_an_invalid_request(summarizer):
    with pytest.raises(InvalidRequestError):
        await summarizer.summarize("Some article text", None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "selector,kind",
    [
        ("openai", ProviderKind.OPENAI),
        ("chatgpt", ProviderKind.OPENAI),
        ("ChatGPT", ProviderKind.OPENAI),
        ("anthropic", ProviderKind.ANTHROPIC),
        ("claude", ProviderKind.ANTHROPIC),
        (" Claude ", ProviderKind.ANTHROPIC),
        ("huggingface", ProviderKind.HUGGINGFACE),
        ("hf", ProviderKind.HUGGINGFACE),
    ],
)
async def test_aliases_resolve_to_same_provider(summarizer, fake_providers, selector, kind):
    content = _words(30, "content")

    result = await summarizer.summarize(content, selector)

    assert result.provider_used == kind.value
    assert len(fake_providers[kind].calls) == 1


@pytest.mark.asyncio
async def test_single_call_provider_receives_whole_content(summarizer, fake_providers):
    content = _words(2000, "lorem")
    openai = fake_providers[ProviderKind.OPENAI]

    result = await summarizer.summarize(content, "openai")

    assert openai.calls == [(content, "gpt-4o-mini")]
    assert result.summary_text == f"summary of {len(content)} chars"
    assert result.model_used == "gpt-4o-mini"
    assert not openai.condense_calls


@pytest.mark.asyncio
async def test_model_override_is_used_and_reported(summarizer, fake_providers):
    result = await summarizer.summarize("Some article text", "claude", model="claude-3-haiku")

    assert result.model_used == "claude-3-haiku"
    assert fake_providers[ProviderKind.ANTHROPIC].calls[0][1] == "claude-3-haiku"


@pytest.mark.asyncio
async def test_blank_model_override_falls_back_to_default(summarizer):
    result = await summarizer.summarize("Some article text", "openai", model="  ")

    assert result.model_used == "gpt-4o-mini"


@pytest.mark.asyncio
async def test_chunked_provider_summarizes_short_content_in_one_call(summarizer, fake_providers):
    content = "A reasonably sized paragraph of article text that is well over the minimum."
    hf = fake_providers[ProviderKind.HUGGINGFACE]

    result = await summarizer.summarize(content, "huggingface")

    assert hf.calls == [(content, "facebook/bart-large-cnn")]
    assert result.provider_used == "huggingface"
    assert result.model_used == "facebook/bart-large-cnn"


@pytest.mark.asyncio
async def test_chunked_provider_rejects_content_below_minimum(summarizer, fake_providers):
    content = "x" * 40
    hf = fake_providers[ProviderKind.HUGGINGFACE]

    with pytest.raises(ProviderCallError) as exc_info:
        await summarizer.summarize(content, "hf")

    assert exc_info.value.provider is ProviderKind.HUGGINGFACE
    assert isinstance(exc_info.value.original, ContentTooShortError)
    assert not hf.calls


@pytest.mark.asyncio
async def test_chunks_are_summarized_in_order_and_joined():
    partials = iter(["First part.", "Second part.", "Third part.", "Fourth part."])
    hf = FakeProvider(
        ProviderKind.HUGGINGFACE,
        chunk_size=1000,
        min_content_chars=50,
        responder=lambda text: next(partials),
        default_model="facebook/bart-large-cnn",
    )
    service = _service(huggingface=hf)
    content = _words(600, "alpha")  # 3599 characters -> 166/166/166/102 words

    result = await service.summarize(content, "huggingface")

    assert len(hf.calls) == 4
    assert all(len(text) <= 1000 for text, _ in hf.calls)
    assert " ".join(text for text, _ in hf.calls) == content
    assert result.summary_text == "First part.\n\nSecond part.\n\nThird part.\n\nFourth part."
    assert not hf.condense_calls


@pytest.mark.asyncio
async def test_short_chunk_is_skipped_and_others_kept():
    hf = FakeProvider(
        ProviderKind.HUGGINGFACE,
        chunk_size=100,
        min_content_chars=50,
        responder=lambda text: f"<{text[:5]}>",
    )
    service = _service(huggingface=hf)
    # Chunks: 95 chars of "lorem", then "short" alone, then a 95-char word
    first = _words(16, "lorem")
    last = "y" * 95
    content = f"{first} short {last}"

    result = await service.summarize(content, "huggingface")

    assert [text for text, _ in hf.calls] == [first, last]
    assert result.summary_text == "<lorem>\n\n<yyyyy>"
    assert not hf.condense_calls


@pytest.mark.asyncio
async def test_all_chunks_too_short_fails():
    hf = FakeProvider(ProviderKind.HUGGINGFACE, chunk_size=40, min_content_chars=50)
    service = _service(huggingface=hf)
    content = _words(20, "tiny")  # 99 characters, but every chunk is under 50

    with pytest.raises(ProviderCallError) as exc_info:
        await service.summarize(content, "huggingface")

    assert isinstance(exc_info.value.original, AllChunksTooShortError)
    assert not hf.calls


@pytest.mark.asyncio
async def test_long_combined_summary_is_condensed_once():
    hf = FakeProvider(
        ProviderKind.HUGGINGFACE,
        chunk_size=1000,
        min_content_chars=50,
        responder=lambda text: _words(125, "summary"),
        condense_responder=lambda text: "Final condensed summary.",
    )
    service = _service(huggingface=hf)
    content = _words(300, "content")  # 2399 characters -> 3 chunks, 375 summary words

    result = await service.summarize(content, "huggingface")

    assert len(hf.calls) == 3
    assert len(hf.condense_calls) == 1
    combined, model = hf.condense_calls[0]
    assert combined == "\n\n".join([_words(125, "summary")] * 3)
    assert model == "fake-model"
    assert result.summary_text == "Final condensed summary."


@pytest.mark.asyncio
async def test_combined_summary_at_threshold_is_not_condensed():
    hf = FakeProvider(
        ProviderKind.HUGGINGFACE,
        chunk_size=1000,
        min_content_chars=50,
        responder=lambda text: _words(100, "summary"),
    )
    service = _service(huggingface=hf)
    content = _words(200, "content")  # 1599 characters -> 2 chunks, 200 summary words

    result = await service.summarize(content, "huggingface")

    assert len(hf.calls) == 2
    assert not hf.condense_calls
    assert result.summary_text == _words(100, "summary") + "\n\n" + _words(100, "summary")


@pytest.mark.asyncio
async def test_condense_failure_keeps_combined_summary():
    hf = FakeProvider(
        ProviderKind.HUGGINGFACE,
        chunk_size=1000,
        min_content_chars=50,
        responder=lambda text: _words(125, "summary"),
        condense_error=RuntimeError("Model is loading"),
    )
    service = _service(huggingface=hf)
    content = _words(200, "content")

    result = await service.summarize(content, "huggingface")

    assert len(hf.condense_calls) == 1
    assert result.summary_text == _words(125, "summary") + "\n\n" + _words(125, "summary")


@pytest.mark.asyncio
async def test_empty_condense_result_keeps_combined_summary():
    hf = FakeProvider(
        ProviderKind.HUGGINGFACE,
        chunk_size=1000,
        min_content_chars=50,
        responder=lambda text: _words(125, "summary"),
        condense_responder=lambda text: "",
    )
    service = _service(huggingface=hf)

    result = await service.summarize(_words(200, "content"), "huggingface")

    assert result.summary_text == _words(125, "summary") + "\n\n" + _words(125, "summary")


@pytest.mark.asyncio
async def test_provider_failure_is_wrapped_with_provider_kind():
    error = RuntimeError("upstream exploded")
    openai = FailingProvider(ProviderKind.OPENAI, error=error)
    service = _service(openai=openai)

    with pytest.raises(ProviderCallError) as exc_info:
        await service.summarize("Some article text", "chatgpt")

    assert exc_info.value.provider is ProviderKind.OPENAI
    assert exc_info.value.original is error
    assert len(openai.calls) == 1


@pytest.mark.asyncio
async def test_chunk_failure_aborts_whole_request():
    hf = FailingProvider(
        ProviderKind.HUGGINGFACE,
        error=RuntimeError("Model is loading"),
        chunk_size=1000,
        min_content_chars=50,
    )
    service = _service(huggingface=hf)

    with pytest.raises(ProviderCallError):
        await service.summarize(_words(600, "alpha"), "huggingface")

    # Stops at the first failing chunk
    assert len(hf.calls) == 1


@pytest.mark.asyncio
async def test_unconfigured_provider_fails_with_missing_credentials():
    openai = UnconfiguredProvider(
        ProviderKind.OPENAI, env_var="OPENAI_API_KEY", default_model="gpt-4o-mini"
    )
    service = _service(openai=openai)

    with pytest.raises(ProviderCallError) as exc_info:
        await service.summarize("Some article text", "openai")

    original = exc_info.value.original
    assert isinstance(original, MissingCredentialsError)
    assert original.env_var == "OPENAI_API_KEY"


@pytest.mark.asyncio
async def test_unconfigured_provider_reports_credentials_before_length():
    hf = UnconfiguredProvider(
        ProviderKind.HUGGINGFACE,
        env_var="HUGGINGFACE_API_KEY",
        default_model="facebook/bart-large-cnn",
    )
    service = _service(huggingface=hf)

    with pytest.raises(ProviderCallError) as exc_info:
        await service.summarize("tiny", "hf")

    assert isinstance(exc_info.value.original, MissingCredentialsError)
