from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from pagebrief.models import ProviderInfo
from pagebrief.services.providers import ProviderKind
from pagebrief.services.summarizer import SummaryService

from .summarize import get_summarizer

router = APIRouter()

DESCRIPTIONS = {
    ProviderKind.HUGGINGFACE: "Free (Slower)",
    ProviderKind.OPENAI: "Fast & Accurate",
    ProviderKind.ANTHROPIC: "Best Quality",
}


@router.get("/api/providers", response_model=List[ProviderInfo])
def list_providers(summarizer: SummaryService = Depends(get_summarizer)):
    """List summarization providers, free tier first."""
    infos: List[ProviderInfo] = []
    for kind in (ProviderKind.HUGGINGFACE, ProviderKind.OPENAI, ProviderKind.ANTHROPIC):
        provider = summarizer.providers.get(kind)
        if provider is None:
            continue
        infos.append(
            ProviderInfo(
                id=kind.value,
                name=kind.display_name,
                description=DESCRIPTIONS[kind],
                aliases=list(kind.aliases),
                default_model=provider.default_model,
                configured=provider.is_configured,
            )
        )
    return infos
