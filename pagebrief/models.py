from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field


class SummarizeRequest(BaseModel):
    # Optional so an empty body reaches SummaryService and gets its 400 message
    content: Optional[str] = None
    provider: Optional[str] = Field(default=None, description="Provider name or alias")
    model: Optional[str] = Field(default=None, description="Override the provider's default model")


class SummarizeResponse(BaseModel):
    summary: str
    provider: str
    model: str


class ExtractUrlRequest(BaseModel):
    url: Optional[str] = None


class ExtractedContent(BaseModel):
    content: str
    title: str
    word_count: int = Field(
        validation_alias=AliasChoices("word_count", "wordCount"),
        serialization_alias="wordCount",
    )
    page_count: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("page_count", "pageCount"),
        serialization_alias="pageCount",
    )


class ProviderInfo(BaseModel):
    id: str
    name: str
    description: str
    aliases: List[str]
    default_model: str = Field(
        validation_alias=AliasChoices("default_model", "defaultModel"),
        serialization_alias="defaultModel",
    )
    configured: bool


class ErrorResponse(BaseModel):
    error: str
