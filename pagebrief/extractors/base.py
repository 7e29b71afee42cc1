from __future__ import annotations

import abc
from typing import Optional

from pagebrief.core.config import ExtractionSettings
from pagebrief.core.utils import count_words, normalize_whitespace
from pagebrief.models import ExtractedContent


class ExtractionError(Exception):
    """Content could not be extracted; ``status_code`` is the HTTP status to report."""

    def __init__(self, message: str, status_code: int = 500):
        self.status_code = status_code
        super().__init__(message)


class BaseExtractor(abc.ABC):
    name: str = "base"
    # Message used when the extracted text is below the minimum length
    empty_message: str = "Could not extract meaningful content"

    def __init__(self, settings: ExtractionSettings):
        self.settings = settings

    def create_result(
        self,
        raw_text: str,
        title: str,
        page_count: Optional[int] = None,
    ) -> ExtractedContent:
        """Normalize extracted text and enforce the minimum content length.

        Raises:
            ExtractionError: With status 400 when too little text was found
        """
        content = normalize_whitespace(raw_text)
        if len(content) < self.settings.min_content_chars:
            raise ExtractionError(self.empty_message, status_code=400)
        return ExtractedContent(
            content=content,
            title=title.strip() or "Untitled",
            word_count=count_words(content),
            page_count=page_count,
        )
