"""Word-aligned chunking of long text for summarization models."""
from __future__ import annotations

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


def chunk_text(text: str, max_length: int) -> List[str]:
    """Split ``text`` into chunks of at most ``max_length`` characters.

    Words are packed greedily and joined by single spaces. A chunk is closed
    when the next word would push it past ``max_length``. Words are never cut,
    so a single word longer than ``max_length`` becomes its own chunk.
    """
    chunks: List[str] = []
    current: List[str] = []
    # Length of the current words plus one separator per word
    current_length = 0

    for word in (text or "").split():
        if current and current_length + len(word) > max_length:
            chunks.append(" ".join(current))
            current = [word]
            current_length = len(word) + 1
        else:
            current.append(word)
            current_length += len(word) + 1

    if current:
        chunks.append(" ".join(current))

    return chunks


class WordChunker:
    """Chunks article text for processing by a summarization model."""

    def __init__(self, max_length: int = 1000):
        """Initialize chunker.

        Args:
            max_length: Default maximum characters per chunk
        """
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        self.max_length = max_length

    def chunk(self, text: str, max_length: Optional[int] = None) -> List[str]:
        limit = max_length or self.max_length
        chunks = chunk_text(text, limit)
        logger.debug(
            "Segmented text",
            extra={"chunk_count": len(chunks), "max_length": limit},
        )
        return chunks
