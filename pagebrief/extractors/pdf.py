from __future__ import annotations

import logging
import re

import fitz

from pagebrief.models import ExtractedContent

from .base import BaseExtractor, ExtractionError

logger = logging.getLogger(__name__)

_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)


class PdfExtractor(BaseExtractor):
    name = "pdf"
    empty_message = "Could not extract text from PDF or PDF is empty"

    def extract(self, data: bytes, filename: str = "document.pdf") -> ExtractedContent:
        logger.info(
            "Extracting PDF",
            extra={"upload_name": filename, "size_bytes": len(data), "extractor": self.name},
        )
        if not data:
            raise ExtractionError(self.empty_message, status_code=400)

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as exc:
            raise ExtractionError(str(exc) or "Failed to extract content from PDF") from exc

        try:
            page_count = doc.page_count
            raw = " ".join(page.get_text("text") for page in doc)
        finally:
            doc.close()

        title = _PDF_SUFFIX_RE.sub("", filename or "")
        return self.create_result(raw, title, page_count=page_count)
