from .base import BaseExtractor, ExtractionError
from .pdf import PdfExtractor
from .url import UrlExtractor

__all__ = ["BaseExtractor", "ExtractionError", "PdfExtractor", "UrlExtractor"]
