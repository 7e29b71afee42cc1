from __future__ import annotations

import logging

import lxml.html as LH
import requests
from lxml.etree import ParserError
from readability import Document

from pagebrief.models import ExtractedContent

from .base import BaseExtractor, ExtractionError

logger = logging.getLogger(__name__)


def _has_class(name: str) -> str:
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


# Page chrome that never belongs to the article text
_NOISE_XPATH = " | ".join(
    [f"//{tag}" for tag in ("script", "style", "nav", "header", "footer", "aside", "iframe")]
    + [f"//*[{_has_class('ad')}]", f"//*[{_has_class('advertisement')}]"]
)

_CONTENT_CLASSES = ("post-content", "article-content", "entry-content", "content")
_CONTENT_CLASS_XPATH = "//*[" + " or ".join(_has_class(c) for c in _CONTENT_CLASSES) + "]"


class UrlExtractor(BaseExtractor):
    name = "url"
    empty_message = "Could not extract meaningful content from URL"

    def fetch(self, url: str) -> str:
        """Return page HTML via HTTP GET."""
        headers = {"User-Agent": self.settings.user_agent}
        try:
            r = requests.get(url, headers=headers, timeout=self.settings.fetch_timeout)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise ExtractionError(str(exc) or "Failed to extract content from URL") from exc
        return r.text

    def extract(self, url: str) -> ExtractedContent:
        logger.info("Extracting URL", extra={"url": url, "extractor": self.name})
        html = self.fetch(url)
        return self.extract_html(html)

    def extract_html(self, html: str) -> ExtractedContent:
        try:
            tree = LH.fromstring(html)
        except (ParserError, ValueError) as exc:
            raise ExtractionError(f"Could not parse page: {exc}") from exc

        for element in tree.xpath(_NOISE_XPATH):
            if element.getparent() is not None:
                element.drop_tree()

        text = self._main_text(tree) or self._readability_text(html) or self._body_text(tree)
        return self.create_result(text, self._title(tree))

    def _main_text(self, tree) -> str:
        # Every <article>, else every <main>, else the first content container
        for tag in ("article", "main"):
            nodes = tree.xpath(f"//{tag}")
            if nodes:
                return " ".join(node.text_content() for node in nodes)
        nodes = tree.xpath(_CONTENT_CLASS_XPATH)
        if nodes:
            return nodes[0].text_content()
        return ""

    def _readability_text(self, html: str) -> str:
        try:
            article_html = Document(html).summary(html_partial=True)
            return LH.fromstring(article_html).text_content().strip()
        except Exception:
            logger.debug("Readability extraction failed", exc_info=True)
            return ""

    def _body_text(self, tree) -> str:
        bodies = tree.xpath("//body")
        node = bodies[0] if bodies else tree
        return node.text_content()

    def _title(self, tree) -> str:
        title = tree.xpath("string(//title)").strip()
        if title:
            return title
        headings = tree.xpath("//h1")
        if headings:
            return headings[0].text_content().strip() or "Untitled"
        return "Untitled"
