"""Summarize web pages and PDFs through hosted AI providers."""

__version__ = "0.1.0"
