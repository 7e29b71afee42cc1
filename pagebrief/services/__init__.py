"""Summarization services: provider adapters, chunking and orchestration."""
