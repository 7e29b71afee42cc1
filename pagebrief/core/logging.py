"""Logging configuration for pagebrief."""

import logging
import sys


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logging for the service.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s | %(message)s",
        stream=sys.stdout,
        force=True,
    )

    # Provider SDKs and their transports log every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)
    logging.getLogger("huggingface_hub").setLevel(logging.WARNING)
    # requests fetches pages for URL extraction
    logging.getLogger("urllib3").setLevel(logging.WARNING)
