"""Core utilities and configuration.

Re-exports convenience types from submodules for nicer imports if desired.
"""

from .config import AppSettings, get_settings  # noqa: F401
from .logging import setup_logging  # noqa: F401
from .utils import count_words, normalize_whitespace  # noqa: F401
